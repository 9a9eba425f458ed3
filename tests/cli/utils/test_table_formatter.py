"""table_formatter のテスト"""

from racebook.cli.utils.table_formatter import format_table, get_display_width, pad_to_width


class TestDisplayWidth:
    """get_display_width / pad_to_width のテスト"""

    def test_ascii_width(self):
        assert get_display_width("abc") == 3

    def test_fullwidth_counts_double(self):
        assert get_display_width("中山") == 4

    def test_pad_left_and_right(self):
        assert pad_to_width("ab", 4) == "ab  "
        assert pad_to_width("ab", 4, align_right=True) == "  ab"

    def test_no_padding_when_wider(self):
        assert pad_to_width("abcdef", 3) == "abcdef"


class TestFormatTable:
    """format_table のテスト"""

    def test_columns_are_aligned(self):
        table = format_table(["ID", "NAME"], [["1", "Alpha"], ["10", "B"]], right_aligned=frozenset({0}))

        assert table.splitlines() == [
            "ID  NAME",
            "--  -----",
            " 1  Alpha",
            "10  B",
        ]

    def test_header_only(self):
        assert format_table(["A"], []) == "A\n-"
