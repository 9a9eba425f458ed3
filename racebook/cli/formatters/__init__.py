"""CLI出力フォーマッタ"""

from racebook.cli.formatters.resources import (
    dumps,
    format_events_table,
    format_races_table,
    to_json_dict,
)

__all__ = [
    "dumps",
    "format_events_table",
    "format_races_table",
    "to_json_dict",
]
