"""Row materializer.

Converts raw result rows (positional tuples) into domain objects and derives
the read-time fields: ``status`` for every resource and ``name`` for events.
"""

from collections.abc import Callable, Iterable, Sequence
from datetime import datetime, timezone
from typing import Any, TypeVar

from racebook.constants import EVENT_NAME_SEPARATOR, STATUS_CLOSED, STATUS_OPEN
from racebook.exceptions import RowScanError
from racebook.models.resources import Event, Race

T = TypeVar("T")

RowFactory = Callable[[Sequence[Any], datetime], T]


def get_status(advertised_start_time: datetime, now: datetime) -> str:
    """開始時刻が現在より前ならCLOSED、それ以外はOPEN"""
    if advertised_start_time < now:
        return STATUS_CLOSED
    return STATUS_OPEN


def to_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected integer, got {value!r}")
    return value


def to_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected text, got {value!r}")
    return value


def to_bool(value: Any) -> bool:
    # SQLiteは真偽値を0/1の整数で保存する
    if not isinstance(value, int):
        raise TypeError(f"expected integer-encoded boolean, got {value!r}")
    return bool(value)


def to_timestamp(value: Any) -> datetime:
    """保存された時刻をUTCのdatetimeに変換する

    RFC 3339形式（末尾"Z"を含む）とSQLAlchemyのDateTime形式
    （"YYYY-MM-DD HH:MM:SS.ffffff"）の両方を受け付ける。
    タイムゾーンの無い値はUTCとして扱う。

    Args:
        value: 文字列またはdatetime

    Returns:
        タイムゾーン付き（UTC）のdatetime

    Raises:
        TypeError: 文字列/datetime以外の場合
        ValueError: 解析に失敗した場合
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    else:
        raise TypeError(f"expected timestamp, got {value!r}")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _check_width(row: Sequence[Any], width: int) -> None:
    if len(row) != width:
        raise ValueError(f"expected {width} columns, got {len(row)}")


def race_from_row(row: Sequence[Any], now: datetime) -> Race:
    """Build a Race from ``(id, meeting_id, name, number, visible, advertised_start_time)``."""
    _check_width(row, 6)
    advertised_start_time = to_timestamp(row[5])
    return Race(
        id=to_int(row[0]),
        meeting_id=to_int(row[1]),
        name=to_str(row[2]),
        number=to_int(row[3]),
        visible=to_bool(row[4]),
        advertised_start_time=advertised_start_time,
        status=get_status(advertised_start_time, now),
    )


def event_from_row(row: Sequence[Any], now: datetime) -> Event:
    """Build an Event from ``(id, sport, league, home, away, visible, advertised_start_time)``."""
    _check_width(row, 7)
    home_side_name = to_str(row[3])
    away_side_name = to_str(row[4])
    advertised_start_time = to_timestamp(row[6])
    return Event(
        id=to_int(row[0]),
        sport=to_str(row[1]),
        league=to_int(row[2]),
        home_side_name=home_side_name,
        away_side_name=away_side_name,
        name=home_side_name + EVENT_NAME_SEPARATOR + away_side_name,
        visible=to_bool(row[5]),
        advertised_start_time=advertised_start_time,
        status=get_status(advertised_start_time, now),
    )


def materialize(
    rows: Iterable[Sequence[Any]],
    row_factory: RowFactory[T],
    now: datetime | None = None,
) -> list[T]:
    """Materialize every row, or nothing.

    "now" is sampled once for the whole batch unless given.

    Args:
        rows: Result rows in the catalog's column order.
        row_factory: Converts one row into a domain object.
        now: Reference time for the status field (timezone-aware).

    Returns:
        List of domain objects; empty if there are no rows.

    Raises:
        RowScanError: If any row cannot be converted. Rows converted before
            the failure are discarded.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    items: list[T] = []
    for index, row in enumerate(rows):
        try:
            items.append(row_factory(row, now))
        except (TypeError, ValueError, IndexError) as e:
            raise RowScanError(f"failed to scan row {index}: {e}", index) from e

    return items
