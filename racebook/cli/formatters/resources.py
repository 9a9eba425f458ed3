"""レース/イベントの出力フォーマッタ

テキストテーブルとJSONの2形式に対応。
"""

import json
from dataclasses import asdict
from datetime import datetime
from typing import Any

from racebook.cli.utils.table_formatter import format_table
from racebook.models.resources import Event, Race

RACE_HEADERS = ["ID", "MEETING", "NO", "NAME", "VISIBLE", "START (UTC)", "STATUS"]
EVENT_HEADERS = ["ID", "SPORT", "LEAGUE", "NAME", "VISIBLE", "START (UTC)", "STATUS"]


def _format_time(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S")


def _format_visible(value: bool) -> str:
    return "yes" if value else "no"


def format_races_table(races: list[Race]) -> str:
    """レース一覧をテーブル文字列に変換"""
    rows = [
        [
            str(race.id),
            str(race.meeting_id),
            str(race.number),
            race.name,
            _format_visible(race.visible),
            _format_time(race.advertised_start_time),
            race.status,
        ]
        for race in races
    ]
    return format_table(RACE_HEADERS, rows, right_aligned=frozenset({0, 1, 2}))


def format_events_table(events: list[Event]) -> str:
    """イベント一覧をテーブル文字列に変換"""
    rows = [
        [
            str(event.id),
            event.sport,
            str(event.league),
            event.name,
            _format_visible(event.visible),
            _format_time(event.advertised_start_time),
            event.status,
        ]
        for event in events
    ]
    return format_table(EVENT_HEADERS, rows, right_aligned=frozenset({0, 2}))


def to_json_dict(resource: Race | Event) -> dict[str, Any]:
    """dataclassをJSON化できる辞書に変換（時刻はISO 8601）"""
    data = asdict(resource)
    data["advertised_start_time"] = resource.advertised_start_time.isoformat()
    return data


def dumps(payload: Any) -> str:
    """JSON文字列化（日本語はエスケープしない）"""
    return json.dumps(payload, ensure_ascii=False, indent=2)
