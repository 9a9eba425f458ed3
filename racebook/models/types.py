"""カスタムカラム型"""

from datetime import datetime, timezone

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator

RFC3339_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class RFC3339Timestamp(TypeDecorator):
    """UTCのRFC 3339文字列（例: "2021-03-02T10:00:00Z"）で保存する時刻型

    SQLiteは文字列として比較するため、全行を同じ書式で保存して
    ORDER BY の順序を時刻順と一致させる。秒未満は切り捨てる。
    タイムゾーンの無いdatetimeはUTCとして扱う。
    """

    impl = String
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect) -> str | None:
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).strftime(RFC3339_FORMAT)

    def process_result_value(self, value: str | None, dialect) -> datetime | None:
        if value is None:
            return None
        return datetime.strptime(value, RFC3339_FORMAT).replace(tzinfo=timezone.utc)
