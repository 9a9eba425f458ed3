"""eventsテーブルのモデル定義"""

from datetime import datetime

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from racebook.models.base import Base
from racebook.models.types import RFC3339Timestamp


class EventRecord(Base):
    """eventsテーブルの1行

    Attributes:
        id: イベントID（主キー）
        sport: 競技名（例: "football"）
        league: リーグID
        home_side_name: ホーム側のチーム名/選手名
        away_side_name: アウェイ側のチーム名/選手名
        visible: 表示フラグ（0/1で保存）
        advertised_start_time: 開始予定時刻（UTC）
    """

    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    sport: Mapped[str] = mapped_column(String, nullable=False)
    league: Mapped[int] = mapped_column(Integer, nullable=False)
    home_side_name: Mapped[str] = mapped_column(String, nullable=False)
    away_side_name: Mapped[str] = mapped_column(String, nullable=False)
    visible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    advertised_start_time: Mapped[datetime] = mapped_column(
        RFC3339Timestamp, nullable=False
    )

    def __repr__(self) -> str:
        return (
            f"<EventRecord(id={self.id!r}, "
            f"{self.home_side_name!r} vs {self.away_side_name!r})>"
        )
