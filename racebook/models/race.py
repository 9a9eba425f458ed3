"""racesテーブルのモデル定義"""

from datetime import datetime

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from racebook.models.base import Base
from racebook.models.types import RFC3339Timestamp


class RaceRecord(Base):
    """racesテーブルの1行

    読み出しはracebook.query経由の生SQLで行う。
    このクラスはスキーマ定義とテストデータ投入に使う。

    Attributes:
        id: レースID（主キー）
        meeting_id: 開催ID
        name: レース名
        number: レース番号
        visible: 表示フラグ（0/1で保存）
        advertised_start_time: 発走予定時刻（UTC）
    """

    __tablename__ = "races"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    meeting_id: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    number: Mapped[int] = mapped_column(Integer, nullable=False)
    visible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    advertised_start_time: Mapped[datetime] = mapped_column(
        RFC3339Timestamp, nullable=False
    )

    def __repr__(self) -> str:
        return f"<RaceRecord(id={self.id!r}, name={self.name!r})>"
