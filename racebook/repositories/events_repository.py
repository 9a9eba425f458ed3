"""イベントリポジトリ"""

from sqlalchemy import Engine

from racebook.exceptions import NotFoundError
from racebook.models.filters import ListEventsFilter
from racebook.models.resources import Event
from racebook.query.resources import EVENTS
from racebook.repositories.base import Seeder, SQLResourceRepository


class EventsRepository(SQLResourceRepository[Event]):
    """eventsテーブルのリポジトリ"""

    def __init__(self, engine: Engine, seeder: Seeder | None = None) -> None:
        super().__init__(engine, EVENTS, seeder)

    def get(self, id: int) -> Event:
        """IDでイベントを1件取得する

        一覧取得をIDフィルタ付きで再利用する。

        Args:
            id: イベントID

        Returns:
            該当するEvent

        Raises:
            NotFoundError: 該当が1件でない場合
        """
        events = self.list(ListEventsFilter(ids=[id]))
        if len(events) != 1:
            raise NotFoundError(self.spec.name, id, len(events))
        return events[0]
