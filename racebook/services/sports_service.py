"""スポーツイベントサービス"""

from racebook.models.requests import (
    GetEventRequest,
    ListEventsRequest,
    ListEventsResponse,
)
from racebook.models.resources import Event
from racebook.repositories.events_repository import EventsRepository


class SportsService:
    """RPC層から呼ばれるイベントサービス

    Attributes:
        events_repo: イベントリポジトリ
    """

    def __init__(self, events_repo: EventsRepository) -> None:
        self.events_repo = events_repo

    def list_events(self, request: ListEventsRequest) -> ListEventsResponse:
        """フィルタとソート指定に従ってイベント一覧を返す"""
        events = self.events_repo.list(request.filter, request.order_by)
        return ListEventsResponse(events=events)

    def get_event(self, request: GetEventRequest) -> Event:
        """IDでイベントを1件返す

        Raises:
            NotFoundError: 該当イベントが無い場合
        """
        return self.events_repo.get(request.id)
