"""レース一覧サービス"""

from racebook.models.requests import ListRacesRequest, ListRacesResponse
from racebook.repositories.races_repository import RacesRepository


class RacingService:
    """RPC層から呼ばれるレースサービス

    Attributes:
        races_repo: レースリポジトリ
    """

    def __init__(self, races_repo: RacesRepository) -> None:
        self.races_repo = races_repo

    def list_races(self, request: ListRacesRequest) -> ListRacesResponse:
        """フィルタとソート指定に従ってレース一覧を返す"""
        races = self.races_repo.list(request.filter, request.order_by)
        return ListRacesResponse(races=races)
