"""RacingService / SportsServiceのテスト"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from racebook.exceptions import NotFoundError
from racebook.models import (
    Event,
    GetEventRequest,
    ListEventsFilter,
    ListEventsRequest,
    ListEventsResponse,
    ListRacesFilter,
    ListRacesRequest,
    ListRacesResponse,
    Race,
)
from racebook.services import RacingService, SportsService

START = datetime(2024, 6, 1, 12, tzinfo=timezone.utc)


@pytest.fixture
def race():
    return Race(
        id=1,
        meeting_id=5,
        name="Alpha",
        number=1,
        visible=True,
        advertised_start_time=START,
        status="OPEN",
    )


@pytest.fixture
def event():
    return Event(
        id=7,
        sport="tennis",
        league=12,
        home_side_name="Smith",
        away_side_name="Jones",
        name="Smith vs Jones",
        visible=True,
        advertised_start_time=START,
        status="CLOSED",
    )


class TestRacingService:
    """RacingServiceのテスト"""

    def test_list_races_passes_filter_and_order(self, race):
        repo = MagicMock()
        repo.list.return_value = [race]
        service = RacingService(repo)
        request = ListRacesRequest(
            filter=ListRacesFilter(meeting_ids=[5]), order_by="name desc"
        )

        response = service.list_races(request)

        repo.list.assert_called_once_with(request.filter, "name desc")
        assert response == ListRacesResponse(races=[race])

    def test_list_races_propagates_errors(self):
        repo = MagicMock()
        repo.list.side_effect = RuntimeError("db down")

        with pytest.raises(RuntimeError):
            RacingService(repo).list_races(ListRacesRequest())


class TestSportsService:
    """SportsServiceのテスト"""

    def test_list_events(self, event):
        repo = MagicMock()
        repo.list.return_value = [event]
        request = ListEventsRequest(filter=ListEventsFilter(sports=["tennis"]))

        response = SportsService(repo).list_events(request)

        repo.list.assert_called_once_with(request.filter, None)
        assert response == ListEventsResponse(events=[event])

    def test_get_event(self, event):
        repo = MagicMock()
        repo.get.return_value = event

        assert SportsService(repo).get_event(GetEventRequest(id=7)) is event
        repo.get.assert_called_once_with(7)

    def test_get_event_not_found(self):
        repo = MagicMock()
        repo.get.side_effect = NotFoundError("event", 99)

        with pytest.raises(NotFoundError):
            SportsService(repo).get_event(GetEventRequest(id=99))
