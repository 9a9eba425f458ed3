"""データモデルパッケージ"""

from racebook.models.base import Base
from racebook.models.event import EventRecord
from racebook.models.filters import ListEventsFilter, ListRacesFilter
from racebook.models.race import RaceRecord
from racebook.models.requests import (
    GetEventRequest,
    ListEventsRequest,
    ListEventsResponse,
    ListRacesRequest,
    ListRacesResponse,
)
from racebook.models.resources import Event, Race

__all__ = [
    "Base",
    "Event",
    "EventRecord",
    "GetEventRequest",
    "ListEventsFilter",
    "ListEventsRequest",
    "ListEventsResponse",
    "ListRacesFilter",
    "ListRacesRequest",
    "ListRacesResponse",
    "Race",
    "RaceRecord",
]
