"""Request/response envelopes for the service layer."""

from dataclasses import dataclass, field

from racebook.models.filters import ListEventsFilter, ListRacesFilter
from racebook.models.resources import Event, Race


@dataclass(frozen=True)
class ListRacesRequest:
    """Attributes:
        filter: Optional race filter.
        order_by: Optional sort spec, e.g. "advertised_start_time, name desc".
    """

    filter: ListRacesFilter | None = None
    order_by: str | None = None


@dataclass(frozen=True)
class ListRacesResponse:
    races: list[Race] = field(default_factory=list)


@dataclass(frozen=True)
class ListEventsRequest:
    """Attributes:
        filter: Optional event filter.
        order_by: Optional sort spec, e.g. "sport, home_side_name desc".
    """

    filter: ListEventsFilter | None = None
    order_by: str | None = None


@dataclass(frozen=True)
class ListEventsResponse:
    events: list[Event] = field(default_factory=list)


@dataclass(frozen=True)
class GetEventRequest:
    id: int
