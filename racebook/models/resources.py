"""Domain DTOs returned by the repositories.

These are immutable values built by the row materializer. ``status`` (and
``name`` for events) is derived at read time and never stored.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Race:
    """A single race.

    Attributes:
        id: Unique race identifier.
        meeting_id: Identifier of the meeting the race belongs to.
        name: The race name.
        number: The race number within the meeting.
        visible: Whether the race is visible.
        advertised_start_time: Advertised start time (timezone-aware UTC).
        status: "OPEN" or "CLOSED" relative to the time of the read.
    """

    id: int
    meeting_id: int
    name: str
    number: int
    visible: bool
    advertised_start_time: datetime
    status: str


@dataclass(frozen=True)
class Event:
    """A single sports event.

    Attributes:
        id: Unique event identifier.
        sport: The sport played at the event.
        league: Identifier of the league the event is in.
        home_side_name: Name of the home team or player.
        away_side_name: Name of the away team or player.
        name: Display name, "<home> vs <away>".
        visible: Whether the event is visible.
        advertised_start_time: Advertised start time (timezone-aware UTC).
        status: "OPEN" or "CLOSED" relative to the time of the read.
    """

    id: int
    sport: str
    league: int
    home_side_name: str
    away_side_name: str
    name: str
    visible: bool
    advertised_start_time: datetime
    status: str
