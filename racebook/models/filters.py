"""List filters.

Every field is optional. An unset field (empty sequence or ``None``) places
no constraint on the result.
"""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ListRacesFilter:
    """Filter for listing races.

    Attributes:
        meeting_ids: Match races whose meeting_id is one of these.
        visible: Match races with exactly this visibility.
    """

    meeting_ids: Sequence[int] = ()
    visible: bool | None = None


@dataclass(frozen=True)
class ListEventsFilter:
    """Filter for listing events.

    Attributes:
        sports: Match events whose sport is one of these.
        leagues: Match events whose league is one of these.
        visible: Match events with exactly this visibility.
        sides: Match events where either the home or the away side is one of these.
        ids: Match events whose id is one of these.
    """

    sports: Sequence[str] = ()
    leagues: Sequence[int] = ()
    visible: bool | None = None
    sides: Sequence[str] = ()
    ids: Sequence[int] = ()
