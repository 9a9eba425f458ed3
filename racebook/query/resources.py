"""Per-resource descriptors for the generic query engine.

A ResourceSpec bundles everything that differs between races and events:
table, query catalog, filter predicates, sort allow-list and row factory.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from racebook.config.sorting import EVENT_SORTABLE_FIELDS, RACE_SORTABLE_FIELDS
from racebook.models.event import EventRecord
from racebook.models.race import RaceRecord
from racebook.query.catalog import get_event_queries, get_race_queries
from racebook.query.filters import (
    AnyColumnMembershipPredicate,
    EqualsPredicate,
    MembershipPredicate,
    Predicate,
)
from racebook.query.materializer import event_from_row, race_from_row


@dataclass(frozen=True)
class ResourceSpec:
    """Attributes:
        name: Resource name used in messages ("race", "event").
        table: SQLAlchemy Table for schema creation.
        queries: Query catalog (logical name -> SQL).
        predicates: Filter predicates in clause order.
        sortable_fields: order_by allow-list.
        row_factory: Builds a domain object from a row.
    """

    name: str
    table: Any
    queries: dict[str, str]
    predicates: tuple[Predicate, ...]
    sortable_fields: dict[str, str]
    row_factory: Callable[..., Any]


RACE_PREDICATES: tuple[Predicate, ...] = (
    MembershipPredicate("meeting_ids", "meeting_id"),
    EqualsPredicate("visible", "visible"),
)

EVENT_PREDICATES: tuple[Predicate, ...] = (
    MembershipPredicate("sports", "sport"),
    MembershipPredicate("leagues", "league"),
    AnyColumnMembershipPredicate("sides", ("home_side_name", "away_side_name")),
    MembershipPredicate("ids", "id"),
    EqualsPredicate("visible", "visible"),
)

RACES = ResourceSpec(
    name="race",
    table=RaceRecord.__table__,
    queries=get_race_queries(),
    predicates=RACE_PREDICATES,
    sortable_fields=RACE_SORTABLE_FIELDS,
    row_factory=race_from_row,
)

EVENTS = ResourceSpec(
    name="event",
    table=EventRecord.__table__,
    queries=get_event_queries(),
    predicates=EVENT_PREDICATES,
    sortable_fields=EVENT_SORTABLE_FIELDS,
    row_factory=event_from_row,
)
