"""Filter compiler.

Turns a filter dataclass into a ``WHERE`` clause plus positional arguments.
Only ``?`` placeholders are written into the SQL; every caller-supplied value
travels in the argument list.
"""

from dataclasses import dataclass
from typing import Any, Protocol


class Predicate(Protocol):
    """One optional constraint read from a filter attribute."""

    def compile(self, filter: Any) -> tuple[str, list[Any]] | None:
        """Return ``(clause, args)`` or ``None`` when the attribute is unset."""
        ...


def placeholders(count: int) -> str:
    """Return ``count`` comma-separated ``?`` placeholders."""
    return ", ".join("?" * count)


def _values(filter: Any, attr: str) -> list[Any]:
    """Read a membership list from the filter.

    Raises:
        AttributeError: If the filter has no such field (wrong filter type).
        TypeError: If the field holds a bare string instead of a sequence.
    """
    value = getattr(filter, attr)
    if isinstance(value, (str, bytes)):
        raise TypeError(f"{attr} must be a sequence of values, not {type(value).__name__}")
    # 空リストは未指定と同じ扱い（"IN ()" は不正なSQLになる）
    return list(value or ())


@dataclass(frozen=True)
class MembershipPredicate:
    """``column IN (?, ...)`` over the values of ``filter.<attr>``."""

    attr: str
    column: str

    def compile(self, filter: Any) -> tuple[str, list[Any]] | None:
        values = _values(filter, self.attr)
        if not values:
            return None
        return f"{self.column} IN ({placeholders(len(values))})", values


@dataclass(frozen=True)
class AnyColumnMembershipPredicate:
    """Matches when any of ``columns`` is one of the values of ``filter.<attr>``.

    The value list is repeated once per column, in column order.
    """

    attr: str
    columns: tuple[str, ...]

    def compile(self, filter: Any) -> tuple[str, list[Any]] | None:
        values = _values(filter, self.attr)
        if not values:
            return None
        group = placeholders(len(values))
        clause = " OR ".join(f"{column} IN ({group})" for column in self.columns)
        return f"({clause})", values * len(self.columns)


@dataclass(frozen=True)
class EqualsPredicate:
    """``column = ?`` when ``filter.<attr>`` is not ``None``."""

    attr: str
    column: str

    def compile(self, filter: Any) -> tuple[str, list[Any]] | None:
        value = getattr(filter, self.attr)
        if value is None:
            return None
        return f"{self.column} = ?", [value]


def compile_filter(
    query: str, filter: Any, predicates: tuple[Predicate, ...]
) -> tuple[str, list[Any]]:
    """Append a WHERE clause for the set predicates of ``filter``.

    Predicates are applied in the order given so the generated SQL is stable.

    Args:
        query: Base ``SELECT ... FROM table`` statement.
        filter: Filter dataclass, or ``None`` for no filtering.
        predicates: Predicate descriptors for the resource.

    Returns:
        Tuple of (query, positional args).

    Example:
        >>> compile_filter("SELECT id FROM races", ListRacesFilter(meeting_ids=[1, 2]),
        ...                RACE_PREDICATES)
        ('SELECT id FROM races WHERE meeting_id IN (?, ?)', [1, 2])
    """
    args: list[Any] = []
    if filter is None:
        return query, args

    clauses: list[str] = []
    for predicate in predicates:
        compiled = predicate.compile(filter)
        if compiled is None:
            continue
        clause, values = compiled
        clauses.append(clause)
        args.extend(values)

    if clauses:
        query += " WHERE " + " AND ".join(clauses)

    return query, args
