"""Base SQL templates per resource.

Each table has a fixed catalog keyed by logical query name. The column list
of the ``list`` query is also the positional read order of the materializer.
"""

LIST = "list"

RACE_COLUMNS: tuple[str, ...] = (
    "id",
    "meeting_id",
    "name",
    "number",
    "visible",
    "advertised_start_time",
)

EVENT_COLUMNS: tuple[str, ...] = (
    "id",
    "sport",
    "league",
    "home_side_name",
    "away_side_name",
    "visible",
    "advertised_start_time",
)


def build_queries(table: str, columns: tuple[str, ...]) -> dict[str, str]:
    """Build the query catalog for a table.

    Args:
        table: Table name.
        columns: Columns selected by the list query, in read order.

    Returns:
        Mapping of logical query name to SQL.
    """
    return {
        LIST: f"SELECT {', '.join(columns)} FROM {table}",
    }


def get_race_queries() -> dict[str, str]:
    return build_queries("races", RACE_COLUMNS)


def get_event_queries() -> dict[str, str]:
    return build_queries("events", EVENT_COLUMNS)
