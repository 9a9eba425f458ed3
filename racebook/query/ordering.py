"""Order compiler.

The order_by string is a comma separated list of ``<field> [asc|desc]``
segments (Google API design "sorting order" pattern), e.g.
``"advertised_start_time, name desc"``.

Column names cannot be bound as parameters, so each field is checked against
an allow-list and only mapped column names reach the SQL. Segments that do
not compile are dropped without error.
"""

import logging

logger = logging.getLogger(__name__)


def compile_order_segment(
    segment: str, sortable_fields: dict[str, str]
) -> str | None:
    """Compile one ``<field> [direction]`` segment.

    Any direction token containing "desc" (case-insensitive) sorts
    descending. Every other token sorts ascending.

    Args:
        segment: A single, already stripped, segment.
        sortable_fields: Allow-list of logical field name to column name.

    Returns:
        SQL for the segment, or None if the segment is dropped.
    """
    tokens = segment.split()
    if not tokens or len(tokens) > 2:
        return None

    column = sortable_fields.get(tokens[0])
    if column is None:
        return None

    if len(tokens) == 2 and "desc" in tokens[1].lower():
        return f"{column} DESC"
    return column


def compile_order_clause(order_by: str, sortable_fields: dict[str, str]) -> str:
    """Return `` ORDER BY ...`` for ``order_by``, or an empty string."""
    compiled = []
    for segment in order_by.split(","):
        segment = segment.strip()
        sql = compile_order_segment(segment, sortable_fields)
        if sql is None:
            logger.debug("Dropping order_by segment %r", segment)
            continue
        compiled.append(sql)

    if not compiled:
        return ""
    return " ORDER BY " + ", ".join(compiled)


def compile_order(
    query: str, order_by: str | None, sortable_fields: dict[str, str]
) -> str:
    """Append an ORDER BY clause to ``query`` if ``order_by`` yields any fields.

    Args:
        query: The query, already carrying any WHERE clause.
        order_by: Raw sort spec or None.
        sortable_fields: Allow-list of logical field name to column name.

    Returns:
        The query with the ORDER BY clause appended.
    """
    if order_by is None:
        return query
    return query + compile_order_clause(order_by, sortable_fields)
