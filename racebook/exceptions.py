"""Exceptions raised by the racebook query layer.

Database errors are not wrapped: SQLAlchemy's ``DBAPIError`` subclasses
reach the caller unchanged.
"""


class RacebookError(Exception):
    """Base class for racebook errors."""


class RowScanError(RacebookError):
    """A result row could not be converted into a domain object.

    Attributes:
        row_index: Position of the offending row in the result set.
    """

    def __init__(self, message: str, row_index: int | None = None) -> None:
        super().__init__(message)
        self.row_index = row_index


class NotFoundError(RacebookError):
    """A single-entity lookup did not return exactly one row.

    Attributes:
        resource: Resource name, e.g. "event".
        id: The identifier that was looked up.
        count: Number of rows actually returned.
    """

    def __init__(self, resource: str, id: int, count: int = 0) -> None:
        if count > 1:
            message = f"ambiguous result for {resource} id {id}: {count} rows"
        else:
            message = f"no {resource} with id: {id}"
        super().__init__(message)
        self.resource = resource
        self.id = id
        self.count = count
