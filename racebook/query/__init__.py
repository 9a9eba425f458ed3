"""Request-to-SQL translation: catalog, filters, ordering and materialization."""

from racebook.query.catalog import LIST
from racebook.query.filters import compile_filter
from racebook.query.materializer import materialize
from racebook.query.ordering import compile_order
from racebook.query.resources import EVENTS, RACES, ResourceSpec

__all__ = [
    "EVENTS",
    "LIST",
    "RACES",
    "ResourceSpec",
    "compile_filter",
    "compile_order",
    "materialize",
]
