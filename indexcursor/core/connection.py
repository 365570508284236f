"""Relay-style connection snapshots as returned by the GraphQL API."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
    arbitrary_types_allowed=True,
)


class Edge(BaseModel, Generic[T]):
    """A node paired with the cursor that locates it."""

    model_config = _MODEL_CONFIG

    cursor: str
    node: T


class PageInfo(BaseModel):
    """Boundaries of the page a connection describes."""

    model_config = _MODEL_CONFIG

    start_cursor: str | None = None
    end_cursor: str | None = None
    has_next_page: bool = False
    has_previous_page: bool = False


class Connection(BaseModel, Generic[T]):
    """One page of a larger ordered sequence.

    Accepts both GraphQL field names (``pageInfo``, ``totalCount``) and their
    snake_case equivalents.
    """

    model_config = _MODEL_CONFIG

    edges: list[Edge[T]] = Field(default_factory=list)
    page_info: PageInfo = Field(default_factory=PageInfo)
    total_count: int = Field(default=0, ge=0)


def as_connection(value: Connection[Any] | Any) -> Connection[Any]:
    """Return ``value`` as a Connection, validating mappings.

    Raises:
        pydantic.ValidationError: If a mapping does not describe a connection
    """
    if isinstance(value, Connection):
        return value
    return Connection[Any].model_validate(value)
