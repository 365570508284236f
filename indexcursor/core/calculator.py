"""Translation between connection cursors and 1-based page numbers.

Cursors are decimal encodings of a zero-based, gapless index. In descending
traversal index 0 is the newest item. When the total is not a multiple of the
page size, the highest-index page is assumed to be the short one.
"""

from __future__ import annotations

import enum
import math
from typing import Any

from indexcursor.core.connection import Connection, as_connection
from indexcursor.core.cursor import IndexCursor
from indexcursor.utils.exceptions import UnsupportedTraversalOrder
from indexcursor.utils.pagination import BackwardParams, ForwardParams, PagerState
from indexcursor.utils.settings import resolve_page_size


class TraversalOrder(enum.Enum):
    DESCENDING = "desc"


def _page_remainder(total_count: int, page_size: int) -> int:
    """Size of the smallest page in the sequence (0 when pages divide evenly)."""
    return total_count % page_size


def _page_offset(total_count: int, page_size: int) -> int:
    return page_size - _page_remainder(total_count, page_size)


def nodes_of(connection: Connection[Any] | Any) -> list[Any]:
    """Return the nodes of a connection in edge order."""
    return [edge.node for edge in as_connection(connection).edges]


def next_page_params(connection: Connection[Any] | Any, page_size: int | None = None) -> ForwardParams:
    """Params for the page after this one. Does not check ``has_next_page``."""
    connection = as_connection(connection)
    return ForwardParams(after=connection.page_info.end_cursor, first=resolve_page_size(page_size))


def previous_page_params(connection: Connection[Any] | Any, page_size: int | None = None) -> BackwardParams:
    """Params for the page before this one. Does not check ``has_previous_page``."""
    connection = as_connection(connection)
    return BackwardParams(before=connection.page_info.start_cursor, last=resolve_page_size(page_size))


def current_page_number_desc(connection: Connection[Any] | Any, page_size: int | None = None) -> int:
    """Page number implied by the end cursor of a descending connection.

    The page is the ``page_size`` block holding the end cursor.

    Raises:
        MalformedCursor: If the end cursor is missing or not a decimal index
    """
    size = resolve_page_size(page_size)
    page_end = IndexCursor.parse(as_connection(connection).page_info.end_cursor)
    return page_end // size + 1


def desc_page_query(page_number: int, total_count: int, page_size: int | None = None) -> BackwardParams:
    """Backward params that land on ``page_number`` of a descending sequence.

    ``page_number`` is not bounds checked; callers clamp it.
    """
    size = resolve_page_size(page_size)
    offset = _page_offset(total_count, size)
    page_end = page_number * size + 1
    return BackwardParams(before=str(page_end - offset), last=size)


def current_page_number(
    connection: Connection[Any] | Any,
    page_size: int | None = None,
    order: TraversalOrder = TraversalOrder.DESCENDING,
) -> int:
    if order is TraversalOrder.DESCENDING:
        return current_page_number_desc(connection, page_size)
    raise UnsupportedTraversalOrder(f"Unsupported traversal order: {order!r}")


def page_query(
    page_number: int,
    total_count: int,
    page_size: int | None = None,
    order: TraversalOrder = TraversalOrder.DESCENDING,
) -> BackwardParams:
    if order is TraversalOrder.DESCENDING:
        return desc_page_query(page_number, total_count, page_size)
    raise UnsupportedTraversalOrder(f"Unsupported traversal order: {order!r}")


def total_pages(total_count: int, page_size: int | None = None) -> int:
    """Number of pages needed for ``total_count`` items (0 when empty)."""
    size = resolve_page_size(page_size)
    return math.ceil(total_count / size) if total_count > 0 else 0


def clamp_page_number(page_number: int, total_pages: int) -> int:
    """Clamp page number to valid bounds."""
    return min(max(page_number, 1), max(total_pages, 1))


def pager_state(connection: Connection[Any] | Any, page_size: int | None = None) -> PagerState:
    """Pager position for a descending connection.

    An empty connection is reported as page 1 of 0.
    """
    connection = as_connection(connection)
    size = resolve_page_size(page_size)
    pages = total_pages(connection.total_count, size)

    if not connection.edges and connection.page_info.end_cursor is None:
        page = 1
    else:
        page = current_page_number_desc(connection, size)

    return PagerState(
        page=page,
        size=size,
        total=connection.total_count,
        total_pages=pages,
        has_next=page < pages,
        has_prev=page > 1,
    )
