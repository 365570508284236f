from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from indexcursor.core.calculator import nodes_of, pager_state
from indexcursor.core.connection import Connection
from indexcursor.utils.exceptions import IndexCursorError, MalformedCursor, UnsupportedTraversalOrder
from indexcursor.utils.settings import get_default_page_size

T = TypeVar("T")

MAX_PAGE_SIZE = 100


def register_exception_handlers(app: Any) -> None:
    """Register indexcursor exception handlers on a FastAPI app."""
    from starlette.responses import JSONResponse

    @app.exception_handler(MalformedCursor)
    async def malformed_cursor_handler(request: Any, exc: MalformedCursor):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(UnsupportedTraversalOrder)
    async def unsupported_order_handler(request: Any, exc: UnsupportedTraversalOrder):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(IndexCursorError)
    async def indexcursor_error_handler(request: Any, exc: IndexCursorError):
        return JSONResponse(status_code=500, content={"detail": str(exc)})


class PageNumberParams:
    """FastAPI dependency for pager parameters."""

    def __init__(self, page: int = 1, size: int | None = None):
        self.page = max(1, page)
        if size is None:
            size = get_default_page_size()
        self.size = min(max(1, size), MAX_PAGE_SIZE)


class PagerResponse(BaseModel, Generic[T]):
    """One page of a connection plus pager metadata."""

    items: list[T]
    page: int
    size: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_connection(cls, connection: Connection[Any] | Any, page_size: int | None = None) -> PagerResponse:
        state = pager_state(connection, page_size)
        return cls(
            items=nodes_of(connection),
            page=state.page,
            size=state.size,
            total=state.total,
            total_pages=state.total_pages,
            has_next=state.has_next,
            has_prev=state.has_prev,
        )
