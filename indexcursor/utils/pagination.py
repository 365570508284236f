from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ForwardParams:
    """Query parameters for fetching the page after a cursor."""

    after: str | None
    first: int

    def as_variables(self) -> dict[str, Any]:
        return {"first": self.first, "last": None, "after": self.after, "before": None}


@dataclass(frozen=True)
class BackwardParams:
    """Query parameters for fetching the page before a cursor."""

    before: str | None
    last: int

    def as_variables(self) -> dict[str, Any]:
        return {"first": None, "last": self.last, "after": None, "before": self.before}


QueryParams = ForwardParams | BackwardParams


@dataclass(frozen=True)
class PagerState:
    """What a pager control needs to render the current position."""

    page: int
    size: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool
