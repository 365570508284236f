from indexcursor.utils.exceptions import (
    IndexCursorError,
    MalformedCursor,
    UnsupportedTraversalOrder,
)
from indexcursor.utils.pagination import (
    BackwardParams,
    ForwardParams,
    PagerState,
    QueryParams,
)
from indexcursor.utils.settings import (
    DEFAULT_PAGE_SIZE,
    configure,
    get_default_page_size,
    reset_settings,
)
from indexcursor.utils.types import Variables, merge_variables

__all__ = [
    "IndexCursorError",
    "MalformedCursor",
    "UnsupportedTraversalOrder",
    "BackwardParams",
    "ForwardParams",
    "PagerState",
    "QueryParams",
    "DEFAULT_PAGE_SIZE",
    "configure",
    "get_default_page_size",
    "reset_settings",
    "Variables",
    "merge_variables",
]
