from indexcursor.core import (
    Connection,
    Edge,
    IndexCursor,
    PageInfo,
    TraversalOrder,
    clamp_page_number,
    current_page_number,
    current_page_number_desc,
    desc_page_query,
    next_page_params,
    nodes_of,
    page_query,
    pager_state,
    previous_page_params,
    total_pages,
)
from indexcursor.lifecycle import PageChangeHandler, build_variables
from indexcursor.utils import (
    DEFAULT_PAGE_SIZE,
    BackwardParams,
    ForwardParams,
    IndexCursorError,
    MalformedCursor,
    PagerState,
    UnsupportedTraversalOrder,
    configure,
    get_default_page_size,
    reset_settings,
)

__all__ = [
    # Core
    "Connection",
    "Edge",
    "IndexCursor",
    "PageInfo",
    "TraversalOrder",
    "clamp_page_number",
    "current_page_number",
    "current_page_number_desc",
    "desc_page_query",
    "next_page_params",
    "nodes_of",
    "page_query",
    "pager_state",
    "previous_page_params",
    "total_pages",
    # Lifecycle
    "PageChangeHandler",
    "build_variables",
    # Utils
    "DEFAULT_PAGE_SIZE",
    "BackwardParams",
    "ForwardParams",
    "IndexCursorError",
    "MalformedCursor",
    "PagerState",
    "UnsupportedTraversalOrder",
    "configure",
    "get_default_page_size",
    "reset_settings",
]
