from indexcursor.core.calculator import (
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
from indexcursor.core.connection import Connection, Edge, PageInfo, as_connection
from indexcursor.core.cursor import IndexCursor

__all__ = [
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
    "Connection",
    "Edge",
    "PageInfo",
    "as_connection",
    "IndexCursor",
]
