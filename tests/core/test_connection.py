import pytest
from pydantic import ValidationError

from indexcursor import Connection, Edge, PageInfo
from indexcursor.core.connection import as_connection


def test_validates_graphql_field_names():
    conn = as_connection({
        "edges": [{"cursor": "3", "node": "a"}],
        "pageInfo": {"startCursor": "3", "endCursor": "3", "hasNextPage": True},
        "totalCount": 4,
    })
    assert conn.page_info.end_cursor == "3"
    assert conn.page_info.has_next_page is True
    assert conn.page_info.has_previous_page is False
    assert conn.total_count == 4
    assert conn.edges[0].node == "a"


def test_accepts_snake_case_names():
    conn = Connection(page_info=PageInfo(end_cursor="9"), total_count=10)
    assert conn.page_info.end_cursor == "9"


def test_partial_connection_defaults():
    conn = as_connection({"pageInfo": {"endCursor": "19"}})
    assert conn.edges == []
    assert conn.total_count == 0
    assert conn.page_info.start_cursor is None


def test_passes_connection_through():
    conn = Connection(edges=[Edge(cursor="0", node=1)])
    assert as_connection(conn) is conn


def test_negative_total_count_rejected():
    with pytest.raises(ValidationError):
        as_connection({"totalCount": -1})


def test_connection_is_frozen():
    conn = Connection(total_count=1)
    with pytest.raises(ValidationError):
        conn.total_count = 2
