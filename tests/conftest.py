import pytest

from indexcursor import reset_settings


@pytest.fixture(autouse=True)
def pagination_settings():
    """Restore the default page size around each test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def make_connection():
    """Factory for GraphQL-shaped connections holding indices ``start..end`` in ascending edge order."""

    def _make(start: int, end: int, total_count: int, **page_info) -> dict:
        edges = [{"cursor": str(i), "node": {"id": f"block-{i}"}} for i in range(start, end + 1)]
        return {
            "edges": edges,
            "pageInfo": {
                "startCursor": edges[0]["cursor"] if edges else None,
                "endCursor": edges[-1]["cursor"] if edges else None,
                "hasNextPage": page_info.get("has_next", False),
                "hasPreviousPage": page_info.get("has_prev", False),
            },
            "totalCount": total_count,
        }

    return _make
