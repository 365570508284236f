from __future__ import annotations

from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from indexcursor import IndexCursorError, configure, current_page_number_desc
from indexcursor.integrations.fastapi import (
    PageNumberParams,
    PagerResponse,
    register_exception_handlers,
)


def test_pager_response_from_connection(make_connection):
    resp = PagerResponse[dict].from_connection(make_connection(6, 15, total_count=25), 10)
    assert len(resp.items) == 10
    assert resp.items[0] == {"id": "block-6"}
    assert resp.page == 2
    assert resp.total == 25
    assert resp.total_pages == 3
    assert resp.has_next is True
    assert resp.has_prev is True


def test_page_number_params_defaults():
    p = PageNumberParams()
    assert p.page == 1
    assert p.size == 10


def test_page_number_params_uses_configured_size():
    configure(page_size=30)
    assert PageNumberParams().size == 30


def test_page_number_params_clamps():
    p = PageNumberParams(page=-2, size=999)
    assert p.page == 1
    assert p.size == 100


def _app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/page")
    async def page(cursor: str, params: PageNumberParams = Depends()):
        conn = {"pageInfo": {"endCursor": cursor}}
        return {"page": current_page_number_desc(conn, params.size)}

    @app.get("/boom")
    async def boom():
        raise IndexCursorError("broken")

    return app


def test_page_endpoint():
    client = TestClient(_app())
    resp = client.get("/page", params={"cursor": "19"})
    assert resp.status_code == 200
    assert resp.json() == {"page": 2}


def test_malformed_cursor_maps_to_400():
    client = TestClient(_app())
    resp = client.get("/page", params={"cursor": "abc"})
    assert resp.status_code == 400
    assert "Malformed cursor" in resp.json()["detail"]


def test_base_error_maps_to_500():
    client = TestClient(_app(), raise_server_exceptions=False)
    resp = client.get("/boom")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "broken"}
