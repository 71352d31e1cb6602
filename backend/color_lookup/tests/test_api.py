import pytest
from httpx import ASGITransport, AsyncClient

from color_lookup.api import app


def client() -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_health_check():
    async with client() as ac:
        resp = await ac.get("/v1/healthz")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["colors_count"] == 4


@pytest.mark.asyncio
async def test_list_colors():
    async with client() as ac:
        resp = await ac.get("/v1/colors")
    assert resp.status_code == 200
    assert resp.json()["colors"] == {
        "red": "#f00",
        "blue": "#00f",
        "green": "#0f0",
        "white": "#fff",
    }


@pytest.mark.asyncio
async def test_get_color():
    async with client() as ac:
        resp = await ac.get("/v1/colors/green")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["hex"] == "#0f0"


@pytest.mark.asyncio
async def test_get_unknown_color():
    async with client() as ac:
        resp = await ac.get("/v1/colors/purple")
    assert resp.status_code == 404
    data = resp.json()
    assert data["error"] == "invalid_color_code"
    assert data["code"] == "purple"


@pytest.mark.asyncio
async def test_lookup_mixed_batch():
    async with client() as ac:
        resp = await ac.post("/v1/colors/lookup", json={"codes": ["red", "purple", "blue"]})
    assert resp.status_code == 200
    data = resp.json()
    assert data["found"] == 2
    assert data["missing"] == 1
    assert [r["status"] for r in data["results"]] == ["ok", "error", "ok"]
    assert data["results"][2]["hex"] == "#00f"


@pytest.mark.asyncio
async def test_lookup_empty_batch():
    async with client() as ac:
        resp = await ac.post("/v1/colors/lookup", json={"codes": []})
    assert resp.status_code == 422
