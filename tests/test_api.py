"""
Integration tests for the REST API endpoints.

The app is driven in-process through ``httpx.ASGITransport``; every
endpoint is a thin wrapper over the domain functions, so these tests
focus on the wire shapes and on error mapping.
"""

from __future__ import annotations

import logging

import pytest
from httpx import AsyncClient

from tests.conftest import GOOGLE_ENCODED, GOOGLE_POINTS


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    resp = await client.get("/api/v1/admin/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


# ── Polyline ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_decode_known_vector(client: AsyncClient):
    resp = await client.post("/api/v1/polyline/decode", json={"encoded": GOOGLE_ENCODED})
    assert resp.status_code == 200
    data = resp.json()
    assert data["count"] == 3
    assert [(p["latitude"], p["longitude"]) for p in data["points"]] == GOOGLE_POINTS


@pytest.mark.asyncio
async def test_decode_empty(client: AsyncClient):
    resp = await client.post("/api/v1/polyline/decode", json={"encoded": ""})
    assert resp.status_code == 200
    assert resp.json() == {"points": [], "count": 0}


@pytest.mark.asyncio
async def test_decode_truncated_returns_422(client: AsyncClient, caplog):
    caplog.set_level(logging.INFO, logger="routegeo.api.app")
    resp = await client.post(
        "/api/v1/polyline/decode", json={"encoded": "_p~iF~ps|U_ulLnnqC_mqNvxq"}
    )
    assert resp.status_code == 422
    data = resp.json()
    assert data["position"] == 25
    assert "truncated" in data["detail"]
    assert any(
        r.levelno == logging.INFO and "Rejected malformed polyline" in r.getMessage()
        for r in caplog.records
    )


@pytest.mark.asyncio
async def test_decode_precision_six(client: AsyncClient):
    resp = await client.post(
        "/api/v1/polyline/decode", json={"encoded": GOOGLE_ENCODED, "precision": 6}
    )
    assert resp.status_code == 200
    assert resp.json()["points"][0]["latitude"] == 3.85


@pytest.mark.asyncio
async def test_encode(client: AsyncClient):
    points = [{"latitude": lat, "longitude": lng} for lat, lng in GOOGLE_POINTS]
    resp = await client.post("/api/v1/polyline/encode", json={"points": points})
    assert resp.status_code == 200
    assert resp.json()["encoded"] == GOOGLE_ENCODED


# ── Distance ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_distance(client: AsyncClient):
    resp = await client.post(
        "/api/v1/distance",
        json={
            "origin": {"latitude": 0, "longitude": 0},
            "destination": {"latitude": 0, "longitude": 1},
        },
    )
    assert resp.status_code == 200
    assert resp.json() == {"distance_km": 111.32, "display": "111.32 km"}


@pytest.mark.asyncio
async def test_distance_rejects_invalid_latitude(client: AsyncClient):
    resp = await client.post(
        "/api/v1/distance",
        json={
            "origin": {"latitude": 91, "longitude": 0},
            "destination": {"latitude": 0, "longitude": 0},
        },
    )
    assert resp.status_code == 422


# ── Path summary ──────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_path_summary_from_polyline(client: AsyncClient):
    resp = await client.post("/api/v1/path/summary", json={"encoded": GOOGLE_ENCODED})
    assert resp.status_code == 200
    data = resp.json()
    assert data["count"] == 3
    assert data["length_km"] > 0
    assert data["display"].endswith(" km")
    assert data["region"]["latitude"] == pytest.approx((38.5 + 43.252) / 2)


@pytest.mark.asyncio
async def test_path_summary_from_geojson(client: AsyncClient):
    resp = await client.post(
        "/api/v1/path/summary",
        json={"coordinates": [[-46.6333, -23.5505], [-43.1729, -22.9068]]},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["count"] == 2
    assert 359.0 < data["length_km"] < 363.0


@pytest.mark.asyncio
async def test_path_summary_empty_has_no_region(client: AsyncClient):
    resp = await client.post("/api/v1/path/summary", json={"encoded": ""})
    assert resp.status_code == 200
    assert resp.json()["region"] is None


@pytest.mark.asyncio
async def test_path_summary_requires_one_geometry(client: AsyncClient):
    neither = await client.post("/api/v1/path/summary", json={})
    both = await client.post(
        "/api/v1/path/summary",
        json={"encoded": GOOGLE_ENCODED, "coordinates": [[0, 0]]},
    )
    assert neither.status_code == 422
    assert both.status_code == 422


@pytest.mark.asyncio
async def test_path_summary_malformed_geojson(client: AsyncClient):
    resp = await client.post("/api/v1/path/summary", json={"coordinates": [[1.0]]})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_path_summary_malformed_polyline(client: AsyncClient):
    resp = await client.post("/api/v1/path/summary", json={"encoded": "_p~iF"})
    assert resp.status_code == 422
    assert resp.json()["position"] == 5


@pytest.mark.asyncio
async def test_path_summary_rejects_out_of_range_geojson(client: AsyncClient):
    resp = await client.post(
        "/api/v1/path/summary", json={"coordinates": [[500.0, 95.0], [0.0, 0.0]]}
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_path_summary_rejects_out_of_range_latitude(client: AsyncClient):
    resp = await client.post(
        "/api/v1/path/summary", json={"coordinates": [[0.0, 0.0], [10.0, -91.0]]}
    )
    assert resp.status_code == 422
