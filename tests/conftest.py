"""
Shared test fixtures.

The API is stateless, so the client fixture only needs a fresh app and
an in-process ASGI transport: no server, no network.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from routegeo.domain.entities import Coordinate


# ── Reference data ────────────────────────────────────────────────────

# Canonical vector from the Google polyline algorithm documentation.
GOOGLE_ENCODED = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"
GOOGLE_POINTS = [(38.5, -120.2), (40.7, -120.95), (43.252, -126.453)]

SAO_PAULO = Coordinate(-23.5505, -46.6333)
RIO_DE_JANEIRO = Coordinate(-22.9068, -43.1729)


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def google_path() -> list[Coordinate]:
    return [Coordinate(lat, lng) for lat, lng in GOOGLE_POINTS]


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    from routegeo.api.app import create_app

    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
