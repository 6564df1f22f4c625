"""
FastAPI application factory.

* Registers routes for geometry (polyline / distance / path) and admin.
* Maps ``DecodeError`` to ``422 Unprocessable Entity``.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from routegeo.api.middleware import limiter
from routegeo.api.routes import admin, geometry
from routegeo.api.schemas import ErrorResponse
from routegeo.config import settings
from routegeo.domain.polyline import DecodeError

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


async def _decode_error_handler(request: Request, exc: DecodeError) -> JSONResponse:
    logger.info(
        "Rejected malformed polyline on %s at position %s: %s",
        request.url.path, exc.position, exc,
    )
    body = ErrorResponse(detail=str(exc), position=exc.position)
    return JSONResponse(status_code=422, content=body.model_dump())


def create_app() -> FastAPI:
    app = FastAPI(
        title="Route Geometry API",
        description=(
            "Decodes encoded route polylines into coordinates, measures "
            "great-circle distances, and frames routes for map display."
        ),
        version="1.0.0",
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.add_exception_handler(DecodeError, _decode_error_handler)

    # Routers
    app.include_router(geometry.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
