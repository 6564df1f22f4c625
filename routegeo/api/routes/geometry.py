"""
Geometry endpoints
==================

POST /api/v1/polyline/decode -- encoded polyline -> list of coordinates
POST /api/v1/polyline/encode -- list of coordinates -> encoded polyline
POST /api/v1/distance        -- great-circle distance between two points
POST /api/v1/path/summary    -- point count, length and map region of a route

All handlers are thin wrappers over the pure functions in
``routegeo.domain``; a malformed polyline surfaces as ``DecodeError`` and
is turned into a 422 by the app-level handler.
"""

from fastapi import APIRouter, Request

from routegeo.api.middleware import limiter
from routegeo.api.schemas import (
    DecodeRequest,
    DecodeResponse,
    DistanceRequest,
    DistanceResponse,
    EncodeRequest,
    EncodeResponse,
    ErrorResponse,
    PathSummaryRequest,
    PathSummaryResponse,
    PointSchema,
    RegionSchema,
)
from routegeo.config import settings
from routegeo.domain.distance import distance, format_distance
from routegeo.domain.entities import Coordinate
from routegeo.domain.path import fit_region, path_from_geojson, path_length_km
from routegeo.domain.polyline import decode, encode

router = APIRouter(tags=["geometry"])

_MALFORMED = {422: {"model": ErrorResponse, "description": "Malformed polyline."}}


@router.post(
    "/polyline/decode",
    response_model=DecodeResponse,
    summary="Decode an encoded polyline",
    responses=_MALFORMED,
)
@limiter.limit(settings.rate_limit)
async def decode_polyline(request: Request, body: DecodeRequest):
    path = decode(body.encoded, body.precision or settings.polyline_precision)
    return DecodeResponse(
        points=[PointSchema(latitude=c.latitude, longitude=c.longitude) for c in path],
        count=len(path),
    )


@router.post(
    "/polyline/encode",
    response_model=EncodeResponse,
    summary="Encode coordinates as a polyline",
)
@limiter.limit(settings.rate_limit)
async def encode_polyline(request: Request, body: EncodeRequest):
    path = [Coordinate(p.latitude, p.longitude) for p in body.points]
    return EncodeResponse(
        encoded=encode(path, body.precision or settings.polyline_precision)
    )


@router.post(
    "/distance",
    response_model=DistanceResponse,
    summary="Great-circle distance between two points",
)
@limiter.limit(settings.rate_limit)
async def compute_distance(request: Request, body: DistanceRequest):
    origin = Coordinate(body.origin.latitude, body.origin.longitude)
    destination = Coordinate(body.destination.latitude, body.destination.longitude)
    km = distance(origin, destination, settings.earth_radius_km)
    return DistanceResponse(distance_km=km, display=format_distance(km))


@router.post(
    "/path/summary",
    response_model=PathSummaryResponse,
    summary="Summarise a route path",
    description=(
        "Accepts either an encoded polyline or GeoJSON LineString "
        "coordinates and returns point count, great-circle length and "
        "the map region that frames the whole route."
    ),
    responses=_MALFORMED,
)
@limiter.limit(settings.rate_limit)
async def summarise_path(request: Request, body: PathSummaryRequest):
    if body.encoded is not None:
        path = decode(body.encoded, body.precision or settings.polyline_precision)
    else:
        path = path_from_geojson(body.coordinates)

    length = path_length_km(path, settings.earth_radius_km)
    region = None
    if path:
        r = fit_region(path, settings.region_padding)
        region = RegionSchema(
            latitude=r.latitude,
            longitude=r.longitude,
            latitude_delta=r.latitude_delta,
            longitude_delta=r.longitude_delta,
        )
    return PathSummaryResponse(
        count=len(path),
        length_km=length,
        display=format_distance(length),
        region=region,
    )
