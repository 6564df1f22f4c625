"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# ── Shared ────────────────────────────────────────────────────────────


class CoordinateSchema(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    model_config = {"from_attributes": True}


class PointSchema(BaseModel):
    """Decoded point.  Not range-checked: the decoder passes values through."""

    latitude: float
    longitude: float

    model_config = {"from_attributes": True}


class RegionSchema(BaseModel):
    latitude: float
    longitude: float
    latitude_delta: float
    longitude_delta: float

    model_config = {"from_attributes": True}


# ── Requests ──────────────────────────────────────────────────────────


class DecodeRequest(BaseModel):
    encoded: str = Field(..., description="Google / OSRM encoded polyline.")
    precision: Optional[int] = Field(
        None, ge=1, le=10, description="Defaults to the configured precision (5)."
    )


class EncodeRequest(BaseModel):
    points: list[CoordinateSchema]
    precision: Optional[int] = Field(None, ge=1, le=10)


class DistanceRequest(BaseModel):
    origin: CoordinateSchema
    destination: CoordinateSchema


class PathSummaryRequest(BaseModel):
    encoded: Optional[str] = None
    coordinates: Optional[list[list[float]]] = Field(
        None, description="GeoJSON LineString positions, [lon, lat] order."
    )
    precision: Optional[int] = Field(None, ge=1, le=10)

    @field_validator("coordinates")
    @classmethod
    def _positions_in_range(
        cls, v: Optional[list[list[float]]]
    ) -> Optional[list[list[float]]]:
        if v is None:
            return v
        for i, position in enumerate(v):
            if len(position) < 2:
                raise ValueError(f"Position {i} needs at least [lon, lat]")
            lon, lat = position[0], position[1]
            if not -180 <= lon <= 180:
                raise ValueError(f"Position {i} longitude {lon} outside [-180, 180]")
            if not -90 <= lat <= 90:
                raise ValueError(f"Position {i} latitude {lat} outside [-90, 90]")
        return v

    @model_validator(mode="after")
    def _exactly_one_geometry(self) -> "PathSummaryRequest":
        if (self.encoded is None) == (self.coordinates is None):
            raise ValueError("Provide exactly one of 'encoded' or 'coordinates'")
        return self


# ── Responses ─────────────────────────────────────────────────────────


class DecodeResponse(BaseModel):
    points: list[PointSchema]
    count: int


class EncodeResponse(BaseModel):
    encoded: str


class DistanceResponse(BaseModel):
    distance_km: float
    display: str


class PathSummaryResponse(BaseModel):
    count: int
    length_km: float
    display: str
    region: Optional[RegionSchema] = None


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
    position: Optional[int] = None
