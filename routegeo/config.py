"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings

from routegeo.domain.distance import EARTH_RADIUS_KM


class Settings(BaseSettings):
    # Distance engine
    earth_radius_km: float = EARTH_RADIUS_KM  # equatorial, not mean (6371)

    # Polyline codec
    polyline_precision: int = 5  # 1e5; OSRM "polyline6" uses 6

    # Map region fitting
    region_padding: float = 0.2  # fraction of the bbox added on each side

    # HTTP surface
    rate_limit: str = "100/minute"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
