# ABOUTME: Runtime settings read from the environment, with .env support via python-dotenv.
# ABOUTME: Defaults point at the public Open-Meteo endpoints, which need no API key.

import os
from collections.abc import Mapping

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from weather_oracle.errors import ConfigError
from weather_oracle.models import UnitSystem
from weather_oracle.weather_service import FORECAST_URL, GEOCODING_URL

load_dotenv()

_ENV_KEYS = {
    "geocoding_url": "WEATHER_GEOCODING_URL",
    "forecast_url": "WEATHER_FORECAST_URL",
    "language": "WEATHER_LANGUAGE",
    "units": "WEATHER_UNITS",
    "hourly_hours": "WEATHER_HOURLY_HOURS",
    "http_attempts": "WEATHER_HTTP_ATTEMPTS",
    "home_latitude": "WEATHER_HOME_LATITUDE",
    "home_longitude": "WEATHER_HOME_LONGITUDE",
}


class Settings(BaseModel):
    """Resolved configuration for the controller and its HTTP client."""

    geocoding_url: str = GEOCODING_URL
    forecast_url: str = FORECAST_URL
    language: str = "en"
    units: UnitSystem = UnitSystem.METRIC
    hourly_hours: int = Field(default=24, ge=0)
    http_attempts: int = Field(default=1, ge=1)
    home_latitude: float | None = Field(default=None, ge=-90, le=90)
    home_longitude: float | None = Field(default=None, ge=-180, le=180)


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environment variables.

    Args:
        env: Optional mapping used instead of ``os.environ`` to simplify testing.

    Raises:
        ConfigError: If a variable holds a value that does not validate.
    """
    source = env if env is not None else os.environ
    values = {}
    for field, key in _ENV_KEYS.items():
        raw = source.get(key)
        if raw is not None and raw.strip():
            values[field] = raw.strip()

    try:
        return Settings.model_validate(values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
