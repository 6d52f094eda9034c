# ABOUTME: Service layer for Open-Meteo API calls and response parsing.
# ABOUTME: Resolves a city name to a Place and fetches a ForecastSnapshot for coordinates.

import logging

import httpx
from pydantic import ValidationError

from weather_oracle.errors import EmptyQuery, ForecastFetchFailed, LookupFailed, PlaceNotFound
from weather_oracle.models import ForecastSnapshot, Place

logger = logging.getLogger(__name__)

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

# Field lists are a contract with the forecast API; parsing in models.py depends on them.
CURRENT_PARAMS = ",".join(
    [
        "temperature_2m",
        "relative_humidity_2m",
        "apparent_temperature",
        "is_day",
        "precipitation",
        "weather_code",
        "wind_speed_10m",
    ]
)
HOURLY_PARAMS = "temperature_2m,precipitation_probability,weather_code"
DAILY_PARAMS = "temperature_2m_max,temperature_2m_min,precipitation_sum,weather_code"


async def resolve_place(
    client: httpx.AsyncClient,
    name: str,
    *,
    url: str = GEOCODING_URL,
    language: str = "en",
) -> Place:
    """Geocode a city name to the single best matching Place."""
    query = name.strip()
    if not query:
        raise EmptyQuery()

    try:
        resp = await client.get(url, params={"name": query, "count": 1, "language": language, "format": "json"})
        resp.raise_for_status()
        data = resp.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.info("Geocoding request for %r failed: %s", query, e)
        raise LookupFailed() from e

    results = data.get("results") if isinstance(data, dict) else None
    if not results:
        raise PlaceNotFound()

    try:
        r = results[0]
        return Place(
            name=_display_name(r),
            country=r.get("country") or "",
            latitude=r["latitude"],
            longitude=r["longitude"],
        )
    except (AttributeError, KeyError, TypeError, ValidationError) as e:
        raise LookupFailed() from e


async def get_forecast(
    client: httpx.AsyncClient,
    latitude: float,
    longitude: float,
    *,
    url: str = FORECAST_URL,
) -> ForecastSnapshot:
    """Fetch current, hourly and daily weather for coordinates in their local timezone."""
    try:
        resp = await client.get(
            url,
            params={
                "latitude": str(latitude),
                "longitude": str(longitude),
                "timezone": "auto",
                "current": CURRENT_PARAMS,
                "hourly": HOURLY_PARAMS,
                "daily": DAILY_PARAMS,
            },
        )
        resp.raise_for_status()
        data = resp.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.info("Forecast request for (%s, %s) failed: %s", latitude, longitude, e)
        raise ForecastFetchFailed() from e

    try:
        return ForecastSnapshot.model_validate(data)
    except ValidationError as e:
        logger.warning("Unexpected forecast payload: %s", e)
        raise ForecastFetchFailed() from e


def _display_name(result: dict) -> str:
    """Join the place name with its first-level region when the geocoder returns one."""
    admin1 = result.get("admin1")
    if admin1:
        return f"{result['name']}, {admin1}"
    return result["name"]
