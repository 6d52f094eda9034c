# ABOUTME: Contract tests for environment-driven settings and HTTP client creation.
# ABOUTME: Uses injected env mappings so the real environment never leaks into assertions.

import httpx
import pytest
from pydantic_ai.retries import AsyncTenacityTransport

from weather_oracle.config import load_settings
from weather_oracle.deps import create_http_client
from weather_oracle.errors import ConfigError
from weather_oracle.location import ConfiguredLocation, location_from_settings
from weather_oracle.models import UnitSystem
from weather_oracle.weather_service import FORECAST_URL, GEOCODING_URL


class TestLoadSettings:
    def test_defaults(self):
        """An empty environment yields the public Open-Meteo defaults.

        Implementation: Loads settings from an empty mapping.
        Passing implies: The package works with no configuration at all.
        """
        settings = load_settings({})
        assert settings.geocoding_url == GEOCODING_URL
        assert settings.forecast_url == FORECAST_URL
        assert settings.language == "en"
        assert settings.units is UnitSystem.METRIC
        assert settings.http_attempts == 1
        assert settings.home_latitude is None

    def test_overrides(self):
        settings = load_settings(
            {
                "WEATHER_UNITS": "imperial",
                "WEATHER_HTTP_ATTEMPTS": "3",
                "WEATHER_HOURLY_HOURS": "12",
                "WEATHER_HOME_LATITUDE": "-30.03",
                "WEATHER_HOME_LONGITUDE": "-51.23",
            }
        )
        assert settings.units is UnitSystem.IMPERIAL
        assert settings.http_attempts == 3
        assert settings.hourly_hours == 12
        assert settings.home_latitude == -30.03

    def test_blank_values_fall_back_to_defaults(self):
        settings = load_settings({"WEATHER_UNITS": "  "})
        assert settings.units is UnitSystem.METRIC

    @pytest.mark.parametrize(
        "env",
        [
            {"WEATHER_UNITS": "kelvin"},
            {"WEATHER_HTTP_ATTEMPTS": "0"},
            {"WEATHER_HOME_LATITUDE": "120"},
        ],
    )
    def test_invalid_values_raise(self, env):
        """Invalid settings raise ConfigError at load time.

        Implementation: Loads unknown units, zero attempts and an out-of-range latitude.
        Passing implies: Misconfiguration fails fast instead of during a search.
        """
        with pytest.raises(ConfigError):
            load_settings(env)


class TestLocationFromSettings:
    def test_needs_both_coordinates(self):
        assert location_from_settings(load_settings({"WEATHER_HOME_LATITUDE": "1.0"})) is None

    @pytest.mark.asyncio
    async def test_configured_position(self):
        provider = location_from_settings(
            load_settings({"WEATHER_HOME_LATITUDE": "1.5", "WEATHER_HOME_LONGITUDE": "2.5"})
        )
        assert isinstance(provider, ConfiguredLocation)
        coords = await provider.current_position()
        assert (coords.latitude, coords.longitude) == (1.5, 2.5)


class TestCreateHttpClient:
    @pytest.mark.asyncio
    async def test_single_attempt_by_default(self):
        client = create_http_client()
        assert isinstance(client, httpx.AsyncClient)
        assert not isinstance(client._transport, AsyncTenacityTransport)
        await client.aclose()

    @pytest.mark.asyncio
    async def test_retrying_transport_when_requested(self):
        client = create_http_client(attempts=3)
        assert isinstance(client._transport, AsyncTenacityTransport)
        await client.aclose()
