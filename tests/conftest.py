# ABOUTME: Shared test fixtures for the weather lookup test suite.
# ABOUTME: Provides canned Open-Meteo payloads for geocoding and forecast responses.

import pytest


@pytest.fixture
def porto_alegre_geocode() -> dict:
    return {
        "results": [
            {
                "name": "Porto Alegre",
                "admin1": "Rio Grande do Sul",
                "country": "Brazil",
                "latitude": -30.03,
                "longitude": -51.23,
            }
        ]
    }


@pytest.fixture
def forecast_payload() -> dict:
    return {
        "latitude": -30.0,
        "longitude": -51.25,
        "timezone": "America/Sao_Paulo",
        "current_units": {"temperature_2m": "°C"},
        "current": {
            "time": "2025-01-15T14:00",
            "temperature_2m": 21.4,
            "relative_humidity_2m": 65,
            "apparent_temperature": 22.0,
            "is_day": 1,
            "precipitation": 0.2,
            "weather_code": 3,
            "wind_speed_10m": 10.0,
        },
        "hourly": {
            "time": ["2025-01-15T00:00", "2025-01-15T01:00", "2025-01-15T02:00"],
            "temperature_2m": [19.0, 18.6, 18.1],
            "precipitation_probability": [0, 10, 40],
            "weather_code": [1, 2, 61],
        },
        "daily": {
            "time": ["2025-01-15", "2025-01-16", "2025-01-17"],
            "temperature_2m_max": [27.3, 25.0, 23.8],
            "temperature_2m_min": [18.2, 17.5, 16.0],
            "precipitation_sum": [0.0, 4.2, 12.5],
            "weather_code": [3, 61, 95],
        },
    }
