# ABOUTME: Pydantic BaseModels for places, Open-Meteo forecast payloads and display view models.
# ABOUTME: Raw forecast columns are kept as returned; conversion happens only when building a view.

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

logger = logging.getLogger(__name__)


class UnitSystem(str, Enum):
    """Display unit system. Affects presentation only, never stored data."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class Coordinates(BaseModel):
    """Position reported by a location service."""

    latitude: float
    longitude: float


class Place(BaseModel):
    """Resolved location with a display name."""

    model_config = ConfigDict(frozen=True)

    name: str
    country: str = ""
    latitude: float
    longitude: float


class CurrentReading(BaseModel):
    """Instantaneous conditions from the `current` block. Any field may be unknown."""

    model_config = ConfigDict(frozen=True)

    time: str | None = None
    temperature_2m: float | None = None
    relative_humidity_2m: float | None = None
    apparent_temperature: float | None = None
    is_day: int | None = None
    precipitation: float | None = None
    weather_code: int | None = None
    wind_speed_10m: float | None = None


class HourlySeries(BaseModel):
    """Column-oriented hourly data. `time` drives the length; other columns may be short."""

    model_config = ConfigDict(frozen=True)

    time: list[str] = []
    temperature_2m: list[float | None] | None = None
    precipitation_probability: list[float | None] | None = None
    weather_code: list[int | None] | None = None


class DailySeries(BaseModel):
    """Column-oriented daily data. `time` drives the length; other columns may be short."""

    model_config = ConfigDict(frozen=True)

    time: list[str] = []
    temperature_2m_max: list[float | None] | None = None
    temperature_2m_min: list[float | None] | None = None
    precipitation_sum: list[float | None] | None = None
    weather_code: list[int | None] | None = None

    @model_validator(mode="after")
    def _check_temperature_columns(self):
        expected = len(self.time)
        for key in ("temperature_2m_max", "temperature_2m_min"):
            col = getattr(self, key)
            if col is not None and len(col) != expected:
                logger.warning("Daily column %s has %d values for %d days", key, len(col), expected)
        return self


class ForecastSnapshot(BaseModel):
    """One forecast payload. Replaced as a whole on every fetch."""

    model_config = ConfigDict(frozen=True)

    timezone: str | None = None
    current: CurrentReading = Field(default_factory=CurrentReading)
    hourly: HourlySeries = Field(default_factory=HourlySeries)
    daily: DailySeries = Field(default_factory=DailySeries)


class CurrentView(BaseModel):
    temperature: str
    apparent_temperature: str
    humidity: str
    wind_speed: str
    precipitation: str
    condition: str
    is_day: bool | None = None


class DayView(BaseModel):
    date: str
    label: str
    condition: str
    high: str
    low: str
    precipitation: str


class HourView(BaseModel):
    time: str
    label: str
    temperature: str
    precipitation_probability: str
    condition: str


class RenderableView(BaseModel):
    """Display-ready projection of a snapshot under one unit system."""

    units: UnitSystem
    place_label: str | None = None
    current: CurrentView
    days: list[DayView] = []
    hours: list[HourView] = []
