# ABOUTME: Builds the display-ready view of a forecast snapshot under a chosen unit system.
# ABOUTME: Missing values degrade to placeholders per field; the output shape never changes.

from datetime import date, datetime

from weather_oracle.models import (
    CurrentReading,
    CurrentView,
    DailySeries,
    DayView,
    ForecastSnapshot,
    HourlySeries,
    HourView,
    Place,
    RenderableView,
    UnitSystem,
)
from weather_oracle.units import (
    convert_temperature,
    convert_wind_speed,
    fmt,
    fmt_with_unit,
    speed_unit,
    temperature_unit,
)
from weather_oracle.weather_codes import describe_weather_code

DEFAULT_HOURS = 24


def build_view(
    snapshot: ForecastSnapshot,
    units: UnitSystem,
    place: Place | None = None,
    *,
    hours: int = DEFAULT_HOURS,
) -> RenderableView:
    """Project a raw snapshot into converted, labelled fields for display."""
    return RenderableView(
        units=units,
        place_label=place_label(place),
        current=build_current(snapshot.current, units),
        days=build_days(snapshot.daily, units),
        hours=build_hours(snapshot.hourly, units, limit=hours),
    )


def place_label(place: Place | None) -> str | None:
    if place is None:
        return None
    if place.country:
        return f"{place.name} — {place.country}"
    return place.name


def build_current(current: CurrentReading, units: UnitSystem) -> CurrentView:
    t_unit = temperature_unit(units)
    return CurrentView(
        temperature=fmt_with_unit(convert_temperature(current.temperature_2m, units), 1, t_unit),
        apparent_temperature=fmt_with_unit(convert_temperature(current.apparent_temperature, units), 1, t_unit),
        humidity=fmt_with_unit(current.relative_humidity_2m, 0, "%", sep=""),
        wind_speed=fmt_with_unit(convert_wind_speed(current.wind_speed_10m, units), 0, speed_unit(units)),
        precipitation=fmt_with_unit(current.precipitation, 1, "mm"),
        condition=describe_weather_code(current.weather_code),
        is_day=None if current.is_day is None else bool(current.is_day),
    )


def build_days(daily: DailySeries, units: UnitSystem) -> list[DayView]:
    """One entry per date in `daily.time`, whatever the other columns hold."""
    t_unit = temperature_unit(units)
    days = []
    for i, iso in enumerate(daily.time):
        high = convert_temperature(_get_at(daily.temperature_2m_max, i), units)
        low = convert_temperature(_get_at(daily.temperature_2m_min, i), units)
        precipitation = _get_at(daily.precipitation_sum, i)
        days.append(
            DayView(
                date=iso,
                label=_date_label(iso),
                condition=describe_weather_code(_get_at(daily.weather_code, i)),
                high=fmt_with_unit(high, 0, t_unit, sep=""),
                low=fmt_with_unit(low, 0, t_unit, sep=""),
                precipitation=fmt(0 if precipitation is None else precipitation, 1) + " mm",
            )
        )
    return days


def build_hours(hourly: HourlySeries, units: UnitSystem, limit: int = DEFAULT_HOURS) -> list[HourView]:
    t_unit = temperature_unit(units)
    result = []
    for i, iso in enumerate(hourly.time[: max(limit, 0)]):
        result.append(
            HourView(
                time=iso,
                label=_hour_label(iso),
                temperature=fmt_with_unit(convert_temperature(_get_at(hourly.temperature_2m, i), units), 0, t_unit, sep=""),
                precipitation_probability=fmt_with_unit(_get_at(hourly.precipitation_probability, i), 0, "%", sep=""),
                condition=describe_weather_code(_get_at(hourly.weather_code, i)),
            )
        )
    return result


def _get_at(col: list | None, index: int):
    """Safely get value at index from a column array, returning None if missing."""
    if col is None or index >= len(col):
        return None
    return col[index]


def _date_label(iso: str) -> str:
    try:
        return date.fromisoformat(iso).strftime("%a %b %d %Y")
    except ValueError:
        return iso


def _hour_label(iso: str) -> str:
    try:
        return datetime.fromisoformat(iso).strftime("%H:%M")
    except ValueError:
        return iso
