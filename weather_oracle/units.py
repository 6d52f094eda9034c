# ABOUTME: Unit conversion from the metric values Open-Meteo returns to the selected display unit.
# ABOUTME: Also holds the fixed-point formatter that renders missing values as a placeholder.

import math
from decimal import ROUND_HALF_UP, Decimal

from weather_oracle.models import UnitSystem

PLACEHOLDER = "-"

KMH_TO_MPH = 0.621371


def convert_temperature(celsius: float | None, units: UnitSystem) -> float | None:
    """Convert a Celsius reading to the display unit. No rounding."""
    if celsius is None or UnitSystem(units) is UnitSystem.METRIC:
        return celsius
    return celsius * 9 / 5 + 32


def convert_wind_speed(kmh: float | None, units: UnitSystem) -> float | None:
    """Convert a km/h wind speed to the display unit. No rounding."""
    if kmh is None or UnitSystem(units) is UnitSystem.METRIC:
        return kmh
    return kmh * KMH_TO_MPH


def temperature_unit(units: UnitSystem) -> str:
    return "°C" if UnitSystem(units) is UnitSystem.METRIC else "°F"


def speed_unit(units: UnitSystem) -> str:
    return "km/h" if UnitSystem(units) is UnitSystem.METRIC else "mph"


def fmt(value: float | None, digits: int = 0) -> str:
    """Format a number with a fixed count of decimals, or the placeholder when it is unknown.

    Halfway values round away from zero (12.5 -> "13", -2.5 -> "-3").
    """
    if value is None or not math.isfinite(value):
        return PLACEHOLDER
    rounded = Decimal(repr(value)).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def fmt_with_unit(value: float | None, digits: int, unit: str, sep: str = " ") -> str:
    """Like fmt() but appends a unit label. Unknown values stay a bare placeholder."""
    text = fmt(value, digits)
    if text == PLACEHOLDER:
        return text
    return f"{text}{sep}{unit}"
