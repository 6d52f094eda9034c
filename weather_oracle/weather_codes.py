# ABOUTME: WMO weather interpretation codes used by Open-Meteo, mapped to readable labels.
# ABOUTME: Lookups never fail; unmapped or missing codes get a fixed placeholder label.

UNKNOWN_CONDITION = "Unknown condition"

# https://open-meteo.com/en/docs (WMO Weather interpretation codes)
WEATHER_CODES: dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snowfall",
    73: "Moderate snowfall",
    75: "Heavy snowfall",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}


def describe_weather_code(code: int | None) -> str:
    """Return the condition label for a WMO code, or UNKNOWN_CONDITION."""
    if code is None:
        return UNKNOWN_CONDITION
    return WEATHER_CODES.get(code, UNKNOWN_CONDITION)
