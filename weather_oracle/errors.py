# ABOUTME: Error types raised by the lookup pipeline and caught at the controller boundary.
# ABOUTME: Every error carries a user-facing message; none of them is fatal.


class WeatherOracleError(Exception):
    """Base class for recoverable lookup errors."""

    default_message = "Something went wrong"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyQuery(WeatherOracleError):
    """Search text was blank after trimming. Ignored by the controller."""

    default_message = "Empty query"


class PlaceNotFound(WeatherOracleError):
    default_message = "City not found"


class LookupFailed(WeatherOracleError):
    """Geocoding request failed at the network or HTTP level."""

    default_message = "City lookup failed"


class ForecastFetchFailed(WeatherOracleError):
    default_message = "Weather fetch failed"


class GeolocationUnsupported(WeatherOracleError):
    default_message = "Geolocation is not supported"


class LocationFailed(WeatherOracleError):
    """The location service denied or could not produce a position."""

    default_message = "Failed to get your location"


class ConfigError(WeatherOracleError):
    default_message = "Invalid configuration"
