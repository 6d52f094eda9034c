# ABOUTME: Location providers used by the "use my location" path of the controller.
# ABOUTME: A provider answers one position request or raises LocationFailed with a readable message.

from typing import Protocol

from weather_oracle.config import Settings
from weather_oracle.models import Coordinates


class LocationProvider(Protocol):
    async def current_position(self) -> Coordinates:
        """Return the device position, raising LocationFailed when it is unavailable."""
        ...


class ConfiguredLocation:
    """Fixed position taken from configuration."""

    def __init__(self, latitude: float, longitude: float):
        self.coordinates = Coordinates(latitude=latitude, longitude=longitude)

    async def current_position(self) -> Coordinates:
        return self.coordinates


def location_from_settings(settings: Settings) -> LocationProvider | None:
    """Return a provider for the configured home position, or None when none is set."""
    if settings.home_latitude is None or settings.home_longitude is None:
        return None
    return ConfiguredLocation(settings.home_latitude, settings.home_longitude)
