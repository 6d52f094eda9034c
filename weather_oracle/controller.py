# ABOUTME: Search controller that owns the lookup state and runs geocode -> forecast per user action.
# ABOUTME: Exposes submit_search, use_current_location and set_unit_system; errors never escape it.

import logging
from enum import Enum

import httpx

from weather_oracle.config import Settings, load_settings
from weather_oracle.deps import create_http_client
from weather_oracle.errors import GeolocationUnsupported, LocationFailed, WeatherOracleError
from weather_oracle.location import LocationProvider, location_from_settings
from weather_oracle.models import ForecastSnapshot, Place, RenderableView, UnitSystem
from weather_oracle.view_model import DEFAULT_HOURS, build_view
from weather_oracle.weather_service import FORECAST_URL, GEOCODING_URL, get_forecast, resolve_place

logger = logging.getLogger(__name__)

CURRENT_LOCATION_NAME = "Your location"
IDLE_PROMPT = "Search for a city or use your location to see the weather."
GENERIC_ERROR = "Something went wrong"


class Status(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class SearchController:
    """State container for one weather lookup widget.

    Holds ``{status, place, snapshot, error}`` plus the selected unit system. Every
    action starts by returning to IDLE and takes a fresh request token; results that
    arrive for an older token are dropped, so the latest action always wins.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        location: LocationProvider | None = None,
        units: UnitSystem = UnitSystem.METRIC,
        geocoding_url: str = GEOCODING_URL,
        forecast_url: str = FORECAST_URL,
        language: str = "en",
        hourly_hours: int = DEFAULT_HOURS,
        owns_client: bool = False,
    ):
        self._client = http_client
        self._location = location
        self._geocoding_url = geocoding_url
        self._forecast_url = forecast_url
        self._language = language
        self._hourly_hours = hourly_hours
        self._owns_client = owns_client

        self._units = UnitSystem(units)
        self._status = Status.IDLE
        self._place: Place | None = None
        self._snapshot: ForecastSnapshot | None = None
        self._error: str | None = None
        self._token = 0

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "SearchController":
        """Create a controller with its own HTTP client, configured from the environment."""
        settings = settings or load_settings()
        return cls(
            create_http_client(settings.http_attempts),
            location=location_from_settings(settings),
            units=settings.units,
            geocoding_url=settings.geocoding_url,
            forecast_url=settings.forecast_url,
            language=settings.language,
            hourly_hours=settings.hourly_hours,
            owns_client=True,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "SearchController":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    @property
    def status(self) -> Status:
        return self._status

    @property
    def place(self) -> Place | None:
        return self._place

    @property
    def snapshot(self) -> ForecastSnapshot | None:
        return self._snapshot

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def units(self) -> UnitSystem:
        return self._units

    @property
    def is_loading(self) -> bool:
        return self._status is Status.LOADING

    @property
    def prompt(self) -> str | None:
        """Hint shown when there is nothing else to display."""
        if self._status is Status.IDLE and self._snapshot is None and self._error is None:
            return IDLE_PROMPT
        return None

    def set_unit_system(self, units: UnitSystem) -> None:
        self._units = UnitSystem(units)

    def view(self) -> RenderableView | None:
        """Build the display view from the stored snapshot under the current units."""
        if self._snapshot is None:
            return None
        return build_view(self._snapshot, self._units, self._place, hours=self._hourly_hours)

    async def submit_search(self, raw_query: str) -> None:
        """Geocode the query and fetch its forecast. Blank queries are ignored.

        The place is stored together with its forecast, so while LOADING the previous
        place stays visible.
        """
        token = self._begin()
        query = (raw_query or "").strip()
        if not query:
            return

        self._status = Status.LOADING
        try:
            place = await resolve_place(self._client, query, url=self._geocoding_url, language=self._language)
            if not self._is_current(token):
                logger.debug("Dropping geocode result for %r, superseded by a newer action", query)
                return
            snapshot = await get_forecast(self._client, place.latitude, place.longitude, url=self._forecast_url)
        except WeatherOracleError as e:
            self._fail(token, e.message, clear_place=True)
            return
        except Exception:
            logger.exception("Unexpected error while searching for %r", query)
            self._fail(token, GENERIC_ERROR, clear_place=True)
            return

        if not self._is_current(token):
            logger.debug("Dropping forecast for %r, superseded by a newer action", query)
            return
        logger.info("Loaded forecast for %s", place.name)
        self._place = place
        self._snapshot = snapshot
        self._status = Status.SUCCESS

    async def use_current_location(self) -> None:
        """Fetch the forecast for the position reported by the location provider."""
        token = self._begin()
        if self._location is None:
            self._status = Status.ERROR
            self._error = GeolocationUnsupported().message
            return

        self._status = Status.LOADING
        try:
            coords = await self._location.current_position()
        except LocationFailed as e:
            self._fail(token, e.message, clear_place=False, clear_snapshot=False)
            return
        except Exception:
            logger.exception("Location provider failed")
            self._fail(token, LocationFailed.default_message, clear_place=False, clear_snapshot=False)
            return

        if not self._is_current(token):
            logger.debug("Dropping position, superseded by a newer action")
            return
        place = Place(name=CURRENT_LOCATION_NAME, country="", latitude=coords.latitude, longitude=coords.longitude)

        try:
            snapshot = await get_forecast(self._client, place.latitude, place.longitude, url=self._forecast_url)
        except WeatherOracleError as e:
            if self._is_current(token):
                self._place = place
            self._fail(token, e.message, clear_place=False)
            return
        except Exception:
            logger.exception("Unexpected error while fetching forecast for current location")
            self._fail(token, GENERIC_ERROR, clear_place=False)
            return

        if not self._is_current(token):
            logger.debug("Dropping forecast for current location, superseded by a newer action")
            return
        self._place = place
        self._snapshot = snapshot
        self._status = Status.SUCCESS

    def _begin(self) -> int:
        self._token += 1
        self._status = Status.IDLE
        self._error = None
        return self._token

    def _is_current(self, token: int) -> bool:
        return token == self._token

    def _fail(self, token: int, message: str, *, clear_place: bool, clear_snapshot: bool = True) -> None:
        if not self._is_current(token):
            logger.debug("Dropping error %r from a superseded action", message)
            return
        if clear_place:
            self._place = None
        if clear_snapshot:
            self._snapshot = None
        self._error = message
        self._status = Status.ERROR
