"""
Dark Sky API client.

This module provides the synchronous interface for fetching forecasts from
the Dark Sky API, built on a requests session.

Usage:
    from darksky.api.client import DarkSkyClient
    from darksky.data.options import Block

    with DarkSkyClient(api_key="...") as client:
        forecast = client.get_forecast(37.8267, -122.423)
        extended = client.get_forecast_with_options(
            37.8267, -122.423,
            lambda o: o.exclude([Block.MINUTELY]).extend_hourly(),
        )
"""

import logging
import math
from typing import Callable, Dict, Optional, Union

import requests

from darksky.api.errors import TransportError, parse_forecast, raise_for_status
from darksky.api.urls import TimeLike, forecast_params, forecast_url, full_url, redact_token
from darksky.config.settings import Settings, get_settings
from darksky.data.models import Forecast
from darksky.data.options import Options

logger = logging.getLogger(__name__)


OptionsLike = Union[Options, Callable[[Options], Options], None]


def resolve_options(options: OptionsLike) -> Options:
    """
    Turn an options argument into an Options instance.

    Accepts a ready Options builder, a callable that receives a fresh
    builder and returns it configured, or None for no options.
    """
    if options is None:
        return Options()
    if isinstance(options, Options):
        return options
    if callable(options):
        built = options(Options())
        if not isinstance(built, Options):
            raise TypeError(f"Options callable must return Options, got {type(built).__name__}")
        return built
    raise TypeError(f"Unsupported options argument: {options!r}")


def validate_coordinates(latitude: float, longitude: float) -> None:
    """
    Check that coordinates are finite and in range.

    Raises:
        ValueError: For out of range or non-finite coordinates
    """
    if not isinstance(latitude, (int, float)) or math.isnan(latitude) or not -90 <= latitude <= 90:
        raise ValueError(f"Invalid latitude: {latitude}. Must be between -90 and 90.")
    if not isinstance(longitude, (int, float)) or math.isnan(longitude) or not -180 <= longitude <= 180:
        raise ValueError(f"Invalid longitude: {longitude}. Must be between -180 and 180.")


class DarkSkyClient:
    """
    Client for the Dark Sky forecast API.

    Handles URL building, error mapping and response deserialization.
    Usable as a context manager, which closes the session on exit.

    Attributes:
        api_key: Dark Sky secret key
        base_url: API base URL
        session: Requests session used for all calls
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the Dark Sky client.

        Args:
            api_key: API key (uses settings if not provided)
            settings: Settings object (uses default if not provided)
            session: Existing requests session to reuse
        """
        self.settings = settings or get_settings()

        if api_key:
            self.api_key = api_key
        else:
            self.api_key = self.settings.get_api_key()

        self.base_url = self.settings.darksky_api_base_url.rstrip("/")
        self.timeout = self.settings.request_timeout

        self._owns_session = session is None
        self.session = session or self._create_session()

        logger.info("DarkSkyClient initialized")

    def _create_session(self) -> requests.Session:
        """Create requests session with default headers."""
        session = requests.Session()
        session.headers.update({
            "Accept": "application/json",
            "Accept-Encoding": "gzip",
            "User-Agent": self.settings.user_agent,
        })
        return session

    def __enter__(self) -> "DarkSkyClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying session if this client created it."""
        if self._owns_session:
            self.session.close()

    def _make_request(self, url: str, params: Dict[str, str]) -> Forecast:
        """
        Make an API request and deserialize the forecast.

        Args:
            url: Forecast resource URL
            params: Query parameters

        Returns:
            Forecast parsed from the response

        Raises:
            TransportError: If the request could not be completed
            DarkSkyAPIError: For API errors
            DecodeError: If the response does not match the schema
        """
        logger.debug(f"API Request: {redact_token(url, self.api_key)} params={params}")

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"Request failed: {e}") from e

        raise_for_status(response.status_code, response.content)

        forecast = parse_forecast(response.content)
        logger.debug(f"API Response: {len(response.content)} bytes")
        return forecast

    def get_forecast(self, latitude: float, longitude: float) -> Forecast:
        """
        Retrieve a forecast for the given latitude and longitude.

        Units are selected automatically from the location.

        Args:
            latitude: Location latitude (-90 to 90)
            longitude: Location longitude (-180 to 180)

        Returns:
            Forecast for the location
        """
        validate_coordinates(latitude, longitude)
        logger.info(f"Fetching forecast: ({latitude}, {longitude})")

        url = forecast_url(self.api_key, latitude, longitude, base_url=self.base_url)
        return self._make_request(url, forecast_params())

    def get_forecast_with_options(
        self,
        latitude: float,
        longitude: float,
        options: OptionsLike,
    ) -> Forecast:
        """
        Retrieve a forecast, setting request options.

        Args:
            latitude: Location latitude (-90 to 90)
            longitude: Location longitude (-180 to 180)
            options: Options builder, or a callable that configures one

        Returns:
            Forecast for the location
        """
        validate_coordinates(latitude, longitude)
        resolved = resolve_options(options)
        logger.info(f"Fetching forecast: ({latitude}, {longitude}) options={resolved.params}")

        url = forecast_url(self.api_key, latitude, longitude, base_url=self.base_url)
        return self._make_request(url, forecast_params(resolved))

    def get_forecast_time_machine(
        self,
        latitude: float,
        longitude: float,
        time: TimeLike,
        options: OptionsLike = None,
    ) -> Forecast:
        """
        Retrieve a forecast for a specific time (Time Machine request).

        Args:
            latitude: Location latitude (-90 to 90)
            longitude: Location longitude (-180 to 180)
            time: Unix timestamp, datetime, date or preformatted
                ``YYYY-MM-DDTHH:MM:SS[timezone]`` string
            options: Options builder, or a callable that configures one

        Returns:
            Forecast for the location at the given time
        """
        validate_coordinates(latitude, longitude)
        resolved = resolve_options(options)
        logger.info(f"Fetching time machine forecast: ({latitude}, {longitude}) at {time}")

        url = forecast_url(self.api_key, latitude, longitude, time=time, base_url=self.base_url)
        return self._make_request(url, forecast_params(resolved))

    def build_url(
        self,
        latitude: float,
        longitude: float,
        time: Optional[TimeLike] = None,
        options: OptionsLike = None,
    ) -> str:
        """
        Return the full request URL for the given arguments, without sending it.

        Matches the request the corresponding ``get_forecast*`` call would
        make: only a plain forecast (no time, no options) adds ``units=auto``.
        """
        if time is None and options is None:
            resolved = None
        else:
            resolved = resolve_options(options)
        return full_url(
            self.api_key, latitude, longitude,
            time=time, options=resolved, base_url=self.base_url,
        )


# Module-level convenience function
def get_forecast(
    latitude: float,
    longitude: float,
    api_key: Optional[str] = None,
    options: OptionsLike = None,
) -> Forecast:
    """
    Convenience function to fetch a forecast.

    Args:
        latitude: Location latitude
        longitude: Location longitude
        api_key: Optional API key (uses settings if not provided)
        options: Optional request options

    Returns:
        Forecast for the location
    """
    with DarkSkyClient(api_key=api_key) as client:
        if options is None:
            return client.get_forecast(latitude, longitude)
        return client.get_forecast_with_options(latitude, longitude, options)
