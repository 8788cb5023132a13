"""
Asynchronous Dark Sky API client built on aiohttp.

Offers the same operations as ``DarkSkyClient`` as coroutines, so several
forecasts can be fetched concurrently:

    async with AsyncDarkSkyClient(api_key="...") as client:
        forecasts = await asyncio.gather(
            client.get_forecast(37.8267, -122.423),
            client.get_forecast(19.2465, -99.1013),
        )
"""

import asyncio
import logging
from typing import Dict, Optional

import aiohttp

from darksky.api.client import OptionsLike, resolve_options, validate_coordinates
from darksky.api.errors import TransportError, parse_forecast, raise_for_status
from darksky.api.urls import TimeLike, forecast_params, forecast_url, redact_token
from darksky.config.settings import Settings, get_settings
from darksky.data.models import Forecast

logger = logging.getLogger(__name__)


class AsyncDarkSkyClient:
    """
    Asynchronous client for the Dark Sky forecast API.

    The aiohttp session is created lazily on first use, inside the running
    event loop, unless one is passed in.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        settings: Optional[Settings] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.settings = settings or get_settings()
        self.api_key = api_key or self.settings.get_api_key()
        self.base_url = self.settings.darksky_api_base_url.rstrip("/")

        self._timeout = aiohttp.ClientTimeout(total=self.settings.request_timeout)
        self._session = session
        self._owns_session = session is None

        logger.info("AsyncDarkSkyClient initialized")

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self._timeout,
                headers={
                    "Accept": "application/json",
                    "User-Agent": self.settings.user_agent,
                },
            )
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "AsyncDarkSkyClient":
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def _make_request(self, url: str, params: Dict[str, str]) -> Forecast:
        """Make an API request and deserialize the forecast."""
        session = await self._ensure_session()
        logger.debug(f"API Request: {redact_token(url, self.api_key)} params={params}")

        try:
            async with session.get(url, params=params, timeout=self._timeout) as response:
                status = response.status
                body = await response.read()
        except aiohttp.ClientError as e:
            raise TransportError(f"Request failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request timed out after {self._timeout.total}s") from e

        raise_for_status(status, body)

        forecast = parse_forecast(body)
        logger.debug(f"API Response: {len(body)} bytes")
        return forecast

    async def get_forecast(self, latitude: float, longitude: float) -> Forecast:
        """Retrieve a forecast for the given latitude and longitude, with automatic units."""
        validate_coordinates(latitude, longitude)
        logger.info(f"Fetching forecast: ({latitude}, {longitude})")

        url = forecast_url(self.api_key, latitude, longitude, base_url=self.base_url)
        return await self._make_request(url, forecast_params())

    async def get_forecast_with_options(
        self,
        latitude: float,
        longitude: float,
        options: OptionsLike,
    ) -> Forecast:
        """Retrieve a forecast, setting request options."""
        validate_coordinates(latitude, longitude)
        resolved = resolve_options(options)
        logger.info(f"Fetching forecast: ({latitude}, {longitude}) options={resolved.params}")

        url = forecast_url(self.api_key, latitude, longitude, base_url=self.base_url)
        return await self._make_request(url, forecast_params(resolved))

    async def get_forecast_time_machine(
        self,
        latitude: float,
        longitude: float,
        time: TimeLike,
        options: OptionsLike = None,
    ) -> Forecast:
        """Retrieve a forecast for a specific time (Time Machine request)."""
        validate_coordinates(latitude, longitude)
        resolved = resolve_options(options)
        logger.info(f"Fetching time machine forecast: ({latitude}, {longitude}) at {time}")

        url = forecast_url(self.api_key, latitude, longitude, time=time, base_url=self.base_url)
        return await self._make_request(url, forecast_params(resolved))
