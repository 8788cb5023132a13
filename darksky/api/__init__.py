"""
API module for Dark Sky forecast retrieval.
"""

from darksky.api.async_client import AsyncDarkSkyClient
from darksky.api.client import DarkSkyClient, get_forecast
from darksky.api.errors import (
    AuthenticationError,
    DarkSkyAPIError,
    DarkSkyError,
    DecodeError,
    InvalidJSONError,
    InvalidLocationError,
    RateLimitError,
    TransportError,
)
from darksky.api.urls import API_URL

__all__ = [
    "API_URL",
    "AsyncDarkSkyClient",
    "DarkSkyClient",
    "get_forecast",
    # Errors
    "AuthenticationError",
    "DarkSkyAPIError",
    "DarkSkyError",
    "DecodeError",
    "InvalidJSONError",
    "InvalidLocationError",
    "RateLimitError",
    "TransportError",
]
