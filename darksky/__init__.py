"""
darksky

A Python client for the Dark Sky weather API. Fetches forecasts, current
conditions and Time Machine (historical or future) data for a location and
deserializes them into typed models.
"""

__version__ = "0.9.0"
__author__ = "darksky-python contributors"

from darksky.api import (
    API_URL,
    AsyncDarkSkyClient,
    AuthenticationError,
    DarkSkyAPIError,
    DarkSkyClient,
    DarkSkyError,
    DecodeError,
    InvalidJSONError,
    InvalidLocationError,
    RateLimitError,
    TransportError,
    get_forecast,
)
from darksky.data import (
    Alert,
    Block,
    Datablock,
    Datapoint,
    Flags,
    Forecast,
    Icon,
    Language,
    Options,
    PrecipitationType,
    Severity,
    Unit,
)

__all__ = [
    "API_URL",
    "AsyncDarkSkyClient",
    "DarkSkyClient",
    "get_forecast",
    "AuthenticationError",
    "DarkSkyAPIError",
    "DarkSkyError",
    "DecodeError",
    "InvalidJSONError",
    "InvalidLocationError",
    "RateLimitError",
    "TransportError",
    "Alert",
    "Block",
    "Datablock",
    "Datapoint",
    "Flags",
    "Forecast",
    "Icon",
    "Language",
    "Options",
    "PrecipitationType",
    "Severity",
    "Unit",
]
