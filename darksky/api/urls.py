"""
URL building for forecast requests.

A forecast request is a GET on ``/forecast/{key}/{latitude},{longitude}``,
with an optional Time Machine time appended to the coordinate segment and
request options passed as query parameters.
"""

import math
from datetime import date, datetime, time as dt_time
from typing import Dict, Optional, Union
from urllib.parse import urlencode

from darksky.data.options import Options

API_URL = "https://api.darksky.net"

TimeLike = Union[int, float, str, datetime, date]


def format_time(value: TimeLike) -> str:
    """
    Render a Time Machine time for the request path.

    Accepts a Unix timestamp or a ``YYYY-MM-DDTHH:MM:SS[timezone]`` string,
    where the timezone is omitted (local time of the requested location),
    ``Z`` (UTC) or ``[+-]HHMM``. Datetimes are rendered in that format and
    dates as local midnight. Strings are passed through as given.

    Args:
        value: Time to render

    Returns:
        Time string for the request path

    Raises:
        TypeError: If the value is of an unsupported type
        ValueError: If a float timestamp is NaN or infinite
    """
    if isinstance(value, bool):
        raise TypeError("Time Machine time cannot be a bool")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"Invalid Time Machine time: {value}")
    if isinstance(value, (int, float)):
        return str(int(value))
    if isinstance(value, str):
        return value
    if isinstance(value, datetime):
        rendered = value.strftime("%Y-%m-%dT%H:%M:%S")
        offset = value.utcoffset()
        if offset is None:
            return rendered
        if not offset:
            return rendered + "Z"
        return rendered + value.strftime("%z")
    if isinstance(value, date):
        return format_time(datetime.combine(value, dt_time.min))
    raise TypeError(f"Unsupported Time Machine time: {value!r}")


def forecast_url(
    token: str,
    latitude: float,
    longitude: float,
    time: Optional[TimeLike] = None,
    base_url: str = API_URL,
) -> str:
    """
    Build the forecast URL without query parameters.

    Args:
        token: Dark Sky secret key
        latitude: Location latitude
        longitude: Location longitude
        time: Optional Time Machine time
        base_url: API base URL

    Returns:
        URL of the forecast resource
    """
    location = f"{latitude},{longitude}"
    if time is not None:
        location = f"{location},{format_time(time)}"
    return f"{base_url.rstrip('/')}/forecast/{token}/{location}"


def forecast_params(options: Optional[Options] = None) -> Dict[str, str]:
    """
    Build the query parameters of a forecast request.

    A plain forecast request asks for automatic units. A request with
    options sends exactly the options that were set.
    """
    if options is None:
        return {"units": "auto"}
    return options.to_params()


def full_url(
    token: str,
    latitude: float,
    longitude: float,
    time: Optional[TimeLike] = None,
    options: Optional[Options] = None,
    base_url: str = API_URL,
) -> str:
    """Build the complete request URL including its query string."""
    url = forecast_url(token, latitude, longitude, time=time, base_url=base_url)
    params = forecast_params(options)
    if not params:
        return url
    return f"{url}?{urlencode(params, safe=',')}"


def redact_token(url: str, token: str) -> str:
    """Hide the secret key in a URL for logging."""
    if not token:
        return url
    return url.replace(f"/forecast/{token}/", "/forecast/***/")
