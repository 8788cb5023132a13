"""
Exceptions and shared response handling for the Dark Sky client.

Both HTTP backends funnel their responses through ``raise_for_status`` and
``parse_forecast`` so that they report failures the same way.
"""

import json
import logging
from typing import Any, Optional, Union

from pydantic import ValidationError

from darksky.data.models import Forecast

logger = logging.getLogger(__name__)


class DarkSkyError(Exception):
    """Base exception for all client errors."""


class DarkSkyAPIError(DarkSkyError):
    """Raised when the API answers with a non-success HTTP status."""

    def __init__(self, message: str, status_code: Optional[int] = None, response: Optional[dict] = None):
        self.message = message
        self.status_code = status_code
        self.response = response
        super().__init__(message)


class AuthenticationError(DarkSkyAPIError):
    """Raised when the API key is missing, invalid or not allowed."""
    pass


class RateLimitError(DarkSkyAPIError):
    """Raised when the API request limit is exceeded."""
    pass


class InvalidLocationError(DarkSkyAPIError):
    """Raised when the API rejects the requested location or time."""
    pass


class InvalidJSONError(DarkSkyError):
    """Raised when a response body is not valid JSON."""

    def __init__(self, message: str, body: str = ""):
        self.body = body
        super().__init__(message)


class DecodeError(DarkSkyError):
    """
    Raised when a JSON response does not match the forecast schema.

    Attributes:
        value: The decoded JSON value that failed validation
        errors: Validation errors reported by Pydantic
    """

    def __init__(self, message: str, value: Any = None, errors: Optional[list] = None):
        self.value = value
        self.errors = errors or []
        super().__init__(message)


class TransportError(DarkSkyError):
    """Raised when the underlying HTTP library fails to complete a request."""
    pass


ERROR_MESSAGES = {
    400: "Bad request - the given location or time is invalid",
    401: "Authentication failed - check your API key",
    403: "Access forbidden - check your API key and usage allowance",
    404: "Not found - check the requested coordinates",
    429: "Rate limit exceeded - please wait before retrying",
}


def _error_body(body: Union[str, bytes, None]) -> dict:
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    try:
        data = json.loads(body or "")
    except ValueError:
        return {"raw": (body or "")[:500]}
    return data if isinstance(data, dict) else {"raw": data}


def raise_for_status(status_code: int, body: Union[str, bytes, None] = None) -> None:
    """
    Raise the matching exception for an unsuccessful HTTP status.

    Args:
        status_code: HTTP status of the response
        body: Raw response body, used for the error details

    Raises:
        AuthenticationError: For 401 and 403
        RateLimitError: For 429
        InvalidLocationError: For 400 and 404
        DarkSkyAPIError: For any other non-2xx status
    """
    if 200 <= status_code < 300:
        return

    error_data = _error_body(body)
    message = ERROR_MESSAGES.get(status_code, f"API error (HTTP {status_code})")
    detail = error_data.get("error")
    if detail:
        message = f"{message}: {detail}"

    logger.debug(f"API error response: HTTP {status_code} {error_data}")

    if status_code in (401, 403):
        raise AuthenticationError(message, status_code, error_data)
    elif status_code == 429:
        raise RateLimitError(message, status_code, error_data)
    elif status_code in (400, 404):
        raise InvalidLocationError(message, status_code, error_data)
    else:
        raise DarkSkyAPIError(message, status_code, error_data)


def parse_forecast(body: Union[str, bytes]) -> Forecast:
    """
    Deserialize a forecast response body.

    Args:
        body: Raw JSON body

    Returns:
        Validated Forecast

    Raises:
        InvalidJSONError: If the body is not JSON
        DecodeError: If the JSON does not match the forecast schema
    """
    try:
        data = json.loads(body)
    except ValueError as e:
        text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
        raise InvalidJSONError(f"Non-JSON response: {e}", body=text[:200]) from e

    try:
        return Forecast.model_validate(data)
    except ValidationError as e:
        raise DecodeError(
            f"Response does not match the forecast schema ({e.error_count()} errors)",
            value=data,
            errors=e.errors(include_url=False),
        ) from e
