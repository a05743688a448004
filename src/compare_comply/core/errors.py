"""
Pure functions for mapping service responses and transport failures to
SDK exceptions.
"""

from typing import Any, Dict, Tuple

from ..exceptions import (
    ApiError,
    AuthenticationError,
    CompareComplyError,
    InvalidInputError,
    NetworkError,
    NotFoundError,
    TimeoutError,
)


def extract_error_details(
    response_data: Any, status_code: int, response_text: str
) -> Tuple[str, Dict[str, Any]]:
    """Extract error message and details from an error response body."""
    if isinstance(response_data, dict):
        message = response_data.get("error") or response_data.get("message")
        if isinstance(message, dict):
            message = message.get("message")
        if message:
            return str(message), response_data
    return f"HTTP {status_code}: {response_text}", {}


def map_status_code_to_exception(
    status_code: int, message: str, details: Dict[str, Any]
) -> ApiError:
    """Map HTTP status codes to appropriate SDK exceptions."""
    if status_code == 400:
        return InvalidInputError(message, status_code, details)
    elif status_code in (401, 403):
        return AuthenticationError(message, status_code, details)
    elif status_code == 404:
        return NotFoundError(message, status_code, details)
    elif status_code == 413:
        return InvalidInputError(f"File too large: {message}", status_code, details)
    elif status_code == 415:
        return InvalidInputError(
            f"Unsupported media type: {message}", status_code, details
        )
    else:
        return ApiError(f"Server error ({status_code}): {message}", status_code, details)


def classify_request_exception(exception: Exception) -> CompareComplyError:
    """Wrap an httpx transport failure in the matching SDK exception."""
    import httpx

    if isinstance(exception, httpx.TimeoutException):
        return TimeoutError(f"Request timed out: {exception}")
    return NetworkError(f"Network error: {exception}")
