"""
Custom exceptions for the Compare and Comply SDK.
"""

from typing import Dict, Any, Iterable, List, Optional


class CompareComplyError(Exception):
    """Base exception for SDK errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MissingParametersError(CompareComplyError):
    """Raised before any request is built when required parameters are absent."""

    def __init__(self, missing: Iterable[str]):
        self.missing: List[str] = list(missing)
        super().__init__(
            f"Missing required parameters: {', '.join(self.missing)}",
            {"missing": self.missing},
        )


class ApiError(CompareComplyError):
    """Raised when the service answers with an error status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code


class InvalidInputError(ApiError):
    """Raised when the service rejects the request payload."""

    pass


class AuthenticationError(ApiError):
    """Raised when credentials are missing or not accepted."""

    pass


class NotFoundError(ApiError):
    """Raised when the addressed feedback entry or batch does not exist."""

    pass


class NetworkError(CompareComplyError):
    """Raised when network operations fail."""

    pass


class TimeoutError(CompareComplyError):
    """Raised when a request exceeds the configured timeout."""

    pass
