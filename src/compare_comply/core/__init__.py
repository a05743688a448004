"""
Core pure functions for the SDK.

This package contains I/O-free functions for request marshaling and
error mapping.
"""

from .marshal import (
    normalize_params,
    get_missing_params,
    validate_params,
    substitute_path,
    build_form_field,
    resolve_headers,
    build_request,
)

from .errors import (
    extract_error_details,
    map_status_code_to_exception,
    classify_request_exception,
)

__all__ = [
    # Marshaling functions
    "normalize_params",
    "get_missing_params",
    "validate_params",
    "substitute_path",
    "build_form_field",
    "resolve_headers",
    "build_request",
    # Error mapping functions
    "extract_error_details",
    "map_status_code_to_exception",
    "classify_request_exception",
]
