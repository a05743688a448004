"""
Pure functions for turning parameter bags into request descriptors.

Functions for normalizing parameters, detecting missing required values,
routing values to path, query, body and form destinations, and resolving
headers without I/O dependencies.
"""

from typing import Any, Dict, List, Mapping, Optional, Union
from urllib.parse import quote

from ..exceptions import MissingParametersError
from ..models import FormField, RequestDescriptor
from ..operations import Destination, OperationDescriptor, OCTET_STREAM

HEADERS_KEY = "headers"
DEFAULT_ACCEPT = "application/json"


def normalize_params(
    operation: OperationDescriptor, params: Optional[Mapping[str, Any]]
) -> Dict[str, Any]:
    """Return a fresh dict of parameters keyed by Python name."""
    if params is None:
        return {}
    if not isinstance(params, Mapping):
        raise TypeError(
            f"Parameters for {operation.name} must be a mapping, "
            f"got {type(params).__name__}"
        )

    aliases = operation.aliases()
    normalized: Dict[str, Any] = {}
    for key, value in params.items():
        name = aliases.get(key, key)
        # The Python spelling wins when a bag carries both.
        if name in normalized and key != name:
            continue
        normalized[name] = value
    return normalized


def get_missing_params(
    operation: OperationDescriptor, params: Mapping[str, Any]
) -> List[str]:
    """List required parameters that are absent or None, in declaration order."""
    return [name for name in operation.required if params.get(name) is None]


def validate_params(operation: OperationDescriptor, params: Mapping[str, Any]) -> None:
    missing = get_missing_params(operation, params)
    if missing:
        raise MissingParametersError(missing)


def substitute_path(url: str, path_params: Mapping[str, Any]) -> str:
    """Replace each {placeholder} once with its percent-encoded value."""
    for name, value in path_params.items():
        url = url.replace("{" + name + "}", quote(str(value), safe=""), 1)
    return url


def build_form_field(
    spec_content_type: Optional[str],
    caller_content_type: Optional[str],
    data: Any,
) -> FormField:
    """Build a multipart file part; a fixed content type beats the caller's."""
    content_type = spec_content_type or caller_content_type or OCTET_STREAM
    return FormField(data=data, content_type=content_type)


def resolve_headers(
    default_content_type: Optional[str],
    overrides: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """Default Accept/Content-Type headers with caller overrides applied."""
    headers = {"Accept": DEFAULT_ACCEPT}
    if default_content_type:
        headers["Content-Type"] = default_content_type

    for key, value in (overrides or {}).items():
        for existing in list(headers):
            if existing.lower() == key.lower():
                del headers[existing]
        headers[key] = value
    return headers


def build_request(
    operation: OperationDescriptor,
    params: Optional[Mapping[str, Any]] = None,
    service_query: Optional[Mapping[str, Any]] = None,
) -> RequestDescriptor:
    """
    Build the request for one invocation of an operation.

    Raises MissingParametersError before anything is built when a required
    parameter is absent.
    """
    values = normalize_params(operation, params)
    validate_params(operation, values)

    path_params: Dict[str, Any] = {}
    query: Dict[str, Any] = dict(service_query or {})
    body: Dict[str, Any] = {}
    form_data: Dict[str, Union[FormField, str]] = {}

    for spec in operation.params:
        value = values.get(spec.name)
        if value is None or spec.describes:
            continue

        if spec.destination is Destination.PATH:
            path_params[spec.key] = value
        elif spec.destination is Destination.QUERY:
            query[spec.key] = value
        elif spec.destination is Destination.BODY:
            body[spec.key] = value
        elif spec.is_file:
            caller_type = (
                values.get(spec.content_type_param) if spec.content_type_param else None
            )
            form_data[spec.key] = build_form_field(spec.content_type, caller_type, value)
        else:
            form_data[spec.key] = value

    has_body = any(p.destination is Destination.BODY for p in operation.params)
    has_form = any(p.destination is Destination.FORM_DATA for p in operation.params)

    return RequestDescriptor(
        method=operation.method,
        url=substitute_path(operation.url, path_params),
        path_params=path_params,
        query=query,
        headers=resolve_headers(operation.content_type, values.get(HEADERS_KEY)),
        body=body if has_body else None,
        form_data=form_data if has_form else None,
    )
