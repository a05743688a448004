"""
Data models for requests handed to the executor and the responses it returns.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union


@dataclass
class FormField:
    """
    A file part of a multipart request.

    Attributes:
        data: File content as bytes, str, a binary file object or a Path
        content_type: MIME type sent with the part
        filename: Name sent in the part's Content-Disposition; the executor
            falls back to the Path name or the field's wire name

    Example:
        >>> part = request.form_data["file"]
        >>> print(part.content_type)
    """

    data: Any
    content_type: Optional[str] = None
    filename: Optional[str] = None


@dataclass
class RequestDescriptor:
    """
    Transport-agnostic description of one HTTP request.

    Built fresh for every invocation by the operation invoker and handed
    to a request executor, which owns it from then on.

    Attributes:
        method: HTTP method ("GET", "POST", "PUT", "DELETE")
        url: Path with placeholders substituted, e.g. "/v1/batches/b-1"
        path_params: Raw values substituted into the URL template
        query: Query string parameters keyed by wire name
        headers: Request headers after caller overrides
        body: JSON body keyed by wire name, or None
        form_data: Multipart fields keyed by wire name, or None. File parts
            are FormField instances, plain parts are strings

    Example:
        >>> request = build_request(OPERATIONS["get_feedback"], {"feedback_id": "fb-1"})
        >>> print(request.method, request.url)
        GET /v1/feedback/fb-1
    """

    method: str
    url: str
    path_params: Dict[str, Any] = field(default_factory=dict)
    query: Dict[str, Any] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[Dict[str, Any]] = None
    form_data: Optional[Dict[str, Union[FormField, str]]] = None


@dataclass
class DetailedResponse:
    """
    Result returned by the default executor.

    Attributes:
        result: Decoded JSON body, raw text for non-JSON bodies, or None
            when the response has no content
        status_code: HTTP status code
        headers: Response headers

    Example:
        >>> response = await client.get_batch(batch_id="b-1")
        >>> print(response.result["status"])
    """

    result: Any
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
