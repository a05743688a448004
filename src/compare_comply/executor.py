"""
Request executors: the transport behind the operation invoker.
"""

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import httpx

from .config import get_logger
from .core.errors import (
    classify_request_exception,
    extract_error_details,
    map_status_code_to_exception,
)
from .models import DetailedResponse, FormField, RequestDescriptor

logger = get_logger("executor")

USER_AGENT = "compare-comply-sdk/1.0"


class RequestExecutor(ABC):
    """Performs the network call described by a RequestDescriptor."""

    @abstractmethod
    async def execute(self, request: RequestDescriptor) -> Any:
        pass


def build_auth_headers(api_key: Optional[str]) -> Dict[str, str]:
    """Build client-wide headers."""
    headers = {"User-Agent": USER_AGENT}
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return headers


def build_file_tuple(field: FormField, wire_name: str) -> Tuple[str, Any, str]:
    """Turn a FormField into an httpx (filename, content, content_type) tuple."""
    data = field.data
    filename = field.filename
    if isinstance(data, Path):
        filename = filename or data.name
        data = data.read_bytes()
    elif filename is None and isinstance(getattr(data, "name", None), str):
        filename = os.path.basename(data.name)
    return filename or wire_name, data, field.content_type or "application/octet-stream"


class HttpxRequestExecutor(RequestExecutor):
    """Executor sending requests with an httpx.AsyncClient."""

    def __init__(
        self,
        service_url: str,
        api_key: Optional[str] = None,
        timeout: int = 30,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.service_url = service_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers=build_auth_headers(api_key),
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        await self._client.aclose()

    async def execute(self, request: RequestDescriptor) -> DetailedResponse:
        url = f"{self.service_url}{request.url}"
        logger.debug("Sending %s %s", request.method, url)

        try:
            response = await self._client.request(
                request.method, url, **self._build_request_kwargs(request)
            )
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", request.method, url, e)
            raise classify_request_exception(e) from e

        if response.status_code >= 400:
            raise self._build_api_error(response)

        return self._parse_response(response)

    def _build_request_kwargs(self, request: RequestDescriptor) -> Dict[str, Any]:
        headers = dict(request.headers)
        kwargs: Dict[str, Any] = {
            "params": {k: v for k, v in request.query.items() if v is not None},
        }

        if request.form_data is not None:
            files = {}
            data = {}
            for name, value in request.form_data.items():
                if isinstance(value, FormField):
                    files[name] = build_file_tuple(value, name)
                else:
                    data[name] = value
            # httpx adds the multipart boundary only when no Content-Type is set.
            for key, value in list(headers.items()):
                if key.lower() == "content-type" and value.lower() == "multipart/form-data":
                    del headers[key]
            if files:
                kwargs["files"] = files
            if data:
                kwargs["data"] = data
        elif request.body is not None:
            kwargs["json"] = request.body

        kwargs["headers"] = headers
        return kwargs

    def _build_api_error(self, response: httpx.Response) -> Exception:
        try:
            response_data = response.json()
        except ValueError:
            response_data = None

        message, details = extract_error_details(
            response_data, response.status_code, response.text
        )
        logger.warning("Service returned %s: %s", response.status_code, message)
        return map_status_code_to_exception(response.status_code, message, details)

    def _parse_response(self, response: httpx.Response) -> DetailedResponse:
        if not response.content:
            result = None
        else:
            try:
                result = response.json()
            except ValueError:
                result = response.text

        return DetailedResponse(
            result=result,
            status_code=response.status_code,
            headers=dict(response.headers),
        )
