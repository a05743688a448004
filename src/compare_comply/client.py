import asyncio
from pathlib import Path
from typing import Any, BinaryIO, Dict, Mapping, Optional, Union

from .config import Settings, get_settings, setup_logging
from .executor import HttpxRequestExecutor, RequestExecutor
from .invoker import Operation, OperationInvoker
from .models import RequestDescriptor
from .operations import (
    ADD_FEEDBACK,
    CLASSIFY_ELEMENTS,
    COMPARE_DOCUMENTS,
    CONVERT_TO_HTML,
    CREATE_BATCH,
    DELETE_FEEDBACK,
    EXTRACT_TABLES,
    GET_BATCH,
    GET_FEEDBACK,
    LIST_BATCHES,
    LIST_FEEDBACK,
    UPDATE_BATCH,
)
from .sync import SyncOperationsMixin

FileInput = Union[bytes, str, BinaryIO, Path]
Headers = Optional[Dict[str, str]]


class CompareComplyV1(SyncOperationsMixin):
    """Client for the Compare and Comply v1 API."""

    def __init__(
        self,
        version: Optional[str] = None,
        url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[int] = None,
        executor: Optional[RequestExecutor] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        if settings.debug:
            setup_logging("DEBUG")

        self.version = version or settings.version
        self.url = (url or settings.url).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.api_key
        self.timeout = timeout or settings.timeout_seconds
        self.executor = executor or HttpxRequestExecutor(
            self.url, api_key=self.api_key, timeout=self.timeout
        )
        self._invoker = OperationInvoker(self.executor, {"version": self.version})

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        close = getattr(self.executor, "close", None)
        if close is not None:
            await close()

    def build_request(
        self, operation: Operation, params: Optional[Mapping[str, Any]] = None
    ) -> RequestDescriptor:
        """Build the request an operation would send, without sending it."""
        return self._invoker.build(operation, params)

    async def invoke(
        self, operation: Operation, params: Optional[Mapping[str, Any]] = None
    ) -> Any:
        """Invoke any operation by name or descriptor with a parameter bag."""
        return await self._invoker.invoke(operation, params)

    def submit(
        self, operation: Operation, params: Optional[Mapping[str, Any]] = None
    ) -> "asyncio.Future[Any]":
        """Start an operation and return a future for its result."""
        return self._invoker.submit(operation, params)

    async def convert_to_html(
        self,
        *,
        file: Optional[FileInput] = None,
        file_content_type: Optional[str] = None,
        model: Optional[str] = None,
        headers: Headers = None,
    ) -> Any:
        """Convert a document to HTML."""
        return await self._invoker.invoke(
            CONVERT_TO_HTML,
            {
                "file": file,
                "file_content_type": file_content_type,
                "model": model,
                "headers": headers,
            },
        )

    async def classify_elements(
        self,
        *,
        file: Optional[FileInput] = None,
        file_content_type: Optional[str] = None,
        model: Optional[str] = None,
        headers: Headers = None,
    ) -> Any:
        """Analyze the structural and semantic elements of a document."""
        return await self._invoker.invoke(
            CLASSIFY_ELEMENTS,
            {
                "file": file,
                "file_content_type": file_content_type,
                "model": model,
                "headers": headers,
            },
        )

    async def extract_tables(
        self,
        *,
        file: Optional[FileInput] = None,
        file_content_type: Optional[str] = None,
        model: Optional[str] = None,
        headers: Headers = None,
    ) -> Any:
        """Extract the tables of a document."""
        return await self._invoker.invoke(
            EXTRACT_TABLES,
            {
                "file": file,
                "file_content_type": file_content_type,
                "model": model,
                "headers": headers,
            },
        )

    async def compare_documents(
        self,
        *,
        file1: Optional[FileInput] = None,
        file2: Optional[FileInput] = None,
        file1_content_type: Optional[str] = None,
        file2_content_type: Optional[str] = None,
        file1_label: Optional[str] = None,
        file2_label: Optional[str] = None,
        model: Optional[str] = None,
        headers: Headers = None,
    ) -> Any:
        """Compare two documents."""
        return await self._invoker.invoke(
            COMPARE_DOCUMENTS,
            {
                "file1": file1,
                "file2": file2,
                "file1_content_type": file1_content_type,
                "file2_content_type": file2_content_type,
                "file1_label": file1_label,
                "file2_label": file2_label,
                "model": model,
                "headers": headers,
            },
        )

    async def add_feedback(
        self,
        *,
        feedback_data: Optional[Dict[str, Any]] = None,
        user_id: Optional[str] = None,
        comment: Optional[str] = None,
        headers: Headers = None,
    ) -> Any:
        """Add feedback on an element classification."""
        return await self._invoker.invoke(
            ADD_FEEDBACK,
            {
                "feedback_data": feedback_data,
                "user_id": user_id,
                "comment": comment,
                "headers": headers,
            },
        )

    async def list_feedback(
        self,
        *,
        feedback_type: Optional[str] = None,
        before: Optional[str] = None,
        after: Optional[str] = None,
        document_title: Optional[str] = None,
        model_id: Optional[str] = None,
        model_version: Optional[str] = None,
        category_removed: Optional[str] = None,
        category_added: Optional[str] = None,
        category_not_changed: Optional[str] = None,
        type_removed: Optional[str] = None,
        type_added: Optional[str] = None,
        type_not_changed: Optional[str] = None,
        page_limit: Optional[int] = None,
        cursor: Optional[str] = None,
        sort: Optional[str] = None,
        include_total: Optional[bool] = None,
        headers: Headers = None,
    ) -> Any:
        """List the feedback entries stored for the service instance."""
        return await self._invoker.invoke(
            LIST_FEEDBACK,
            {
                "feedback_type": feedback_type,
                "before": before,
                "after": after,
                "document_title": document_title,
                "model_id": model_id,
                "model_version": model_version,
                "category_removed": category_removed,
                "category_added": category_added,
                "category_not_changed": category_not_changed,
                "type_removed": type_removed,
                "type_added": type_added,
                "type_not_changed": type_not_changed,
                "page_limit": page_limit,
                "cursor": cursor,
                "sort": sort,
                "include_total": include_total,
                "headers": headers,
            },
        )

    async def get_feedback(
        self,
        *,
        feedback_id: Optional[str] = None,
        model: Optional[str] = None,
        headers: Headers = None,
    ) -> Any:
        """Get a single feedback entry."""
        return await self._invoker.invoke(
            GET_FEEDBACK,
            {"feedback_id": feedback_id, "model": model, "headers": headers},
        )

    async def delete_feedback(
        self,
        *,
        feedback_id: Optional[str] = None,
        model: Optional[str] = None,
        headers: Headers = None,
    ) -> Any:
        """Delete a feedback entry."""
        return await self._invoker.invoke(
            DELETE_FEEDBACK,
            {"feedback_id": feedback_id, "model": model, "headers": headers},
        )

    async def create_batch(
        self,
        *,
        function: Optional[str] = None,
        input_credentials_file: Optional[FileInput] = None,
        input_bucket_location: Optional[str] = None,
        input_bucket_name: Optional[str] = None,
        output_credentials_file: Optional[FileInput] = None,
        output_bucket_location: Optional[str] = None,
        output_bucket_name: Optional[str] = None,
        model: Optional[str] = None,
        headers: Headers = None,
    ) -> Any:
        """
        Submit a batch job over the documents in a storage bucket.

        The credential files are always sent as application/json.
        """
        return await self._invoker.invoke(
            CREATE_BATCH,
            {
                "function": function,
                "input_credentials_file": input_credentials_file,
                "input_bucket_location": input_bucket_location,
                "input_bucket_name": input_bucket_name,
                "output_credentials_file": output_credentials_file,
                "output_bucket_location": output_bucket_location,
                "output_bucket_name": output_bucket_name,
                "model": model,
                "headers": headers,
            },
        )

    async def list_batches(self, *, headers: Headers = None) -> Any:
        """List submitted batch jobs."""
        return await self._invoker.invoke(LIST_BATCHES, {"headers": headers})

    async def get_batch(
        self, *, batch_id: Optional[str] = None, headers: Headers = None
    ) -> Any:
        """Get the status of a batch job."""
        return await self._invoker.invoke(
            GET_BATCH, {"batch_id": batch_id, "headers": headers}
        )

    async def update_batch(
        self,
        *,
        batch_id: Optional[str] = None,
        action: Optional[str] = None,
        model: Optional[str] = None,
        headers: Headers = None,
    ) -> Any:
        """Rescan or cancel a batch job."""
        return await self._invoker.invoke(
            UPDATE_BATCH,
            {"batch_id": batch_id, "action": action, "model": model, "headers": headers},
        )
