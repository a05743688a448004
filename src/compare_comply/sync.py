"""
Sync API wrappers for async client methods.
"""

import asyncio
import concurrent.futures
import threading
from functools import wraps
from typing import Any, Callable, Mapping, Optional, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])

_thread_local = threading.local()


def detect_event_loop_state() -> str:
    """Detect current event loop state.

    Returns:
        - "none": No event loop running in current thread
        - "running": Event loop is running in current thread
    """
    try:
        asyncio.get_running_loop()
        return "running"
    except RuntimeError:
        return "none"


def create_thread_local_loop() -> asyncio.AbstractEventLoop:
    """Create a new event loop for thread-local use."""
    return asyncio.new_event_loop()


def run_in_thread_pool(coro: Any, timeout: Optional[float] = None) -> Any:
    """Run coroutine in thread pool executor."""
    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as executor:
        future = executor.submit(asyncio.run, coro)
        return future.result(timeout=timeout)


def get_or_create_event_loop() -> asyncio.AbstractEventLoop:
    """Get or create this thread's event loop for blocking calls."""
    loop = getattr(_thread_local, "loop", None)
    if loop is None or loop.is_closed():
        loop = create_thread_local_loop()
        _thread_local.loop = loop
    return cast(asyncio.AbstractEventLoop, loop)


def sync_wrapper(async_func: F) -> F:
    """
    Decorator to create sync version of async method.

    The thread-local loop is reused across calls so an httpx connection
    pool stays bound to one loop.
    """

    @wraps(async_func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if detect_event_loop_state() == "running":
            # Called from async code: run on a worker thread
            return run_in_thread_pool(async_func(*args, **kwargs))
        loop = get_or_create_event_loop()
        return loop.run_until_complete(async_func(*args, **kwargs))

    return cast(F, wrapper)


class SyncOperationsMixin:
    """Mixin providing sync versions of async operation methods."""

    def invoke_sync(
        self, operation: Any, params: Optional[Mapping[str, Any]] = None
    ) -> Any:
        """Synchronous version of invoke."""
        return sync_wrapper(getattr(self, "invoke"))(operation, params)

    def convert_to_html_sync(self, **params: Any) -> Any:
        """Synchronous version of convert_to_html."""
        return sync_wrapper(getattr(self, "convert_to_html"))(**params)

    def classify_elements_sync(self, **params: Any) -> Any:
        """Synchronous version of classify_elements."""
        return sync_wrapper(getattr(self, "classify_elements"))(**params)

    def extract_tables_sync(self, **params: Any) -> Any:
        """Synchronous version of extract_tables."""
        return sync_wrapper(getattr(self, "extract_tables"))(**params)

    def compare_documents_sync(self, **params: Any) -> Any:
        """Synchronous version of compare_documents."""
        return sync_wrapper(getattr(self, "compare_documents"))(**params)

    def add_feedback_sync(self, **params: Any) -> Any:
        """Synchronous version of add_feedback."""
        return sync_wrapper(getattr(self, "add_feedback"))(**params)

    def list_feedback_sync(self, **params: Any) -> Any:
        """Synchronous version of list_feedback."""
        return sync_wrapper(getattr(self, "list_feedback"))(**params)

    def get_feedback_sync(self, **params: Any) -> Any:
        """Synchronous version of get_feedback."""
        return sync_wrapper(getattr(self, "get_feedback"))(**params)

    def delete_feedback_sync(self, **params: Any) -> Any:
        """Synchronous version of delete_feedback."""
        return sync_wrapper(getattr(self, "delete_feedback"))(**params)

    def create_batch_sync(self, **params: Any) -> Any:
        """Synchronous version of create_batch."""
        return sync_wrapper(getattr(self, "create_batch"))(**params)

    def list_batches_sync(self, **params: Any) -> Any:
        """Synchronous version of list_batches."""
        return sync_wrapper(getattr(self, "list_batches"))(**params)

    def get_batch_sync(self, **params: Any) -> Any:
        """Synchronous version of get_batch."""
        return sync_wrapper(getattr(self, "get_batch"))(**params)

    def update_batch_sync(self, **params: Any) -> Any:
        """Synchronous version of update_batch."""
        return sync_wrapper(getattr(self, "update_batch"))(**params)
