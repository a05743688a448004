"""
Generic invocation routine shared by every API operation.

The invoker validates a parameter bag against an operation descriptor,
builds the RequestDescriptor synchronously and hands it to the request
executor. Executor results and errors are relayed unchanged; the only
error raised here is MissingParametersError.
"""

import asyncio
from typing import Any, Mapping, Optional, Union

from .config import get_logger
from .core.marshal import build_request
from .exceptions import MissingParametersError
from .executor import RequestExecutor
from .models import RequestDescriptor
from .operations import OperationDescriptor, get_operation

logger = get_logger("invoker")

Operation = Union[OperationDescriptor, str]


class OperationInvoker:
    """Builds requests from operation descriptors and submits them."""

    def __init__(
        self,
        executor: RequestExecutor,
        service_query: Optional[Mapping[str, Any]] = None,
    ):
        self.executor = executor
        self.service_query = dict(service_query or {})

    def build(
        self, operation: Operation, params: Optional[Mapping[str, Any]] = None
    ) -> RequestDescriptor:
        """Validate params and build the request without executing it."""
        descriptor = self._resolve(operation)
        try:
            return build_request(descriptor, params, self.service_query)
        except MissingParametersError as e:
            logger.debug("%s rejected: %s", descriptor.name, e.message)
            raise

    async def invoke(
        self, operation: Operation, params: Optional[Mapping[str, Any]] = None
    ) -> Any:
        """Execute an operation and return the executor's result."""
        request = self.build(operation, params)
        logger.debug("Invoking %s %s", request.method, request.url)
        return await self.executor.execute(request)

    def submit(
        self, operation: Operation, params: Optional[Mapping[str, Any]] = None
    ) -> "asyncio.Future[Any]":
        """
        Start an operation and return a future for its result.

        The request is validated and built before this returns. Validation
        failures are set on the returned future and the executor is not
        called. Must be called with a running event loop.
        """
        loop = asyncio.get_running_loop()
        try:
            request = self.build(operation, params)
        except MissingParametersError as e:
            future = loop.create_future()
            future.set_exception(e)
            return future

        logger.debug("Submitting %s %s", request.method, request.url)
        return asyncio.ensure_future(self.executor.execute(request))

    @staticmethod
    def _resolve(operation: Operation) -> OperationDescriptor:
        if isinstance(operation, OperationDescriptor):
            return operation
        return get_operation(operation)
