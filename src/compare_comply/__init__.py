"""
Compare and Comply SDK

Python client for the Compare and Comply document analysis API.
"""

from .client import CompareComplyV1
from .executor import HttpxRequestExecutor, RequestExecutor
from .invoker import OperationInvoker
from .models import DetailedResponse, FormField, RequestDescriptor
from .operations import OPERATIONS, Destination, OperationDescriptor, ParameterSpec
from .exceptions import (
    CompareComplyError,
    MissingParametersError,
    ApiError,
    InvalidInputError,
    AuthenticationError,
    NotFoundError,
    NetworkError,
    TimeoutError,
)

__version__ = "1.0.0"

__all__ = [
    "CompareComplyV1",
    "OperationInvoker",
    "RequestExecutor",
    "HttpxRequestExecutor",
    "RequestDescriptor",
    "FormField",
    "DetailedResponse",
    "OPERATIONS",
    "OperationDescriptor",
    "ParameterSpec",
    "Destination",
    "CompareComplyError",
    "MissingParametersError",
    "ApiError",
    "InvalidInputError",
    "AuthenticationError",
    "NotFoundError",
    "NetworkError",
    "TimeoutError",
]
