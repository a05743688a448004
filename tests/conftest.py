import pytest
from unittest.mock import AsyncMock

from compare_comply import CompareComplyV1, OperationInvoker, RequestExecutor
from compare_comply.config import Settings
from compare_comply.models import DetailedResponse

VERSION = "2018-10-18"
SERVICE_URL = "https://api.example.com/compare-comply/api"


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def executor():
    """Request executor double that never touches the network."""
    executor = AsyncMock(spec=RequestExecutor)
    executor.execute.return_value = DetailedResponse(
        result={"status": "ok"}, status_code=200
    )
    return executor


@pytest.fixture
def invoker(executor):
    return OperationInvoker(executor, {"version": VERSION})


@pytest.fixture
def client(executor, settings):
    return CompareComplyV1(
        version=VERSION, url=SERVICE_URL, executor=executor, settings=settings
    )


@pytest.fixture
def sent_request(executor):
    """Return the RequestDescriptor handed to the executor."""

    def _sent():
        executor.execute.assert_called_once()
        return executor.execute.call_args.args[0]

    return _sent
