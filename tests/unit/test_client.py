"""
Tests for the CompareComplyV1 client facade.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from compare_comply import CompareComplyV1, HttpxRequestExecutor, RequestExecutor
from compare_comply.config import Settings
from compare_comply.exceptions import MissingParametersError


class TestClientConfiguration:
    def test_defaults_from_settings(self, settings):
        client = CompareComplyV1(settings=settings)

        assert client.version == "2018-10-18"
        assert client.url == "https://gateway.watsonplatform.net/compare-comply/api"
        assert client.api_key is None
        assert client.timeout == 30
        assert isinstance(client.executor, HttpxRequestExecutor)

    def test_explicit_values_win(self, settings):
        client = CompareComplyV1(
            version="2019-01-01",
            url="https://api.example.com/",
            api_key="test-key",
            timeout=60,
            settings=settings,
        )

        assert client.version == "2019-01-01"
        assert client.url == "https://api.example.com"
        assert client.executor.service_url == "https://api.example.com"
        assert client.executor.api_key == "test-key"
        assert client.executor.timeout == 60

    def test_settings_values_used(self):
        settings = Settings(
            _env_file=None,
            url="https://eu.example.com",
            api_key="env-key",
            version="2018-12-01",
            timeout_seconds=10,
        )
        client = CompareComplyV1(settings=settings)

        assert client.url == "https://eu.example.com"
        assert client.api_key == "env-key"
        assert client.version == "2018-12-01"
        assert client.timeout == 10

    def test_injected_executor(self, executor, settings):
        client = CompareComplyV1(executor=executor, settings=settings)
        assert client.executor is executor


class TestClientInvocation:
    async def test_version_sent_with_every_request(self, client, sent_request):
        await client.get_feedback(feedback_id="fb-1")
        assert sent_request().query == {"version": "2018-10-18"}

    async def test_returns_executor_result(self, client):
        response = await client.list_batches()
        assert response.result == {"status": "ok"}

    async def test_keyword_call_missing_required(self, client, executor):
        with pytest.raises(MissingParametersError) as exc_info:
            await client.compare_documents(file1=b"left")

        assert exc_info.value.missing == ["file2"]
        executor.execute.assert_not_called()

    def test_build_request(self, client, executor):
        request = client.build_request("update_batch", {"batchId": "b-1", "action": "rescan"})

        assert request.method == "PUT"
        assert request.url == "/v1/batches/b-1"
        assert request.query == {"version": "2018-10-18", "action": "rescan"}
        executor.execute.assert_not_called()

    async def test_submit(self, client):
        future = client.submit("get_batch", {"batch_id": "b-1"})

        assert isinstance(future, asyncio.Future)
        response = await future
        assert response.status_code == 200

    def test_invoke_sync(self, client, sent_request):
        client.invoke_sync("get_feedback", {"feedbackId": "fb-1", "model": "m1"})

        request = sent_request()
        assert request.url == "/v1/feedback/fb-1"
        assert request.query["model"] == "m1"

    async def test_sync_method_inside_running_loop(self, client):
        response = client.list_batches_sync()
        assert response.status_code == 200


class TestClientLifecycle:
    async def test_close_closes_executor(self, settings):
        executor = AsyncMock(spec=HttpxRequestExecutor)
        client = CompareComplyV1(executor=executor, settings=settings)

        await client.close()
        executor.close.assert_awaited_once()

    async def test_close_without_executor_close(self, client):
        await client.close()

    async def test_async_context_manager(self, settings):
        executor = AsyncMock(spec=HttpxRequestExecutor)

        async with CompareComplyV1(executor=executor, settings=settings) as client:
            assert isinstance(client, CompareComplyV1)

        executor.close.assert_awaited_once()

    async def test_default_executor_closed(self, settings):
        async with CompareComplyV1(settings=settings) as client:
            http_client = client.executor._client

        assert http_client.is_closed


def test_executor_is_abstract():
    with pytest.raises(TypeError):
        RequestExecutor()
