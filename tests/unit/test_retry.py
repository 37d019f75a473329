import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from health_insight.llm.exceptions import LlmError, LlmErrorKind
from health_insight.llm.retry import RetryingCompletionClient

_MESSAGES = [{"role": "user", "content": "report"}]


def _inner(*outcomes: object) -> AsyncMock:
    inner = AsyncMock()
    inner.create_chat_completion.side_effect = list(outcomes)
    return inner


def _transient() -> LlmError:
    return LlmError("503", kind=LlmErrorKind.SERVER_ERROR, status_code=503)


async def _call(client: RetryingCompletionClient) -> str:
    return await client.create_chat_completion(model="m", temperature=0.1, messages=_MESSAGES)


class TestRetryingCompletionClient:
    @pytest.mark.asyncio
    async def test_success_on_first_attempt(self) -> None:
        inner = _inner("ok")
        client = RetryingCompletionClient(inner, base_delay_seconds=0)
        assert await _call(client) == "ok"
        assert inner.create_chat_completion.await_count == 1

    @pytest.mark.asyncio
    async def test_retries_transient_errors_then_succeeds(self) -> None:
        inner = _inner(_transient(), _transient(), "ok")
        client = RetryingCompletionClient(inner, max_retries=2, base_delay_seconds=0)
        assert await _call(client) == "ok"
        assert inner.create_chat_completion.await_count == 3

    @pytest.mark.asyncio
    async def test_gives_up_after_max_retries(self) -> None:
        inner = _inner(_transient(), _transient(), _transient(), "never")
        client = RetryingCompletionClient(inner, max_retries=2, base_delay_seconds=0)
        with pytest.raises(LlmError):
            await _call(client)
        assert inner.create_chat_completion.await_count == 3

    @pytest.mark.asyncio
    async def test_non_transient_error_is_not_retried(self) -> None:
        inner = _inner(LlmError("401", kind=LlmErrorKind.AUTH, status_code=401), "never")
        client = RetryingCompletionClient(inner, base_delay_seconds=0)
        with pytest.raises(LlmError) as exc_info:
            await _call(client)
        assert exc_info.value.kind is LlmErrorKind.AUTH
        assert inner.create_chat_completion.await_count == 1

    @pytest.mark.asyncio
    async def test_backoff_grows_linearly(self) -> None:
        inner = _inner(_transient(), _transient(), "ok")
        client = RetryingCompletionClient(inner, max_retries=2, base_delay_seconds=1.5)
        with patch("health_insight.llm.retry.asyncio.sleep", new=AsyncMock()) as sleep:
            await _call(client)
        assert [c.args[0] for c in sleep.await_args_list] == [1.5, 3.0]

    @pytest.mark.asyncio
    async def test_slow_attempt_times_out_and_is_retried(self) -> None:
        calls = 0

        async def slow_then_fast(**_: object) -> str:
            nonlocal calls
            calls += 1
            if calls == 1:
                await asyncio.sleep(1)
            return "ok"

        inner = AsyncMock()
        inner.create_chat_completion.side_effect = slow_then_fast
        client = RetryingCompletionClient(
            inner, max_retries=1, base_delay_seconds=0, timeout_seconds=0.01
        )
        assert await _call(client) == "ok"
        assert calls == 2

    @pytest.mark.asyncio
    async def test_timeout_exhaustion_raises_timeout_kind(self) -> None:
        async def never(**_: object) -> str:
            await asyncio.sleep(1)
            return "late"

        inner = AsyncMock()
        inner.create_chat_completion.side_effect = never
        client = RetryingCompletionClient(
            inner, max_retries=0, base_delay_seconds=0, timeout_seconds=0.01
        )
        with pytest.raises(LlmError) as exc_info:
            await _call(client)
        assert exc_info.value.kind is LlmErrorKind.TIMEOUT

    def test_rejects_negative_retry_budget(self) -> None:
        with pytest.raises(ValueError):
            RetryingCompletionClient(AsyncMock(), max_retries=-1)
