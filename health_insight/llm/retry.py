import asyncio

from health_insight.llm.client_base import BaseCompletionClient
from health_insight.llm.exceptions import LlmError, LlmErrorKind
from health_insight.llm.messages import Message
from health_insight.logging.logger import Log


class RetryingCompletionClient(BaseCompletionClient):
    """Retries transient provider failures with linear backoff.

    Attempt ``n`` that fails transiently is followed by a pause of
    ``n * base_delay_seconds``. Non-transient failures are raised at once.
    Each attempt is bounded by ``timeout_seconds``; exceeding it is a
    transient TIMEOUT failure.
    """

    def __init__(
        self,
        inner: BaseCompletionClient,
        *,
        max_retries: int = 2,
        base_delay_seconds: float = 1.0,
        timeout_seconds: float | None = None,
    ) -> None:
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        self._inner = inner
        self._max_retries = max_retries
        self._base_delay = max(0.0, base_delay_seconds)
        self._timeout = timeout_seconds

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        messages: list[Message],
    ) -> str:
        attempt = 0
        while True:
            attempt += 1
            try:
                return await self._attempt(model, temperature, messages)
            except LlmError as exc:
                if not exc.transient or attempt > self._max_retries:
                    raise
                delay = attempt * self._base_delay
                Log.warning(
                    f"Transient AI provider failure on attempt {attempt}, "
                    f"retrying in {delay:.1f}s: {exc}",
                    model=model,
                    kind=exc.kind.value,
                )
                await asyncio.sleep(delay)

    async def _attempt(
        self, model: str, temperature: float, messages: list[Message]
    ) -> str:
        call = self._inner.create_chat_completion(
            model=model, temperature=temperature, messages=messages
        )
        if self._timeout is None:
            return await call
        try:
            return await asyncio.wait_for(call, timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            raise LlmError(
                f"AI provider call exceeded {self._timeout}s", kind=LlmErrorKind.TIMEOUT
            ) from exc
