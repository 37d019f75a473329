from health_insight.llm.client_base import BaseCompletionClient
from health_insight.llm.exceptions import LlmError
from health_insight.llm.messages import Message
from health_insight.logging.logger import Log


class ModelFallbackClient(BaseCompletionClient):
    """Repeats a failed call exactly once against a different model."""

    def __init__(self, inner: BaseCompletionClient, *, fallback_model: str) -> None:
        self._inner = inner
        self._fallback_model = fallback_model

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        messages: list[Message],
    ) -> str:
        try:
            return await self._inner.create_chat_completion(
                model=model, temperature=temperature, messages=messages
            )
        except LlmError as exc:
            if not self._fallback_model or self._fallback_model == model:
                raise
            Log.warning(
                f"Model {model} failed ({exc.kind.value}), "
                f"falling back to {self._fallback_model}"
            )
        return await self._inner.create_chat_completion(
            model=self._fallback_model, temperature=temperature, messages=messages
        )
