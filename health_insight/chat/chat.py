from collections.abc import Sequence

from health_insight.config.settings import Settings
from health_insight.llm.client_base import BaseCompletionClient
from health_insight.llm.factory import CompletionClientFactory
from health_insight.llm.gateway import LlmGateway
from health_insight.llm.messages import ChatMessage
from health_insight.logging.logger import Log
from health_insight.policy.prompt_loader import load_prompt


class HealthChat:
    """Conversational mode: answers health questions in bullet form.

    Replies are returned unmodified; storing the history is up to the caller.
    """

    def __init__(
        self,
        *,
        gateway: LlmGateway,
        model: str,
        system_instruction: str | None = None,
    ) -> None:
        self._gateway = gateway
        self._model = model
        self._system_instruction = system_instruction or load_prompt("chat")

    async def reply(self, history: Sequence[ChatMessage], message: str) -> str:
        """Answer ``message`` in the context of the prior turns.

        Raises:
            ValueError: if the message is empty.
            LlmError: when the provider call fails after retries.
        """
        if not message or not message.strip():
            raise ValueError("Message is required")
        Log.info(f"Chat message received ({len(history)} prior turns)")
        return await self._gateway.complete(
            self._model, self._system_instruction, message.strip(), history=history
        )


def build_chat(settings: Settings, *, client: BaseCompletionClient | None = None) -> HealthChat:
    raw_client = client if client is not None else CompletionClientFactory.create(settings)
    gateway = LlmGateway(
        CompletionClientFactory.create_retrying(settings, raw_client),
        temperature=settings.llm_temperature,
    )
    return HealthChat(gateway=gateway, model=settings.chat_model)
