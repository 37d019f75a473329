from collections.abc import Sequence

from health_insight.llm.client_base import BaseCompletionClient
from health_insight.llm.messages import ChatMessage, UserContent, build_messages
from health_insight.logging.logger import Log


class LlmGateway:
    """Single entry point for completion calls made by the pipeline."""

    def __init__(self, client: BaseCompletionClient, *, temperature: float = 0.1) -> None:
        self._client = client
        self._temperature = max(0.0, min(1.0, temperature))

    async def complete(
        self,
        model: str,
        system_instruction: str,
        user_content: UserContent | str,
        history: Sequence[ChatMessage] = (),
    ) -> str:
        """Run one completion and return the reply text.

        Raises:
            LlmError: when the underlying client gives up.
        """
        if isinstance(user_content, str):
            user_content = UserContent(text=user_content)
        messages = build_messages(system_instruction, user_content, history)
        Log.debug(
            f"Completion request to {model}",
            messages=len(messages),
            has_image=user_content.image is not None,
        )
        reply = await self._client.create_chat_completion(
            model=model,
            temperature=self._temperature,
            messages=messages,
        )
        Log.debug(f"AI raw response:\n{reply}")
        return reply
