from abc import ABC, abstractmethod

from health_insight.llm.messages import Message


class BaseCompletionClient(ABC):
    """Contract for provider-specific chat completion clients and their wrappers."""

    @abstractmethod
    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        messages: list[Message],
    ) -> str:
        """Return provider response as plain text.

        Raises:
            LlmError: on any provider failure, classified by kind.
        """
