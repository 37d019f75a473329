"""Example completion client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseCompletionClient and register the provider in CompletionClientFactory.
"""

from typing import ClassVar

from health_insight.llm.client_base import BaseCompletionClient
from health_insight.llm.messages import Message


class ExampleClientAdapter(BaseCompletionClient):
    """Example adapter that returns a fixed report classification.

    No network calls. Useful for local development and as a template for
    building real provider adapters.
    """

    DEFAULT_REPLY: ClassVar[str] = (
        "📊 **Blood & Metabolic Panel**\n"
        "• **Fasting Blood Sugar**: 88 mg/dL - NORMAL\n"
        "• **HbA1c**: 5.3% - NORMAL\n"
        "\n"
        "🧬 **Complete Blood Count (CBC)**\n"
        "• **Hemoglobin**: 11.4 g/dL - LOW"
    )

    def __init__(self, reply: str | None = None) -> None:
        self._reply = reply if reply is not None else self.DEFAULT_REPLY

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        messages: list[Message],
    ) -> str:
        _ = model, temperature, messages
        return self._reply
