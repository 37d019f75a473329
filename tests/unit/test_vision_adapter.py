import pytest

from health_insight.extraction.exceptions import ExtractionError, ExtractionErrorKind
from health_insight.extraction.models import MediaType
from health_insight.extraction.vision_adapter import VisionModelAdapter
from health_insight.llm.client_base import BaseCompletionClient
from health_insight.llm.exceptions import LlmError, LlmErrorKind
from health_insight.llm.fallback import ModelFallbackClient
from health_insight.llm.gateway import LlmGateway
from health_insight.llm.messages import Message


class ScriptedClient(BaseCompletionClient):
    """Replies per model from a script; records every call."""

    def __init__(self, script: dict[str, list[object]]) -> None:
        self._script = script
        self.calls: list[tuple[str, list[Message]]] = []

    async def create_chat_completion(
        self, *, model: str, temperature: float, messages: list[Message]
    ) -> str:
        self.calls.append((model, messages))
        outcome = self._script[model].pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return str(outcome)


def _adapter(client: BaseCompletionClient) -> VisionModelAdapter:
    gateway = LlmGateway(ModelFallbackClient(client, fallback_model="secondary"))
    return VisionModelAdapter(gateway=gateway, model="primary")


def _rate_limited() -> LlmError:
    return LlmError("429", kind=LlmErrorKind.RATE_LIMITED, status_code=429)


class TestVisionModelAdapter:
    @pytest.mark.asyncio
    async def test_returns_primary_transcription(self) -> None:
        client = ScriptedClient({"primary": ["Glucose 88 mg/dL\n"]})
        text = await _adapter(client).extract(b"img", MediaType.PNG)
        assert text == "Glucose 88 mg/dL"
        assert [model for model, _ in client.calls] == ["primary"]

    @pytest.mark.asyncio
    async def test_sends_image_inline_with_transcription_request(self) -> None:
        client = ScriptedClient({"primary": ["text"]})
        await _adapter(client).extract(b"img", MediaType.JPEG)
        _, messages = client.calls[0]
        assert messages[0]["role"] == "system"
        user_parts = messages[1]["content"]
        assert isinstance(user_parts, list)
        assert user_parts[0]["image_url"]["url"].startswith("data:image/jpeg;base64,")
        assert "Extract all text" in user_parts[1]["text"]

    @pytest.mark.asyncio
    async def test_rate_limited_primary_falls_back_exactly_once(self) -> None:
        client = ScriptedClient({
            "primary": [_rate_limited()],
            "secondary": ["Hemoglobin 11.4 g/dL", "unused"],
        })
        text = await _adapter(client).extract(b"img", MediaType.PNG)
        assert text == "Hemoglobin 11.4 g/dL"
        assert [model for model, _ in client.calls] == ["primary", "secondary"]

    @pytest.mark.asyncio
    async def test_rate_limit_on_both_models_is_reported_as_rate_limited(self) -> None:
        client = ScriptedClient({"primary": [_rate_limited()], "secondary": [_rate_limited()]})
        with pytest.raises(ExtractionError) as exc_info:
            await _adapter(client).extract(b"img", MediaType.PNG)
        assert exc_info.value.kind is ExtractionErrorKind.RATE_LIMITED
        assert len(client.calls) == 2

    @pytest.mark.asyncio
    async def test_other_failures_are_vision_failures(self) -> None:
        client = ScriptedClient({
            "primary": [LlmError("down", kind=LlmErrorKind.SERVER_ERROR, status_code=503)],
            "secondary": [LlmError("bad", kind=LlmErrorKind.BAD_REQUEST, status_code=400)],
        })
        with pytest.raises(ExtractionError) as exc_info:
            await _adapter(client).extract(b"img", MediaType.WEBP)
        assert exc_info.value.kind is ExtractionErrorKind.VISION_FAILURE
