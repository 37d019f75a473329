from health_insight.extraction.exceptions import ExtractionError, ExtractionErrorKind
from health_insight.extraction.image_base import BaseImageExtractor
from health_insight.extraction.models import MediaType
from health_insight.llm.exceptions import LlmError, LlmErrorKind
from health_insight.llm.gateway import LlmGateway
from health_insight.llm.messages import ImageInput, UserContent
from health_insight.policy.prompt_loader import load_prompt


class VisionModelAdapter(BaseImageExtractor):
    """Transcribes images through a vision-capable model.

    The gateway is expected to carry the secondary-model fallback; a
    rate-limit reply that survives it is reported as RATE_LIMITED.
    """

    def __init__(
        self,
        *,
        gateway: LlmGateway,
        model: str,
        system_instruction: str | None = None,
        transcription_request: str | None = None,
    ) -> None:
        self._gateway = gateway
        self._model = model
        self._system_instruction = system_instruction or load_prompt("vision_ocr_system")
        self._transcription_request = transcription_request or load_prompt("vision_ocr_user")

    async def extract(self, image_bytes: bytes, media_type: MediaType) -> str:
        content = UserContent(
            text=self._transcription_request,
            image=ImageInput(data=image_bytes, media_type=media_type.value),
        )
        try:
            text = await self._gateway.complete(self._model, self._system_instruction, content)
        except LlmError as exc:
            if exc.kind is LlmErrorKind.RATE_LIMITED:
                raise ExtractionError(
                    f"vision model rate limited: {exc}",
                    kind=ExtractionErrorKind.RATE_LIMITED,
                ) from exc
            raise ExtractionError(
                f"vision model transcription failed: {exc}",
                kind=ExtractionErrorKind.VISION_FAILURE,
            ) from exc
        return text.strip()
