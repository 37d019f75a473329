from health_insight.analysis.exceptions import AnalysisError, AnalysisErrorCode
from health_insight.analysis.pipeline import PipelineContext, PipelineState, PipelineStep
from health_insight.extraction.exceptions import ExtractionError
from health_insight.extraction.extractor import TextExtractor
from health_insight.extraction.models import Artifact, MediaType
from health_insight.llm.exceptions import LlmError
from health_insight.llm.gateway import LlmGateway
from health_insight.logging.logger import Log
from health_insight.policy.policies import PolicyTable
from health_insight.sanitizer.sanitizer import OutputSanitizer

MISSING_INPUT_MESSAGE = "Report text or file is required."
RATE_LIMITED_MESSAGE = (
    "Vision model rate limit exceeded. Please wait a moment and try again, "
    "or use text input instead."
)
EXTRACTION_FAILED_MESSAGE = (
    "Failed to extract text from the uploaded file. Please try again or use text input."
)
GENERATION_FAILED_MESSAGE = "Failed to analyze report. Please try again later."

ADDITIONAL_NOTES_HEADING = "Additional Notes:"
ANALYSIS_REQUEST_PREFIX = "Please analyze this medical report text:"


def merge_texts(extracted_text: str, supplied_text: str) -> str:
    """Extracted content first, caller notes appended under a heading."""
    extracted_text = extracted_text.strip()
    supplied_text = supplied_text.strip()
    if extracted_text and supplied_text:
        return f"{extracted_text}\n\n{ADDITIONAL_NOTES_HEADING}\n{supplied_text}"
    return extracted_text or supplied_text


class ValidateRequestStep(PipelineStep):
    async def run(self, context: PipelineContext) -> PipelineContext:
        request = context.request
        if not request.has_text and not request.has_file:
            raise AnalysisError(AnalysisErrorCode.INVALID_INPUT, MISSING_INPUT_MESSAGE)
        if request.has_file:
            if not request.file_media_type:
                raise AnalysisError(
                    AnalysisErrorCode.INVALID_INPUT, "File media type is required."
                )
            try:
                media_type = MediaType.parse(request.file_media_type)
            except ExtractionError as exc:
                raise AnalysisError(AnalysisErrorCode.INVALID_INPUT, str(exc)) from exc
            context.artifact = Artifact(data=request.file_bytes or b"", media_type=media_type)
        Log.info(f"Received {request!r}")
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: TextExtractor) -> None:
        self._extractor = extractor

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.artifact is None:
            return context
        context.transition(PipelineState.EXTRACTING)
        try:
            context.extracted_text = await self._extractor.extract(context.artifact)
        except ExtractionError as exc:
            context.transition(PipelineState.EXTRACTION_FAILED)
            Log.error(f"Text extraction failed: {exc}", kind=exc.kind.value)
            if exc.rate_limited:
                raise AnalysisError(
                    AnalysisErrorCode.EXTRACTION_RATE_LIMITED, RATE_LIMITED_MESSAGE
                ) from exc
            raise AnalysisError(
                AnalysisErrorCode.EXTRACTION_FAILED, EXTRACTION_FAILED_MESSAGE
            ) from exc
        context.transition(PipelineState.EXTRACTED)
        return context


class MergeTextStep(PipelineStep):
    async def run(self, context: PipelineContext) -> PipelineContext:
        context.analysis_text = merge_texts(
            context.extracted_text, context.request.raw_text or ""
        )
        return context


class SelectPolicyStep(PipelineStep):
    def __init__(self, policy_table: PolicyTable) -> None:
        self._policy_table = policy_table

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.policy = self._policy_table.select(context.request.caller_role)
        Log.info(
            f"Selected '{context.policy.name}' policy for role "
            f"{context.request.caller_role.value}"
        )
        return context


class GenerateStep(PipelineStep):
    def __init__(self, gateway: LlmGateway, model: str) -> None:
        self._gateway = gateway
        self._model = model

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.policy is None:
            raise ValueError("PipelineContext.policy must be set before generation")
        context.transition(PipelineState.GENERATING)
        try:
            context.raw_reply = await self._gateway.complete(
                self._model,
                context.policy.system_instruction,
                f"{ANALYSIS_REQUEST_PREFIX}\n\n{context.analysis_text}",
            )
        except LlmError as exc:
            context.transition(PipelineState.GENERATION_FAILED)
            Log.error(
                f"Report generation failed: {exc}",
                kind=exc.kind.value,
                status_code=exc.status_code,
            )
            raise AnalysisError(
                AnalysisErrorCode.GENERATION_FAILED, GENERATION_FAILED_MESSAGE
            ) from exc
        context.transition(PipelineState.GENERATED)
        return context


class FinalizeStep(PipelineStep):
    def __init__(self, sanitizer: OutputSanitizer) -> None:
        self._sanitizer = sanitizer

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.policy is None:
            raise ValueError("PipelineContext.policy must be set before finalizing")
        context.transition(PipelineState.FINALIZING)
        if not context.policy.sanitize:
            context.final_text = context.raw_reply
            context.transition(PipelineState.DONE)
            return context

        outcome = self._sanitizer.process(context.raw_reply)
        context.outcome = outcome
        context.final_text = outcome.canonical_text
        context.warnings.extend(outcome.warnings)
        if context.warnings:
            Log.warning(f"Analysis finished with warnings: {context.warnings}")
            context.transition(PipelineState.DONE_WITH_WARNINGS)
        else:
            context.transition(PipelineState.DONE)
        return context
