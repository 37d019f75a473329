from collections.abc import Sequence

from health_insight.analysis.models import AnalysisRequest, AnalysisResponse
from health_insight.analysis.pipeline import PipelineContext, PipelineStep
from health_insight.analysis.steps import (
    ExtractTextStep,
    FinalizeStep,
    GenerateStep,
    MergeTextStep,
    SelectPolicyStep,
    ValidateRequestStep,
)
from health_insight.config.settings import Settings
from health_insight.extraction.factory import build_text_extractor
from health_insight.llm.client_base import BaseCompletionClient
from health_insight.llm.factory import CompletionClientFactory
from health_insight.llm.gateway import LlmGateway
from health_insight.logging.logger import Log
from health_insight.policy.policies import PolicyTable, default_policy_table
from health_insight.sanitizer.sanitizer import OutputSanitizer


class ReportAnalyzer:
    """Runs the report analysis pipeline.

    Pipeline: validate -> extract -> merge -> select policy -> generate -> finalize.
    Steps run strictly in order; a step failure aborts the request.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = tuple(steps)

    async def analyze(self, request: AnalysisRequest) -> AnalysisResponse:
        """Analyze one report.

        Raises:
            AnalysisError: INVALID_INPUT, EXTRACTION_RATE_LIMITED,
                EXTRACTION_FAILED or GENERATION_FAILED.
        """
        context = await self.run(request)
        return self._to_response(context)

    async def run(self, request: AnalysisRequest) -> PipelineContext:
        context = PipelineContext(request=request)
        for step in self._steps:
            context = await step.run(context)
        Log.info(
            f"Analysis finished in state {context.state.value}",
            role=request.caller_role.value,
            chars=len(context.final_text),
        )
        return context

    @staticmethod
    def _to_response(context: PipelineContext) -> AnalysisResponse:
        outcome = context.outcome
        if outcome is None:
            return AnalysisResponse(succeeded=True, text=context.final_text)
        return AnalysisResponse(
            succeeded=outcome.succeeded,
            text=context.final_text,
            parameters=list(outcome.parameters) if outcome.parameters else None,
            warnings=list(context.warnings),
        )


def build_analyzer(
    settings: Settings,
    *,
    client: BaseCompletionClient | None = None,
    policy_table: PolicyTable | None = None,
) -> ReportAnalyzer:
    """Build a ReportAnalyzer with all adapters resolved from settings."""
    raw_client = client if client is not None else CompletionClientFactory.create(settings)
    analysis_gateway = LlmGateway(
        CompletionClientFactory.create_retrying(settings, raw_client),
        temperature=settings.llm_temperature,
    )
    vision_gateway = LlmGateway(
        CompletionClientFactory.create_vision(settings, raw_client),
        temperature=settings.llm_temperature,
    )
    sanitizer = OutputSanitizer(
        min_length=settings.sanitizer_min_length,
        max_length=settings.sanitizer_max_length,
    )
    return ReportAnalyzer([
        ValidateRequestStep(),
        ExtractTextStep(build_text_extractor(settings, vision_gateway)),
        MergeTextStep(),
        SelectPolicyStep(policy_table or default_policy_table()),
        GenerateStep(analysis_gateway, settings.analysis_model),
        FinalizeStep(sanitizer),
    ])
