from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from health_insight.analysis.models import AnalysisRequest
from health_insight.extraction.models import Artifact
from health_insight.logging.logger import Log
from health_insight.policy.models import PromptPolicy
from health_insight.sanitizer.models import AnalysisOutcome


class PipelineState(str, Enum):
    RECEIVED = "Received"
    EXTRACTING = "Extracting"
    EXTRACTED = "Extracted"
    EXTRACTION_FAILED = "ExtractionFailed"
    GENERATING = "Generating"
    GENERATED = "Generated"
    GENERATION_FAILED = "GenerationFailed"
    FINALIZING = "Finalizing"
    DONE = "Done"
    DONE_WITH_WARNINGS = "DoneWithWarnings"


@dataclass(slots=True)
class PipelineContext:
    request: AnalysisRequest
    state: PipelineState = PipelineState.RECEIVED
    trail: list[PipelineState] = field(default_factory=lambda: [PipelineState.RECEIVED])
    artifact: Artifact | None = None
    extracted_text: str = ""
    analysis_text: str = ""
    policy: PromptPolicy | None = None
    raw_reply: str = ""
    outcome: AnalysisOutcome | None = None
    final_text: str = ""
    warnings: list[str] = field(default_factory=list)

    def transition(self, state: PipelineState) -> None:
        Log.info(f"Analysis {self.state.value} -> {state.value}")
        self.state = state
        self.trail.append(state)


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
