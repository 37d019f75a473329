from dataclasses import dataclass, field
from enum import Enum


class Classification(str, Enum):
    """Relationship of a lab value to its reference range, as the model reported it."""

    NORMAL = "NORMAL"
    HIGH = "HIGH"
    LOW = "LOW"
    BORDERLINE = "BORDERLINE"

    @property
    def color(self) -> str:
        """Display colour class used by the web client."""
        return _COLORS[self]

    @property
    def emoji(self) -> str:
        return _EMOJIS[self]


_COLORS = {
    Classification.NORMAL: "text-green-500",
    Classification.HIGH: "text-red-500",
    Classification.LOW: "text-orange-500",
    Classification.BORDERLINE: "text-yellow-500",
}

_EMOJIS = {
    Classification.NORMAL: "🟢",
    Classification.HIGH: "🔴",
    Classification.LOW: "🟡",
    Classification.BORDERLINE: "🟠",
}


class FailureReason(str, Enum):
    MISSING_CLASSIFICATION = "missing classification token"
    MISSING_BULLETS = "missing bullet lines"
    TOO_SHORT = "output too short"
    TOO_LONG = "output too long"


@dataclass(frozen=True)
class Parameter:
    """A single classified measurement, in source order."""

    name: str
    value: str
    classification: Classification
    section: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "section": self.section,
            "name": self.name,
            "value": self.value,
            "classification": self.classification.value,
        }


@dataclass
class AnalysisOutcome:
    """Output of the sanitizer for one model reply."""

    succeeded: bool
    canonical_text: str
    parameters: list[Parameter] = field(default_factory=list)
    failure_reasons: list[FailureReason] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def failure_reason(self) -> FailureReason | None:
        return self.failure_reasons[0] if self.failure_reasons else None
