from dataclasses import dataclass, field

from health_insight.policy.models import CallerRole
from health_insight.sanitizer.models import Parameter


@dataclass(frozen=True)
class AnalysisRequest:
    """One report analysis request, already authenticated and uploaded."""

    caller_role: CallerRole
    raw_text: str | None = None
    file_bytes: bytes | None = None
    file_media_type: str | None = None

    @property
    def has_text(self) -> bool:
        return bool(self.raw_text and self.raw_text.strip())

    @property
    def has_file(self) -> bool:
        return bool(self.file_bytes)

    def __repr__(self) -> str:
        return (
            f"AnalysisRequest(caller_role={self.caller_role.value}, "
            f"text_chars={len(self.raw_text or '')}, "
            f"file_bytes={len(self.file_bytes or b'')}, "
            f"file_media_type={self.file_media_type!r})"
        )


@dataclass
class AnalysisResponse:
    """Result handed back to the route layer."""

    succeeded: bool
    text: str
    parameters: list[Parameter] | None = None
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"succeeded": self.succeeded, "text": self.text}
        if self.parameters is not None:
            payload["parameters"] = [p.to_dict() for p in self.parameters]
        if self.warnings:
            payload["warnings"] = list(self.warnings)
        return payload
