from enum import Enum


class AnalysisErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    EXTRACTION_RATE_LIMITED = "EXTRACTION_RATE_LIMITED"
    EXTRACTION_FAILED = "EXTRACTION_FAILED"
    GENERATION_FAILED = "GENERATION_FAILED"


_RETRYABLE = frozenset({
    AnalysisErrorCode.EXTRACTION_RATE_LIMITED,
    AnalysisErrorCode.EXTRACTION_FAILED,
    AnalysisErrorCode.GENERATION_FAILED,
})


class AnalysisError(Exception):
    """Caller-facing pipeline failure. The message is safe to show end users."""

    def __init__(self, code: AnalysisErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    @property
    def retryable(self) -> bool:
        return self.code in _RETRYABLE

    def to_dict(self) -> dict[str, object]:
        return {"error": self.code.value, "message": self.message, "retryable": self.retryable}
