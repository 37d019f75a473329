from enum import Enum


class LlmErrorKind(str, Enum):
    CONNECTION = "connection"
    TIMEOUT = "timeout"
    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"
    BAD_REQUEST = "bad_request"
    AUTH = "auth"
    EMPTY_RESPONSE = "empty_response"
    UNKNOWN = "unknown"


_TRANSIENT_KINDS = frozenset({
    LlmErrorKind.CONNECTION,
    LlmErrorKind.TIMEOUT,
    LlmErrorKind.RATE_LIMITED,
    LlmErrorKind.SERVER_ERROR,
})


class LlmError(Exception):
    """Raised when a completion call to the AI provider fails."""

    def __init__(
        self,
        message: str,
        kind: LlmErrorKind,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code

    @property
    def transient(self) -> bool:
        """True when the failure is worth retrying."""
        return self.kind in _TRANSIENT_KINDS


def classify_status(status_code: int) -> LlmErrorKind:
    """Map an HTTP status code from the provider to an error kind."""
    if status_code == 429:
        return LlmErrorKind.RATE_LIMITED
    if status_code == 408:
        return LlmErrorKind.TIMEOUT
    if status_code >= 500:
        return LlmErrorKind.SERVER_ERROR
    if status_code in (401, 403):
        return LlmErrorKind.AUTH
    if 400 <= status_code < 500:
        return LlmErrorKind.BAD_REQUEST
    return LlmErrorKind.UNKNOWN
