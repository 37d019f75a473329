"""Acceptance checks for cleaned strict-policy output."""

from health_insight.sanitizer.grammar import CLASSIFICATION_RE, is_bullet
from health_insight.sanitizer.models import FailureReason

DEFAULT_MIN_LENGTH = 50
DEFAULT_MAX_LENGTH = 5000


def validate_output(
    text: str,
    *,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> list[FailureReason]:
    """Return every failed check; an empty list means the text is accepted."""
    failures: list[FailureReason] = []
    if CLASSIFICATION_RE.search(text) is None:
        failures.append(FailureReason.MISSING_CLASSIFICATION)
    if not any(is_bullet(line) for line in text.splitlines()):
        failures.append(FailureReason.MISSING_BULLETS)
    if len(text) <= min_length:
        failures.append(FailureReason.TOO_SHORT)
    elif len(text) >= max_length:
        failures.append(FailureReason.TOO_LONG)
    return failures
