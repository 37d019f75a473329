"""Deterministic cleanup of strict-policy model replies.

Processing flow:
1. Strip denylisted phrases (greetings, deferrals, disease names, advice).
2. Keep only blank, section-header and bullet lines; drop everything else.
3. Collapse runs of blank lines and trim the blob.
4. Validate: classification token, bullet line, length bounds.
5. Parse bullet lines into Parameter records, tracking the current section.
6. Re-serialize parameters in the canonical bullet grammar.

A reply that fails validation still yields the cleaned text, never the raw
reply, with ``succeeded=False`` and warnings naming the failed checks.
"""

import re

from health_insight.logging.logger import Log
from health_insight.sanitizer.grammar import is_structural
from health_insight.sanitizer.models import AnalysisOutcome
from health_insight.sanitizer.parser import extract_parameters, format_parameters
from health_insight.sanitizer.rules import DEFAULT_PHRASE_RULES, PhraseRule, strip_phrases
from health_insight.sanitizer.validator import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    validate_output,
)

_BLANK_RUN_RE = re.compile(r"\n{3,}")

NO_PARAMETERS_WARNING = "no parameters matched the bullet grammar; returning cleaned text"


class OutputSanitizer:
    """Cleans, validates and canonicalizes strict-policy replies."""

    def __init__(
        self,
        *,
        rules: tuple[PhraseRule, ...] = DEFAULT_PHRASE_RULES,
        min_length: int = DEFAULT_MIN_LENGTH,
        max_length: int = DEFAULT_MAX_LENGTH,
    ) -> None:
        if min_length >= max_length:
            raise ValueError("min_length must be smaller than max_length")
        self._rules = rules
        self._min_length = min_length
        self._max_length = max_length

    def process(self, raw_reply: str) -> AnalysisOutcome:
        cleaned = self.clean(raw_reply)
        failures = validate_output(
            cleaned, min_length=self._min_length, max_length=self._max_length
        )
        if failures:
            Log.warning(
                "Report output failed validation",
                reasons=",".join(f.value for f in failures),
                chars=len(cleaned),
            )
            return AnalysisOutcome(
                succeeded=False,
                canonical_text=cleaned,
                failure_reasons=failures,
                warnings=[f.value for f in failures],
            )

        parameters = extract_parameters(cleaned)
        if not parameters:
            return AnalysisOutcome(
                succeeded=True,
                canonical_text=cleaned,
                warnings=[NO_PARAMETERS_WARNING],
            )
        Log.info(f"Sanitized report output: {len(parameters)} parameters")
        return AnalysisOutcome(
            succeeded=True,
            canonical_text=format_parameters(parameters),
            parameters=parameters,
        )

    def clean(self, raw_reply: str) -> str:
        """Steps 1-3: phrase stripping, structural filter, whitespace normalization."""
        if not raw_reply:
            return ""
        text = strip_phrases(raw_reply, self._rules)
        kept = [line.strip() for line in text.splitlines() if is_structural(line)]
        text = _BLANK_RUN_RE.sub("\n\n", "\n".join(kept))
        return text.strip()
