"""Denylist of phrases stripped from strict-policy replies.

Each rule is applied case-insensitively to the whole reply, in order. The
list is data: extend it here without touching the sanitizer.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class PhraseRule:
    pattern: re.Pattern[str]
    replacement: str = ""

    @classmethod
    def of(cls, pattern: str, replacement: str = "") -> "PhraseRule":
        return cls(re.compile(pattern, re.IGNORECASE), replacement)

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


GREETINGS = (
    # Only at line start or right after a bullet glyph, and only as a whole word.
    PhraseRule.of(
        r"(?m)^([ \t]*(?:[•*-][ \t]*)?)(?:hello|hi|hey|dear|greetings)\b(?=[ \t!,.:;]|$)"
        r"(?:[ \t]+[^\s!,.:;•*]+)?[ \t]*[!,.:;]?",
        r"\1",
    ),
)

DEFERRALS = (
    PhraseRule.of(r"discuss with your doctor"),
    PhraseRule.of(r"consult[^\n]*?(?:healthcare provider|doctor|physician)"),
    PhraseRule.of(r"see[^\n]*?doctor"),
    PhraseRule.of(r"talk to[^\n]*?physician"),
    PhraseRule.of(r"medical professional"),
    PhraseRule.of(r"as they can provide"),
    PhraseRule.of(r"personalized advice"),
    PhraseRule.of(r"Some potential areas to discuss"),
)

CONVERSATIONAL = (
    PhraseRule.of(r"I've reviewed your"),
    PhraseRule.of(r"overall,?\s+they look good"),
    PhraseRule.of(r"Here are some observations:"),
    PhraseRule.of(r"Overall, your test results"),
    PhraseRule.of(r"Do you have any"),
    PhraseRule.of(r"questions about"),
    PhraseRule.of(r"concerns you'd like"),
    PhraseRule.of(r"However,"),
    PhraseRule.of(r"Remember,?"),
    PhraseRule.of(r"What[^\n]*?indicates:"),
    PhraseRule.of(r"What[^\n]*?means:"),
    PhraseRule.of(r"Important[^\n]*?notes:"),
)

RISK_LANGUAGE = (
    PhraseRule.of(r"This suggests that"),
    PhraseRule.of(r"This might indicate"),
    PhraseRule.of(r"suggest that you're"),
    PhraseRule.of(r"at risk for"),
    PhraseRule.of(r"may indicate"),
    PhraseRule.of(r"could suggest"),
    PhraseRule.of(r"interpretation"),
    PhraseRule.of(r"diagnosis"),
)

DISEASE_NAMES = (
    PhraseRule.of(r"prediabetes"),
    PhraseRule.of(r"diabetes"),
    PhraseRule.of(r"hypertension"),
    PhraseRule.of(r"anemia"),
    PhraseRule.of(r"insulin resistance"),
    PhraseRule.of(r"impaired[^\n]*?glucose"),
    PhraseRule.of(r"disease"),
    PhraseRule.of(r"condition"),
)

RECOMMENDATIONS = (
    PhraseRule.of(r"it's essential to"),
    PhraseRule.of(r"Maintaining a healthy"),
    PhraseRule.of(r"Monitoring your"),
    PhraseRule.of(r"lifestyle change"),
    PhraseRule.of(r"diet[^\n]*?exercise"),
    PhraseRule.of(r"next steps"),
    PhraseRule.of(r"early intervention"),
    PhraseRule.of(r"opportunity to"),
    PhraseRule.of(r"positive changes"),
    PhraseRule.of(r"your body[^\n]*?processing"),
    PhraseRule.of(r"efficiently"),
)

DEFAULT_PHRASE_RULES: tuple[PhraseRule, ...] = (
    *GREETINGS,
    *DEFERRALS,
    *CONVERSATIONAL,
    *RISK_LANGUAGE,
    *DISEASE_NAMES,
    *RECOMMENDATIONS,
)


def strip_phrases(text: str, rules: tuple[PhraseRule, ...] = DEFAULT_PHRASE_RULES) -> str:
    for rule in rules:
        text = rule.apply(text)
    return text
