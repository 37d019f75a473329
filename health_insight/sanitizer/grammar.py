"""Line grammar shared by the structural filter, the parser and the formatter.

    header    := ICON "**" label "**" ...  |  "**" label "**" ":"?
    bullet    := ("•" | "-" | "*") ...
    parameter := GLYPH "**" name "**" ":" value "-" CLASSIFICATION
"""

import re

from health_insight.sanitizer.models import Classification, Parameter

SECTION_ICONS = ("📊", "🧬", "🧠", "❤️", "❤", "💉", "🩺")
CANONICAL_SECTION_ICON = "📊"
CANONICAL_BULLET = "•"

_ICON_ALT = "|".join(re.escape(icon) for icon in SECTION_ICONS)
_CLASSIFICATION_ALT = "|".join(c.value for c in Classification)

# An icon marks a header whatever follows the label; a bare bold label must fill the line.
ICON_HEADER_RE = re.compile(rf"^(?:{_ICON_ALT})\s*\*\*(?P<label>[^*]+?)\*\*")
BOLD_HEADER_RE = re.compile(r"^\*\*(?P<label>[^*]+?)\*\*\s*:?\s*$")
BULLET_RE = re.compile(r"^(?:•|[-*](?=\s))\s*\S")
PARAMETER_RE = re.compile(
    r"^(?:•|[-*])\s*\*\*(?P<name>[^*]+?)\*\*\s*:\s*(?P<value>.+?)\s*-\s*"
    rf"(?P<classification>{_CLASSIFICATION_ALT})\b",
    re.IGNORECASE,
)
CLASSIFICATION_RE = re.compile(rf"\b(?:{_CLASSIFICATION_ALT})\b", re.IGNORECASE)


def header_label(line: str) -> str | None:
    """Return the section label if ``line`` is a section header."""
    stripped = line.strip()
    match = ICON_HEADER_RE.match(stripped) or BOLD_HEADER_RE.match(stripped)
    return match.group("label").strip() if match else None


def is_bullet(line: str) -> bool:
    return BULLET_RE.match(line.strip()) is not None


def is_structural(line: str) -> bool:
    """Blank, header or bullet: the only line shapes a strict reply may keep."""
    stripped = line.strip()
    return not stripped or header_label(stripped) is not None or is_bullet(stripped)


def parse_parameter(line: str, section: str) -> Parameter | None:
    match = PARAMETER_RE.match(line.strip())
    if match is None:
        return None
    return Parameter(
        section=section,
        name=match.group("name").strip(),
        value=match.group("value").strip(),
        classification=Classification(match.group("classification").upper()),
    )


def format_header(section: str) -> str:
    return f"{CANONICAL_SECTION_ICON} **{section}**"


def format_parameter(parameter: Parameter) -> str:
    return (
        f"{CANONICAL_BULLET} **{parameter.name}**: {parameter.value} - "
        f"{parameter.classification.value}"
    )
