from health_insight.sanitizer.grammar import (
    format_header,
    format_parameter,
    header_label,
    parse_parameter,
)
from health_insight.sanitizer.models import Parameter


def extract_parameters(text: str) -> list[Parameter]:
    """Parse bullet lines into parameters, tagging each with the latest header.

    Parameters before any header get an empty section. Duplicates are kept.
    """
    parameters: list[Parameter] = []
    section = ""
    for line in text.splitlines():
        label = header_label(line)
        if label is not None:
            section = label
            continue
        parameter = parse_parameter(line, section)
        if parameter is not None:
            parameters.append(parameter)
    return parameters


def format_parameters(parameters: list[Parameter]) -> str:
    """Re-emit parameters grouped by section, in first-seen section order."""
    groups: dict[str, list[Parameter]] = {}
    for parameter in parameters:
        groups.setdefault(parameter.section, []).append(parameter)

    blocks: list[str] = []
    for section, members in groups.items():
        lines = [format_header(section)] if section else []
        lines.extend(format_parameter(p) for p in members)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
