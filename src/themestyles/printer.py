"""Serialize rules back into CSS text."""

from __future__ import annotations

from themestyles.stylesheet.model import Rule, Stylesheet

# Line terminator expected by the CMS importer.
NEWLINE = "\r\n"


def _rule_lines(rule: Rule) -> list[str]:
    lines = [rule.selector_text, "{"]
    for name in rule.properties:
        for value in rule.values(name):
            lines.append(f"  {name}: {value};")
    lines.append("}" + NEWLINE)
    return lines


def print_stylesheet(stylesheet: Stylesheet | str) -> str:
    """Return CSS text for *stylesheet*.

    Strings pass through unchanged.  Rules without selectors or without
    properties are left out.
    """
    if isinstance(stylesheet, str):
        return stylesheet
    lines: list[str] = []
    for rule in stylesheet:
        if rule.is_empty():
            continue
        lines.extend(_rule_lines(rule))
    return NEWLINE.join(lines)
