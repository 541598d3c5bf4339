"""Lenient parser for the flat CSS subset used by theme stylesheets.

Syntax handled:
    selector-a, selector-b { name: value; name: value; }
    /* block comments (not nested) */

At-rules, nested blocks and braces inside strings or comments are not part
of the grammar.  Text that does not match is dropped; parsing never fails.
"""

from __future__ import annotations

import logging
import re

from themestyles.stylesheet.model import PropertyValue, Rule, Stylesheet

__all__ = [
    "ADDITIONAL_STYLES_BEGIN",
    "ADDITIONAL_STYLES_END",
    "clear_content",
    "extract_additional_styles",
    "parse_properties",
    "parse_selectors",
    "parse_stylesheet",
]

logger = logging.getLogger(__name__)

ADDITIONAL_STYLES_BEGIN = "/* Begin Additional CSS Styles */"
ADDITIONAL_STYLES_END = "/* End Additional CSS Styles */"

# The custom block, markers included.
_ADDITIONAL_RE = re.compile(
    re.escape(ADDITIONAL_STYLES_BEGIN) + r".*" + re.escape(ADDITIONAL_STYLES_END),
    re.DOTALL,
)

# Block comments; a comment containing "/" is left in place.
_COMMENT_RE = re.compile(r"/\*[^/]*\*/")

# Matches a complete rule: selector { declarations }
_RULE_RE = re.compile(
    r"""
    (?P<selector>[^{]+)     # everything before the opening brace
    \s*\{\s*                 # opening brace
    (?P<body>[^}]+)          # declarations, at least one character
    \s*\}                    # closing brace
    """,
    re.VERBOSE,
)


def extract_additional_styles(source: str) -> str:
    """Return the Additional CSS Styles block of *source*, markers included.

    The block is returned verbatim.  An empty string means there is none.
    """
    match = _ADDITIONAL_RE.search(source)
    return match.group(0) if match else ""


def clear_content(source: str) -> str:
    """Remove the Additional CSS Styles block, then every block comment."""
    without_block = _ADDITIONAL_RE.sub("", source, count=1)
    return _COMMENT_RE.sub("", without_block)


def parse_selectors(raw: str) -> list[str]:
    """Split a selector list on commas, trimming each selector.

    Selectors that are empty after trimming are kept.
    """
    return [part.strip() for part in raw.split(",")]


def parse_properties(body: str) -> dict[str, PropertyValue]:
    """Parse the body of a rule block into an ordered property mapping.

    Declarations that do not split into exactly one name and one value are
    skipped.  A repeated name collects its values into a list.
    """
    props: dict[str, PropertyValue] = {}
    for declaration in body.split(";"):
        if not declaration.strip():
            continue
        parts = declaration.split(":")
        if len(parts) != 2:
            logger.debug("Skipping declaration %r", declaration.strip())
            continue
        name, value = parts[0].strip(), parts[1].strip()
        if name in props:
            current = props[name]
            if isinstance(current, list):
                current.append(value)
            else:
                props[name] = [current, value]
        else:
            props[name] = value
    return props


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse CSS text into a Stylesheet with rules in source order.

    The Additional CSS Styles block and comments are excluded.  Rules whose
    declarations are all malformed are still returned with no properties.
    """
    content = clear_content(source)
    rules: list[Rule] = []
    for match in _RULE_RE.finditer(content):
        rules.append(
            Rule(
                selectors=parse_selectors(match.group("selector")),
                properties=parse_properties(match.group("body")),
            )
        )
    logger.debug("Parsed %d rule(s)", len(rules))
    return Stylesheet(rules=rules)
