from themestyles.stylesheet.parser import (
    clear_content,
    extract_additional_styles,
    parse_stylesheet,
)
from themestyles.stylesheet.model import PropertyValue, Rule, Stylesheet

__all__ = [
    "parse_stylesheet",
    "extract_additional_styles",
    "clear_content",
    "Stylesheet",
    "Rule",
    "PropertyValue",
]
