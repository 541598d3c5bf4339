"""Print transform: a black-and-white stylesheet for printing."""

from __future__ import annotations

import logging
import re

from themestyles.stylesheet.model import PropertyValue
from themestyles.transforms.base import RuleTransform

logger = logging.getLogger(__name__)

# Elements that have no place on paper, plus anything else in the theme namespace.
NON_PRINTING = (
    "slider",
    "arrow",
    "loading",
    "close",
    "cw",
    "ccw",
    "preview-cms-logo",
    "lightbox",
    "reset",
    "art",
)
_NON_PRINTING_RE = re.compile("(" + "|".join(NON_PRINTING) + ")")

# Post content is printed at the top level of the page.
_COLLAPSED_RE = re.compile(r"\.art-postcontent")

_COLOR_PROPERTY_RE = re.compile(r"(border-|color|background-)")


class PrintTransform(RuleTransform):
    """Drop non-printing selectors and every color-bearing property."""

    def transform_selectors(self, selectors: list[str]) -> list[str]:
        result = []
        for selector in selectors:
            collapsed = _COLLAPSED_RE.sub("", selector, count=1).strip()
            if not collapsed or _NON_PRINTING_RE.search(collapsed):
                logger.debug("Dropping selector %r from print stylesheet", selector)
                continue
            result.append(collapsed)
        return result

    def transform_properties(
        self, properties: dict[str, PropertyValue]
    ) -> dict[str, PropertyValue]:
        kept = {
            name: value
            for name, value in properties.items()
            if not _COLOR_PROPERTY_RE.search(name)
        }
        return super().transform_properties(kept)
