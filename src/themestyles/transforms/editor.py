"""Editor transform: a stylesheet for previewing content inside a WYSIWYG editor.

The editor iframe renders post content directly inside ``body``, so the
theme's page wrappers collapse into ``body`` and page chrome is dropped.
Colors are kept so the preview matches the published page.
"""

from __future__ import annotations

import logging
import re

from themestyles.stylesheet.model import PropertyValue, Rule, Stylesheet
from themestyles.stylesheet.parser import parse_stylesheet
from themestyles.swatch import CachedSwatchRenderer, SwatchRenderer
from themestyles.transforms.base import RuleTransform, copy_properties
from themestyles.transforms.print_css import NON_PRINTING

logger = logging.getLogger(__name__)

_NON_EDITABLE_RE = re.compile("(" + "|".join(NON_PRINTING + (r"\.cleared",)) + ")")
_COLLAPSED_RE = re.compile(r"(\.art-postcontent|#art-main)")
_ARTICLE_RE = re.compile(r"^\.art-article (\w*)")

# Layout properties that break the editor's own scrolling surface.
LAYOUT_PROPERTIES = frozenset({"overflow", "position", "width", "min-width"})

BODY_SELECTOR = "#art-main"
# Layers stacked over the body background, topmost first.
LAYER_SELECTORS = (".art-post", ".art-sheet")

_RGBA_COLOR_RE = re.compile(r"rgba\([\d\s.,]+\)")
_HEX_COLOR_RE = re.compile(r"#[\w\d]+")


def _is_body_selector(selector: str) -> bool:
    return selector == "body" or selector.startswith("body ")


def _prefix_values(value: PropertyValue, prefix: str) -> PropertyValue:
    if isinstance(value, list):
        return [prefix + item for item in value]
    return prefix + value


class EditorTransform(RuleTransform):
    """Collapse page wrappers into ``body`` and drop non-editable elements."""

    def transform_selectors(self, selectors: list[str]) -> list[str]:
        result = []
        for selector in selectors:
            value = _ARTICLE_RE.sub(r"body \1", selector, count=1)
            value = _COLLAPSED_RE.sub("", value, count=1).strip() or "body"
            if _NON_EDITABLE_RE.search(value):
                logger.debug("Dropping selector %r from editor stylesheet", selector)
                continue
            result.append(value)
        return result

    def transform_rule(self, rule: Rule) -> Rule:
        selectors = self.transform_selectors(rule.selectors)
        if any(_is_body_selector(s) for s in selectors):
            properties = copy_properties({
                name: value
                for name, value in rule.properties.items()
                if name not in LAYOUT_PROPERTIES
            })
        else:
            properties = self.transform_properties(rule.properties)
        return Rule(selectors=selectors, properties=properties)

    # --- background composition -------------------------------------------

    @staticmethod
    def background_url(rule: Rule | None, renderer: SwatchRenderer) -> str:
        """Return ``url(...)`` of a swatch for the color of *rule*'s background.

        Only the last ``background`` value is inspected.  Returns an empty
        string when there is no rule, no background or no color literal.
        """
        if rule is None:
            return ""
        values = rule.values("background")
        if not values:
            return ""
        last = values[-1]
        match = _RGBA_COLOR_RE.search(last) or _HEX_COLOR_RE.search(last)
        if match is None:
            return ""
        return f"url({renderer(match.group(0))})"

    def build_multiple_backgrounds(
        self, source: str, renderer: SwatchRenderer | None = None
    ) -> Stylesheet:
        """Parse *source* and fold the post and sheet colors into the body background.

        The flat colors of ``.art-post`` and ``.art-sheet`` become swatch
        image layers stacked on top of every ``#art-main`` background value.
        ``background-attachment`` gains one ``scroll`` per added layer.  The
        parsed stylesheet is returned unchanged when there is no body rule
        or no color to fold in.
        """
        stylesheet = parse_stylesheet(source)
        body = stylesheet.find_by_selector(BODY_SELECTOR)
        if body is None:
            return stylesheet

        cached = CachedSwatchRenderer(renderer)
        urls = [
            url
            for url in (
                self.background_url(stylesheet.find_by_selector(s), cached)
                for s in LAYER_SELECTORS
            )
            if url
        ]
        if not urls:
            return stylesheet

        properties = copy_properties(body.properties)
        if "background" in properties:
            properties["background"] = _prefix_values(
                properties["background"], ", ".join(urls) + ", "
            )
        if "background-attachment" in properties:
            properties["background-attachment"] = _prefix_values(
                properties["background-attachment"], "scroll, " * len(urls)
            )
        logger.debug("Composed %d background layer(s) into %s", len(urls), BODY_SELECTOR)
        index = stylesheet.index_of(body)
        return stylesheet.replace_rule(
            index, Rule(selectors=list(body.selectors), properties=properties)
        )

    def prepare(self, source: str, renderer: SwatchRenderer | None = None) -> Stylesheet:
        return self.build_multiple_backgrounds(source, renderer)
