"""Solid-color swatch images for layered background composition.

An embedded editor surface cannot resolve a theme's relative image URLs, so
flat background colors are turned into small inline PNG images instead.
"""

from __future__ import annotations

import base64
import logging
import re
from io import BytesIO
from typing import Protocol

from PIL import Image, ImageColor

logger = logging.getLogger(__name__)

SWATCH_SIZE = 50
MEDIA_TYPE = "image/png"

# Canvas fill used when a color expression cannot be parsed.
_FALLBACK_FILL = (0, 0, 0, 255)

# CSS rgba() with a fractional alpha, which ImageColor does not accept.
_NUMBER = r"(\d+(?:\.\d+)?|\.\d+)"
_RGBA_RE = re.compile(
    r"^rgba\(\s*" + r"\s*,\s*".join([_NUMBER] * 4) + r"\s*\)$",
    re.IGNORECASE,
)


class SwatchRenderer(Protocol):
    """Turns a CSS color expression into an embeddable image reference."""

    def __call__(self, color: str) -> str: ...


def _channel(raw: str) -> int:
    return max(0, min(255, round(float(raw))))


def parse_color(color: str) -> tuple[int, int, int, int]:
    """Convert a CSS color expression into an RGBA tuple.

    Unparseable expressions fall back to opaque black.
    """
    expression = color.strip()
    match = _RGBA_RE.match(expression)
    if match:
        red, green, blue, alpha = match.groups()
        opacity = max(0.0, min(1.0, float(alpha)))
        return (_channel(red), _channel(green), _channel(blue), round(opacity * 255))
    try:
        rgb = ImageColor.getrgb(expression)
    except ValueError:
        logger.warning("Cannot parse color %r, using black", color)
        return _FALLBACK_FILL
    if len(rgb) == 3:
        return (*rgb, 255)
    return rgb


def make_data_uri(data: bytes, media_type: str = MEDIA_TYPE) -> str:
    """Build a ``data:`` URI from raw bytes and a media type."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{media_type};base64,{encoded}"


def render_swatch(color: str, size: int = SWATCH_SIZE) -> str:
    """Render a *size* x *size* square filled with *color* as a PNG data URI.

    The same color expression always produces the same bytes.
    """
    image = Image.new("RGBA", (size, size), parse_color(color))
    buffer = BytesIO()
    image.save(buffer, format="PNG")
    logger.debug("Rendered %dx%d swatch for %s", size, size, color)
    return make_data_uri(buffer.getvalue())


class CachedSwatchRenderer:
    """Memoizes another renderer by color expression.

    Meant to live for a single composition call.
    """

    def __init__(self, renderer: SwatchRenderer | None = None):
        self._renderer = renderer or render_swatch
        self._cache: dict[str, str] = {}

    def __call__(self, color: str) -> str:
        if color not in self._cache:
            self._cache[color] = self._renderer(color)
        return self._cache[color]

    def __len__(self) -> int:
        return len(self._cache)
