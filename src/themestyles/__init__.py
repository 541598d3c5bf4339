"""Derive print, editor and custom stylesheets from a theme stylesheet."""

__version__ = "0.1.0"

from themestyles.pipeline import build_css_files, build_preview_css  # noqa: E402

__all__ = ["__version__", "build_css_files", "build_preview_css"]
