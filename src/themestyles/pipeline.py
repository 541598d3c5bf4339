"""Build the derived stylesheets from one theme stylesheet."""

from __future__ import annotations

import logging
from pathlib import Path

from themestyles.config import StylesConfig
from themestyles.printer import print_stylesheet
from themestyles.stylesheet import extract_additional_styles, parse_stylesheet
from themestyles.swatch import SwatchRenderer
from themestyles.transforms import EditorTransform, PrintTransform

logger = logging.getLogger(__name__)

PRINT_CSS = "print.css"
EDITOR_CSS = "editor.css"
CUSTOM_CSS = "custom.css"


def build_css_files(source: str) -> dict[str, str]:
    """Return the print, editor and custom stylesheets derived from *source*.

    Keys are the file names the CMS package expects.
    """
    stylesheet = parse_stylesheet(source)
    files = {
        PRINT_CSS: print_stylesheet(PrintTransform().transform(stylesheet)),
        EDITOR_CSS: print_stylesheet(EditorTransform().transform(stylesheet)),
        CUSTOM_CSS: print_stylesheet(extract_additional_styles(source)),
    }
    logger.debug(
        "Built %s from %d rule(s)", ", ".join(files), len(stylesheet)
    )
    return files


def build_preview_css(source: str, renderer: SwatchRenderer | None = None) -> str:
    """Return the editor stylesheet with post and sheet colors layered into body."""
    editor = EditorTransform()
    composed = editor.build_multiple_backgrounds(source, renderer)
    return print_stylesheet(editor.transform(composed))


def write_css_files(
    files: dict[str, str], out_dir: str | Path | None = None, config: StylesConfig | None = None
) -> list[Path]:
    """Write each stylesheet verbatim under *out_dir* and return the paths."""
    config = config or StylesConfig()
    target = Path(out_dir if out_dir is not None else config.out_dir)
    target.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for name, content in files.items():
        path = target / name
        with open(path, "w", encoding=config.encoding, newline="") as fh:
            fh.write(content)
        logger.debug("Wrote %s (%d chars)", path, len(content))
        written.append(path)
    return written
