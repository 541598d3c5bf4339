"""themestyles CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
import sys
from functools import partial

import click

from themestyles import __version__
from themestyles.config import StylesConfig
from themestyles.errors import UnknownTransformError
from themestyles.pipeline import build_css_files, build_preview_css, write_css_files
from themestyles.printer import print_stylesheet
from themestyles.stylesheet import parse_stylesheet
from themestyles.swatch import render_swatch
from themestyles.transforms import TRANSFORMS, apply_transform


def _read_source(path: str, config: StylesConfig) -> str:
    try:
        with open(path, encoding=config.encoding, newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        click.echo(f"Cannot read {path}: {exc}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="themestyles")
@click.option("-v", "--verbose", is_flag=True, help="Log pipeline details to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """themestyles - derive CMS print, editor and custom stylesheets."""
    try:
        config = StylesConfig.from_env()
    except ValueError as exc:
        click.echo(f"Invalid configuration: {exc}", err=True)
        sys.exit(1)
    level = logging.DEBUG if verbose else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


@cli.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
@click.option("--out", "out_dir", default=None, help="Output directory")
@click.pass_obj
def build(config: StylesConfig, stylesheet: str, out_dir: str | None) -> None:
    """Write print.css, editor.css and custom.css derived from STYLESHEET."""
    source = _read_source(stylesheet, config)
    files = build_css_files(source)
    try:
        written = write_css_files(files, out_dir, config)
    except OSError as exc:
        click.echo(f"Cannot write stylesheets: {exc}", err=True)
        sys.exit(1)
    for path in written:
        click.echo(f"Wrote {path}")


@cli.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", default=None, help="Write to FILE instead of stdout")
@click.pass_obj
def preview(config: StylesConfig, stylesheet: str, output: str | None) -> None:
    """Print the editor live-preview stylesheet for STYLESHEET.

    Post and sheet background colors are layered into the body background
    as inline swatch images.
    """
    source = _read_source(stylesheet, config)
    css = build_preview_css(source, partial(render_swatch, size=config.swatch_size))
    if output is None:
        click.echo(css, nl=False)
        return
    try:
        with open(output, "w", encoding=config.encoding, newline="") as fh:
            fh.write(css)
    except OSError as exc:
        click.echo(f"Cannot write {output}: {exc}", err=True)
        sys.exit(1)
    click.echo(f"Wrote {output}")


@cli.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--transform",
    "variant",
    default="identity",
    show_default=True,
    help=f"One of: {', '.join(TRANSFORMS)}",
)
@click.pass_obj
def show(config: StylesConfig, stylesheet: str, variant: str) -> None:
    """Print STYLESHEET after one transform."""
    source = _read_source(stylesheet, config)
    try:
        result = apply_transform(variant, parse_stylesheet(source))
    except UnknownTransformError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)
    click.echo(print_stylesheet(result), nl=False)
