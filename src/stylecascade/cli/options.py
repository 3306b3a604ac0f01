"""Options shared by the CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import click

from stylecascade.config import EnvironmentConfig
from stylecascade.parser import Document, ParseError

_ENVIRONMENT_OPTIONS = [
    click.option("--media", "media_type", default="screen", show_default=True,
                 help="Media type conditions are evaluated for."),
    click.option("--width", default=1024.0, type=float, show_default=True,
                 help="Viewport width in CSS px."),
    click.option("--height", default=768.0, type=float, show_default=True,
                 help="Viewport height in CSS px."),
    click.option("--resolution", default=96.0, type=float, show_default=True,
                 help="Device resolution in dpi."),
    click.option("--color-scheme", type=click.Choice(["light", "dark"]), default="light",
                 show_default=True),
    click.option("--reduced-motion", type=click.Choice(["no-preference", "reduce"]),
                 default="no-preference", show_default=True),
    click.option("--css", "css_files", multiple=True, type=click.Path(exists=True, dir_okay=False),
                 help="Extra style sheet appended after the document's own (repeatable)."),
]


def document_options(func: Callable) -> Callable:
    """Attach the DOCUMENT argument and the environment options to *func*."""
    for option in reversed(_ENVIRONMENT_OPTIONS):
        func = option(func)
    return click.argument("document", type=click.Path(exists=True, dir_okay=False))(func)


def build_config(
    media_type: str,
    width: float,
    height: float,
    resolution: float,
    color_scheme: str,
    reduced_motion: str,
) -> EnvironmentConfig:
    return EnvironmentConfig(
        media_type=media_type,
        width=width,
        height=height,
        resolution=resolution,
        color_scheme=color_scheme,
        reduced_motion=reduced_motion,
    )


def load_document(document: str, css_files: tuple[str, ...]) -> Document:
    """Parse *document* plus any extra CSS files, exiting with code 1 on a parse error."""
    extra_css = [Path(path).read_text(encoding="utf-8") for path in css_files]
    try:
        return Document.from_path(document, extra_css=extra_css)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
