"""CLI command: stylecascade resolve -- resolved styles of one element."""

from __future__ import annotations

import json
import sys

import click

from stylecascade.cascade import (
    get_document_style_rules,
    get_element_styles,
    get_pseudo_element_styles,
)
from stylecascade.cli.options import build_config, document_options, load_document
from stylecascade.conditions import Environment
from stylecascade.model.resolved import ResolvedStyleMap


def _echo_style(title: str, style: ResolvedStyleMap | None, indent: str = "") -> None:
    click.echo(f"{indent}{title}:")
    if not style:
        click.echo(f"{indent}  (none)")
        return
    for name in sorted(style):
        marker = "  !important" if style.is_important(name) else ""
        click.echo(f"{indent}  {name}: {style[name]}{marker}")


@click.command()
@document_options
@click.argument("selector")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.option("--strip-all-pseudo", is_flag=True,
              help="Strip every pseudo-element token, not only the last, when matching.")
def resolve(
    document: str,
    selector: str,
    css_files: tuple[str, ...],
    as_json: bool,
    strip_all_pseudo: bool,
    **env_options: object,
) -> None:
    """Print the styles of the first element of DOCUMENT matching SELECTOR.

    Shows the element's own resolved styles followed by the styles of each
    pseudo-element that has any.
    """
    doc = load_document(document, css_files)
    element = doc.query(selector)
    if element is None:
        click.echo(f"No element matches {selector!r}", err=True)
        sys.exit(1)

    environment = Environment(build_config(**env_options))  # type: ignore[arg-type]
    ordered = get_document_style_rules(doc, environment)
    style = get_element_styles(element, ordered)
    pseudo = get_pseudo_element_styles(element, ordered, strip_all=strip_all_pseudo)

    if as_json:
        payload = {
            "element": style.to_dict() if style is not None else None,
            "pseudo_elements": (
                {name: s.to_dict() for name, s in pseudo.items()} if pseudo is not None else None
            ),
        }
        click.echo(json.dumps(payload, indent=2, sort_keys=True))
        return

    _echo_style(selector, style)
    if pseudo is None:
        click.echo("Pseudo-elements: (none)")
        return
    click.echo("Pseudo-elements:")
    for name, pseudo_style in pseudo.items():
        _echo_style(name, pseudo_style, indent="  ")
