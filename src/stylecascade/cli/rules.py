"""CLI command: stylecascade rules -- list applicable rules by specificity."""

from __future__ import annotations

import click

from stylecascade.cascade import get_document_style_rules
from stylecascade.cli.options import build_config, document_options, load_document
from stylecascade.conditions import Environment
from stylecascade.selector import specificity


@click.command()
@document_options
def rules(document: str, css_files: tuple[str, ...], **env_options: object) -> None:
    """List the style rules of DOCUMENT that apply in the given environment.

    Rules are printed most specific first, with their specificity and
    declarations.
    """
    doc = load_document(document, css_files)
    environment = Environment(build_config(**env_options))  # type: ignore[arg-type]
    ordered = get_document_style_rules(doc, environment)

    click.echo(f"Rules: {len(ordered)}")
    for rule in ordered:
        a, b, c = specificity(rule.selector_text)
        declarations = "; ".join(
            f"{d.name}: {d.value}" + (" !important" if d.important else "")
            for d in rule.declarations
        )
        click.echo(f"  ({a},{b},{c})  {rule.selector_text} {{ {declarations} }}")
