"""CLI command: scopetheme inspect -- display a theme's rules."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from scopetheme.errors import MalformedThemeError
from scopetheme.palette import describe
from scopetheme.theme import load_theme_file


@click.command()
@click.argument("theme", type=click.Path(exists=True, dir_okay=False))
def inspect(theme: str) -> None:
    """Parse a tmTheme file and list its rules in source order."""
    theme_path = Path(theme)

    try:
        definition = load_theme_file(theme_path)
    except MalformedThemeError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Theme: {definition.name or theme_path.stem}")
    click.echo(f"Rules: {len(definition.rules)}")
    if definition.encoding_errors:
        click.echo(f"Encoding errors: {len(definition.encoding_errors)}")
    click.echo()

    for index, rule in enumerate(definition.rules):
        selector = "(default)" if rule.selector is None else rule.selector.source
        parts = [f"  [{index}] {selector}"]
        if rule.name:
            parts.append(f'name="{rule.name}"')
        parts.append(f"fg={describe(rule.foreground)}")
        if rule.background is not None:
            parts.append(f"bg={describe(rule.background)}")
        if rule.font_style:
            parts.append("font=" + ",".join(sorted(f.value for f in rule.font_style)))
        click.echo("  ".join(parts))
