"""CLI command: scopetheme validate -- parse and validate a theme file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from scopetheme.errors import MalformedThemeError
from scopetheme.model.diagnostic import Severity
from scopetheme.theme import load_theme_file
from scopetheme.validation import validate as run_validate


@click.command()
@click.argument("theme", type=click.Path(exists=True, dir_okay=False))
def validate(theme: str) -> None:
    """Parse and validate a tmTheme file.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    theme_path = Path(theme)

    # Parse
    try:
        definition = load_theme_file(theme_path)
    except MalformedThemeError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    # Validate
    diagnostics = list(definition.diagnostics) + run_validate(definition.rules)

    if not diagnostics:
        click.echo(f"OK: {theme_path.name} is valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
