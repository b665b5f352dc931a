"""CLI command: scopetheme resolve -- show the style a theme gives each scope."""

from __future__ import annotations

import sys

import click

from scopetheme.config import RenderConfig
from scopetheme.errors import MalformedThemeError
from scopetheme.palette import describe
from scopetheme.render import paint
from scopetheme.theme import bundled_theme_names, load_bundled_theme, load_theme_file


@click.command()
@click.argument("scopes", nargs=-1, required=True)
@click.option(
    "--theme",
    "theme_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="tmTheme file to use instead of a bundled theme",
)
@click.option(
    "--bundled",
    default="ansi",
    type=click.Choice(bundled_theme_names() + ["auto"]),
    help="Bundled theme name",
)
@click.option("--color/--no-color", default=True, help="Paint the sample text")
@click.option("--true-color", is_flag=True, help="Emit 24-bit escapes for literal colors")
def resolve(
    scopes: tuple[str, ...],
    theme_path: str | None,
    bundled: str,
    color: bool,
    true_color: bool,
) -> None:
    """Resolve each SCOPE and print its style.

    A scope stack can be given as one quoted, space-separated argument,
    outermost scope first.
    """
    try:
        definition = load_theme_file(theme_path) if theme_path else load_bundled_theme(bundled)
        resolver = definition.resolver()
    except MalformedThemeError as exc:
        click.echo(f"Theme error: {exc}", err=True)
        sys.exit(1)

    config = RenderConfig(color=color, true_color=true_color)
    for scope in scopes:
        style = resolver.resolve(scope)
        parts = [paint(scope, style, config)]
        parts.append(f"fg={describe(style.foreground, config.palette)}")
        if style.background is not None:
            parts.append(f"bg={describe(style.background, config.palette)}")
        if style.font_style:
            parts.append("font=" + ",".join(sorted(f.value for f in style.font_style)))
        parts.append(f"rule={style.selector or '(default)'}")
        click.echo("  ".join(parts))
