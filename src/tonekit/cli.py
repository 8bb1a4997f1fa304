"""
tonekit command line.

Commands:
- build: Render a brand as a themed stylesheet
- validate: Check a brand's derived palettes for unmet contrast
- contrast: Measure or repair the contrast between two colors
- color: Show a color in every canonical form
- init: Create a starter brand.yaml
- version: Print the installed version
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    help="Accessible design-token resolution: brands in, themed CSS out.",
    no_args_is_help=True,
)

console = Console()

_THEME_CHOICES = ("all", "light", "dark", "high-contrast-light", "high-contrast-dark")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """tonekit CLI global options."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command("build")
def build_command(
    project_dir: Path = typer.Argument(Path("."), help="brand.yaml or a directory holding one"),
    theme: str = typer.Option(
        "all", "--theme", "-t", help=f"Theme to render: {', '.join(_THEME_CHOICES)}"
    ),
    variables: bool = typer.Option(
        False, "--variables", help="Emit custom properties instead of rules"
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output file path"),
) -> None:
    """Build the theme for a brand and write its CSS."""
    from tonekit.core.enums import ThemeType
    from tonekit.core.errors import BrandError
    from tonekit.theme import (
        build_theme,
        generate_stylesheet,
        generate_theme_css,
        generate_variables,
        load_brand,
    )

    if theme not in _THEME_CHOICES:
        choices = ", ".join(_THEME_CHOICES)
        typer.echo(f"Error: Unknown theme '{theme}'. Use one of: {choices}", err=True)
        raise typer.Exit(1)
    if variables and theme == "all":
        typer.echo("Error: --variables needs a single --theme", err=True)
        raise typer.Exit(1)

    try:
        brand = load_brand(project_dir.resolve(), use_defaults=True)
    except BrandError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    store = build_theme(brand)
    if theme == "all":
        css = generate_stylesheet(store)
    elif variables:
        css = generate_variables(store, ThemeType(theme))
    else:
        css = generate_theme_css(store, ThemeType(theme))

    if output is None:
        typer.echo(css)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(css + "\n", encoding="utf-8")
    typer.echo(f"Wrote {len(store)} theme entries to {output}")


@app.command("validate")
def validate_command(
    project_dir: Path = typer.Argument(Path("."), help="brand.yaml or a directory holding one"),
) -> None:
    """Check every derived palette of a brand for unmet contrast."""
    from tonekit.core.errors import BrandError
    from tonekit.theme import load_brand, validate_brand

    try:
        brand = load_brand(project_dir.resolve(), use_defaults=True)
    except BrandError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    result = validate_brand(brand)
    if result.errors or result.warnings:
        table = Table(title="Contrast issues")
        table.add_column("Level")
        table.add_column("Palette")
        table.add_column("Issue")
        levels = (
            ("[red]error[/red]", result.errors),
            ("[yellow]warning[/yellow]", result.warnings),
        )
        for level, messages in levels:
            for message in messages:
                palette, _, issue = message.partition(": ")
                table.add_row(level, palette, issue)
        console.print(table)

    if not result.is_valid:
        typer.echo(f"Brand is invalid ({len(result.errors)} errors)", err=True)
        raise typer.Exit(1)
    console.print(f"[green]Brand is valid[/green] ({len(result.warnings)} warnings)")


@app.command("contrast")
def contrast_command(
    foreground: str = typer.Argument(..., help="Foreground color"),
    background: str = typer.Argument(..., help="Background color"),
    minimum: float = typer.Option(4.5, "--min", "-m", help="Minimum contrast ratio"),
) -> None:
    """Report the contrast of two colors and the nearest passing foreground."""
    from tonekit.core import Color, ColorError, contrast_ratio, ensure_minimum_contrast

    try:
        fg = Color.parse(foreground)
        bg = Color.parse(background)
    except ColorError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Ratio: {contrast_ratio(fg, bg):.2f}")
    result = ensure_minimum_contrast(fg, bg, minimum)
    if result.color != fg:
        typer.echo(f"Suggested: {result.color.hex} ({result.ratio:.2f})")
    if not result.is_met:
        typer.echo(f"Error: {minimum} is not reachable on {bg.hex}", err=True)
        raise typer.Exit(1)


@app.command("color")
def color_command(
    value: str = typer.Argument(..., help="Hex, rgb(a), hsv(a) or a named color"),
) -> None:
    """Show a color in every canonical form."""
    from tonekit.core import Color, ColorError, relative_luminance

    try:
        color = Color.parse(value)
    except ColorError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    hue, saturation, brightness = color.to_hsv()
    table = Table(show_header=False)
    table.add_column("Form", style="dim")
    table.add_column("Value")
    table.add_row("hex", color.hex)
    table.add_row("rgba", color.to_rgba())
    table.add_row("hsv", f"{hue:.1f}, {saturation:.1f}%, {brightness:.1f}%")
    table.add_row("luminance", f"{relative_luminance(color):.4f}")
    console.print(table)


@app.command("init")
def init_command(
    project_dir: Path = typer.Argument(Path("."), help="Directory to create brand.yaml in"),
    overwrite: bool = typer.Option(False, "--overwrite", help="Overwrite an existing brand.yaml"),
) -> None:
    """Create a starter brand.yaml holding the default seeds."""
    from tonekit.theme import Brand, brand_exists, save_brand

    project_dir = project_dir.resolve()
    if brand_exists(project_dir) and not overwrite:
        typer.echo("brand.yaml already exists. Use --overwrite to replace.")
        raise typer.Exit(1)

    project_dir.mkdir(parents=True, exist_ok=True)
    path = save_brand(Brand(), project_dir)
    typer.echo(f"Created {path}")
    typer.echo("Edit brand.yaml then run: tonekit build")


@app.command("version")
def version_command() -> None:
    """Print the installed tonekit version."""
    from tonekit._version import __version__

    typer.echo(f"tonekit {__version__}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
