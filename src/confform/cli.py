"""
Click-based CLI for confform.

IMPORTANT: This module only ORCHESTRATES. It never parses or renders itself.
- Loads settings
- Invokes actions
- Passes flags
- Formats output
"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape as escape_markup

from confform import __version__
from confform.actions.html_form import HTMLFormAction, read_config
from confform.actions.inspect import REPORTERS, InspectAction
from confform.config import SettingsManager
from confform.exceptions import ConfformError

console = Console()
err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__, prog_name="confform")
@click.option("--settings-dir", "-c", type=click.Path(), help="Path to settings directory")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, settings_dir: str | None, verbose: bool) -> None:
    """confform: Render annotated configuration files as editable HTML forms."""
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = SettingsManager(Path(settings_dir) if settings_dir else None)


def _fail(e: Exception) -> None:
    err_console.print(f"[bold red]Error:[/] {escape_markup(str(e))}")
    sys.exit(1)


@main.command()
@click.argument("config_file", required=False)
@click.option("--output", "-o", default="form.html", help="Output file for the HTML form ('-' for stdout)")
@click.option("--assets", default=None, help="Directory or URL prefix holding form.css and form.js")
@click.option("--escape/--no-escape", default=None, help="HTML-escape values from the configuration file")
@click.pass_context
def render(ctx: click.Context, config_file: str | None, output: str, assets: str | None, escape: bool | None) -> None:
    """Render a configuration file as an editable HTML form.

    The configuration file itself is never modified.
    """
    settings: SettingsManager = ctx.obj["settings"]
    try:
        config_path = settings.resolve_config_path(config_file)
        action = HTMLFormAction(
            assets_path=assets if assets is not None else settings.get("assets_path"),
            escape=escape if escape is not None else settings.get("escape"),
        )

        if output == "-":
            click.echo(action.render_file(config_path))
            return

        written = action.generate(config_path, output)
        console.print(f"[bold green]✓ Form written to:[/] {escape_markup(written)}")
    except ConfformError as e:
        _fail(e)


@main.command()
@click.argument("config_file", required=False)
@click.option("--format", "fmt", type=click.Choice(sorted(REPORTERS)), default="rich", help="Output format")
@click.pass_context
def inspect(ctx: click.Context, config_file: str | None, fmt: str) -> None:
    """Show the sections and settings a form would contain."""
    settings: SettingsManager = ctx.obj["settings"]
    try:
        config_path = settings.resolve_config_path(config_file)
        InspectAction(console, fmt=fmt).run(read_config(config_path))
    except ConfformError as e:
        _fail(e)


@main.group("settings")
def settings_group() -> None:
    """Manage confform settings."""
    pass


@settings_group.command("list")
@click.pass_context
def settings_list(ctx: click.Context) -> None:
    """List all settings with their effective values."""
    settings: SettingsManager = ctx.obj["settings"]
    for key, value in settings.list_settings().items():
        shown = escape_markup(str(value)) if value is not None else "[dim](default)[/]"
        console.print(f"[bold green]{key}[/]: {shown}")


@settings_group.command("get")
@click.argument("key")
@click.pass_context
def settings_get(ctx: click.Context, key: str) -> None:
    """Print one setting."""
    settings: SettingsManager = ctx.obj["settings"]
    try:
        click.echo(settings.get(key))
    except ConfformError as e:
        _fail(e)


@settings_group.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def settings_set(ctx: click.Context, key: str, value: str) -> None:
    """Store a setting."""
    settings: SettingsManager = ctx.obj["settings"]
    try:
        settings.set(key, value)
    except ConfformError as e:
        _fail(e)
    console.print(f"[bold green]✓ Set[/] {key}")


@settings_group.command("unset")
@click.argument("key")
@click.pass_context
def settings_unset(ctx: click.Context, key: str) -> None:
    """Restore a setting to its default."""
    settings: SettingsManager = ctx.obj["settings"]
    try:
        removed = settings.unset(key)
    except ConfformError as e:
        _fail(e)
        return
    if removed:
        console.print(f"[bold green]✓ Removed setting:[/] {key}")
    else:
        console.print(f"[dim]{key} was not set.[/]")


if __name__ == "__main__":
    main()
