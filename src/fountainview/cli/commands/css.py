"""Custom stylesheet commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from fountainview.api import FountainPreview
from fountainview.cli.utils.cli_handler import CLIHandler, cli_command
from fountainview.cli.validators import FileValidator
from fountainview.config import get_settings
from fountainview.config.stylesheet_store import StylesheetStore

console = Console()

css_app = typer.Typer(
    name="css",
    help="Manage the custom stylesheet",
    pretty_exceptions_enable=False,
)


def _store() -> StylesheetStore:
    return StylesheetStore(get_settings().stylesheet_path)


@css_app.command(name="show")
@cli_command
def css_show(
    full: Annotated[
        bool,
        typer.Option(
            "--full",
            help="Show the built-in preview stylesheet followed by the custom one",
        ),
    ] = False,
) -> None:
    """Print the custom stylesheet."""
    if full:
        print(FountainPreview().stylesheet())
    else:
        print(_store().load())


@css_app.command(name="path")
def css_path() -> None:
    """Print where the custom stylesheet is stored."""
    print(_store().path)


@css_app.command(name="set")
@cli_command
def css_set(
    source: Annotated[
        Path | None,
        typer.Argument(help="CSS file to use (default: read from stdin)"),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Replace the custom stylesheet.

    Examples:
        fountainview css set my-styles.css
        cat my-styles.css | fountainview css set
    """
    handler = CLIHandler(console)
    if source is None:
        css = handler.read_stdin() or ""
    else:
        css_file = FileValidator(extensions=[".css"]).validate(source)
        css = css_file.read_text(encoding="utf-8")

    store = _store()
    store.save(css)
    handler.handle_success(
        "Custom stylesheet saved",
        {"path": str(store.path), "size": len(css)},
        json_output,
    )


@css_app.command(name="reset")
@cli_command
def css_reset(
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip the confirmation prompt"),
    ] = False,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Restore the default custom stylesheet."""
    if not yes and not typer.confirm("Replace your custom stylesheet?"):
        console.print("[yellow]Cancelled[/yellow]")
        raise typer.Exit(0)

    store = _store()
    store.reset()
    CLIHandler(console).handle_success(
        "Custom stylesheet reset to defaults",
        {"path": str(store.path)},
        json_output,
    )
