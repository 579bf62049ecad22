"""Main CLI entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from fountainview import __version__
from fountainview.cli.commands import (
    classify_command,
    css_app,
    export_command,
    render_command,
    watch_command,
)
from fountainview.cli.formatters.json_formatter import JsonFormatter
from fountainview.cli.utils.cli_handler import CLIHandler
from fountainview.cli.validators import ConfigFileValidator
from fountainview.config import (
    configure_logging,
    get_logger,
    get_settings_for_cli,
    set_settings,
)

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="fountainview",
    help="Classify and preview Fountain screenplays",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="classify")(classify_command)
app.command(name="render")(render_command)
app.command(name="export")(export_command)
app.command(name="watch")(watch_command)

app.add_typer(css_app, name="css")


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show fountainview version."""
    version_info = {
        "name": "fountainview",
        "version": __version__,
        "description": "Classify and preview Fountain screenplays",
    }

    if json_output:
        print(JsonFormatter().format(version_info))
    else:
        console.print(f"fountainview v{version_info['version']}")


@app.callback()
def main_callback(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
            envvar="FOUNTAINVIEW_CONFIG",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug", help="Enable debug logging", envvar="FOUNTAINVIEW_DEBUG"
        ),
    ] = False,
) -> None:
    """Configure global options."""
    overrides: dict[str, Any] = {}
    if debug:
        overrides = {"log_level": "DEBUG", "debug": True}
    elif verbose:
        overrides = {"log_level": "INFO"}

    if config is None and not overrides:
        return

    config_path: Path | None = None
    try:
        if config:
            config_path = ConfigFileValidator().validate(config)
        settings = get_settings_for_cli(config_path, overrides)
        set_settings(settings)
        configure_logging(settings)
    except Exception as e:
        CLIHandler(console).handle_error(e)

    if config_path:
        logger.debug("Loaded configuration", config_file=str(config_path))
    if debug:
        logger.debug("Debug mode enabled")
    elif verbose:
        logger.info("Verbose mode enabled")


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
