"""Unified CLI handler for standardized error handling and output."""

import sys
from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from fountainview.cli.formatters.json_formatter import JsonFormatter
from fountainview.cli.validators.base import ValidationError
from fountainview.config import get_logger
from fountainview.exceptions import ExportError, FountainViewError

logger = get_logger(__name__)


class CLIHandler:
    """Unified handler for CLI commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize CLI handler.

        Args:
            console: Rich console for output
        """
        self.console = console or Console()
        self.json_formatter = JsonFormatter()

    def handle_error(
        self, error: Exception, json_output: bool = False, exit_code: int = 1
    ) -> None:
        """Handle and display errors consistently.

        Args:
            error: Exception to handle
            json_output: Whether to output JSON
            exit_code: Exit code to use

        Raises:
            typer.Exit: Always, with ``exit_code``
        """
        logger.error("Command failed", error=str(error), exc_info=error)

        if json_output:
            print(self.json_formatter.format_error_response(error, exit_code))
        elif isinstance(error, ValidationError):
            self.console.print(f"[red]Validation Error: {error}[/red]")
        elif isinstance(error, FountainViewError):
            self.console.print(f"[red]Error: {error.message}[/red]")
            if error.hint:
                self.console.print(f"[yellow]Hint: {error.hint}[/yellow]")
        else:
            self.console.print(f"[red]Error: {error}[/red]")

        raise typer.Exit(exit_code)

    def handle_success(
        self, message: str, data: Any = None, json_output: bool = False
    ) -> None:
        """Handle success responses consistently.

        Args:
            message: Success message
            data: Optional data to include
            json_output: Whether to output JSON
        """
        if json_output:
            print(self.json_formatter.format_success(message, data))
        else:
            self.console.print(f"[green]{message}[/green]")

    def read_stdin(self, required: bool = True) -> str | None:
        """Read content from stdin.

        Args:
            required: Whether stdin content is required

        Returns:
            Content from stdin or None

        Raises:
            typer.Exit: If required and no content available
        """
        if sys.stdin.isatty():
            if required:
                self.console.print(
                    "[red]Error: No input provided. "
                    "Pass a Fountain file or pipe text on stdin[/red]"
                )
                raise typer.Exit(1)
            return None
        return sys.stdin.read()

    def write_output(self, path: Path, content: str) -> Path:
        """Write rendered output to a file.

        Args:
            path: Destination file
            content: Text to write

        Returns:
            The resolved destination path

        Raises:
            ExportError: If the file cannot be written
        """
        path = path.expanduser().resolve()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ExportError(
                message=f"Could not write output file: {path}",
                hint="Check that the directory exists and is writable",
                details={"file": str(path), "error": str(e)},
            ) from e
        logger.info("Wrote output", path=str(path), size=len(content))
        return path


def cli_command(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator for CLI commands with standardized error handling.

    Errors are reported through ``CLIHandler``; a ``json_output`` keyword
    argument selects the JSON error payload.

    Args:
        func: Command function to wrap

    Returns:
        Wrapped function
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        handler = CLIHandler()
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except Exception as e:
            handler.handle_error(e, kwargs.get("json_output", False))

    return wrapper
