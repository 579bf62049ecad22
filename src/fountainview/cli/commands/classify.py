"""Classify a Fountain document line by line."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from fountainview.api import FountainPreview
from fountainview.cli.formatters import LineTableFormatter, OutputFormat
from fountainview.cli.utils.cli_handler import CLIHandler
from fountainview.cli.utils.document import load_document
from fountainview.cli.validators.base import Validator

console = Console()


class _TargetValidator(Validator[str]):
    def validate(self, value: str) -> str:
        return self.validate_choice(value, ["preview", "editor"], "target")


def classify_command(
    path: Annotated[
        Path | None,
        typer.Argument(help="Fountain document to classify (default: stdin)"),
    ] = None,
    target: Annotated[
        str,
        typer.Option(
            "--target",
            "-t",
            help="Classifier options to use: 'preview' or 'editor'",
        ),
    ] = "preview",
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show the structural type of every line in a document.

    Dual dialogue blocks are marked in the Dual column with the side each
    line belongs to.

    Examples:
        fountainview classify script.fountain
        fountainview classify script.fountain --target editor
        cat script.fountain | fountainview classify --json
    """
    handler = CLIHandler(console)

    try:
        target = _TargetValidator().validate(target)
        preview = FountainPreview()
        text, title = load_document(preview, path, handler)
        tree = preview.build_tree(text, target)

        formatter = LineTableFormatter(console)
        if json_output:
            print(formatter.format(tree, OutputFormat.JSON))
            return

        console.print(formatter.build_table(tree, title=title))
        blocks = len(tree.blocks)
        console.print(
            f"\n[green]{len(tree.lines)} line{'s' if len(tree.lines) != 1 else ''}, "
            f"{blocks} dual dialogue block{'s' if blocks != 1 else ''}[/green]"
        )

    except typer.Exit:
        raise
    except Exception as e:
        handler.handle_error(e, json_output)
