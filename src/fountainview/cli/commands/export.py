"""Export a Fountain document as a print-ready HTML document."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from fountainview.api import FountainPreview
from fountainview.cli.utils.cli_handler import CLIHandler
from fountainview.cli.utils.document import load_document
from fountainview.config import get_settings_for_cli

console = Console()


def export_command(
    path: Annotated[
        Path | None,
        typer.Argument(help="Fountain document to export (default: stdin)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file (default: the document name with .html, or stdout)",
        ),
    ] = None,
    paper_size: Annotated[
        str | None,
        typer.Option("--paper", "-p", help="Paper size: 'letter' or 'a4'"),
    ] = None,
    margins: Annotated[
        str | None,
        typer.Option("--margins", "-m", help="Margins: 'normal', 'narrow' or 'tight'"),
    ] = None,
    page_numbers: Annotated[
        bool | None,
        typer.Option(
            "--page-numbers/--no-page-numbers",
            help="Print page numbers in the bottom-right corner",
        ),
    ] = None,
    title: Annotated[
        str | None,
        typer.Option("--title", help="Document title (default: file name)"),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Export a document for printing or saving as PDF.

    The export contains the page setup, the print stylesheet and your custom
    stylesheet. Open it in a browser and print to paper or PDF.

    Examples:
        fountainview export script.fountain
        fountainview export script.fountain --paper a4 --margins narrow
        fountainview export script.fountain --page-numbers -o print.html
    """
    handler = CLIHandler(console)

    try:
        settings = get_settings_for_cli(
            cli_overrides={
                "export_paper_size": paper_size,
                "export_margins": margins,
                "export_page_numbers": page_numbers,
            }
        )
        preview = FountainPreview(settings)
        text, doc_title = load_document(preview, path, handler)
        document = preview.export(text, title=title or doc_title)

        if output is None and path is not None:
            output = path.with_suffix(".html")

        if output is None:
            print(document)
            return

        written = handler.write_output(output, document)
        options = preview.export_options()
        handler.handle_success(
            f"Exported {written}",
            {"output": str(written), "options": options.model_dump(mode="json")},
            json_output,
        )

    except typer.Exit:
        raise
    except Exception as e:
        handler.handle_error(e, json_output)
