"""Render a Fountain document as preview HTML."""

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


def render_command(
    path: Annotated[
        Path | None,
        typer.Argument(help="Fountain document to render (default: stdin)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write HTML to this file"),
    ] = None,
    standalone: Annotated[
        bool,
        typer.Option(
            "--standalone",
            "-s",
            help="Wrap the fragment in a full page with the preview stylesheet",
        ),
    ] = False,
    empty_lines: Annotated[
        str | None,
        typer.Option(
            "--empty-lines",
            help="Blank line policy: 'placeholder' or 'omit'",
        ),
    ] = None,
    strip_unpaired_marker: Annotated[
        bool | None,
        typer.Option(
            "--strip-unpaired-marker/--keep-unpaired-marker",
            help="Hide the '^' of character cues that did not pair",
        ),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Render a document as a preview HTML fragment or page.

    Without --output the HTML is written to stdout.

    Examples:
        fountainview render script.fountain
        fountainview render script.fountain --standalone -o script.html
        fountainview render script.fountain --empty-lines omit
    """
    handler = CLIHandler(console)

    try:
        settings = get_settings_for_cli(
            cli_overrides={
                "empty_line_policy": empty_lines,
                "strip_unpaired_dual_marker": strip_unpaired_marker,
            }
        )
        preview = FountainPreview(settings)
        text, title = load_document(preview, path, handler)

        if standalone:
            html = preview.render_page(text, title)
        else:
            html = preview.render_html(text)

        if output is None:
            if json_output:
                handler.handle_success("Rendered document", {"html": html}, True)
            else:
                print(html)
            return

        written = handler.write_output(output, html)
        handler.handle_success(
            f"Wrote {written}", {"output": str(written)}, json_output
        )

    except typer.Exit:
        raise
    except Exception as e:
        handler.handle_error(e, json_output)
