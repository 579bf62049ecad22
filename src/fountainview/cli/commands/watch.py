"""CLI command for fountainview watch - re-render a document when it changes."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from watchdog.observers import Observer

from fountainview.api import FountainPreview, PreviewSession
from fountainview.cli.utils.cli_handler import CLIHandler
from fountainview.cli.utils.file_watcher import DocumentChangeHandler, DocumentRenderer
from fountainview.cli.validators import FountainFileValidator
from fountainview.config import get_logger, get_settings

logger = get_logger(__name__)
console = Console()


def watch_command(
    path: Annotated[
        Path,
        typer.Argument(help="Fountain document to watch"),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="HTML file to keep up to date (default: the document name with .html)",
        ),
    ] = None,
    fragment: Annotated[
        bool,
        typer.Option("--fragment", help="Write the bare HTML fragment, not a page"),
    ] = False,
    timeout: Annotated[
        int,
        typer.Option(
            "--timeout",
            "-t",
            help="Maximum watch duration in seconds (0 for unlimited)",
        ),
    ] = 0,
) -> None:
    """Watch a document and re-render its preview whenever it is saved.

    The document is rendered once at start, then again on every change.

    Press Ctrl+C to stop watching.
    """
    handler = CLIHandler(console)

    try:
        doc_path = FountainFileValidator().validate(path)
        out_path = (output or doc_path.with_suffix(".html")).expanduser().resolve()
        settings = get_settings()

        def update_status(status: str, doc: Path, error: str | None = None) -> None:
            timestamp = time.strftime("%H:%M:%S")
            if status == "rendered":
                console.print(f"[{timestamp}] [green]Updated:[/green] {out_path.name}")
            elif status == "skipped":
                console.print(f"[{timestamp}] [dim]Skipped stale render[/dim]")
            elif status == "error":
                safe_error = str(error)[:100] if error else "Unknown error"
                console.print(
                    f"[{timestamp}] [red]Error:[/red] {doc.name} - {safe_error}"
                )

        renderer = DocumentRenderer(
            preview=FountainPreview(settings),
            document=doc_path,
            output=out_path,
            standalone=not fragment,
            session=PreviewSession(),
            callback=update_status,
        )
        event_handler = DocumentChangeHandler(
            renderer, debounce_seconds=settings.watch_debounce_seconds
        )

        table = Table(title="Watch", show_header=False)
        table.add_column("Setting")
        table.add_column("Value")
        table.add_row("Document", str(doc_path))
        table.add_row("Output", str(out_path))
        table.add_row("Timeout", f"{timeout}s" if timeout > 0 else "None")
        console.print(
            Panel(
                table,
                title="[bold cyan]fountainview watch[/bold cyan]",
                border_style="cyan",
            )
        )

        renderer.render()

        observer = Observer()
        observer.schedule(event_handler, str(doc_path.parent), recursive=False)
        observer.start()
        console.print("[dim]Press Ctrl+C to stop[/dim]")

        start_time = time.monotonic()
        try:
            while observer.is_alive():
                time.sleep(0.2)
                if timeout > 0 and (time.monotonic() - start_time) >= timeout:
                    console.print(
                        f"\n[yellow]Watch timeout reached ({timeout}s)[/yellow]"
                    )
                    break
        except KeyboardInterrupt:
            console.print("\n[yellow]Stopping file watch...[/yellow]")
        finally:
            observer.stop()
            observer.join(timeout=5.0)
            event_handler.stop()

        logger.info("Watch stopped", path=str(doc_path))

    except typer.Exit:
        raise
    except Exception as e:
        handler.handle_error(e)
