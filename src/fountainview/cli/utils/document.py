"""Document input helpers shared by CLI commands."""

from __future__ import annotations

from pathlib import Path

from fountainview.api import FountainPreview
from fountainview.cli.utils.cli_handler import CLIHandler
from fountainview.cli.validators import FountainFileValidator


def load_document(
    preview: FountainPreview, path: Path | None, handler: CLIHandler
) -> tuple[str, str]:
    """Read a document from ``path``, or from stdin when no path is given.

    Args:
        preview: Preview API used to read the file
        path: Document path, or None for stdin
        handler: CLI handler used for stdin access

    Returns:
        Tuple of (document text, title)

    Raises:
        ValidationError: If the path is missing or not a Fountain document
        DocumentReadError: If the file cannot be decoded
    """
    if path is None:
        return handler.read_stdin() or "", "Screenplay"

    doc_path = FountainFileValidator().validate(path)
    return preview.read_document(doc_path), doc_path.stem
