"""Custom exception hierarchy for fountainview with helpful error messages."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class FountainViewError(Exception):
    """Base exception with helpful formatting for all fountainview errors.

    Provides structured error messages with hints and details to help users
    understand and fix problems.
    """

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize exception with structured error information.

        Args:
            message: Primary error message describing what went wrong
            hint: Optional hint suggesting how to fix the problem
            details: Optional dictionary with additional debugging information
        """
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Format the error message with hint and details.

        Returns:
            Formatted error string with all available information
        """
        output = f"Error: {self.message}"
        if self.hint:
            output += f"\nHint: {self.hint}"
        if self.details:
            details_str = "\n".join(
                f"  {key}: {value}" for key, value in self.details.items()
            )
            output += f"\nDetails:\n{details_str}"
        return output


class ConfigurationError(FountainViewError):
    """Configuration errors including invalid settings and bad config files."""

    pass


class DocumentNotFoundError(FountainViewError):
    """No document is loaded, or the document path does not exist."""

    pass


class DocumentReadError(FountainViewError):
    """A document exists but could not be read or decoded."""

    pass


class ExportError(FountainViewError):
    """Writing a rendered or exported document failed."""

    pass


def check_document_path(path: Any) -> Path:
    """Check that a document path points at a readable file.

    Args:
        path: Candidate document path (may be None when nothing is loaded)

    Returns:
        The path as a ``Path``

    Raises:
        DocumentNotFoundError: With hints about what to open instead
    """
    if not path:
        raise DocumentNotFoundError(
            message="No file loaded",
            hint="Open a .fountain file, then refresh the preview",
        )

    doc_path = Path(path)
    if not doc_path.exists():
        hints = []
        if doc_path.suffix.lower() not in {".fountain", ".md", ".txt"}:
            hints.append("Fountain documents usually end in .fountain")
        hints.append("Check the path and try again")
        raise DocumentNotFoundError(
            message=f"Document not found: {doc_path}",
            hint=". ".join(hints),
            details={
                "searched_path": str(doc_path),
                "current_dir": str(Path.cwd()),
            },
        )
    if not doc_path.is_file():
        raise DocumentNotFoundError(
            message=f"Document path is not a file: {doc_path}",
            hint="Pass the path of a single .fountain file",
            details={"searched_path": str(doc_path)},
        )
    return doc_path


def check_config_keys(config: dict[str, Any]) -> None:
    """Check for common configuration mistakes.

    Args:
        config: Configuration dictionary to validate

    Raises:
        ConfigurationError: With hints about correct configuration keys
    """
    wrong_keys = {
        "css": "stylesheet_path",
        "custom_css": "stylesheet_path",
        "paper_size": "export_paper_size",
        "margins": "export_margins",
        "page_numbers": "export_page_numbers",
        "section_headings": "preview_section_headings",
    }

    for wrong, correct in wrong_keys.items():
        if wrong in config:
            raise ConfigurationError(
                message=f"Invalid configuration key '{wrong}'",
                hint=f"Use '{correct}' instead of '{wrong}'",
                details={
                    "found_keys": list(config.keys()),
                    "invalid_key": wrong,
                    "correct_key": correct,
                },
            )
