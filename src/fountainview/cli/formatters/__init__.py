"""Output formatters for fountainview CLI."""

from __future__ import annotations

from fountainview.cli.formatters.base import OutputFormat, OutputFormatter
from fountainview.cli.formatters.json_formatter import JsonFormatter
from fountainview.cli.formatters.line_formatter import LineTableFormatter, line_rows

__all__ = [
    "JsonFormatter",
    "LineTableFormatter",
    "OutputFormat",
    "OutputFormatter",
    "line_rows",
]
