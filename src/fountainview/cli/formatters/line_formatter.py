"""Formatter for classified lines and their dual dialogue grouping."""

from __future__ import annotations

import json
from typing import Any

from rich.table import Table
from rich.text import Text

from fountainview.cli.formatters.base import OutputFormat, OutputFormatter
from fountainview.parser import RenderTree

TYPE_STYLES = {
    "scene_heading": "bold cyan",
    "transition": "magenta",
    "centered": "magenta",
    "character": "bold yellow",
    "parenthetical": "yellow",
    "dialogue": "green",
    "dialogue_continuation": "dim green",
    "section_heading": "bold blue",
    "empty": "dim",
}


def line_rows(tree: RenderTree) -> list[dict[str, Any]]:
    """Flatten a render tree into one row per source line.

    ``dual`` names the part of a dual dialogue block the line belongs to
    (``left``, ``gap`` or ``right``), or is None outside blocks.
    """
    sides: dict[int, str] = {}
    for block in tree.blocks:
        for side, lines in (
            ("left", block.left_lines),
            ("gap", block.gap_lines),
            ("right", block.right_lines),
        ):
            for line in lines:
                sides[line.index] = side

    return [
        {
            "line": line.index + 1,
            "type": line.type.value,
            "text": line.raw,
            "section_level": line.section_level,
            "dual_marker": line.is_dual_marker,
            "dual": sides.get(line.index),
        }
        for line in tree.lines
    ]


class LineTableFormatter(OutputFormatter[RenderTree]):
    """Format a render tree as a tab-separated line listing or JSON."""

    def format(
        self, data: RenderTree, format_type: OutputFormat = OutputFormat.TABLE
    ) -> str:
        rows = line_rows(data)
        if format_type == OutputFormat.JSON:
            return json.dumps(
                {
                    "lines": rows,
                    "dual_blocks": len(data.blocks),
                },
                indent=2,
            )
        return "\n".join(
            f"{row['line']}\t{row['type']}\t{row['text']}" for row in rows
        )

    def build_table(self, data: RenderTree, title: str | None = None) -> Table:
        """Build a Rich table with one row per line."""
        table = Table(title=title, show_header=True, header_style="bold magenta")
        table.add_column("Line", justify="right", style="dim")
        table.add_column("Type")
        table.add_column("Dual", justify="center")
        table.add_column("Text", no_wrap=False)

        for row in line_rows(data):
            style = TYPE_STYLES.get(row["type"], "")
            line_type = row["type"]
            if row["section_level"]:
                line_type = f"{line_type} ({row['section_level']})"
            table.add_row(
                str(row["line"]),
                f"[{style}]{line_type}[/{style}]" if style else line_type,
                row["dual"] or "",
                Text(row["text"]),
            )
        return table
