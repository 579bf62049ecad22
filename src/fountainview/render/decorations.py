"""Live editor renderer: render tree to decoration instructions.

The editor paints a class on each line and swaps every dual dialogue block
for a two-column widget. This module only describes those instructions; the
editor integration applies them.
"""

from __future__ import annotations

from dataclasses import dataclass

from fountainview.parser.models import (
    ClassifiedLine,
    DualDialogueBlock,
    LineType,
    RenderTree,
)
from fountainview.render.html import display_text


@dataclass(frozen=True)
class LineDecoration:
    """Paint ``css_class`` on the line spanning ``[start, end)``."""

    line_index: int
    start: int
    end: int
    css_class: str


@dataclass(frozen=True)
class BlockReplacement:
    """Replace a source range with a two-column dual dialogue widget."""

    start_line: int
    end_line: int
    start_offset: int
    end_offset: int
    left: tuple[tuple[LineType, str], ...]
    right: tuple[tuple[LineType, str], ...]


@dataclass(frozen=True)
class DecorationSet:
    """All instructions for one render pass, in source order."""

    lines: tuple[LineDecoration, ...] = ()
    replacements: tuple[BlockReplacement, ...] = ()

    @property
    def classes_by_line(self) -> dict[int, str]:
        return {deco.line_index: deco.css_class for deco in self.lines}


class DecorationRenderer:
    """Map a render tree onto editor decorations."""

    def render(self, tree: RenderTree) -> DecorationSet:
        lines: list[LineDecoration] = []
        replacements: list[BlockReplacement] = []
        for node in tree:
            if isinstance(node, DualDialogueBlock):
                replacements.append(self.replacement(node))
                continue
            decoration = self.decorate(node.line)
            if decoration is not None:
                lines.append(decoration)
        return DecorationSet(lines=tuple(lines), replacements=tuple(replacements))

    def decorate(self, line: ClassifiedLine) -> LineDecoration | None:
        """Return the class decoration for a line; blank lines get none."""
        if line.type is LineType.EMPTY:
            return None
        css_class = line.css_class
        if line.type is LineType.DIALOGUE_CONTINUATION:
            css_class = "fountain-dialogue"
        return LineDecoration(
            line_index=line.index,
            start=line.source.start,
            end=line.source.end,
            css_class=css_class,
        )

    def replacement(self, block: DualDialogueBlock) -> BlockReplacement:
        return BlockReplacement(
            start_line=block.start_line,
            end_line=block.end_line,
            start_offset=block.start_offset,
            end_offset=block.end_offset,
            left=tuple((line.type, display_text(line)) for line in block.left_lines),
            right=tuple(
                (line.type, display_text(line, strip_dual_marker=True))
                for line in block.right_lines
            ),
        )


def render_decorations(tree: RenderTree) -> DecorationSet:
    """Render a tree with a one-off ``DecorationRenderer``."""
    return DecorationRenderer().render(tree)
