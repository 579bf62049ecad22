"""Group classified lines into a render tree with dual dialogue blocks.

A dual block is anchored on a character cue ending in ``^`` (the right-hand
speaker). Its right group is collected forward from the cue; its left group
is found by walking backward over the preceding dialogue to the previous
character cue. When no left group exists the cue stays an ordinary line.
"""

from __future__ import annotations

from collections.abc import Sequence

from fountainview.config import get_logger
from fountainview.parser.models import (
    ClassifiedLine,
    DualDialogueBlock,
    LineType,
    RenderNode,
    RenderTree,
    SingleLine,
)

logger = get_logger(__name__)

_CONTINUES_AFTER_BLANK = frozenset({LineType.DIALOGUE, LineType.PARENTHETICAL})


class BlockAssembler:
    """Detect dual dialogue pairs and build a render tree."""

    def assemble(self, lines: Sequence[ClassifiedLine]) -> RenderTree:
        """Build the render tree for a classified document.

        Args:
            lines: Classifier output, in source order

        Returns:
            RenderTree covering every line exactly once
        """
        lines = tuple(lines)
        nodes: list[RenderNode] = []
        consumed: set[int] = set()

        position = 0
        while position < len(lines):
            line = lines[position]
            block = None
            if line.is_dual_marker and line.index not in consumed:
                block = self._pair(lines, position, consumed)

            if block is None:
                nodes.append(SingleLine(line))
                position += 1
                continue

            # Everything from the left cue up to the marker was already
            # emitted as single lines; the block takes their place.
            while nodes and nodes[-1].start_line >= block.start_line:
                nodes.pop()
            nodes.append(block)
            consumed.update(member.index for member in block.lines)
            position += len(block.right_lines)

        logger.debug(
            "Assembled render tree",
            lines=len(lines),
            nodes=len(nodes),
            dual_blocks=sum(isinstance(node, DualDialogueBlock) for node in nodes),
        )
        return RenderTree(
            nodes=tuple(nodes), lines=lines, consumed=frozenset(consumed)
        )

    def _pair(
        self,
        lines: tuple[ClassifiedLine, ...],
        marker: int,
        consumed: set[int],
    ) -> DualDialogueBlock | None:
        """Try to build a dual block around the marker at ``marker``."""
        found = self._left_group(lines, marker, consumed)
        if found is None:
            logger.debug("Dual dialogue marker has no partner", line=marker)
            return None

        left_start, gap_start = found
        right_end = self._right_group_end(lines, marker)
        return DualDialogueBlock(
            left_lines=lines[left_start:gap_start],
            gap_lines=lines[gap_start:marker],
            right_lines=lines[marker:right_end],
        )

    def _right_group_end(self, lines: tuple[ClassifiedLine, ...], marker: int) -> int:
        """Return the index one past the right group starting at ``marker``."""
        end = marker + 1
        while end < len(lines):
            line_type = lines[end].type
            if line_type.is_dialogue_part:
                end += 1
            elif (
                line_type is LineType.EMPTY
                and end + 1 < len(lines)
                and lines[end + 1].type in _CONTINUES_AFTER_BLANK
            ):
                end += 2
            else:
                break
        return end

    def _left_group(
        self,
        lines: tuple[ClassifiedLine, ...],
        marker: int,
        consumed: set[int],
    ) -> tuple[int, int] | None:
        """Find the left group ending before ``marker``.

        Returns:
            Tuple of (left group start, gap start), or None when the lines
            before the marker do not end in a complete dialogue group
        """
        cursor = marker - 1
        while cursor >= 0 and lines[cursor].type is LineType.EMPTY:
            cursor -= 1
        gap_start = cursor + 1

        while cursor >= 0:
            line = lines[cursor]
            if line.index in consumed:
                return None
            if line.type is LineType.CHARACTER:
                if line.is_dual_marker:
                    return None
                return cursor, gap_start
            if not (line.type.is_dialogue_part or line.type is LineType.EMPTY):
                return None
            cursor -= 1
        return None


def assemble(lines: Sequence[ClassifiedLine]) -> RenderTree:
    """Build a render tree with a one-off assembler.

    Args:
        lines: Classifier output, in source order

    Returns:
        RenderTree covering every line exactly once
    """
    return BlockAssembler().assemble(lines)
