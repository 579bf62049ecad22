"""Data models for Fountain line classification and block assembly."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import overload


class LineType(str, Enum):
    """Structural role of a single screenplay line."""

    SCENE_HEADING = "scene_heading"
    TRANSITION = "transition"
    CENTERED = "centered"
    CHARACTER = "character"
    PARENTHETICAL = "parenthetical"
    DIALOGUE = "dialogue"
    DIALOGUE_CONTINUATION = "dialogue_continuation"
    ACTION = "action"
    SECTION_HEADING = "section_heading"
    EMPTY = "empty"

    @property
    def css_name(self) -> str:
        """Hyphenated name used in ``fountain-<name>`` class names."""
        return self.value.replace("_", "-")

    @property
    def is_dialogue_part(self) -> bool:
        """Whether lines of this type continue a dialogue group."""
        return self in _DIALOGUE_PARTS

    @property
    def is_blank(self) -> bool:
        """Whether lines of this type display as a blank line."""
        return self in (LineType.EMPTY, LineType.DIALOGUE_CONTINUATION)


_DIALOGUE_PARTS = frozenset(
    {LineType.DIALOGUE, LineType.PARENTHETICAL, LineType.DIALOGUE_CONTINUATION}
)


@dataclass(frozen=True)
class SourceLine:
    """One line of input text.

    ``start`` and ``end`` are character offsets into the source, ``end``
    exclusive; the line terminator is not part of ``raw``.
    """

    index: int
    raw: str
    start: int
    end: int

    @property
    def trimmed(self) -> str:
        return self.raw.strip()


@dataclass(frozen=True)
class ClassifiedLine:
    """A source line together with its classified role."""

    source: SourceLine
    type: LineType
    section_level: int | None = None
    is_dual_marker: bool = False

    @property
    def index(self) -> int:
        return self.source.index

    @property
    def raw(self) -> str:
        return self.source.raw

    @property
    def text(self) -> str:
        """Trimmed text of the line."""
        return self.source.trimmed

    @property
    def css_class(self) -> str:
        """Class name for painting this line, e.g. ``fountain-scene-heading``."""
        if self.type is LineType.SECTION_HEADING and self.section_level:
            return f"fountain-section-heading-{self.section_level}"
        return f"fountain-{self.type.css_name}"


@dataclass(frozen=True)
class ClassifierOptions:
    """Capability flags shared by every classification context."""

    section_headings: bool = True
    adjacent_dual_marker: bool = True

    @classmethod
    def preview(cls) -> ClassifierOptions:
        """Whole-document static preview rules."""
        return cls(section_headings=True, adjacent_dual_marker=True)

    @classmethod
    def editor(cls) -> ClassifierOptions:
        """Live editor decoration rules."""
        return cls(section_headings=False, adjacent_dual_marker=False)


@dataclass(frozen=True)
class ClassifierState:
    """What the preceding line implies for classifying the next one.

    At most one of the three dialogue-context flags is set at a time.
    """

    after_character: bool = False
    after_parenthetical: bool = False
    after_dialogue: bool = False
    after_empty: bool = False

    @classmethod
    def initial(cls) -> ClassifierState:
        """State at document start, which counts as following a blank line."""
        return cls(after_empty=True)

    @property
    def in_dialogue(self) -> bool:
        return self.after_character or self.after_parenthetical or self.after_dialogue

    def after_blank(self) -> ClassifierState:
        """State after a line that breaks dialogue and enables character cues."""
        return ClassifierState(after_empty=True)

    def cleared(self) -> ClassifierState:
        """State after a non-blank line outside of dialogue."""
        return ClassifierState()

    def entering(self, line_type: LineType) -> ClassifierState:
        """State after a line of ``line_type`` has been classified."""
        if line_type is LineType.CHARACTER:
            return ClassifierState(after_character=True)
        if line_type is LineType.PARENTHETICAL:
            return ClassifierState(after_parenthetical=True)
        if line_type is LineType.DIALOGUE:
            return ClassifierState(after_dialogue=True)
        if line_type is LineType.DIALOGUE_CONTINUATION:
            return self
        if line_type is LineType.EMPTY:
            return self.after_blank()
        return self.cleared()


@dataclass(frozen=True)
class SingleLine:
    """Render node for a line that is not part of a dual dialogue block."""

    line: ClassifiedLine

    @property
    def start_line(self) -> int:
        return self.line.index

    @property
    def lines(self) -> tuple[ClassifiedLine, ...]:
        return (self.line,)


@dataclass(frozen=True)
class DualDialogueBlock:
    """Two dialogue groups displayed side by side.

    ``gap_lines`` holds the blank lines between the left and right groups;
    they belong to the block but are not painted in either column.
    """

    left_lines: tuple[ClassifiedLine, ...]
    right_lines: tuple[ClassifiedLine, ...]
    gap_lines: tuple[ClassifiedLine, ...] = ()

    @property
    def lines(self) -> tuple[ClassifiedLine, ...]:
        """Every line of the block in source order."""
        return self.left_lines + self.gap_lines + self.right_lines

    @property
    def start_line(self) -> int:
        return self.left_lines[0].index

    @property
    def end_line(self) -> int:
        """Index one past the last right-hand line."""
        return self.right_lines[-1].index + 1

    @property
    def start_offset(self) -> int:
        return self.left_lines[0].source.start

    @property
    def end_offset(self) -> int:
        return self.right_lines[-1].source.end


RenderNode = SingleLine | DualDialogueBlock


@dataclass(frozen=True)
class RenderTree(Sequence[RenderNode]):
    """Ordered render nodes covering a classified document exactly once."""

    nodes: tuple[RenderNode, ...]
    lines: tuple[ClassifiedLine, ...]
    consumed: frozenset[int] = field(default_factory=frozenset)

    @overload
    def __getitem__(self, index: int) -> RenderNode: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[RenderNode, ...]: ...

    def __getitem__(self, index: int | slice) -> RenderNode | tuple[RenderNode, ...]:
        return self.nodes[index]

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[RenderNode]:
        return iter(self.nodes)

    @property
    def blocks(self) -> list[DualDialogueBlock]:
        return [node for node in self.nodes if isinstance(node, DualDialogueBlock)]

    def is_consumed(self, line: ClassifiedLine | int) -> bool:
        """Whether a line (or line index) was folded into a dual block."""
        index = line if isinstance(line, int) else line.index
        return index in self.consumed
