"""Line-by-line Fountain classifier.

One forward pass over the document. Each line is classified from its own text
and the ``ClassifierState`` left behind by the previous line; nothing is ever
re-classified.
"""

from __future__ import annotations

from fountainview.config import get_logger
from fountainview.parser import patterns
from fountainview.parser.models import (
    ClassifiedLine,
    ClassifierOptions,
    ClassifierState,
    LineType,
    SourceLine,
)

logger = get_logger(__name__)


def split_lines(text: str) -> list[SourceLine]:
    """Split text on ``\\n`` into source lines with character offsets.

    A ``\\r`` directly before the newline (or at the very end of the text) is
    treated as part of the line terminator. ``N`` newlines always give
    ``N + 1`` lines.
    """
    lines: list[SourceLine] = []
    offset = 0
    for index, chunk in enumerate(text.split("\n")):
        raw = chunk[:-1] if chunk.endswith("\r") else chunk
        lines.append(
            SourceLine(index=index, raw=raw, start=offset, end=offset + len(raw))
        )
        offset += len(chunk) + 1
    return lines


class FountainClassifier:
    """Classify Fountain lines into structural roles."""

    def __init__(self, options: ClassifierOptions | None = None) -> None:
        """Initialize the classifier.

        Args:
            options: Capability flags; defaults to the static preview rules
        """
        self.options = options or ClassifierOptions.preview()

    def classify(self, text: str) -> list[ClassifiedLine]:
        """Classify every line of ``text``.

        Args:
            text: Raw document text

        Returns:
            One ClassifiedLine per source line, in order
        """
        state = ClassifierState.initial()
        result: list[ClassifiedLine] = []
        for source in split_lines(text):
            line, state = self.classify_line(source, state)
            result.append(line)

        logger.debug(
            "Classified document",
            lines=len(result),
            section_headings=self.options.section_headings,
            adjacent_dual_marker=self.options.adjacent_dual_marker,
        )
        return result

    def classify_line(
        self, source: SourceLine, state: ClassifierState
    ) -> tuple[ClassifiedLine, ClassifierState]:
        """Classify one line given the state left by the previous line.

        Args:
            source: The line to classify
            state: State produced by the previous line

        Returns:
            Tuple of (classified line, state for the next line)
        """
        line_type, level = self._line_type(source, state)
        line = ClassifiedLine(
            source=source,
            type=line_type,
            section_level=level,
            is_dual_marker=(
                line_type is LineType.CHARACTER
                and patterns.has_dual_marker(source.trimmed)
            ),
        )
        return line, state.entering(line_type)

    def _line_type(
        self, source: SourceLine, state: ClassifierState
    ) -> tuple[LineType, int | None]:
        raw = source.raw
        trimmed = source.trimmed

        if not trimmed:
            # Whitespace-only lines keep an open dialogue going
            if raw and state.in_dialogue:
                return LineType.DIALOGUE_CONTINUATION, None
            return LineType.EMPTY, None

        if patterns.is_scene_heading(trimmed):
            return LineType.SCENE_HEADING, None
        if patterns.is_centered(trimmed):
            return LineType.CENTERED, None
        if self.options.section_headings:
            level = patterns.section_level(trimmed)
            if level is not None:
                return LineType.SECTION_HEADING, level
        if patterns.is_transition(trimmed):
            return LineType.TRANSITION, None

        # Scene headings and transitions were ruled out above
        if patterns.is_character_cue(raw):
            if state.after_empty:
                return LineType.CHARACTER, None
            if (
                self.options.adjacent_dual_marker
                and state.in_dialogue
                and patterns.has_dual_marker(trimmed)
            ):
                return LineType.CHARACTER, None

        if state.in_dialogue:
            if patterns.is_parenthetical(trimmed):
                return LineType.PARENTHETICAL, None
            return LineType.DIALOGUE, None

        return LineType.ACTION, None


def classify(
    text: str, options: ClassifierOptions | None = None
) -> list[ClassifiedLine]:
    """Classify ``text`` with a one-off classifier.

    Args:
        text: Raw document text
        options: Capability flags; defaults to the static preview rules

    Returns:
        One ClassifiedLine per source line
    """
    return FountainClassifier(options).classify(text)
