"""Regular expressions and predicates for Fountain line recognition.

Every predicate except ``is_character_cue`` takes the trimmed line text.
Character cues are matched against the raw line so indented cues are allowed.
"""

from __future__ import annotations

import re

SCENE_HEADING_PATTERN = re.compile(
    r"^(?:(?:INT|EXT|EST|INT/EXT|I/E|I/X)\..*|\.[^.].*)$",
    re.IGNORECASE,
)

TRANSITION_PATTERN = re.compile(
    r"^(?:[A-Z\s]+TO:|FADE TO BLACK\.|FADE OUT\.|CUT TO BLACK\.|>.*[^<])$"
)

CENTERED_PATTERN = re.compile(r"^>.*<$")

SECTION_HEADING_PATTERN = re.compile(r"^(#{1,6})\s")

# Leading indentation is covered by the \s in the name class
CHARACTER_PATTERN = re.compile(r"^[A-Z0-9\s]+(?: \([^)]+\))?\s*\^?$")

PARENTHETICAL_PATTERN = re.compile(r"^\([^)]+\)$")

DUAL_MARKER = "^"

MAX_SECTION_LEVEL = 3

_CENTERED_MARKERS = re.compile(r"^>\s*|\s*<$")
_TRANSITION_MARKER = re.compile(r"^>\s*")
_SECTION_MARKER = re.compile(r"^#+\s*")
_TRAILING_DUAL_MARKER = re.compile(r"\s*\^\s*$")


def is_scene_heading(trimmed: str) -> bool:
    """Scene heading prefix (``INT.``, ``EXT.`` …) or forced ``.HEADING``."""
    return SCENE_HEADING_PATTERN.match(trimmed) is not None


def is_transition(trimmed: str) -> bool:
    return TRANSITION_PATTERN.match(trimmed) is not None


def is_centered(trimmed: str) -> bool:
    return CENTERED_PATTERN.match(trimmed) is not None


def section_level(trimmed: str) -> int | None:
    """Return the display level (1..3) of a ``#`` section heading, else None."""
    match = SECTION_HEADING_PATTERN.match(trimmed)
    if match is None:
        return None
    return min(len(match.group(1)), MAX_SECTION_LEVEL)


def is_character_cue(raw: str) -> bool:
    """Uppercase cue with optional extension and dual marker.

    Scene headings and transitions also look like cues, so callers must
    rule those out first.
    """
    return CHARACTER_PATTERN.match(raw) is not None


def is_parenthetical(trimmed: str) -> bool:
    return PARENTHETICAL_PATTERN.match(trimmed) is not None


def has_dual_marker(trimmed: str) -> bool:
    return trimmed.endswith(DUAL_MARKER)


def strip_centered_markers(trimmed: str) -> str:
    return _CENTERED_MARKERS.sub("", trimmed)


def strip_transition_marker(trimmed: str) -> str:
    return _TRANSITION_MARKER.sub("", trimmed)


def strip_section_marker(trimmed: str) -> str:
    return _SECTION_MARKER.sub("", trimmed)


def strip_dual_marker(trimmed: str) -> str:
    return _TRAILING_DUAL_MARKER.sub("", trimmed)
