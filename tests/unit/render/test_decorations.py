"""Tests for editor decoration rendering."""

from fountainview.parser import ClassifierOptions, LineType, assemble, classify
from fountainview.render import (
    BlockReplacement,
    DecorationRenderer,
    LineDecoration,
    render_decorations,
)


def decorate(text, options=None):
    return render_decorations(assemble(classify(text, options)))


def test_line_classes():
    decorations = decorate("INT. HOUSE\n\nJOHN\n(softly)\nHello.")
    assert decorations.classes_by_line == {
        0: "fountain-scene-heading",
        2: "fountain-character",
        3: "fountain-parenthetical",
        4: "fountain-dialogue",
    }
    assert decorations.replacements == ()


def test_decoration_offsets_match_source():
    text = "INT. HOUSE\nAction here."
    decorations = decorate(text)
    second = decorations.lines[1]
    assert second == LineDecoration(
        line_index=1, start=11, end=23, css_class="fountain-action"
    )
    assert text[second.start : second.end] == "Action here."


def test_empty_lines_get_no_decoration():
    decorations = decorate("A.\n\n\nB.")
    assert [deco.line_index for deco in decorations.lines] == [0, 3]


def test_continuation_painted_as_dialogue():
    decorations = decorate("\nJOHN\nHello.\n  \nStill me.")
    assert decorations.classes_by_line[3] == "fountain-dialogue"


def test_section_heading_class_uses_level():
    decorations = decorate("### Beat", ClassifierOptions.preview())
    assert decorations.classes_by_line == {0: "fountain-section-heading-3"}


def test_dual_block_becomes_replacement():
    text = "\nJOHN\nHi!\n\nJANE^\nHey!"
    decorations = decorate(text)

    assert decorations.classes_by_line == {}
    assert decorations.replacements == (
        BlockReplacement(
            start_line=1,
            end_line=6,
            start_offset=1,
            end_offset=len(text),
            left=((LineType.CHARACTER, "JOHN"), (LineType.DIALOGUE, "Hi!")),
            right=((LineType.CHARACTER, "JANE"), (LineType.DIALOGUE, "Hey!")),
        ),
    )


def test_lines_around_block_are_still_decorated():
    decorations = decorate("INT. A\n\nJOHN\nHi!\n\nJANE^\nHey!\n\nThey go.")
    assert decorations.classes_by_line == {
        0: "fountain-scene-heading",
        8: "fountain-action",
    }
    assert len(decorations.replacements) == 1


def test_renderer_instance_matches_helper():
    tree = assemble(classify("INT. A\nAction."))
    assert DecorationRenderer().render(tree) == render_decorations(tree)
