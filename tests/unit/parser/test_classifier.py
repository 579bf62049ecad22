"""Tests for the Fountain line classifier."""

import pytest

from fountainview.parser import (
    ClassifierOptions,
    ClassifierState,
    FountainClassifier,
    LineType,
    SourceLine,
    classify,
    split_lines,
)


def types(text, options=None):
    return [line.type for line in classify(text, options)]


class TestSplitLines:
    """Test splitting text into source lines."""

    def test_empty_text_is_one_line(self):
        lines = split_lines("")
        assert len(lines) == 1
        assert lines[0].raw == ""
        assert (lines[0].start, lines[0].end) == (0, 0)

    def test_newline_count_plus_one(self):
        assert len(split_lines("a\nb\n")) == 3
        assert len(split_lines("\n\n\n")) == 4

    def test_offsets_exclude_terminator(self):
        lines = split_lines("INT. HOUSE\nJOHN\nHi.")
        assert [(line.start, line.end) for line in lines] == [
            (0, 10),
            (11, 15),
            (16, 19),
        ]
        assert [line.index for line in lines] == [0, 1, 2]

    def test_carriage_return_belongs_to_terminator(self):
        lines = split_lines("JOHN\r\nHi.\r")
        assert [line.raw for line in lines] == ["JOHN", "Hi."]
        assert lines[0].end == 4
        assert lines[1].start == 6

    def test_lone_carriage_return_inside_line_is_kept(self):
        lines = split_lines("a\rb")
        assert lines[0].raw == "a\rb"


class TestSceneHeadings:
    """Test scene heading recognition."""

    @pytest.mark.parametrize(
        "heading",
        [
            "INT. KITCHEN - DAY",
            "EXT. PARK - NIGHT",
            "EST. CITY SKYLINE",
            "INT/EXT. CAR - MOVING",
            "I/E. DOORWAY",
            "I/X. HALLWAY",
            "int. lowercase still counts",
            ". KITCHEN",
            ".FLASHBACK",
        ],
    )
    def test_scene_headings(self, heading):
        assert types(heading) == [LineType.SCENE_HEADING]

    def test_ellipsis_is_not_forced_heading(self):
        assert types(".. ELLIPSIS") != [LineType.SCENE_HEADING]
        assert types("...and then") == [LineType.ACTION]

    def test_heading_breaks_dialogue(self):
        result = types("\nJOHN\nHello.\nINT. HOUSE - DAY\nMore text.")
        assert result == [
            LineType.EMPTY,
            LineType.CHARACTER,
            LineType.DIALOGUE,
            LineType.SCENE_HEADING,
            LineType.ACTION,
        ]


class TestDialogue:
    """Test character, dialogue and parenthetical classification."""

    def test_character_then_dialogue(self):
        assert types("\nJOHN\nHello there.") == [
            LineType.EMPTY,
            LineType.CHARACTER,
            LineType.DIALOGUE,
        ]

    def test_document_start_counts_as_blank(self):
        assert types("JOHN\nHello.") == [LineType.CHARACTER, LineType.DIALOGUE]

    def test_parenthetical_inside_dialogue(self):
        assert types("\nJOHN\n(quietly)\nHello.\n(beat)\nGoodbye.") == [
            LineType.EMPTY,
            LineType.CHARACTER,
            LineType.PARENTHETICAL,
            LineType.DIALOGUE,
            LineType.PARENTHETICAL,
            LineType.DIALOGUE,
        ]

    def test_parenthetical_outside_dialogue_is_action(self):
        assert types("John walks in.\n(he is tired)") == [
            LineType.ACTION,
            LineType.ACTION,
        ]

    def test_character_requires_preceding_blank(self):
        assert types("John walks in.\nJOHN\nHello.") == [
            LineType.ACTION,
            LineType.ACTION,
            LineType.ACTION,
        ]

    @pytest.mark.parametrize(
        "cue",
        ["MARY (V.O.)", "DR. NO", "R2D2", "  INDENTED", "JANE (CONT'D)"],
    )
    def test_character_cue_forms(self, cue):
        result = classify(f"\n{cue}\nLine.")
        expected = LineType.CHARACTER if cue != "DR. NO" else LineType.ACTION
        assert result[1].type is expected

    def test_dual_marker_flag(self):
        result = classify("\nJANE^\nHey!")
        assert result[1].type is LineType.CHARACTER
        assert result[1].is_dual_marker is True

    def test_dual_marker_with_extension(self):
        result = classify("\nJANE (O.S.) ^\nHey!")
        assert result[1].type is LineType.CHARACTER
        assert result[1].is_dual_marker is True

    def test_plain_character_is_not_dual_marker(self):
        assert classify("\nJOHN\nHi.")[1].is_dual_marker is False

    def test_blank_line_ends_dialogue(self):
        assert types("\nJOHN\nHello.\n\nThe door opens.") == [
            LineType.EMPTY,
            LineType.CHARACTER,
            LineType.DIALOGUE,
            LineType.EMPTY,
            LineType.ACTION,
        ]

    def test_whitespace_line_continues_dialogue(self):
        result = types("\nJOHN\nHello.\n  \nStill me.")
        assert result == [
            LineType.EMPTY,
            LineType.CHARACTER,
            LineType.DIALOGUE,
            LineType.DIALOGUE_CONTINUATION,
            LineType.DIALOGUE,
        ]

    def test_whitespace_line_outside_dialogue_is_empty(self):
        assert types("Action.\n   \nJOHN\nHi.") == [
            LineType.ACTION,
            LineType.EMPTY,
            LineType.CHARACTER,
            LineType.DIALOGUE,
        ]

    def test_continuation_does_not_enable_character_cue(self):
        # The uppercase line is still dialogue: a continuation keeps the
        # dialogue state and does not count as a blank line.
        assert types("\nJOHN\nHello.\n  \nSTOP")[-1] is LineType.DIALOGUE


class TestOtherTypes:
    """Test transitions, centered text and section headings."""

    @pytest.mark.parametrize(
        "transition",
        ["CUT TO:", "SMASH CUT TO:", "FADE TO BLACK.", "FADE OUT.", "CUT TO BLACK."],
    )
    def test_transitions(self, transition):
        assert types(f"Action.\n\n{transition}")[-1] is LineType.TRANSITION

    def test_forced_transition(self):
        assert types("> BURN TO WHITE.") == [LineType.TRANSITION]

    def test_transitions_are_uppercase_only(self):
        assert types("Action.\ncut to:")[-1] is LineType.ACTION

    def test_transition_beats_character_cue(self):
        assert types("\nCUT TO:\nAction.")[1] is LineType.TRANSITION

    def test_centered(self):
        assert types("> THE END <") == [LineType.CENTERED]

    def test_section_heading_levels(self):
        result = classify("# Act\n## Sequence\n### Scene\n#### Beat")
        assert [line.type for line in result] == [LineType.SECTION_HEADING] * 4
        assert [line.section_level for line in result] == [1, 2, 3, 3]
        assert result[0].css_class == "fountain-section-heading-1"

    def test_section_heading_requires_whitespace(self):
        assert types("#hashtag") == [LineType.ACTION]

    def test_section_headings_disabled_for_editor(self):
        result = classify("# Act One", ClassifierOptions.editor())
        assert result[0].type is LineType.ACTION
        assert result[0].section_level is None

    def test_action_clears_dialogue(self):
        assert types("Action.\nMore action.") == [LineType.ACTION, LineType.ACTION]


class TestAdjacentDualMarker:
    """Test dual marker cues that directly follow dialogue."""

    TEXT = "\nJOHN\nHi!\nJANE^\nHey!"

    def test_enabled_for_preview(self):
        result = classify(self.TEXT, ClassifierOptions.preview())
        assert result[3].type is LineType.CHARACTER
        assert result[3].is_dual_marker is True
        assert result[4].type is LineType.DIALOGUE

    def test_disabled_for_editor(self):
        result = classify(self.TEXT, ClassifierOptions.editor())
        assert result[3].type is LineType.DIALOGUE
        assert result[3].is_dual_marker is False

    def test_requires_marker(self):
        assert types("\nJOHN\nHi!\nJANE\nHey!")[3] is LineType.DIALOGUE


class TestClassifierState:
    """Test state transitions in isolation."""

    def test_initial_state(self):
        state = ClassifierState.initial()
        assert state.after_empty is True
        assert state.in_dialogue is False

    @pytest.mark.parametrize(
        ("line_type", "flag"),
        [
            (LineType.CHARACTER, "after_character"),
            (LineType.PARENTHETICAL, "after_parenthetical"),
            (LineType.DIALOGUE, "after_dialogue"),
        ],
    )
    def test_entering_dialogue_types(self, line_type, flag):
        state = ClassifierState.initial().entering(line_type)
        assert getattr(state, flag) is True
        assert state.in_dialogue is True
        assert state.after_empty is False

    def test_continuation_keeps_state(self):
        state = ClassifierState(after_dialogue=True)
        assert state.entering(LineType.DIALOGUE_CONTINUATION) is state

    def test_empty_resets_to_blank(self):
        state = ClassifierState(after_dialogue=True).entering(LineType.EMPTY)
        assert state == ClassifierState(after_empty=True)

    @pytest.mark.parametrize(
        "line_type",
        [
            LineType.ACTION,
            LineType.SCENE_HEADING,
            LineType.TRANSITION,
            LineType.CENTERED,
            LineType.SECTION_HEADING,
        ],
    )
    def test_other_types_clear_state(self, line_type):
        state = ClassifierState(after_character=True).entering(line_type)
        assert state == ClassifierState()

    def test_classify_line_single_step(self):
        classifier = FountainClassifier()
        source = SourceLine(index=0, raw="JOHN", start=0, end=4)
        line, state = classifier.classify_line(source, ClassifierState.initial())
        assert line.type is LineType.CHARACTER
        assert state == ClassifierState(after_character=True)

        nxt = SourceLine(index=1, raw="Hi.", start=5, end=8)
        line, state = classifier.classify_line(nxt, state)
        assert line.type is LineType.DIALOGUE
        assert state.after_dialogue is True


class TestClassifyContract:
    """Test whole-document guarantees."""

    def test_one_line_per_source_line(self):
        text = "INT. A\n\nJOHN\nHi.\n\n> END <\n"
        assert len(classify(text)) == text.count("\n") + 1

    def test_default_options_are_preview(self):
        assert FountainClassifier().options == ClassifierOptions.preview()

    def test_lines_carry_source(self):
        result = classify("INT. A\nAction.")
        assert result[1].raw == "Action."
        assert result[1].source.start == 7
        assert result[1].css_class == "fountain-action"

    def test_classification_is_deterministic(self):
        text = "\nJOHN\nHi!\n\nJANE^\nHey!"
        assert classify(text) == classify(text)
