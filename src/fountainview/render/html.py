"""Static preview renderer: render tree to HTML fragment."""

from __future__ import annotations

from enum import Enum
from html import escape

from fountainview.parser import patterns
from fountainview.parser.models import (
    ClassifiedLine,
    DualDialogueBlock,
    LineType,
    RenderTree,
    SingleLine,
)

BLANK_PLACEHOLDER = '<div class="fountain-empty">&nbsp;</div>'


class EmptyLinePolicy(str, Enum):
    """How blank lines are painted."""

    PLACEHOLDER = "placeholder"
    OMIT = "omit"


def display_text(line: ClassifiedLine, strip_dual_marker: bool = False) -> str:
    """Return the text shown for a line, with Fountain markers removed.

    Args:
        line: Classified line to display
        strip_dual_marker: Remove a trailing ``^`` from character cues

    Returns:
        Unescaped display text
    """
    text = line.text
    if line.type is LineType.CENTERED:
        return patterns.strip_centered_markers(text)
    if line.type is LineType.TRANSITION:
        return patterns.strip_transition_marker(text)
    if line.type is LineType.SECTION_HEADING:
        return patterns.strip_section_marker(text)
    if line.type is LineType.CHARACTER and strip_dual_marker:
        return patterns.strip_dual_marker(text)
    if line.type.is_blank:
        return ""
    return text


class HtmlRenderer:
    """Map a render tree onto ``fountain-*`` HTML elements."""

    def __init__(
        self,
        policy: EmptyLinePolicy | str = EmptyLinePolicy.PLACEHOLDER,
        strip_unpaired_marker: bool = True,
    ) -> None:
        """Initialize the renderer.

        Args:
            policy: Paint blank lines as placeholders or omit them
            strip_unpaired_marker: Hide the ``^`` of cues outside a dual block
        """
        self.policy = EmptyLinePolicy(policy)
        self.strip_unpaired_marker = strip_unpaired_marker

    def render(self, tree: RenderTree) -> str:
        """Render a whole tree as newline-joined HTML."""
        parts: list[str] = []
        for node in tree:
            if isinstance(node, DualDialogueBlock):
                parts.append(self.render_block(node))
            else:
                rendered = self.render_single(node)
                if rendered is not None:
                    parts.append(rendered)
        return "\n".join(parts)

    def render_single(self, node: SingleLine) -> str | None:
        return self.render_line(
            node.line, strip_dual_marker=self.strip_unpaired_marker
        )

    def render_block(self, block: DualDialogueBlock) -> str:
        """Render a dual block as a two-column flex container."""
        parts = ['<div class="fountain-dual-dialogue">']
        for column, strip in ((block.left_lines, False), (block.right_lines, True)):
            parts.append('<div class="fountain-dual-col">')
            for line in column:
                rendered = self.render_line(line, strip_dual_marker=strip)
                if rendered is not None:
                    parts.append(rendered)
            parts.append("</div>")
        parts.append("</div>")
        return "\n".join(parts)

    def render_line(
        self, line: ClassifiedLine, strip_dual_marker: bool = False
    ) -> str | None:
        """Render one line, or None when the policy omits it."""
        if line.type.is_blank:
            if self.policy is EmptyLinePolicy.OMIT:
                return None
            return BLANK_PLACEHOLDER

        text = escape(display_text(line, strip_dual_marker), quote=True)
        return f'<div class="fountain-line {line.css_class}">{text}</div>'


def render_html(
    tree: RenderTree,
    policy: EmptyLinePolicy | str = EmptyLinePolicy.PLACEHOLDER,
    strip_unpaired_marker: bool = True,
) -> str:
    """Render a tree with a one-off ``HtmlRenderer``."""
    return HtmlRenderer(policy, strip_unpaired_marker).render(tree)


def render_page(body_html: str, stylesheet: str, title: str = "Screenplay") -> str:
    """Wrap a preview fragment in a standalone HTML page for viewing."""
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escape(title)}</title>\n"
        f"<style>\n{stylesheet}\n</style>\n"
        "</head>\n"
        "<body>\n"
        f'<div class="fountain-preview-content">\n{body_html}\n</div>\n'
        "</body>\n"
        "</html>\n"
    )
