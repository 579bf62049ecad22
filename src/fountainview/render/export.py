"""Print/export document builder.

Wraps a preview HTML fragment into a standalone, print-ready HTML document.
Export options only change page layout; the fragment is used as given.
"""

from __future__ import annotations

from enum import Enum
from html import escape

from pydantic import BaseModel, ConfigDict, Field

from fountainview.render.styles import compose_stylesheet


class PaperSize(str, Enum):
    """Supported paper sizes."""

    LETTER = "letter"
    A4 = "a4"

    @property
    def css_size(self) -> str:
        return "A4" if self is PaperSize.A4 else "letter"


class MarginPreset(str, Enum):
    """Page margin presets."""

    NORMAL = "normal"
    NARROW = "narrow"
    TIGHT = "tight"

    @property
    def css_length(self) -> str:
        return {"normal": "1in", "narrow": "0.75in", "tight": "0.5in"}[self.value]


class ExportOptions(BaseModel):
    """Page layout options for print export."""

    model_config = ConfigDict(frozen=True)

    paper_size: PaperSize = Field(default=PaperSize.LETTER)
    margins: MarginPreset = Field(default=MarginPreset.NORMAL)
    page_numbers: bool = Field(default=False)


PRINT_CSS = """\
* { box-sizing: border-box; }
body { margin: 0; padding: 0; background: white; color: black; }

.fountain-preview-content {
    font-family: "Courier Prime", "Courier New", Courier, monospace;
    font-size: 12pt; line-height: 1.5;
    max-width: 100%; margin: 0; padding: 0;
    background: white; color: black;
}
.fountain-line { margin: 0; padding: 0; }
.fountain-empty { min-height: 1em; }

.fountain-scene-heading {
    text-transform: uppercase; font-weight: bold;
    margin-top: 1.5em; page-break-after: avoid;
}
.fountain-character {
    margin-left: 22ch; text-transform: uppercase;
    margin-top: 1em; page-break-after: avoid;
}
.fountain-dialogue { margin-left: 10ch; max-width: 35ch; }
.fountain-parenthetical { margin-left: 16ch; max-width: 25ch; page-break-after: avoid; }
.fountain-transition { text-align: right; text-transform: uppercase; margin-top: 1em; }
.fountain-centered { text-align: center; }
.fountain-action { margin-top: 0.5em; }

.fountain-section-heading-1 {
    page-break-before: always; page-break-after: always;
    text-align: center; font-size: 1.4em; font-weight: bold;
    text-transform: uppercase; padding-top: 4in;
}
.fountain-section-heading-2 { font-weight: bold; text-transform: uppercase; margin-top: 2em; page-break-after: avoid; }
.fountain-section-heading-3 { font-weight: bold; margin-top: 1.5em; page-break-after: avoid; }

.fountain-dual-dialogue { display: flex; gap: 2ch; margin-top: 1em; width: 100%; }
.fountain-dual-col { flex: 1; min-width: 0; }
.fountain-dual-col .fountain-character { margin-left: 5ch; margin-top: 0; }
.fountain-dual-col .fountain-dialogue { margin-left: 0; max-width: none; }
.fountain-dual-col .fountain-parenthetical { margin-left: 2ch; max-width: none; }
"""  # noqa: E501

PAGE_NUMBER_CSS = (
    "@page { @bottom-right { content: counter(page); "
    'font-family: "Courier Prime", "Courier New", Courier, monospace; '
    "font-size: 10pt; } }"
)


def page_css(options: ExportOptions) -> str:
    """Return the ``@page`` rules for the chosen layout."""
    rules = [
        f"@page {{ size: {options.paper_size.css_size}; "
        f"margin: {options.margins.css_length}; }}"
    ]
    if options.page_numbers:
        rules.append(PAGE_NUMBER_CSS)
    return "\n".join(rules)


def build_print_document(
    body_html: str,
    custom_css: str | None = None,
    options: ExportOptions | None = None,
    title: str = "Screenplay",
) -> str:
    """Build a standalone print document around a preview fragment.

    Args:
        body_html: HTML fragment from ``HtmlRenderer``
        custom_css: User stylesheet, appended last and unmodified
        options: Page layout options (defaults: letter, normal margins)
        title: Document title

    Returns:
        Complete HTML document
    """
    options = options or ExportOptions()
    stylesheet = compose_stylesheet(f"{page_css(options)}\n{PRINT_CSS}", custom_css)
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
