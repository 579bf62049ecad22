"""Built-in stylesheets and user stylesheet composition."""

from __future__ import annotations

PREVIEW_CSS = """\
.fountain-preview-content {
    font-family: "Courier Prime", "Courier New", Courier, monospace;
    font-size: 12pt;
    line-height: 1.5;
    max-width: 8.5in;
    margin: 0 auto;
    padding: 1in 1in;
}

.fountain-line {
    margin: 0;
    padding: 0;
}

.fountain-empty {
    min-height: 1em;
}

.fountain-scene-heading {
    text-transform: uppercase;
    font-weight: bold;
    margin-top: 1.5em;
}

.fountain-character {
    margin-left: 22ch;
    text-transform: uppercase;
    margin-top: 1em;
}

.fountain-dialogue {
    margin-left: 10ch;
    max-width: 35ch;
}

.fountain-parenthetical {
    margin-left: 16ch;
    max-width: 25ch;
}

.fountain-transition {
    text-align: right;
    text-transform: uppercase;
    margin-top: 1em;
}

.fountain-centered {
    text-align: center;
}

.fountain-action {
    margin-top: 0.5em;
}

.fountain-section-heading-1 {
    text-align: center;
    font-size: 1.4em;
    font-weight: bold;
    text-transform: uppercase;
    margin: 3em 0 2em;
    padding: 0.5em 0;
    border-top: 1px solid #ccc;
    border-bottom: 1px solid #ccc;
}

.fountain-section-heading-2 {
    font-weight: bold;
    text-transform: uppercase;
    margin: 2em 0 0.5em;
}

.fountain-section-heading-3 {
    font-weight: bold;
    margin: 1.5em 0 0.5em;
}

.fountain-dual-dialogue {
    display: flex;
    gap: 2ch;
    margin-top: 1em;
    width: 100%;
}

.fountain-dual-col {
    flex: 1;
    min-width: 0;
}

.fountain-dual-col .fountain-character {
    margin-left: 5ch;
    margin-top: 0;
}

.fountain-dual-col .fountain-dialogue {
    margin-left: 0;
    max-width: none;
}

.fountain-dual-col .fountain-parenthetical {
    margin-left: 2ch;
    max-width: none;
}
"""

# Default user stylesheet: editor line classes, including the two
# dual dialogue columns painted by the live decorations.
EDITOR_CSS = """\
/* Scene Headings */
.cm-line.fountain-scene-heading {
    text-transform: uppercase !important;
    font-weight: bold !important;
}

/* Character */
.cm-line.fountain-character {
    text-align: left !important;
    margin-left: 22ch !important;
    text-transform: uppercase !important;
}

/* Dialogue */
.cm-line.fountain-dialogue {
    margin-left: 10ch !important;
    max-width: 40ch !important;
}

/* Parenthetical */
.cm-line.fountain-parenthetical {
    text-align: left !important;
    margin-left: 16ch !important;
    max-width: 25ch !important;
}

/* Transitions */
.cm-line.fountain-transition {
    text-align: right !important;
    text-transform: uppercase !important;
}

/* Centered */
.cm-line.fountain-centered {
    text-align: center !important;
}

/* Dual Dialogue */
.fountain-dual-dialogue {
    display: flex;
    gap: 2ch;
}
.fountain-dual-col {
    flex: 1;
    min-width: 0;
}
.fountain-dual-col .fountain-character {
    margin-left: 5ch !important;
}
.fountain-dual-col .fountain-dialogue {
    margin-left: 0 !important;
    max-width: none !important;
}
.fountain-dual-col .fountain-parenthetical {
    margin-left: 2ch !important;
}
"""


def compose_stylesheet(base: str, custom_css: str | None = None) -> str:
    """Append the user stylesheet verbatim after a built-in one.

    The custom stylesheet is not validated; it is injected exactly as given.
    """
    if not custom_css:
        return base
    return f"{base}\n{custom_css}"
