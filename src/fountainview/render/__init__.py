"""Render adapters for classified Fountain documents."""

from __future__ import annotations

from .decorations import (
    BlockReplacement,
    DecorationRenderer,
    DecorationSet,
    LineDecoration,
    render_decorations,
)
from .export import ExportOptions, MarginPreset, PaperSize, build_print_document
from .html import (
    EmptyLinePolicy,
    HtmlRenderer,
    display_text,
    render_html,
    render_page,
)
from .styles import EDITOR_CSS, PREVIEW_CSS, compose_stylesheet

__all__ = [
    "EDITOR_CSS",
    "PREVIEW_CSS",
    "BlockReplacement",
    "DecorationRenderer",
    "DecorationSet",
    "EmptyLinePolicy",
    "ExportOptions",
    "HtmlRenderer",
    "LineDecoration",
    "MarginPreset",
    "PaperSize",
    "build_print_document",
    "compose_stylesheet",
    "display_text",
    "render_decorations",
    "render_html",
    "render_page",
]
