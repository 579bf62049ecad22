"""Preview API module for fountainview."""

from __future__ import annotations

import threading
from pathlib import Path

from fountainview.config import FountainViewSettings, get_logger, get_settings
from fountainview.config.stylesheet_store import StylesheetStore
from fountainview.exceptions import DocumentReadError, check_document_path
from fountainview.parser import ClassifiedLine, RenderTree, assemble, classify
from fountainview.render import (
    PREVIEW_CSS,
    DecorationSet,
    ExportOptions,
    HtmlRenderer,
    build_print_document,
    compose_stylesheet,
    render_decorations,
    render_page,
)

logger = get_logger(__name__)


class FountainPreview:
    """Run the classify/assemble/render pipeline with configured options."""

    def __init__(self, settings: FountainViewSettings | None = None) -> None:
        """Initialize the preview API.

        Args:
            settings: Settings to use; the global settings when omitted
        """
        self.settings = settings or get_settings()
        self.stylesheets = StylesheetStore(self.settings.stylesheet_path)

    def classify(self, text: str, target: str = "preview") -> list[ClassifiedLine]:
        """Classify text with the options configured for ``target``.

        Args:
            text: Fountain source text
            target: "preview" or "editor"

        Returns:
            One classified line per source line
        """
        return classify(text, self.settings.classifier_options(target))

    def build_tree(self, text: str, target: str = "preview") -> RenderTree:
        """Classify and assemble text into a render tree."""
        return assemble(self.classify(text, target))

    def html_renderer(self) -> HtmlRenderer:
        return HtmlRenderer(
            policy=self.settings.empty_line_policy,
            strip_unpaired_marker=self.settings.strip_unpaired_dual_marker,
        )

    def render_html(self, text: str) -> str:
        """Render text as a preview HTML fragment."""
        tree = self.build_tree(text)
        html = self.html_renderer().render(tree)
        logger.debug(
            "Rendered preview",
            lines=len(tree.lines),
            nodes=len(tree),
            dual_blocks=len(tree.blocks),
        )
        return html

    def render_page(self, text: str, title: str = "Screenplay") -> str:
        """Render text as a standalone page styled with ``stylesheet()``."""
        return render_page(self.render_html(text), self.stylesheet(), title)

    def read_document(self, path: Path | str | None) -> str:
        """Read a Fountain document from disk.

        Args:
            path: Document path, or None when no document is loaded

        Returns:
            The document text

        Raises:
            DocumentNotFoundError: If no path is given or it does not exist
            DocumentReadError: If the file cannot be read as UTF-8
        """
        doc_path = check_document_path(path)
        try:
            return doc_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentReadError(
                message=f"Could not read document: {doc_path}",
                hint="Make sure the file is readable UTF-8 text",
                details={"file": str(doc_path), "error": str(e)},
            ) from e

    def render_file(self, path: Path | str | None) -> str:
        """Read a document and render it as a preview HTML fragment."""
        text = self.read_document(path)
        logger.info("Rendering document", path=str(path))
        return self.render_html(text)

    def decorations(self, text: str) -> DecorationSet:
        """Build editor decorations for text using the editor options."""
        return render_decorations(self.build_tree(text, target="editor"))

    def stylesheet(self) -> str:
        """Return the built-in preview stylesheet followed by the user's."""
        return compose_stylesheet(PREVIEW_CSS, self.stylesheets.load())

    def export_options(self) -> ExportOptions:
        return ExportOptions(
            paper_size=self.settings.export_paper_size,
            margins=self.settings.export_margins,
            page_numbers=self.settings.export_page_numbers,
        )

    def export(
        self,
        text: str,
        options: ExportOptions | None = None,
        title: str = "Screenplay",
    ) -> str:
        """Build a standalone print document for text.

        Args:
            text: Fountain source text
            options: Page layout; the configured export options when omitted
            title: Document title

        Returns:
            Complete HTML document ready for printing
        """
        return build_print_document(
            self.render_html(text),
            custom_css=self.stylesheets.load(),
            options=options or self.export_options(),
            title=title,
        )


class PreviewSession:
    """Hold the most recently started render that has finished.

    Renders may finish out of order when a file watcher and a manual refresh
    overlap. Each render takes a ticket from ``begin()``; ``publish()`` keeps
    a result only if no later-started render has published already.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._next_ticket = 0
        self._published_ticket = -1
        self._current: RenderTree | None = None

    def begin(self) -> int:
        """Start a render and return its ticket."""
        with self._lock:
            ticket = self._next_ticket
            self._next_ticket += 1
            return ticket

    def publish(self, ticket: int, tree: RenderTree) -> bool:
        """Publish a finished render.

        Args:
            ticket: Ticket returned by ``begin()`` when the render started
            tree: The render result

        Returns:
            True if the result was kept, False if a newer render had already
            been published
        """
        with self._lock:
            if ticket < self._published_ticket:
                logger.debug(
                    "Discarded stale render",
                    ticket=ticket,
                    published=self._published_ticket,
                )
                return False
            self._published_ticket = ticket
            self._current = tree
            return True

    @property
    def current(self) -> RenderTree | None:
        with self._lock:
            return self._current
