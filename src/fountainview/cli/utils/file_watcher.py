"""File watching utilities for fountainview CLI."""

from __future__ import annotations

import threading
import time
from pathlib import Path
from typing import Protocol

from watchdog.events import FileSystemEvent, FileSystemEventHandler

from fountainview.api import FountainPreview, PreviewSession
from fountainview.config import get_logger
from fountainview.render import render_page

logger = get_logger(__name__)


class StatusCallback(Protocol):
    """Protocol for status update callbacks."""

    def __call__(self, status: str, path: Path, error: str | None = None) -> None:
        """Update status callback.

        Args:
            status: Status type (rendered, skipped, error)
            path: Document path being rendered
            error: Optional error message
        """
        ...


class DocumentRenderer:
    """Re-render one document into an HTML file through a ``PreviewSession``."""

    def __init__(
        self,
        preview: FountainPreview,
        document: Path,
        output: Path,
        standalone: bool = True,
        session: PreviewSession | None = None,
        callback: StatusCallback | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            preview: Preview API used for the pipeline
            document: Fountain document to read
            output: HTML file rewritten after each accepted render
            standalone: Write a full page instead of a fragment
            session: Session deciding which render is current
            callback: Callback for status updates
        """
        self.preview = preview
        self.document = document
        self.output = output
        self.standalone = standalone
        self.session = session or PreviewSession()
        self.callback = callback
        self._write_lock = threading.Lock()

    def render(self) -> bool:
        """Render the document once.

        Returns:
            True if this render became the current one and was written
        """
        ticket = self.session.begin()
        try:
            text = self.preview.read_document(self.document)
            tree = self.preview.build_tree(text)
            fragment = self.preview.html_renderer().render(tree)
            html = fragment
            if self.standalone:
                html = render_page(
                    fragment, self.preview.stylesheet(), title=self.document.stem
                )
        except Exception as e:
            logger.error("Render failed", path=str(self.document), error=str(e))
            self._notify("error", str(e))
            return False

        with self._write_lock:
            if not self.session.publish(ticket, tree):
                self._notify("skipped")
                return False
            self.output.write_text(html, encoding="utf-8")

        logger.info(
            "Rendered document",
            path=str(self.document),
            output=str(self.output),
            dual_blocks=len(tree.blocks),
        )
        self._notify("rendered")
        return True

    def _notify(self, status: str, error: str | None = None) -> None:
        if self.callback:
            self.callback(status, self.document, error)


class DocumentChangeHandler(FileSystemEventHandler):
    """Trigger a render when the watched document changes.

    Events inside the debounce window are not dropped: the last one schedules
    a render for when the window closes, so the final save is always shown.
    """

    def __init__(
        self,
        renderer: DocumentRenderer,
        debounce_seconds: float = 0.5,
    ) -> None:
        """Initialize the handler.

        Args:
            renderer: Renderer to run on each change
            debounce_seconds: Minimum time between renders
        """
        self.renderer = renderer
        self.target = renderer.document.resolve()
        self.debounce_seconds = debounce_seconds
        self.last_rendered: float | None = None
        self._lock = threading.Lock()
        self._pending: threading.Timer | None = None
        self._generation = 0

    def should_render(self, path: Path) -> bool:
        """Check whether an event path should trigger a render.

        Args:
            path: Path reported by the event

        Returns:
            True for the watched document outside the debounce window
        """
        if path.resolve() != self.target:
            return False
        if self.last_rendered is None:
            return True
        return time.monotonic() - self.last_rendered >= self.debounce_seconds

    def on_modified(self, event: FileSystemEvent) -> None:
        """Handle file modification events."""
        if not event.is_directory:
            self._handle(event.src_path)

    def on_created(self, event: FileSystemEvent) -> None:
        """Handle file creation events."""
        if not event.is_directory:
            self._handle(event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        """Handle atomic saves that move a temp file over the document."""
        if not event.is_directory:
            self._handle(event.dest_path)

    def _handle(self, src_path: str | bytes) -> None:
        if isinstance(src_path, bytes):
            src_path = src_path.decode()
        path = Path(src_path)
        if path.resolve() != self.target:
            return

        with self._lock:
            if not self.should_render(path):
                self._schedule()
                return
            self._cancel_pending()
            self.last_rendered = time.monotonic()
        self.renderer.render()

    @property
    def has_pending_render(self) -> bool:
        with self._lock:
            return self._pending is not None

    def stop(self) -> None:
        """Cancel a scheduled render, e.g. when the watch ends."""
        with self._lock:
            self._cancel_pending()

    def _schedule(self) -> None:
        # Restart the timer so a burst of saves renders once, after the last one
        self._cancel_pending()
        now = time.monotonic()
        since = self.last_rendered if self.last_rendered is not None else now
        remaining = max(since + self.debounce_seconds - now, 0.0)
        self._generation += 1
        timer = threading.Timer(
            remaining, self._render_pending, args=(self._generation,)
        )
        timer.daemon = True
        self._pending = timer
        timer.start()
        logger.debug("Scheduled render after debounce", delay=remaining)

    def _render_pending(self, generation: int) -> None:
        with self._lock:
            # A newer event restarted the timer, or the watch was stopped
            if self._pending is None or generation != self._generation:
                return
            self._pending = None
            self.last_rendered = time.monotonic()
        self.renderer.render()

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
