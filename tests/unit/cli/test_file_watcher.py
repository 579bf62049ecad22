"""Tests for the watch command and its file watching helpers."""

import os
import time

import pytest
from watchdog.events import (
    DirModifiedEvent,
    FileCreatedEvent,
    FileModifiedEvent,
    FileMovedEvent,
)

from fountainview.api import FountainPreview, PreviewSession
from fountainview.cli.utils.file_watcher import DocumentChangeHandler, DocumentRenderer


class Recorder:
    """Status callback that remembers every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, status, path, error=None):
        self.calls.append((status, path.name, error))

    @property
    def statuses(self):
        return [status for status, _, _ in self.calls]


class FakeRenderer:
    def __init__(self, document):
        self.document = document
        self.renders = 0

    def render(self):
        self.renders += 1
        return True


def wait_for(read, done, timeout=5.0):
    """Poll ``read`` until ``done`` accepts its value or the timeout passes."""
    deadline = time.monotonic() + timeout
    value = read()
    while not done(value) and time.monotonic() < deadline:
        time.sleep(0.05)
        value = read()
    return value


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def renderer(settings, sample_script, tmp_path, recorder):
    return DocumentRenderer(
        preview=FountainPreview(settings),
        document=sample_script,
        output=tmp_path / "preview.html",
        callback=recorder,
    )


class TestDocumentRenderer:
    """Test rendering a watched document to disk."""

    def test_render_writes_page(self, renderer, recorder):
        assert renderer.render() is True

        content = renderer.output.read_text(encoding="utf-8")
        assert content.startswith("<!DOCTYPE html>")
        assert "<title>brick_and_steel</title>" in content
        assert recorder.statuses == ["rendered"]
        assert renderer.session.current is not None

    def test_render_fragment(self, renderer):
        renderer.standalone = False
        renderer.render()

        assert renderer.output.read_text(encoding="utf-8").startswith("<div")

    def test_rerender_picks_up_changes(self, renderer, sample_script):
        renderer.render()
        sample_script.write_text("INT. NEW PLACE\n", encoding="utf-8")
        renderer.render()

        assert "INT. NEW PLACE" in renderer.output.read_text(encoding="utf-8")

    def test_missing_document_reports_error(self, renderer, recorder, sample_script):
        sample_script.unlink()

        assert renderer.render() is False
        assert recorder.statuses == ["error"]
        assert "Document not found" in recorder.calls[0][2]
        assert not renderer.output.exists()

    def test_stale_render_is_skipped(self, renderer, recorder, monkeypatch):
        session = PreviewSession()
        renderer.session = session
        newer_tree = renderer.preview.build_tree("INT. NEWER")
        read_document = renderer.preview.read_document

        def read_while_newer_render_finishes(path):
            session.publish(session.begin(), newer_tree)
            return read_document(path)

        monkeypatch.setattr(
            renderer.preview, "read_document", read_while_newer_render_finishes
        )

        assert renderer.render() is False
        assert recorder.statuses == ["skipped"]
        assert session.current is newer_tree
        assert not renderer.output.exists()


class TestDocumentChangeHandler:
    """Test event filtering and debouncing."""

    def test_ignores_other_files(self, sample_script, tmp_path):
        fake = FakeRenderer(sample_script)
        handler = DocumentChangeHandler(fake, debounce_seconds=0)

        handler.on_modified(FileModifiedEvent(str(tmp_path / "other.fountain")))

        assert fake.renders == 0

    def test_ignores_directories(self, sample_script):
        fake = FakeRenderer(sample_script)
        handler = DocumentChangeHandler(fake, debounce_seconds=0)

        handler.on_modified(DirModifiedEvent(str(sample_script.parent)))

        assert fake.renders == 0

    def test_renders_on_modify(self, sample_script):
        fake = FakeRenderer(sample_script)
        handler = DocumentChangeHandler(fake, debounce_seconds=0)

        handler.on_modified(FileModifiedEvent(str(sample_script)))
        handler.on_modified(FileModifiedEvent(str(sample_script)))

        assert fake.renders == 2

    def test_debounce(self, sample_script):
        fake = FakeRenderer(sample_script)
        handler = DocumentChangeHandler(fake, debounce_seconds=60)

        handler.on_modified(FileModifiedEvent(str(sample_script)))
        handler.on_modified(FileModifiedEvent(str(sample_script)))
        handler.on_modified(FileModifiedEvent(str(sample_script)))

        assert fake.renders == 1
        assert handler.has_pending_render

        handler.stop()
        assert not handler.has_pending_render
        assert fake.renders == 1

    def test_last_save_in_burst_is_rendered(self, renderer, sample_script):
        handler = DocumentChangeHandler(renderer, debounce_seconds=0.2)

        sample_script.write_text("INT. FIRST - DAY\n", encoding="utf-8")
        handler.on_modified(FileModifiedEvent(str(sample_script)))
        assert "FIRST" in renderer.output.read_text(encoding="utf-8")

        sample_script.write_text("INT. SECOND - NIGHT\n", encoding="utf-8")
        handler.on_modified(FileModifiedEvent(str(sample_script)))

        content = wait_for(
            lambda: renderer.output.read_text(encoding="utf-8"),
            lambda text: "SECOND" in text,
        )
        assert "INT. SECOND - NIGHT" in content
        assert "FIRST" not in content

    def test_burst_renders_once_after_window(self, sample_script):
        fake = FakeRenderer(sample_script)
        handler = DocumentChangeHandler(fake, debounce_seconds=0.2)

        for _ in range(5):
            handler.on_modified(FileModifiedEvent(str(sample_script)))

        assert wait_for(lambda: fake.renders, lambda renders: renders == 2) == 2
        time.sleep(0.3)
        assert fake.renders == 2

    def test_renders_on_create(self, sample_script):
        fake = FakeRenderer(sample_script)
        handler = DocumentChangeHandler(fake, debounce_seconds=0)

        handler.on_created(FileCreatedEvent(str(sample_script)))

        assert fake.renders == 1

    def test_atomic_save_uses_destination(self, sample_script, tmp_path):
        fake = FakeRenderer(sample_script)
        handler = DocumentChangeHandler(fake, debounce_seconds=0)

        handler.on_moved(
            FileMovedEvent(str(tmp_path / ".script.swp"), str(sample_script))
        )

        assert fake.renders == 1

    def test_bytes_paths(self, sample_script):
        fake = FakeRenderer(sample_script)
        handler = DocumentChangeHandler(fake, debounce_seconds=0)

        handler.on_modified(FileModifiedEvent(os.fsencode(str(sample_script))))

        assert fake.renders == 1


@pytest.mark.slow
class TestWatchCommand:
    """Test the watch command end to end."""

    def test_initial_render_and_timeout(self, cli_invoke, sample_script):
        result = cli_invoke("watch", str(sample_script), "--timeout", "1")

        assert result.exit_code == 0, result.output
        assert "Updated:" in result.output
        assert "Watch timeout reached" in result.output
        output = sample_script.with_suffix(".html")
        assert output.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")

    def test_fragment_output(self, cli_invoke, sample_script, tmp_path):
        output = tmp_path / "live.html"

        result = cli_invoke(
            "watch", str(sample_script), "-o", str(output), "--fragment", "-t", "1"
        )

        assert result.exit_code == 0
        assert output.read_text(encoding="utf-8").startswith("<div")

    def test_missing_document(self, cli_invoke, tmp_path):
        result = cli_invoke("watch", str(tmp_path / "missing.fountain"))

        assert result.exit_code == 1
        assert "File does not exist" in result.output
