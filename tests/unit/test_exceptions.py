"""Tests for the fountainview exception hierarchy."""

import pytest

from fountainview.exceptions import (
    ConfigurationError,
    DocumentNotFoundError,
    ExportError,
    FountainViewError,
    check_config_keys,
    check_document_path,
)


class TestFountainViewError:
    """Test structured error formatting."""

    def test_message_only(self):
        error = FountainViewError("Something broke")
        assert str(error) == "Error: Something broke"

    def test_hint_and_details(self):
        error = ExportError(
            "Could not write",
            hint="Check permissions",
            details={"file": "out.html", "errno": 13},
        )
        assert error.format_error() == (
            "Error: Could not write\n"
            "Hint: Check permissions\n"
            "Details:\n"
            "  file: out.html\n"
            "  errno: 13"
        )

    def test_subclasses_share_base(self):
        for cls in (ConfigurationError, DocumentNotFoundError, ExportError):
            assert issubclass(cls, FountainViewError)


class TestCheckDocumentPath:
    """Test document path checks."""

    @pytest.mark.parametrize("path", [None, ""])
    def test_no_file_loaded(self, path):
        with pytest.raises(DocumentNotFoundError) as exc_info:
            check_document_path(path)
        assert exc_info.value.message == "No file loaded"

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentNotFoundError) as exc_info:
            check_document_path(tmp_path / "missing.fountain")
        assert "Document not found" in exc_info.value.message
        assert exc_info.value.hint == "Check the path and try again"

    def test_missing_file_with_odd_suffix(self, tmp_path):
        with pytest.raises(DocumentNotFoundError) as exc_info:
            check_document_path(tmp_path / "missing.docx")
        assert exc_info.value.hint.startswith("Fountain documents usually end")

    def test_directory(self, tmp_path):
        with pytest.raises(DocumentNotFoundError, match="not a file"):
            check_document_path(tmp_path)

    def test_existing_file(self, tmp_path):
        doc = tmp_path / "script.fountain"
        doc.write_text("INT. HOUSE\n")
        assert check_document_path(str(doc)) == doc


class TestCheckConfigKeys:
    """Test detection of common configuration key mistakes."""

    def test_valid_keys(self):
        check_config_keys({"export_margins": "tight", "debug": True})

    @pytest.mark.parametrize(
        ("wrong", "correct"),
        [
            ("css", "stylesheet_path"),
            ("custom_css", "stylesheet_path"),
            ("margins", "export_margins"),
            ("page_numbers", "export_page_numbers"),
            ("section_headings", "preview_section_headings"),
        ],
    )
    def test_wrong_keys(self, wrong, correct):
        with pytest.raises(ConfigurationError) as exc_info:
            check_config_keys({wrong: "x"})
        assert exc_info.value.details["correct_key"] == correct
