"""Persistence for the user-editable stylesheet."""

from __future__ import annotations

import json
from pathlib import Path

from fountainview.config import get_logger
from fountainview.exceptions import ConfigurationError
from fountainview.render.styles import EDITOR_CSS

logger = get_logger(__name__)


class StylesheetStore:
    """Load and save the custom stylesheet as ``{"custom_css": "..."}`` JSON.

    A missing file means the user has never edited the stylesheet, so the
    built-in editor stylesheet is returned.
    """

    KEY = "custom_css"

    def __init__(self, path: Path, default_css: str = EDITOR_CSS) -> None:
        """Initialize the store.

        Args:
            path: JSON file holding the stylesheet
            default_css: Stylesheet used until the user saves one
        """
        self.path = Path(path)
        self.default_css = default_css

    def load(self) -> str:
        """Return the persisted stylesheet, or the default when none is saved.

        Raises:
            ConfigurationError: If the file exists but is not valid store JSON
        """
        if not self.path.exists():
            return self.default_css

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                message=f"Could not read stylesheet store: {self.path}",
                hint="Run 'fountainview css reset' to restore the default stylesheet",
                details={"file": str(self.path), "error": str(e)},
            ) from e

        css = data.get(self.KEY) if isinstance(data, dict) else None
        if not isinstance(css, str):
            raise ConfigurationError(
                message=f"Stylesheet store has no '{self.KEY}' string",
                hint="Run 'fountainview css reset' to restore the default stylesheet",
                details={"file": str(self.path)},
            )
        return css

    def save(self, css: str) -> None:
        """Persist ``css`` exactly as given.

        Raises:
            ConfigurationError: If the store file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps({self.KEY: css}, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as e:
            raise ConfigurationError(
                message=f"Could not write stylesheet store: {self.path}",
                hint="Check that the directory is writable",
                details={"file": str(self.path), "error": str(e)},
            ) from e
        logger.info("Saved custom stylesheet", path=str(self.path), size=len(css))

    def reset(self) -> str:
        """Restore and persist the default stylesheet."""
        self.save(self.default_css)
        return self.default_css
