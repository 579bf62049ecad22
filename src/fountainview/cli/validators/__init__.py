"""Input validators for fountainview CLI."""

from __future__ import annotations

from fountainview.cli.validators.base import ValidationError, Validator
from fountainview.cli.validators.file_validator import (
    ConfigFileValidator,
    FileValidator,
    FountainFileValidator,
)

__all__ = [
    "ConfigFileValidator",
    "FileValidator",
    "FountainFileValidator",
    "ValidationError",
    "Validator",
]
