"""fountainview configuration settings."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fountainview.exceptions import ConfigurationError, check_config_keys

if TYPE_CHECKING:
    from fountainview.parser.models import ClassifierOptions


class FountainViewSettings(BaseSettings):
    """fountainview configuration settings.

    Settings are loaded with the following precedence (highest to lowest):
    1. CLI arguments (when provided via command flags)
       Example: fountainview export script.fountain --paper a4

    2. Config file values (YAML, TOML, or JSON)
       Example: fountainview --config myconfig.yaml
       Multiple files: Later files override earlier ones

    3. Environment variables (prefixed with FOUNTAINVIEW_)
       Example: export FOUNTAINVIEW_EXPORT_MARGINS=narrow

    4. .env file (in current directory or specified path)
       Example: FOUNTAINVIEW_LOG_LEVEL=DEBUG in .env file

    5. Default values (defined in field declarations below)
    """

    model_config = SettingsConfigDict(
        env_prefix="FOUNTAINVIEW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application settings
    app_name: str = Field(
        default="fountainview",
        description="Application name",
    )

    # Debug settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    # Logging settings
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        pattern="^(?i)(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="console",
        description="Log output format (console, json, structured)",
        pattern="^(?i)(console|json|structured)$",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )

    # Classifier settings, one pair per render target
    preview_section_headings: bool = Field(
        default=True,
        description="Recognise '#' section headings in the static preview",
    )
    preview_adjacent_dual_marker: bool = Field(
        default=True,
        description=(
            "Allow a '^' character cue directly after a dialogue block "
            "(no blank line) in the static preview"
        ),
    )
    editor_section_headings: bool = Field(
        default=False,
        description="Recognise '#' section headings in editor decorations",
    )
    editor_adjacent_dual_marker: bool = Field(
        default=False,
        description=(
            "Allow a '^' character cue directly after a dialogue block "
            "(no blank line) in editor decorations"
        ),
    )

    # Rendering settings
    empty_line_policy: str = Field(
        default="placeholder",
        description="How blank lines render in HTML (placeholder, omit)",
        pattern="^(placeholder|omit)$",
    )
    strip_unpaired_dual_marker: bool = Field(
        default=True,
        description="Hide the trailing '^' of a cue that found no dual partner",
    )
    stylesheet_path: Path = Field(
        default_factory=lambda: Path.home() / ".fountainview" / "styles.json",
        description="Where the user stylesheet is persisted",
    )

    # Export settings
    export_paper_size: str = Field(
        default="letter",
        description="Paper size for print export (letter, a4)",
        pattern="^(letter|a4)$",
    )
    export_margins: str = Field(
        default="normal",
        description="Page margins for print export (normal, narrow, tight)",
        pattern="^(normal|narrow|tight)$",
    )
    export_page_numbers: bool = Field(
        default=False,
        description="Print page numbers in the bottom-right corner",
    )

    # Watch settings
    watch_debounce_seconds: float = Field(
        default=0.5,
        description="Minimum delay between two re-renders of a watched file",
        ge=0.0,
    )

    @field_validator("stylesheet_path", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Path | None:
        """Expand environment variables and resolve path.

        Accepts None (for optional fields), strings (with env vars and ``~``)
        and ``Path`` objects. Collections are rejected.
        """
        if v is None:
            return None
        if isinstance(v, str):
            expanded = os.path.expandvars(v)
            return Path(expanded).expanduser().resolve()
        if isinstance(v, Path):
            return v.expanduser().resolve()

        if isinstance(v, (dict, list, set, tuple)):  # noqa: UP038
            raise ValueError(
                f"Path fields cannot accept {type(v).__name__} types. "
                f"Expected str or Path, got: {v!r}"
            )

        try:
            return Path(str(v)).resolve()
        except (TypeError, ValueError, OSError) as e:
            raise ValueError(
                f"Path fields must be string, Path, or convertible to string. "
                f"Got {type(v).__name__}: {v!r}"
            ) from e

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Normalize log level to uppercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.upper()
        raise ValueError(f"log_level must be a string, got {type(v).__name__}")

    @field_validator(
        "log_format",
        "empty_line_policy",
        "export_paper_size",
        "export_margins",
        mode="before",
    )
    @classmethod
    def normalize_lowercase(cls, v: Any) -> str:
        """Normalize choice fields to lowercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.strip().lower()
        raise ValueError(f"Expected a string, got {type(v).__name__}")

    def classifier_options(self, target: str = "preview") -> ClassifierOptions:
        """Build classifier options for a render target.

        Args:
            target: ``"preview"`` for the static HTML path or ``"editor"`` for
                live decorations

        Returns:
            ClassifierOptions with this target's capability flags
        """
        from fountainview.parser.models import ClassifierOptions

        if target == "preview":
            return ClassifierOptions(
                section_headings=self.preview_section_headings,
                adjacent_dual_marker=self.preview_adjacent_dual_marker,
            )
        if target == "editor":
            return ClassifierOptions(
                section_headings=self.editor_section_headings,
                adjacent_dual_marker=self.editor_adjacent_dual_marker,
            )
        raise ConfigurationError(
            message=f"Unknown render target '{target}'",
            hint="Use 'preview' or 'editor'",
            details={"target": target},
        )

    @classmethod
    def from_env(cls) -> FountainViewSettings:
        """Create settings from environment variables."""
        return cls()

    @classmethod
    def from_file(cls, config_path: Path | str) -> FountainViewSettings:
        """Load settings from a configuration file.

        Args:
            config_path: Path to configuration file (YAML, TOML, or JSON).

        Returns:
            Settings loaded from the file.

        Raises:
            ConfigurationError: If file format is not supported.
            FileNotFoundError: If config file doesn't exist.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()

        if suffix in {".yml", ".yaml"}:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        elif suffix == ".toml":
            with config_path.open("rb") as f:
                data = tomllib.load(f)
        elif suffix == ".json":
            with config_path.open(encoding="utf-8") as f:
                data = json.load(f)
        else:
            raise ConfigurationError(
                message=f"Unsupported configuration file format: {suffix}",
                hint="Use one of the supported formats: .yml, .yaml, .toml, or .json",
                details={
                    "file": str(config_path),
                    "detected_format": suffix,
                    "supported_formats": [".yml", ".yaml", ".toml", ".json"],
                },
            )

        check_config_keys(data)

        return cls(**data)

    @classmethod
    def from_multiple_sources(
        cls,
        config_files: list[Path | str] | None = None,
        env_file: Path | str | None = None,
        cli_args: dict[str, Any] | None = None,
    ) -> FountainViewSettings:
        """Load settings with proper precedence from multiple sources.

        Precedence (highest to lowest):
        1. CLI arguments
        2. Config files (last file wins)
        3. Environment variables
        4. .env file
        5. Default values

        Args:
            config_files: List of config files to load (later files override earlier).
            env_file: Path to .env file (default: .env in current directory).
            cli_args: Dictionary of CLI arguments.

        Returns:
            Merged settings from all sources.
        """
        data: dict[str, Any] = {}

        if config_files:
            for config_file in config_files:
                try:
                    file_settings = cls.from_file(config_file)
                    # Only keys the file actually set, so env vars still apply
                    data.update(file_settings.model_dump(exclude_unset=True))
                except FileNotFoundError:
                    from fountainview.config.logging import get_logger as _get_logger

                    logger = _get_logger("fountainview.config.settings")
                    logger.warning(
                        "Configuration file not found, using defaults",
                        config_file=str(config_file),
                    )

        if env_file:
            settings = cast(
                "FountainViewSettings", cast(Any, cls)(_env_file=env_file, **data)
            )
        else:
            settings = cls(**data)

        if cli_args:
            cli_data = {k: v for k, v in cli_args.items() if v is not None}
            if cli_data:
                updated_data = settings.model_dump()
                updated_data.update(cli_data)
                settings = cls(**updated_data)

        return settings


# Global settings instance
_settings: FountainViewSettings | None = None
# Cache for config file paths that exist
_config_paths_cache: list[Path | str] | None = None


def _get_config_paths() -> list[Path | str]:
    """Get list of config file paths to check.

    Returns paths in priority order (later files override earlier).
    Caches the list of existing config files to avoid repeated filesystem checks.
    """
    global _config_paths_cache

    if _config_paths_cache is not None:
        return _config_paths_cache

    potential_paths = [
        # User config in home directory
        Path.home() / ".fountainview" / "config.yaml",
        Path.home() / ".fountainview" / "config.json",
        Path.home() / ".fountainview" / "config.toml",
        # User config in .config directory (XDG standard)
        Path.home() / ".config" / "fountainview" / "config.yaml",
        Path.home() / ".config" / "fountainview" / "config.json",
        Path.home() / ".config" / "fountainview" / "config.toml",
        # Project config in current directory
        Path.cwd() / "fountainview.yaml",
        Path.cwd() / "fountainview.json",
        Path.cwd() / "fountainview.toml",
    ]

    existing_paths: list[Path | str] = []
    for path in potential_paths:
        try:
            if path.exists() and path.is_file():
                existing_paths.append(path)
        except (OSError, PermissionError):
            continue

    _config_paths_cache = existing_paths
    return existing_paths


def get_settings() -> FountainViewSettings:
    """Get the global settings instance.

    Loads configuration from multiple sources with proper precedence:
    1. Environment variables (highest priority)
    2. Config files (in order: user, XDG, project)
    3. Default values (lowest priority)

    Returns:
        Global FountainViewSettings instance.
    """
    global _settings
    if _settings is None:
        config_paths = _get_config_paths()

        if config_paths:
            _settings = FountainViewSettings.from_multiple_sources(
                config_files=config_paths
            )
        else:
            _settings = FountainViewSettings.from_env()
    return _settings


def set_settings(settings: FountainViewSettings | None) -> None:
    """Set the global settings instance.

    Args:
        settings: Settings instance to use globally (None forces a reload).
    """
    global _settings
    _settings = settings


def clear_settings_cache() -> None:
    """Clear the global settings cache.

    This forces get_settings() to re-read from environment variables
    and configuration files on the next call. Useful for testing
    when environment variables are changed via monkeypatch.
    """
    global _settings, _config_paths_cache
    _settings = None
    _config_paths_cache = None


def get_settings_for_cli(
    config_file: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> FountainViewSettings:
    """Get settings for CLI commands with consistent precedence.

    Args:
        config_file: Optional specific config file to load. If not provided,
                    uses standard config locations.
        cli_overrides: Dictionary of CLI argument overrides (e.g. export_margins).
                      Only non-None values are applied.

    Returns:
        FountainViewSettings instance with all sources merged.

    Raises:
        FileNotFoundError: If config_file is specified but doesn't exist.
    """
    if config_file:
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")

        return FountainViewSettings.from_multiple_sources(
            config_files=[config_file],
            cli_args=cli_overrides,
        )

    settings = get_settings()
    if cli_overrides:
        filtered_overrides = {k: v for k, v in cli_overrides.items() if v is not None}
        if filtered_overrides:
            data = settings.model_dump()
            data.update(filtered_overrides)
            settings = FountainViewSettings(**data)

    return settings
