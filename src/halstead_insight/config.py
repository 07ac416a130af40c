"""Configuration loading and management for Halstead Insight.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.halstead-insight.toml)
    3. Project config (./halstead-insight.toml)
    4. Explicit config file
    5. Environment variables (HALSTEAD_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, decimal_places=3)
    >>> config.verbosity
    'verbose'
    >>> config.decimal_places
    3
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, Union, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

# Ratio of 42 passing interoperability checks out of 50. Not measured from
# the analyzed code; reported verbatim.
DEFAULT_INTEROPERABILITY_SCORE = (42 / 50) * 100


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for a metrics run.

    Attributes:
        File selection:
            extensions: Suffixes of eligible files (all count for size metrics)
            excluded_dirs: Directory names never descended into
            script_languages: Suffix -> tree-sitter grammar for parsed files
            max_file_size_mb: Files larger than this are skipped with a
                warning (None: no limit)
            allow_hidden_files: Include files/dirs starting with "."
            follow_symlinks: Follow symbolic links during scanning

        Reporting:
            interoperability_score: Static score emitted with every report
            decimal_places: Precision of floats in CSV/console output
            verbosity: Logging verbosity level
    """

    extensions: list[str] = field(
        default_factory=lambda: [".js", ".jsx", ".ts", ".tsx", ".json", ".css", ".html"]
    )
    excluded_dirs: list[str] = field(default_factory=lambda: ["node_modules"])
    script_languages: dict[str, str] = field(
        default_factory=lambda: {
            ".js": "javascript",
            ".jsx": "javascript",
            ".ts": "typescript",
            ".tsx": "tsx",
        }
    )
    max_file_size_mb: Optional[float] = None
    allow_hidden_files: bool = True
    follow_symlinks: bool = False

    interoperability_score: float = DEFAULT_INTEROPERABILITY_SCORE
    decimal_places: int = 2
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for ext in self.extensions:
            if not ext.startswith("."):
                raise InvalidConfigError("extensions", ext, "extensions must start with '.'")
        for ext in self.script_languages:
            if ext not in self.extensions:
                raise InvalidConfigError(
                    "script_languages", ext, "script extension is not an eligible extension"
                )
        if self.max_file_size_mb is not None and self.max_file_size_mb <= 0:
            raise InvalidConfigError(
                "max_file_size_mb", self.max_file_size_mb, "must be positive"
            )
        if not 0.0 <= self.interoperability_score <= 100.0:
            raise InvalidConfigError(
                "interoperability_score", self.interoperability_score, "must be between 0 and 100"
            )
        if not 0 <= self.decimal_places <= 10:
            raise InvalidConfigError(
                "decimal_places", self.decimal_places, "must be between 0 and 10"
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "must be one of quiet, normal, verbose"
            )

    @property
    def max_file_size_bytes(self) -> Optional[int]:
        """Get max file size in bytes, None when unlimited."""
        if self.max_file_size_mb is None:
            return None
        return int(self.max_file_size_mb * 1024 * 1024)

    def language_for(self, path: Path) -> Optional[str]:
        """Grammar name for a script file, None for size-only files."""
        return self.script_languages.get(path.suffix.lower())


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
    """
    merged: dict = {}

    global_config = Path.home() / ".halstead-insight.toml"
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / "halstead-insight.toml"
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update(overrides)

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from HALSTEAD_* environment variables.

    Supported environment variables:
        HALSTEAD_MAX_FILE_SIZE_MB: float
        HALSTEAD_ALLOW_HIDDEN_FILES: bool (true/false/1/0)
        HALSTEAD_FOLLOW_SYMLINKS: bool
        HALSTEAD_INTEROPERABILITY_SCORE: float
        HALSTEAD_DECIMAL_PLACES: int
        HALSTEAD_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any HALSTEAD_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"HALSTEAD_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns:
        Parsed value or None if the field can't be set from the environment

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] parses as X
    if origin is Union:
        args = [arg for arg in type_hint.__args__ if arg is not type(None)]
        if len(args) == 1:
            return _parse_env_value(value, args[0])
        return None

    # Collections (extensions, script_languages) are TOML-only
    if origin in (list, dict) or type_hint in (list, dict):
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If no TOML parser is available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
