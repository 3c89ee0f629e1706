"""Configuration loading and management for project-analysis.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.project-analysis.toml)
    3. Project config (./project-analysis.toml)
    4. Explicit config file
    5. Environment variables (PROJECT_ANALYSIS_* prefix)
    6. Overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, max_periods=3)
    >>> config.verbosity
    'verbose'
    >>> config.max_periods
    3
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigurationError
from .periods import MAX_PERIODS

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "PROJECT_ANALYSIS_"
CONFIG_FILE_NAME = "project-analysis.toml"


@dataclass(frozen=True)
class AnalysisConfig:
    """Settings of an analysis run.

    Attributes:
        max_periods: Number of periods the analysis may activate (1..5).
        verbosity: Logging verbosity level.
        log_file: Optional file receiving a copy of the logs.
    """

    max_periods: int = MAX_PERIODS
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        if not 1 <= self.max_periods <= MAX_PERIODS:
            raise InvalidConfigurationError(
                "max_periods", self.max_periods, f"must be between 1 and {MAX_PERIODS}"
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigurationError("verbosity", self.verbosity, "must be quiet, normal or verbose")

    @property
    def verbose(self) -> bool:
        return self.verbosity == "verbose"

    @property
    def quiet(self) -> bool:
        return self.verbosity == "quiet"


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides; ``verbose``/``quiet`` booleans are
            translated to ``verbosity``

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
    """
    merged: dict = {}

    global_config = Path.home() / f".{CONFIG_FILE_NAME}"
    if global_config.exists():
        merged.update(_read_config_file(global_config, "global config"))

    project_config = Path.cwd() / CONFIG_FILE_NAME
    if project_config.exists():
        merged.update(_read_config_file(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_read_config_file(config_file, "config file"))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides.pop("verbose"):
            overrides["verbosity"] = "verbose"
    if "quiet" in overrides:
        if overrides.pop("quiet"):
            overrides["verbosity"] = "quiet"
    merged.update(overrides)

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _read_config_file(path: Path, label: str) -> dict:
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}")
    # Settings may live at top level or under [project-analysis]
    section = data.get("project-analysis", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid {label} '{path}': [project-analysis] must be a table")
    return dict(section)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from PROJECT_ANALYSIS_* environment variables.

    Supported environment variables:
        PROJECT_ANALYSIS_MAX_PERIODS: int
        PROJECT_ANALYSIS_VERBOSITY: quiet/normal/verbose
        PROJECT_ANALYSIS_LOG_FILE: str
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}
    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue
        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue
        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type."""
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

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
