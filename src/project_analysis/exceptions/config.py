"""Configuration exceptions: invalid construction inputs and settings."""

from typing import Any

from .base import ProjectAnalysisError


class ConfigurationError(ProjectAnalysisError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when a required input is missing, empty or out of range."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value!r}",
            details={"key": key, "value": repr(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
