"""Exception hierarchy for project-analysis."""

from .analysis import (
    AnalysisCancelledError,
    AnalysisError,
    DuplicateMeasureError,
    HolderAlreadyInitializedError,
    HolderError,
    HolderNotInitializedError,
    InvalidMappingError,
    UnknownMetricError,
)
from .base import ProjectAnalysisError
from .config import ConfigurationError, InvalidConfigurationError

__all__ = [
    "ProjectAnalysisError",
    "AnalysisError",
    "HolderError",
    "HolderNotInitializedError",
    "HolderAlreadyInitializedError",
    "DuplicateMeasureError",
    "InvalidMappingError",
    "UnknownMetricError",
    "AnalysisCancelledError",
    "ConfigurationError",
    "InvalidConfigurationError",
]
