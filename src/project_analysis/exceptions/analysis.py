"""Analysis-time exceptions: holders, measures, mappings, cancellation."""

from typing import Any, Optional

from .base import ProjectAnalysisError


class AnalysisError(ProjectAnalysisError):
    """Base class for errors raised while an analysis runs."""

    pass


class HolderError(AnalysisError):
    """Base class for misuse of a per-analysis holder."""

    def __init__(self, message: str, holder: str, reason: str):
        super().__init__(message, details={"holder": holder, "reason": reason})
        self.holder = holder
        self.reason = reason


class HolderNotInitializedError(HolderError):
    """Raised when a holder is read before its producing step set it."""

    def __init__(self, holder: str, what: str):
        super().__init__(
            f"{what} has not been set",
            holder=holder,
            reason="read before initialization",
        )
        self.what = what


class HolderAlreadyInitializedError(HolderError):
    """Raised when a set-once holder is written a second time."""

    def __init__(self, holder: str, what: str):
        super().__init__(
            f"{what} has already been set",
            holder=holder,
            reason="holder is set-once",
        )
        self.what = what


class DuplicateMeasureError(AnalysisError):
    """Raised when a measure already exists for (component, metric)."""

    def __init__(self, component_key: str, metric_key: str):
        super().__init__(
            f"A measure already exists for metric '{metric_key}' on component '{component_key}'",
            details={"component": component_key, "metric": metric_key},
        )
        self.component_key = component_key
        self.metric_key = metric_key


class InvalidMappingError(AnalysisError):
    """Raised when a value falls outside the domain it is converted to."""

    def __init__(self, value: Any, target: str, reason: Optional[str] = None):
        details = {"value": repr(value), "target": target}
        if reason:
            details["reason"] = reason
        super().__init__(f"Unsupported value {value!r} can not be converted to {target}", details=details)
        self.value = value
        self.target = target
        self.reason = reason


class UnknownMetricError(AnalysisError):
    """Raised when a metric key is not registered."""

    def __init__(self, metric_key: str):
        super().__init__(f"Metric with key '{metric_key}' does not exist", details={"metric": metric_key})
        self.metric_key = metric_key


class AnalysisCancelledError(AnalysisError):
    """Raised when cancellation is observed between computation steps."""

    def __init__(self, next_step: str):
        super().__init__("Analysis has been cancelled", details={"next_step": next_step})
        self.next_step = next_step
