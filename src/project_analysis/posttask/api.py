"""Public, immutable view of a finished analysis handed to post-analysis tasks.

Everything here is frozen: a task can keep reading the snapshot during its
``finished`` call but can not change what other tasks will see.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Protocol

from ..exceptions import InvalidConfigurationError


class CeTaskStatus(Enum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


class QualityGateStatus(Enum):
    OK = "OK"
    WARN = "WARN"
    ERROR = "ERROR"


class EvaluationStatus(Enum):
    OK = "OK"
    WARN = "WARN"
    ERROR = "ERROR"
    NO_VALUE = "NO_VALUE"


class ConditionOperator(Enum):
    EQUALS = "EQUALS"
    NOT_EQUALS = "NOT_EQUALS"
    GREATER_THAN = "GREATER_THAN"
    LESS_THAN = "LESS_THAN"


@dataclass(frozen=True)
class CeTask:
    uuid: str
    status: CeTaskStatus


@dataclass(frozen=True)
class Project:
    uuid: str
    key: str
    name: str


@dataclass(frozen=True)
class ConditionSummary:
    """One evaluated condition. ``value`` is None iff status is NO_VALUE."""

    status: EvaluationStatus
    metric_key: str
    operator: ConditionOperator
    error_threshold: Optional[str]
    warning_threshold: Optional[str]
    on_leak_period: bool
    value: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.status is EvaluationStatus.NO_VALUE) != (self.value is None):
            raise InvalidConfigurationError(
                "condition.value", self.value, f"inconsistent with status {self.status.value}"
            )


@dataclass(frozen=True)
class QualityGateSummary:
    id: str
    name: str
    status: QualityGateStatus
    conditions: tuple[ConditionSummary, ...] = ()


@dataclass(frozen=True)
class ProjectAnalysis:
    """Snapshot of a terminated analysis.

    ``quality_gate`` is present only when the task succeeded and the project
    had a quality gate.
    """

    ce_task: CeTask
    project: Project
    date: datetime
    quality_gate: Optional[QualityGateSummary] = None

    def __post_init__(self) -> None:
        for name in ("ce_task", "project", "date"):
            if getattr(self, name) is None:
                raise InvalidConfigurationError(f"project_analysis.{name}", None, f"{name} can not be None")


class PostProjectAnalysisTask(Protocol):
    """Extension point notified once when an analysis terminates.

    Implementations must not keep the snapshot after ``finished`` returns.
    """

    def finished(self, analysis: ProjectAnalysis) -> None: ...
