"""Quality gate as evaluated by the pipeline (internal model)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..exceptions import InvalidConfigurationError


class QualityGateStatus(Enum):
    """Overall status computed for the gate."""

    OK = "OK"
    WARN = "WARN"
    ERROR = "ERROR"


class EvaluationStatus(Enum):
    """Status of a single condition."""

    OK = "OK"
    WARN = "WARN"
    ERROR = "ERROR"
    NO_VALUE = "NO_VALUE"


class ConditionOperator(Enum):
    EQUALS = "EQ"
    NOT_EQUALS = "NE"
    GREATER_THAN = "GT"
    LESS_THAN = "LT"


@dataclass(frozen=True)
class Condition:
    """A threshold on a metric. Hashable so it can key per-condition statuses."""

    metric_key: str
    operator: ConditionOperator
    warning_threshold: Optional[str] = None
    error_threshold: Optional[str] = None
    has_period: bool = False

    def __post_init__(self) -> None:
        if not self.metric_key:
            raise InvalidConfigurationError("condition.metric_key", self.metric_key, "metric key can not be empty")


@dataclass(frozen=True)
class ConditionStatus:
    """Outcome of evaluating one condition; value is absent for NO_VALUE."""

    status: EvaluationStatus
    value: Optional[str] = None

    def __post_init__(self) -> None:
        if self.status is EvaluationStatus.NO_VALUE and self.value is not None:
            raise InvalidConfigurationError("condition_status.value", self.value, "NO_VALUE status has no value")
        if self.status is not EvaluationStatus.NO_VALUE and self.value is None:
            raise InvalidConfigurationError("condition_status.value", self.value, f"{self.status.value} status requires a value")

    @classmethod
    def no_value(cls) -> ConditionStatus:
        return cls(EvaluationStatus.NO_VALUE)


@dataclass(frozen=True)
class QualityGate:
    id: int
    name: str
    conditions: tuple[Condition, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidConfigurationError("quality_gate.name", self.name, "name can not be empty")
        if not isinstance(self.conditions, tuple):
            object.__setattr__(self, "conditions", tuple(self.conditions))
