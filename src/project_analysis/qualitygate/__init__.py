"""Internal quality gate model filled by the pipeline."""

from .models import (
    Condition,
    ConditionOperator,
    ConditionStatus,
    EvaluationStatus,
    QualityGate,
    QualityGateStatus,
)

__all__ = [
    "Condition",
    "ConditionOperator",
    "ConditionStatus",
    "EvaluationStatus",
    "QualityGate",
    "QualityGateStatus",
]
