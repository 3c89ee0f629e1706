"""Executor notifying post-analysis tasks once an analysis terminates.

Registered as the listener of the computation step executor. When the
pipeline terminates, it reads the holders once, builds an immutable
ProjectAnalysis and hands it to every task in registration order. A task
raising does not prevent the following tasks from running.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterable, Mapping, Optional

from ..ce_task import CeTaskDescriptor
from ..exceptions import InvalidConfigurationError, InvalidMappingError
from ..holders import AnalysisMetadataHolder, QualityGateHolder, QualityGateStatusHolder
from ..logging_config import get_logger
from ..qualitygate import models as internal
from .api import (
    CeTask,
    CeTaskStatus,
    ConditionOperator,
    ConditionSummary,
    EvaluationStatus,
    PostProjectAnalysisTask,
    Project,
    ProjectAnalysis,
    QualityGateStatus,
    QualityGateSummary,
)

logger = get_logger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_GATE_STATUSES = {
    internal.QualityGateStatus.OK: QualityGateStatus.OK,
    internal.QualityGateStatus.WARN: QualityGateStatus.WARN,
    internal.QualityGateStatus.ERROR: QualityGateStatus.ERROR,
}

_EVALUATION_STATUSES = {
    internal.EvaluationStatus.OK: EvaluationStatus.OK,
    internal.EvaluationStatus.WARN: EvaluationStatus.WARN,
    internal.EvaluationStatus.ERROR: EvaluationStatus.ERROR,
    internal.EvaluationStatus.NO_VALUE: EvaluationStatus.NO_VALUE,
}

_OPERATORS = {
    internal.ConditionOperator.EQUALS: ConditionOperator.EQUALS,
    internal.ConditionOperator.NOT_EQUALS: ConditionOperator.NOT_EQUALS,
    internal.ConditionOperator.GREATER_THAN: ConditionOperator.GREATER_THAN,
    internal.ConditionOperator.LESS_THAN: ConditionOperator.LESS_THAN,
}


@dataclass(frozen=True)
class ExtensionFailure:
    """A post-analysis task that raised while being notified."""

    task: str
    error: BaseException
    analysis: ProjectAnalysis


def task_name(task: PostProjectAnalysisTask) -> str:
    return getattr(task, "name", None) or type(task).__qualname__


class PostProjectAnalysisTasksExecutor:
    def __init__(
        self,
        ce_task: CeTaskDescriptor,
        analysis_metadata_holder: AnalysisMetadataHolder,
        quality_gate_holder: QualityGateHolder,
        quality_gate_status_holder: QualityGateStatusHolder,
        tasks: Optional[Iterable[PostProjectAnalysisTask]] = None,
    ) -> None:
        required = {
            "ce_task": ce_task,
            "analysis_metadata_holder": analysis_metadata_holder,
            "quality_gate_holder": quality_gate_holder,
            "quality_gate_status_holder": quality_gate_status_holder,
        }
        for name, value in required.items():
            if value is None:
                raise InvalidConfigurationError(name, None, f"{name} can not be None")
        self._ce_task = ce_task
        self._analysis_metadata_holder = analysis_metadata_holder
        self._quality_gate_holder = quality_gate_holder
        self._quality_gate_status_holder = quality_gate_status_holder
        # Snapshot: registering a task later does not affect this analysis
        self._tasks: tuple[PostProjectAnalysisTask, ...] = tuple(tasks or ())

    @property
    def tasks(self) -> tuple[PostProjectAnalysisTask, ...]:
        return self._tasks

    def finished(self, all_steps_executed: bool) -> list[ExtensionFailure]:
        """Notify every task. Returns the failures, which are also logged."""
        if not self._tasks:
            return []

        status = CeTaskStatus.SUCCESS if all_steps_executed else CeTaskStatus.FAILED
        analysis = self._create_project_analysis(status)

        failures: list[ExtensionFailure] = []
        for task in self._tasks:
            name = task_name(task)
            try:
                task.finished(analysis)
            except Exception as e:
                logger.error(f"Execution of post-analysis task {name} failed on {analysis}", exc_info=True)
                failures.append(ExtensionFailure(task=name, error=e, analysis=analysis))
            else:
                logger.debug(f"Post-analysis task {name} completed")
        return failures

    def _create_project_analysis(self, status: CeTaskStatus) -> ProjectAnalysis:
        return ProjectAnalysis(
            ce_task=CeTask(uuid=self._ce_task.uuid, status=status),
            project=Project(
                uuid=self._ce_task.component_uuid,
                key=self._ce_task.component_key,
                name=self._ce_task.component_name,
            ),
            date=self._analysis_date(),
            quality_gate=self._create_quality_gate() if status is CeTaskStatus.SUCCESS else None,
        )

    def _analysis_date(self) -> datetime:
        return _EPOCH + timedelta(milliseconds=self._analysis_metadata_holder.get_analysis_date())

    def _create_quality_gate(self) -> Optional[QualityGateSummary]:
        gate = self._quality_gate_holder.get_quality_gate()
        if gate is None:
            return None
        return QualityGateSummary(
            id=str(gate.id),
            name=gate.name,
            status=convert_status(self._quality_gate_status_holder.get_status()),
            conditions=convert_conditions(
                gate.conditions, self._quality_gate_status_holder.get_status_per_conditions()
            ),
        )


def convert_status(status: internal.QualityGateStatus) -> QualityGateStatus:
    """Map the internal gate status to the public one."""
    try:
        return _GATE_STATUSES[status]
    except (KeyError, TypeError):
        raise InvalidMappingError(status, "QualityGate.Status") from None


def convert_conditions(
    conditions: Iterable[internal.Condition],
    status_per_conditions: Mapping[internal.Condition, internal.ConditionStatus],
) -> tuple[ConditionSummary, ...]:
    """Public conditions in gate order, each joined with its evaluation."""
    return tuple(_convert_condition(c, status_per_conditions) for c in conditions)


def _convert_condition(
    condition: internal.Condition,
    status_per_conditions: Mapping[internal.Condition, internal.ConditionStatus],
) -> ConditionSummary:
    condition_status = status_per_conditions.get(condition)
    if condition_status is None:
        raise InvalidMappingError(
            condition.metric_key, "QualityGate.Condition", reason="missing status for condition"
        )
    try:
        status = _EVALUATION_STATUSES[condition_status.status]
        operator = _OPERATORS[condition.operator]
    except (KeyError, TypeError) as e:
        raise InvalidMappingError(e.args[0] if e.args else None, "QualityGate.Condition") from None
    return ConditionSummary(
        status=status,
        metric_key=condition.metric_key,
        operator=operator,
        error_threshold=condition.error_threshold,
        warning_threshold=condition.warning_threshold,
        on_leak_period=condition.has_period,
        value=condition_status.value,
    )
