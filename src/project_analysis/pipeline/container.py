"""Container of the holders and repositories of one analysis.

A container lives for exactly one analysis: it is created when the task
starts, handed to the steps that fill it, read by the post-analysis
notifier, and reset afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from ..ce_task import CeTaskDescriptor
from ..config import AnalysisConfig
from ..formula import FormulaExecutionStep, FormulaRegistry
from ..holders import (
    AnalysisMetadataHolder,
    QualityGateHolder,
    QualityGateStatusHolder,
    TreeRootHolder,
)
from ..logging_config import setup_logging_from_config
from ..measures import MeasureRepository, MetricRepository
from ..periods import PeriodsHolder
from ..posttask import PostProjectAnalysisTask, PostProjectAnalysisTasksExecutor
from .executor import ComputationStep, ComputationStepExecutor


@dataclass
class AnalysisContainer:
    ce_task: CeTaskDescriptor
    metric_repository: MetricRepository = field(default_factory=MetricRepository)
    measure_repository: MeasureRepository = field(default_factory=MeasureRepository)
    periods_holder: PeriodsHolder = field(default_factory=PeriodsHolder)
    tree_root_holder: TreeRootHolder = field(default_factory=TreeRootHolder)
    analysis_metadata_holder: AnalysisMetadataHolder = field(default_factory=AnalysisMetadataHolder)
    quality_gate_holder: QualityGateHolder = field(default_factory=QualityGateHolder)
    quality_gate_status_holder: QualityGateStatusHolder = field(default_factory=QualityGateStatusHolder)

    @classmethod
    def create(cls, ce_task: CeTaskDescriptor, config: Optional[AnalysisConfig] = None) -> AnalysisContainer:
        """Container for one analysis. An explicit config also sets up logging."""
        if config is None:
            config = AnalysisConfig()
        else:
            setup_logging_from_config(config)
        return cls(ce_task=ce_task, periods_holder=PeriodsHolder(max_periods=config.max_periods))

    def formula_step(self, registry: FormulaRegistry) -> FormulaExecutionStep:
        return FormulaExecutionStep(
            registry,
            self.tree_root_holder,
            self.measure_repository,
            self.metric_repository,
            self.periods_holder,
        )

    def post_analysis_executor(
        self, tasks: Iterable[PostProjectAnalysisTask] = ()
    ) -> PostProjectAnalysisTasksExecutor:
        return PostProjectAnalysisTasksExecutor(
            self.ce_task,
            self.analysis_metadata_holder,
            self.quality_gate_holder,
            self.quality_gate_status_holder,
            tasks,
        )

    def step_executor(
        self,
        steps: Iterable[ComputationStep],
        tasks: Iterable[PostProjectAnalysisTask] = (),
        is_cancelled: Optional[Callable[[], bool]] = None,
    ) -> ComputationStepExecutor:
        """Executor for ``steps`` notifying ``tasks`` when it terminates."""
        return ComputationStepExecutor(
            steps,
            listener=self.post_analysis_executor(tasks),
            is_cancelled=is_cancelled,
        )

    def reset(self) -> None:
        self.measure_repository.clear()
        self.periods_holder.reset()
        self.tree_root_holder.reset()
        self.analysis_metadata_holder.reset()
        self.quality_gate_holder.reset()
        self.quality_gate_status_holder.reset()
