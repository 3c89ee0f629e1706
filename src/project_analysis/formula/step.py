"""Computation step running the registered formulas."""

from __future__ import annotations

from ..holders import TreeRootHolder
from ..logging_config import get_logger
from ..measures import MeasureRepository, MetricRepository
from ..periods import PeriodsHolder
from .executor import FormulaExecutor
from .registry import FormulaRegistry

logger = get_logger(__name__)


class FormulaExecutionStep:
    """Folds the frozen formula registry over the analysed tree."""

    description = "Compute aggregated measures"

    def __init__(
        self,
        registry: FormulaRegistry,
        tree_root_holder: TreeRootHolder,
        measure_repository: MeasureRepository,
        metric_repository: MetricRepository,
        periods_holder: PeriodsHolder,
    ) -> None:
        self._registry = registry.freeze()
        self._tree_root_holder = tree_root_holder
        self._measure_repository = measure_repository
        self._metric_repository = metric_repository
        self._periods_holder = periods_holder

    def execute(self) -> None:
        executor = FormulaExecutor(
            self._registry,
            self._measure_repository,
            self._metric_repository,
            self._periods_holder,
        )
        emitted = executor.execute(self._tree_root_holder.get_root())
        logger.info(f"{len(self._registry)} formulas produced {emitted} measures")
