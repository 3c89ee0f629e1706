"""Fold every registered formula over the component tree.

The tree is walked in post-order. For each component and formula:

    leaf      -> new counter, initialize() from the component's measures
    non-leaf  -> new counter, aggregate() every child counter in child order
    then      -> create_measure() per output metric; a returned measure is
                 added to the measure repository

A child's counters are dropped as soon as its parent has aggregated them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..components import Component
from ..logging_config import get_logger
from ..measures import Measure, MeasureRepository, Metric, MetricRepository
from ..periods import Period, PeriodsHolder
from .protocols import Counter, Formula

logger = get_logger(__name__)


@dataclass(frozen=True)
class _CounterInitializationContext:
    component: Component
    periods: Sequence[Period]
    measure_repository: MeasureRepository

    def get_measure(self, metric_key: str) -> Optional[Measure]:
        return self.measure_repository.get_measure(self.component, metric_key)


@dataclass(frozen=True)
class _CreateMeasureContext:
    component: Component
    periods: Sequence[Period]
    metric: Metric


class FormulaExecutor:
    """Run formulas over a component tree and store the emitted measures."""

    def __init__(
        self,
        formulas: Iterable[Formula],
        measure_repository: MeasureRepository,
        metric_repository: MetricRepository,
        periods_holder: PeriodsHolder,
    ) -> None:
        self._formulas: tuple[Formula, ...] = tuple(formulas)
        self._measure_repository = measure_repository
        self._metric_repository = metric_repository
        self._periods_holder = periods_holder
        self._emitted = 0

    def execute(self, root: Component) -> int:
        """Fold all formulas over ``root``. Returns the number of measures added."""
        self._emitted = 0
        if not self._formulas:
            return 0
        # Fail on unknown output metrics before touching the tree
        outputs = [
            tuple(self._metric_repository.get_by_key(key) for key in formula.output_metric_keys())
            for formula in self._formulas
        ]
        periods = tuple(self._periods_holder.get_periods())
        self._visit(root, periods, outputs)
        logger.debug(f"Formulas emitted {self._emitted} measures from {root.key}")
        return self._emitted

    def _visit(
        self,
        component: Component,
        periods: Sequence[Period],
        outputs: list[tuple[Metric, ...]],
    ) -> list[Counter]:
        children_counters = [self._visit(child, periods, outputs) for child in component.children]

        counters: list[Counter] = []
        for position, formula in enumerate(self._formulas):
            counter = formula.create_new_counter()
            if component.is_leaf:
                counter.initialize(
                    _CounterInitializationContext(component, periods, self._measure_repository)
                )
            else:
                for child_counters in children_counters:
                    counter.aggregate(child_counters[position])
            self._create_measures(formula, counter, component, periods, outputs[position])
            counters.append(counter)
        return counters

    def _create_measures(
        self,
        formula: Formula,
        counter: Counter,
        component: Component,
        periods: Sequence[Period],
        metrics: tuple[Metric, ...],
    ) -> None:
        for metric in metrics:
            measure = formula.create_measure(counter, _CreateMeasureContext(component, periods, metric))
            if measure is not None:
                self._measure_repository.add(component, metric.key, measure)
                self._emitted += 1
