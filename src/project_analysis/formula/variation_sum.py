"""VariationSumFormula: sums positive variations of a metric up the tree.

Only strictly positive variations contribute; a variation of 0 or below is
dropped, or replaced by ``default_input_value`` when one is configured. A
component lacking the measure (or whose measure has no variations)
contributes ``default_input_value`` on every supported period, or nothing.
"""

from __future__ import annotations

from typing import Optional

from ..components import CrawlerDepthLimit
from ..exceptions import InvalidConfigurationError
from ..measures import Measure, MeasureVariationsBuilder
from ..periods import PeriodPredicate
from .protocols import CounterInitializationContext, CreateMeasureContext
from .variation import DoubleVariationValueArray


class VariationSumFormula:
    def __init__(
        self,
        metric_key: str,
        supported_periods: PeriodPredicate,
        default_input_value: Optional[float] = None,
        depth_limit: CrawlerDepthLimit = CrawlerDepthLimit.LEAVES,
    ) -> None:
        if not metric_key:
            raise InvalidConfigurationError("metric_key", metric_key, "metric key can not be empty")
        if supported_periods is None or not callable(supported_periods):
            raise InvalidConfigurationError(
                "supported_periods", supported_periods, "period predicate must be callable"
            )
        self.metric_key = metric_key
        self.supported_periods = supported_periods
        self.default_input_value = default_input_value
        self.depth_limit = depth_limit

    def create_new_counter(self) -> VariationSumCounter:
        return VariationSumCounter(self.metric_key, self.supported_periods, self.default_input_value)

    def create_measure(
        self, counter: VariationSumCounter, context: CreateMeasureContext
    ) -> Optional[Measure]:
        if not self.depth_limit.is_deeper_than(context.component.type):
            return None
        builder = MeasureVariationsBuilder()
        for period in context.periods:
            if not self.supported_periods(period):
                continue
            cell = counter.array.get(period)
            if cell.is_set:
                builder.set_variation(period, cell.value)
        if builder.is_empty():
            return None
        return Measure.no_value(builder.build())

    def output_metric_keys(self) -> tuple[str, ...]:
        return (self.metric_key,)

    def __repr__(self) -> str:
        return f"VariationSumFormula({self.metric_key!r}, default={self.default_input_value!r})"


class VariationSumCounter:
    def __init__(
        self,
        metric_key: str,
        supported_periods: PeriodPredicate,
        default_input_value: Optional[float],
    ) -> None:
        self.metric_key = metric_key
        self.supported_periods = supported_periods
        self.default_input_value = default_input_value
        self.array = DoubleVariationValueArray()

    def aggregate(self, counter: VariationSumCounter) -> None:
        self.array.increment_all(counter.array)

    def initialize(self, context: CounterInitializationContext) -> None:
        measure = context.get_measure(self.metric_key)
        if measure is None or measure.variations is None:
            self._initialize_with_default_input_value(context)
            return
        variations = measure.variations
        for period in context.periods:
            if not self.supported_periods(period):
                continue
            if not variations.has_variation(period.index):
                continue
            variation = variations.get_variation(period.index)
            if variation > 0:
                self.array.increment(period, variation)
            elif self.default_input_value is not None:
                self.array.increment(period, self.default_input_value)

    def _initialize_with_default_input_value(self, context: CounterInitializationContext) -> None:
        if self.default_input_value is None:
            return
        for period in context.periods:
            if self.supported_periods(period):
                self.array.increment(period, self.default_input_value)
