"""IntSumFormula: sums an integer measure up the tree."""

from __future__ import annotations

from typing import Optional

from ..components import CrawlerDepthLimit
from ..exceptions import InvalidConfigurationError, InvalidMappingError
from ..measures import Measure
from .protocols import CounterInitializationContext, CreateMeasureContext


class IntSumFormula:
    """Sum of the values of ``input_metric_key`` on leaves, emitted as
    ``output_metric_key`` (defaults to the input key).

    Leaves without the input contribute ``default_input_value`` when set.
    A component whose subtree contributed nothing gets no measure.
    """

    def __init__(
        self,
        input_metric_key: str,
        output_metric_key: Optional[str] = None,
        default_input_value: Optional[int] = None,
        depth_limit: CrawlerDepthLimit = CrawlerDepthLimit.LEAVES,
    ) -> None:
        if not input_metric_key:
            raise InvalidConfigurationError(
                "input_metric_key", input_metric_key, "metric key can not be empty"
            )
        self.input_metric_key = input_metric_key
        self.output_metric_key = output_metric_key or input_metric_key
        self.default_input_value = default_input_value
        self.depth_limit = depth_limit

    def create_new_counter(self) -> IntSumCounter:
        return IntSumCounter(self.input_metric_key, self.default_input_value)

    def create_measure(self, counter: IntSumCounter, context: CreateMeasureContext) -> Optional[Measure]:
        if not self.depth_limit.is_deeper_than(context.component.type):
            return None
        if not counter.initialized:
            return None
        return Measure.of(counter.value)

    def output_metric_keys(self) -> tuple[str, ...]:
        return (self.output_metric_key,)

    def __repr__(self) -> str:
        return f"IntSumFormula({self.input_metric_key!r} -> {self.output_metric_key!r})"


class IntSumCounter:
    def __init__(self, metric_key: str, default_input_value: Optional[int]) -> None:
        self.metric_key = metric_key
        self.default_input_value = default_input_value
        self.value = 0
        self.initialized = False

    def aggregate(self, counter: IntSumCounter) -> None:
        if counter.initialized:
            self.value += counter.value
            self.initialized = True

    def initialize(self, context: CounterInitializationContext) -> None:
        measure = context.get_measure(self.metric_key)
        if measure is not None and measure.has_value:
            if not isinstance(measure.value, int) or isinstance(measure.value, bool):
                raise InvalidMappingError(measure.value, f"integer value of {self.metric_key}")
            self.value += measure.value
            self.initialized = True
        elif self.default_input_value is not None:
            self.value += self.default_input_value
            self.initialized = True
