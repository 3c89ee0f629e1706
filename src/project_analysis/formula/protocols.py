"""Protocol classes for formulas, counters and their contexts."""

from typing import Optional, Protocol, Sequence, TypeVar

from ..components import Component
from ..measures import Measure, Metric
from ..periods import Period

C = TypeVar("C", bound="Counter")


class CounterInitializationContext(Protocol):
    """What a counter sees when it is initialized on a leaf."""

    @property
    def component(self) -> Component: ...

    @property
    def periods(self) -> Sequence[Period]: ...

    def get_measure(self, metric_key: str) -> Optional[Measure]: ...


class CreateMeasureContext(Protocol):
    """What a formula sees when it turns a counter into a measure."""

    @property
    def component(self) -> Component: ...

    @property
    def periods(self) -> Sequence[Period]: ...

    @property
    def metric(self) -> Metric: ...


class Counter(Protocol):
    """Per-component, per-formula accumulator.

    ``initialize`` is called once on leaves; ``aggregate`` once per child
    of a non-leaf. ``aggregate`` must be commutative and associative.
    """

    def initialize(self, context: CounterInitializationContext) -> None: ...

    def aggregate(self, counter: "Counter") -> None: ...


class Formula(Protocol[C]):
    """Formulas create counters and turn them into zero or one measure."""

    def create_new_counter(self) -> C: ...

    def create_measure(self, counter: C, context: CreateMeasureContext) -> Optional[Measure]: ...

    def output_metric_keys(self) -> tuple[str, ...]: ...
