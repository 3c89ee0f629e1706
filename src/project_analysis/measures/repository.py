"""In-memory measure repository keyed by (component, metric key).

Two layers are kept apart:

    input     measures loaded from the analysis report before any step runs
    computed  measures added by steps and formulas during the analysis

A formula may therefore emit on the very metric it reads: the leaf's input
measure stays readable, and ``get_measure`` prefers the computed measure
once there is one.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from ..components import Component
from ..exceptions import DuplicateMeasureError, InvalidConfigurationError
from ..logging_config import get_logger
from .measure import Measure

logger = get_logger(__name__)

_Layer = dict[str, dict[str, Measure]]


class MeasureRepository:
    def __init__(self) -> None:
        self._input: _Layer = {}
        self._computed: _Layer = {}

    def add_input(self, component: Component, metric_key: str, measure: Measure) -> None:
        """Load a measure read from the analysis report."""
        self._put(self._input, component, metric_key, measure)

    def add(self, component: Component, metric_key: str, measure: Measure) -> None:
        """Add a computed measure. A second add for the same pair fails."""
        self._put(self._computed, component, metric_key, measure)
        logger.debug(f"Added measure {metric_key} on {component.key}")

    def get_measure(self, component: Component, metric_key: str) -> Optional[Measure]:
        computed = self._computed.get(component.uuid, {}).get(metric_key)
        if computed is not None:
            return computed
        return self._input.get(component.uuid, {}).get(metric_key)

    def get_input_measure(self, component: Component, metric_key: str) -> Optional[Measure]:
        return self._input.get(component.uuid, {}).get(metric_key)

    def get_computed_measure(self, component: Component, metric_key: str) -> Optional[Measure]:
        return self._computed.get(component.uuid, {}).get(metric_key)

    def get_measures(self, component: Component) -> Mapping[str, Measure]:
        """All measures of a component, computed ones shadowing input ones."""
        merged = dict(self._input.get(component.uuid, {}))
        merged.update(self._computed.get(component.uuid, {}))
        return MappingProxyType(merged)

    def __len__(self) -> int:
        return sum(len(m) for m in self._computed.values())

    def clear(self) -> None:
        self._input.clear()
        self._computed.clear()

    @staticmethod
    def _put(layer: _Layer, component: Component, metric_key: str, measure: Measure) -> None:
        if not metric_key:
            raise InvalidConfigurationError("metric_key", metric_key, "metric key can not be empty")
        if measure is None:
            raise InvalidConfigurationError("measure", None, "measure can not be None")
        per_component = layer.setdefault(component.uuid, {})
        if metric_key in per_component:
            raise DuplicateMeasureError(component.key, metric_key)
        per_component[metric_key] = measure
