"""Metric definitions and the metric repository."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from ..exceptions import InvalidConfigurationError, UnknownMetricError


class MetricType(Enum):
    INT = "int"
    FLOAT = "float"
    PERCENT = "percent"
    BOOLEAN = "boolean"
    STRING = "string"
    LEVEL = "level"


@dataclass(frozen=True)
class Metric:
    """A named metric a measure can be attached to."""

    key: str
    name: str
    type: MetricType = MetricType.FLOAT

    def __post_init__(self) -> None:
        if not self.key:
            raise InvalidConfigurationError("metric.key", self.key, "metric key can not be empty")


class MetricRepository:
    """Registered metrics of the current analysis, looked up by key."""

    def __init__(self, metrics: Iterable[Metric] = ()) -> None:
        self._metrics: dict[str, Metric] = {}
        for metric in metrics:
            self.register(metric)

    def register(self, metric: Metric) -> None:
        if metric.key in self._metrics:
            raise InvalidConfigurationError("metric.key", metric.key, "metric is already registered")
        self._metrics[metric.key] = metric

    def get_by_key(self, key: str) -> Metric:
        try:
            return self._metrics[key]
        except KeyError:
            raise UnknownMetricError(key) from None

    def __contains__(self, key: object) -> bool:
        return key in self._metrics

    def __iter__(self) -> Iterator[Metric]:
        return iter(self._metrics.values())

    def __len__(self) -> int:
        return len(self._metrics)
