"""Measures, metrics and the measure repository."""

from .measure import Measure, MeasureValue, MeasureVariations, MeasureVariationsBuilder
from .metrics import Metric, MetricRepository, MetricType
from .repository import MeasureRepository

__all__ = [
    "Measure",
    "MeasureValue",
    "MeasureVariations",
    "MeasureVariationsBuilder",
    "Metric",
    "MetricRepository",
    "MetricType",
    "MeasureRepository",
]
