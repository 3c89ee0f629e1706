"""
project-analysis - measure aggregation and post-analysis notification.

Folds pluggable formulas bottom-up over a component tree to aggregate
measures, and notifies post-analysis tasks with an immutable summary once
the computation pipeline terminates.
"""

__version__ = "0.1.0"

from .components import Component, ComponentType, CrawlerDepthLimit, build_component
from .config import AnalysisConfig, load_config
from .formula import FormulaExecutor, FormulaRegistry, IntSumFormula, VariationSumFormula
from .measures import Measure, MeasureRepository, MeasureVariations, Metric, MetricRepository
from .periods import Period, PeriodsHolder
from .pipeline import AnalysisContainer, ComputationStepExecutor
from .posttask import PostProjectAnalysisTasksExecutor, ProjectAnalysis

__all__ = [
    "Component",
    "ComponentType",
    "CrawlerDepthLimit",
    "build_component",
    "AnalysisConfig",
    "load_config",
    "FormulaExecutor",
    "FormulaRegistry",
    "IntSumFormula",
    "VariationSumFormula",
    "Measure",
    "MeasureRepository",
    "MeasureVariations",
    "Metric",
    "MetricRepository",
    "Period",
    "PeriodsHolder",
    "AnalysisContainer",
    "ComputationStepExecutor",
    "PostProjectAnalysisTasksExecutor",
    "ProjectAnalysis",
]
