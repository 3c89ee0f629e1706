"""Computation pipeline: sequential steps and the per-analysis container."""

from .container import AnalysisContainer
from .executor import ComputationStep, ComputationStepExecutor, Listener

__all__ = ["AnalysisContainer", "ComputationStep", "ComputationStepExecutor", "Listener"]
