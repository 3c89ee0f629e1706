"""Formula engine: pluggable formulas folded bottom-up over the component tree."""

from .executor import FormulaExecutor
from .int_sum import IntSumCounter, IntSumFormula
from .protocols import Counter, CounterInitializationContext, CreateMeasureContext, Formula
from .registry import FormulaRegistry
from .step import FormulaExecutionStep
from .variation import DoubleValue, DoubleVariationValueArray
from .variation_sum import VariationSumCounter, VariationSumFormula

__all__ = [
    "Counter",
    "CounterInitializationContext",
    "CreateMeasureContext",
    "Formula",
    "FormulaExecutor",
    "FormulaRegistry",
    "FormulaExecutionStep",
    "DoubleValue",
    "DoubleVariationValueArray",
    "VariationSumFormula",
    "VariationSumCounter",
    "IntSumFormula",
    "IntSumCounter",
]
