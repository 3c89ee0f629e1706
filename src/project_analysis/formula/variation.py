"""Per-period accumulators keeping "unset" distinct from "set to 0"."""

from __future__ import annotations

from ..periods import MAX_PERIODS, Period


class DoubleValue:
    """A double that remembers whether it has ever been written."""

    __slots__ = ("_set", "_value")

    def __init__(self) -> None:
        self._set = False
        self._value = 0.0

    def increment(self, value: float) -> DoubleValue:
        self._value += value
        self._set = True
        return self

    def increment_value(self, other: DoubleValue) -> DoubleValue:
        if other.is_set:
            self.increment(other.value)
        return self

    @property
    def is_set(self) -> bool:
        return self._set

    @property
    def value(self) -> float:
        return self._value

    def __repr__(self) -> str:
        return f"DoubleValue({self._value!r})" if self._set else "DoubleValue(<unset>)"


class DoubleVariationValueArray:
    """One DoubleValue per period index."""

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values = tuple(DoubleValue() for _ in range(MAX_PERIODS))

    def increment(self, period: Period, value: float) -> DoubleVariationValueArray:
        self._values[period.index - 1].increment(value)
        return self

    def increment_all(self, other: DoubleVariationValueArray) -> DoubleVariationValueArray:
        for mine, theirs in zip(self._values, other._values):
            mine.increment_value(theirs)
        return self

    def is_set(self, period: Period) -> bool:
        return self._values[period.index - 1].is_set

    def get(self, period: Period) -> DoubleValue:
        return self._values[period.index - 1]

    def as_dict(self) -> dict[int, float]:
        """Set cells keyed by period index."""
        return {i: v.value for i, v in enumerate(self._values, start=1) if v.is_set}
