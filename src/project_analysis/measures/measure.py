"""Measures and their per-period variations.

A measure carries an optional scalar value and optional variations. A
variations container is never empty: a builder with no value set does not
produce a container at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Union

from ..exceptions import InvalidConfigurationError
from ..periods import MAX_PERIODS, Period

MeasureValue = Union[int, float, str, bool]


@dataclass(frozen=True)
class MeasureVariations:
    """Immutable variations, one optional delta per period index (1-based)."""

    values: tuple[Optional[float], ...]

    def __post_init__(self) -> None:
        values = tuple(self.values)
        if len(values) > MAX_PERIODS:
            raise InvalidConfigurationError(
                "variations", len(values), f"at most {MAX_PERIODS} variations are supported"
            )
        if all(v is None for v in values):
            raise InvalidConfigurationError("variations", values, "there must be at least one variation")
        padded = values + (None,) * (MAX_PERIODS - len(values))
        object.__setattr__(self, "values", padded)

    @classmethod
    def of(cls, *variations: Optional[float]) -> MeasureVariations:
        """Build from positional values, the first one being period 1."""
        return cls(tuple(None if v is None else float(v) for v in variations))

    @classmethod
    def from_mapping(cls, variations: dict[int, float]) -> MeasureVariations:
        builder = MeasureVariationsBuilder()
        for index, value in variations.items():
            builder.set_variation_at(index, value)
        return builder.build()

    def has_variation(self, period_index: int) -> bool:
        _check_index(period_index)
        return self.values[period_index - 1] is not None

    def get_variation(self, period_index: int) -> float:
        _check_index(period_index)
        value = self.values[period_index - 1]
        if value is None:
            raise KeyError(f"No variation for period {period_index}")
        return value

    def items(self) -> Iterator[tuple[int, float]]:
        for position, value in enumerate(self.values, start=1):
            if value is not None:
                yield position, value

    def as_dict(self) -> dict[int, float]:
        return dict(self.items())


class MeasureVariationsBuilder:
    """Mutable builder for MeasureVariations. Each index may be set once."""

    def __init__(self) -> None:
        self._values: list[Optional[float]] = [None] * MAX_PERIODS

    def set_variation(self, period: Period, value: float) -> MeasureVariationsBuilder:
        return self.set_variation_at(period.index, value)

    def set_variation_at(self, period_index: int, value: float) -> MeasureVariationsBuilder:
        _check_index(period_index)
        if self._values[period_index - 1] is not None:
            raise InvalidConfigurationError(
                "variations", period_index, "variation for this period has already been set"
            )
        self._values[period_index - 1] = float(value)
        return self

    def is_empty(self) -> bool:
        return all(v is None for v in self._values)

    def build(self) -> MeasureVariations:
        return MeasureVariations(tuple(self._values))


def _check_index(period_index: int) -> None:
    if not 1 <= period_index <= MAX_PERIODS:
        raise InvalidConfigurationError(
            "period.index", period_index, f"index must be between 1 and {MAX_PERIODS}"
        )


@dataclass(frozen=True)
class Measure:
    """A value attached to a (component, metric) pair.

    A measure carries at most one of a scalar ``value`` and ``variations``;
    with neither it is a no-value measure. Use the ``of`` and ``no_value``
    factories rather than the constructor.
    """

    value: Optional[MeasureValue] = None
    variations: Optional[MeasureVariations] = None

    def __post_init__(self) -> None:
        if self.value is not None and self.variations is not None:
            raise InvalidConfigurationError(
                "measure", self.value, "a measure can not carry both a value and variations"
            )

    @classmethod
    def of(cls, value: MeasureValue) -> Measure:
        if value is None:
            raise InvalidConfigurationError("measure.value", value, "use Measure.no_value() for no-value measures")
        return cls(value=value)

    @classmethod
    def no_value(cls, variations: Optional[MeasureVariations] = None) -> Measure:
        return cls(value=None, variations=variations)

    @property
    def has_value(self) -> bool:
        return self.value is not None

    @property
    def has_variations(self) -> bool:
        return self.variations is not None

    def variations_for(self, periods: Sequence[Period]) -> dict[int, float]:
        """Variations restricted to the given periods, keyed by index."""
        if self.variations is None:
            return {}
        return {
            p.index: self.variations.get_variation(p.index)
            for p in periods
            if self.variations.has_variation(p.index)
        }
