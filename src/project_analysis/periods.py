"""Periods: labeled windows of past analyses used as variation baselines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence

from .exceptions import (
    HolderAlreadyInitializedError,
    HolderNotInitializedError,
    InvalidConfigurationError,
)

MAX_PERIODS = 5

PeriodPredicate = Callable[["Period"], bool]


@dataclass(frozen=True)
class Period:
    """A reference window of a past analysis.

    Attributes:
        index:          Position of the period, 1..MAX_PERIODS.
        mode:           Kind of period (e.g. "previous_analysis", "days").
        mode_parameter: Optional parameter of the mode (e.g. "30").
        snapshot_date:  Date of the baseline snapshot, millis since epoch.
        analysis_uuid:  Uuid of the baseline analysis, when known.
    """

    index: int
    mode: str
    snapshot_date: int
    mode_parameter: Optional[str] = None
    analysis_uuid: Optional[str] = None

    def __post_init__(self) -> None:
        if not 1 <= self.index <= MAX_PERIODS:
            raise InvalidConfigurationError(
                "period.index", self.index, f"index must be between 1 and {MAX_PERIODS}"
            )
        if not self.mode:
            raise InvalidConfigurationError("period.mode", self.mode, "mode can not be empty")


def all_periods(period: Period) -> bool:
    """Period predicate accepting every period."""
    return True


def period_indexes(*indexes: int) -> PeriodPredicate:
    """Period predicate accepting only the given period indexes."""
    for index in indexes:
        if not 1 <= index <= MAX_PERIODS:
            raise InvalidConfigurationError("period.index", index, f"index must be between 1 and {MAX_PERIODS}")
    accepted = frozenset(indexes)

    def _supported(period: Period) -> bool:
        return period.index in accepted

    return _supported


class PeriodsHolder:
    """Set-once holder of the active periods of the current analysis."""

    def __init__(self, max_periods: int = MAX_PERIODS) -> None:
        if not 1 <= max_periods <= MAX_PERIODS:
            raise InvalidConfigurationError("max_periods", max_periods, f"must be between 1 and {MAX_PERIODS}")
        self.max_periods = max_periods
        self._periods: Optional[tuple[Period, ...]] = None

    def set_periods(self, periods: Iterable[Period]) -> None:
        if self._periods is not None:
            raise HolderAlreadyInitializedError("PeriodsHolder", "Periods")
        ordered = tuple(periods)
        indexes = [p.index for p in ordered]
        if len(set(indexes)) != len(indexes):
            raise InvalidConfigurationError("periods", indexes, "two periods share the same index")
        if any(index > self.max_periods for index in indexes):
            raise InvalidConfigurationError(
                "periods", indexes, f"only {self.max_periods} periods are enabled for this analysis"
            )
        self._periods = ordered

    def get_periods(self) -> Sequence[Period]:
        if self._periods is None:
            raise HolderNotInitializedError("PeriodsHolder", "Periods")
        return self._periods

    @property
    def is_initialized(self) -> bool:
        return self._periods is not None

    def reset(self) -> None:
        self._periods = None
