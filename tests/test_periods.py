"""Tests for periods and the periods holder."""

import pytest

from project_analysis.exceptions import (
    HolderAlreadyInitializedError,
    HolderNotInitializedError,
    InvalidConfigurationError,
)
from project_analysis.periods import Period, PeriodsHolder, all_periods, period_indexes


def _period(index: int) -> Period:
    return Period(index=index, mode="previous_analysis", snapshot_date=0)


class TestPeriod:
    @pytest.mark.parametrize("index", [0, 6, -1])
    def test_index_range(self, index):
        with pytest.raises(InvalidConfigurationError):
            _period(index)

    def test_mode_required(self):
        with pytest.raises(InvalidConfigurationError):
            Period(index=1, mode="", snapshot_date=0)


class TestPredicates:
    def test_all_periods(self):
        assert all_periods(_period(5))

    def test_period_indexes(self):
        supported = period_indexes(1, 3)
        assert supported(_period(1))
        assert not supported(_period(2))
        assert supported(_period(3))

    def test_period_indexes_out_of_range(self):
        with pytest.raises(InvalidConfigurationError):
            period_indexes(7)


class TestPeriodsHolder:
    def test_read_before_set(self):
        with pytest.raises(HolderNotInitializedError):
            PeriodsHolder().get_periods()

    def test_set_once(self):
        holder = PeriodsHolder()
        holder.set_periods([_period(1)])
        with pytest.raises(HolderAlreadyInitializedError):
            holder.set_periods([_period(2)])

    def test_keeps_order(self):
        holder = PeriodsHolder()
        holder.set_periods([_period(3), _period(1)])
        assert [p.index for p in holder.get_periods()] == [3, 1]

    def test_empty_periods_are_valid(self):
        holder = PeriodsHolder()
        holder.set_periods([])
        assert holder.get_periods() == ()

    def test_duplicate_index(self):
        with pytest.raises(InvalidConfigurationError):
            PeriodsHolder().set_periods([_period(1), _period(1)])

    def test_max_periods(self):
        holder = PeriodsHolder(max_periods=2)
        with pytest.raises(InvalidConfigurationError):
            holder.set_periods([_period(3)])

    def test_reset(self):
        holder = PeriodsHolder()
        holder.set_periods([_period(1)])
        holder.reset()
        assert not holder.is_initialized
