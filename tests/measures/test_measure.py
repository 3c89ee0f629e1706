"""Tests for Measure and MeasureVariations."""

import pytest

from project_analysis.exceptions import InvalidConfigurationError
from project_analysis.measures import Measure, MeasureVariations, MeasureVariationsBuilder
from project_analysis.periods import Period


def _period(index: int) -> Period:
    return Period(index=index, mode="previous_version", snapshot_date=0)


class TestMeasureVariations:
    def test_of_pads_to_all_periods(self):
        variations = MeasureVariations.of(1.0)

        assert variations.has_variation(1)
        assert not variations.has_variation(5)
        assert len(variations.values) == 5

    def test_empty_variations_are_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            MeasureVariations.of()
        with pytest.raises(InvalidConfigurationError):
            MeasureVariations.of(None, None)

    def test_too_many_variations_are_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            MeasureVariations.of(1, 2, 3, 4, 5, 6)

    def test_get_absent_variation_raises(self):
        with pytest.raises(KeyError):
            MeasureVariations.of(None, 2.0).get_variation(1)

    @pytest.mark.parametrize("index", [0, 6])
    def test_index_out_of_range(self, index):
        with pytest.raises(InvalidConfigurationError):
            MeasureVariations.of(1.0).has_variation(index)

    def test_from_mapping(self):
        variations = MeasureVariations.from_mapping({2: 4.0, 4: -1.0})

        assert variations.as_dict() == {2: 4.0, 4: -1.0}

    def test_is_immutable(self):
        variations = MeasureVariations.of(1.0)
        with pytest.raises(AttributeError):
            variations.values = (2.0,)


class TestMeasureVariationsBuilder:
    def test_new_builder_is_empty(self):
        assert MeasureVariationsBuilder().is_empty()

    def test_set_twice_raises(self):
        builder = MeasureVariationsBuilder().set_variation(_period(1), 1.0)
        with pytest.raises(InvalidConfigurationError):
            builder.set_variation(_period(1), 2.0)

    def test_build_keeps_set_values(self):
        variations = (
            MeasureVariationsBuilder()
            .set_variation(_period(1), 1.0)
            .set_variation(_period(3), 0.0)
            .build()
        )
        assert variations.as_dict() == {1: 1.0, 3: 0.0}

    def test_build_empty_raises(self):
        with pytest.raises(InvalidConfigurationError):
            MeasureVariationsBuilder().build()


class TestMeasure:
    def test_no_value_measure_with_variations(self):
        measure = Measure.no_value(MeasureVariations.of(2.0))

        assert not measure.has_value
        assert measure.has_variations

    def test_of_requires_a_value(self):
        with pytest.raises(InvalidConfigurationError):
            Measure.of(None)

    def test_value_and_variations_are_exclusive(self):
        with pytest.raises(InvalidConfigurationError):
            Measure(value=3, variations=MeasureVariations.of(1.0))

    def test_variations_for_periods(self):
        measure = Measure.no_value(MeasureVariations.of(1.0, None, 3.0))

        assert measure.variations_for([_period(1), _period(2), _period(3)]) == {1: 1.0, 3: 3.0}
        assert Measure.of(3).variations_for([_period(1)]) == {}
