"""Tests for percentage weight normalization."""

import math

import pytest

from holdings_charts.core.aggregation.weights import normalize_weights, weight_entries


class TestNormalizeWeights:
    """Tests for normalize_weights."""

    @pytest.mark.parametrize(
        "values, expected",
        [
            ([600, 300, 100], [60.0, 30.0, 10.0]),
            ([333, 333, 334], [33.3, 33.3, 33.4]),
            ([100, 100, 100], [33.3, 33.3, 33.4]),
        ],
    )
    def test_known_allocations(self, values, expected):
        assert normalize_weights(values) == expected

    @pytest.mark.parametrize(
        "values",
        [
            [1, 1, 1],
            [1, 2, 3, 4, 5, 6, 7],
            [0.01, 999.99],
            [12.34, 56.78, 90.12, 3.45, 6.78, 9.01],
            [1] * 13,
        ],
    )
    def test_weights_sum_to_100(self, values):
        """Weights should add up to exactly 100 after rounding to 1 decimal."""
        weights = normalize_weights(values)

        assert round(math.fsum(weights), 1) == 100.0

    def test_last_entry_absorbs_residual(self):
        """Only the last weight is corrected."""
        weights = normalize_weights([1, 1, 1])

        assert weights[:-1] == [33.3, 33.3]
        assert weights[-1] == 33.4

    def test_zero_total_gives_zeros(self):
        """Should return all zeros without raising."""
        assert normalize_weights([0, 0, 0]) == [0.0, 0.0, 0.0]

    def test_explicit_zero_total(self):
        assert normalize_weights([10, 20], total=0) == [0.0, 0.0]

    def test_empty_input(self):
        assert normalize_weights([]) == []

    def test_single_value_is_full_weight(self):
        assert normalize_weights([42.0]) == [100.0]

    def test_half_rounds_up(self):
        """0.25% rounds to 0.3, not to the even 0.2."""
        weights = normalize_weights([25, 9975], total=10000)

        assert weights[0] == 0.3

    def test_preserves_input_order(self):
        assert normalize_weights([100, 300, 600]) == [10.0, 30.0, 60.0]

    def test_idempotent(self):
        values = [123.45, 678.9, 10.11]

        assert normalize_weights(values) == normalize_weights(values)


class TestWeightEntries:
    """Tests for weight_entries."""

    def test_pairs_names_with_percentages(self):
        entries = weight_entries([("A", 600.0), ("B", 300.0), ("C", 100.0)])

        assert [e.name for e in entries] == ["A", "B", "C"]
        assert [e.percentage for e in entries] == [60.0, 30.0, 10.0]
        assert entries[0].value == 600.0

    def test_uses_explicit_total(self):
        entries = weight_entries([("A", 50.0)], total=200.0)

        # A single entry absorbs the residual up to 100
        assert entries[0].percentage == 100.0
