"""
Tests for Bit-String Transformations
"""

import numpy as np
import pytest

from benchgen.transform.discrete import (
    dummy_variable_mask,
    epistasis,
    epistasis_optimum,
    neutrality,
    ruggedness1,
    ruggedness2,
    ruggedness3_table,
    random_flip,
    random_reorder,
    inverse_random_reorder,
    transform_bits,
    reset_bits,
    transform_objective,
)


class TestDummyVariables:
    """Test the seeded dummy-variable subset."""

    def test_deterministic(self):
        """Repeated calls return the same subset."""
        np.testing.assert_array_equal(
            dummy_variable_mask(100, 0.5, 10000), dummy_variable_mask(100, 0.5, 10000))

    def test_size_and_order(self):
        mask = dummy_variable_mask(100, 0.9)
        assert len(mask) == 90
        assert np.all(np.diff(mask) > 0)
        assert mask[0] >= 0 and mask[-1] < 100

    def test_seed_dependence(self):
        assert not np.array_equal(
            dummy_variable_mask(50, 0.5, 1), dummy_variable_mask(50, 0.5, 2))

    def test_tiny_ratio(self):
        assert len(dummy_variable_mask(3, 0.1)) == 0


class TestEpistasis:
    """Test the per-block remapping."""

    def test_all_ones_fixed_point(self):
        """Even blocks map all-ones to all-ones."""
        np.testing.assert_array_equal(epistasis(np.ones(8, dtype=int)), np.ones(8))

    def test_single_flip_spreads(self):
        """Flipping one input bit changes every bit of its block."""
        x = np.ones(8, dtype=int)
        x[1] = 0
        y = epistasis(x)
        np.testing.assert_array_equal(y[:4], [0, 0, 1, 0])
        np.testing.assert_array_equal(y[4:], [1, 1, 1, 1])

    def test_trailing_block(self):
        x = np.array([1, 1, 1, 1, 0, 1, 1])
        np.testing.assert_array_equal(epistasis(x), [1, 1, 1, 1, 1, 1, 0])

    def test_optimum_even(self):
        np.testing.assert_array_equal(epistasis_optimum(10), np.ones(10))

    def test_optimum_odd_tail(self):
        x = epistasis_optimum(7)
        np.testing.assert_array_equal(x, [1, 1, 1, 1, 0, 1, 1])
        np.testing.assert_array_equal(epistasis(x), [1, 1, 1, 1, 1, 1, 0])

    def test_preserves_length(self):
        assert len(epistasis(np.zeros(13, dtype=int))) == 13


class TestNeutrality:
    """Test majority voting over blocks."""

    def test_majority(self):
        x = np.array([1, 1, 0, 0, 0, 1, 1])
        np.testing.assert_array_equal(neutrality(x, 3), [1, 0])

    def test_length(self):
        assert len(neutrality(np.ones(10, dtype=int), 3)) == 3


class TestRuggedness:
    """Test objective remapping."""

    def test_ruggedness1_even(self):
        assert ruggedness1(4, 4) == 3.0
        assert ruggedness1(3, 4) == 2.0
        assert ruggedness1(0, 4) == 1.0

    def test_ruggedness1_odd(self):
        assert ruggedness1(5, 5) == 4.0
        assert ruggedness1(3, 5) == 3.0

    def test_ruggedness2(self):
        assert ruggedness2(5, 5) == 5.0
        assert ruggedness2(4, 5) == 3.0
        assert ruggedness2(3, 5) == 4.0
        assert ruggedness2(0, 5) == 0.0

    def test_ruggedness3_table(self):
        assert ruggedness3_table(5) == [4.0, 3.0, 2.0, 1.0, 0.0, 5.0]
        assert ruggedness3_table(7) == [1.0, 0.0, 6.0, 5.0, 4.0, 3.0, 2.0, 7.0]

    @pytest.mark.parametrize("n", [4, 5, 10, 17])
    def test_maximum_kept(self, n):
        """The best objective stays best after every remap."""
        ys = range(n + 1)
        assert max(ys, key=lambda y: ruggedness1(y, n)) == n
        assert max(ys, key=lambda y: ruggedness2(y, n)) == n
        table = ruggedness3_table(n)
        assert max(ys, key=lambda y: table[y]) == n


class TestInstanceTransforms:
    """Test instance-derived bit flips, reordering and objective shifts."""

    def test_flip_involution(self):
        x = np.array([1, 0, 1, 1, 0, 0, 1, 0])
        np.testing.assert_array_equal(random_flip(random_flip(x, 7), 7), x)

    def test_reorder_round_trip(self):
        x = np.arange(12) % 2
        np.testing.assert_array_equal(inverse_random_reorder(random_reorder(x, 60), 60), x)

    def test_reorder_is_permutation(self):
        x = np.arange(20)
        np.testing.assert_array_equal(np.sort(random_reorder(x, 77)), x)

    @pytest.mark.parametrize("instance", [1, 2, 37, 51, 100, 150])
    def test_reset_inverts_transform(self, instance):
        x = np.array([1, 1, 0, 1, 0, 0, 1, 1, 1, 0])
        np.testing.assert_array_equal(transform_bits(reset_bits(x, instance), instance), x)

    def test_identity_instances(self):
        x = np.array([1, 0, 1])
        np.testing.assert_array_equal(transform_bits(x, 1), x)
        np.testing.assert_array_equal(transform_bits(x, 101), x)

    def test_objective_identity_for_first_instance(self):
        assert transform_objective(12.0, 1) == 12.0

    def test_objective_transform_deterministic(self):
        a = transform_objective(12.0, 5)
        assert a == transform_objective(12.0, 5)
        assert a != 12.0

    def test_objective_transform_monotone(self):
        """Scaling factor is positive, so order is preserved."""
        assert transform_objective(3.0, 9) < transform_objective(4.0, 9)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
