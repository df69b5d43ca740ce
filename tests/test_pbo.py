"""
Tests for the Pseudo-Boolean Suite
"""

import numpy as np
import pytest

from benchgen.errors import BenchgenError, DimensionMismatch, InvalidSolution, UnsupportedVersion
from benchgen.suites.pbo import PBO_SUITE, build_pbo_problem
from benchgen.transform.discrete import dummy_variable_mask


class TestPBOOptimum:
    """The recorded optimum is consistent and not beaten by random strings."""

    @pytest.mark.parametrize("function_id", sorted(PBO_SUITE))
    @pytest.mark.parametrize("instance", [1, 4, 60])
    def test_consistency(self, function_id, instance):
        problem = build_pbo_problem(function_id, instance, 30)
        x, y = problem.optimum
        assert problem(x) == y
        assert problem.is_consistent()
        assert set(np.unique(x)) <= {0, 1}

    @pytest.mark.parametrize("function_id", sorted(PBO_SUITE))
    def test_optimum_is_maximal(self, function_id):
        problem = build_pbo_problem(function_id, 3, 20)
        rng = np.random.default_rng(function_id)
        for _ in range(100):
            assert problem(rng.integers(0, 2, 20)) <= problem.optimum.y

    @pytest.mark.parametrize("function_id", [7, 14])
    def test_epistasis_odd_tail(self, function_id):
        """A trailing odd block cannot be all ones; the optimum still matches."""
        problem = build_pbo_problem(function_id, 1, 11)
        assert problem.is_consistent()
        assert problem(np.ones(11)) < problem.optimum.y


class TestPBOValues:
    """Test objective values of untransformed instances."""

    def test_one_max(self):
        problem = build_pbo_problem(1, 1, 8)
        assert problem([1, 0, 1, 1, 0, 0, 0, 1]) == 4.0
        assert problem.optimum.y == 8.0

    def test_leading_ones(self):
        problem = build_pbo_problem(2, 1, 6)
        assert problem([1, 1, 0, 1, 1, 1]) == 2.0
        assert problem(np.zeros(6)) == 0.0

    def test_linear(self):
        problem = build_pbo_problem(3, 1, 4)
        assert problem([1, 0, 0, 1]) == 5.0
        assert problem.optimum.y == 10.0

    def test_dummy_ignores_masked_bits(self):
        """Bits outside the dummy subset do not change the value."""
        problem = build_pbo_problem(4, 1, 20)
        mask = dummy_variable_mask(20, 0.5)
        x = np.zeros(20, dtype=int)
        x[mask] = 1
        assert problem(x) == 10.0
        assert problem.optimum.y == 10.0

    def test_neutrality(self):
        problem = build_pbo_problem(6, 1, 9)
        assert problem([1, 1, 0, 0, 0, 0, 1, 0, 1]) == 2.0
        assert problem.optimum.y == 3.0

    def test_ruggedness3_optimum(self):
        problem = build_pbo_problem(10, 1, 10)
        assert problem.optimum.y == 10.0
        assert problem(np.zeros(10)) == 4.0

    def test_instance_changes_values(self):
        a = build_pbo_problem(1, 1, 16)
        b = build_pbo_problem(1, 2, 16)
        assert a.optimum.y != b.optimum.y


class TestPBOMeta:
    """Test metadata and errors."""

    def test_meta(self):
        problem = build_pbo_problem(13, 2, 30)
        assert problem.meta.family == "pbo"
        assert problem.meta.name == "LeadingOnesNeutrality"
        assert problem.meta.maximization

    def test_unknown_function(self):
        with pytest.raises(UnsupportedVersion):
            build_pbo_problem(18, 1, 10)

    def test_neutrality_too_short(self):
        with pytest.raises(DimensionMismatch):
            build_pbo_problem(6, 1, 2)

    def test_wrong_length(self):
        problem = build_pbo_problem(1, 1, 10)
        with pytest.raises(DimensionMismatch):
            problem(np.ones(11))

    @pytest.mark.parametrize("function_id", [1, 10, 17])
    def test_non_binary_rejected(self, function_id):
        """Values other than 0 and 1 are reported, not indexed."""
        problem = build_pbo_problem(function_id, 1, 10)
        with pytest.raises(InvalidSolution) as exc:
            problem([2] * 10)
        assert isinstance(exc.value, BenchgenError)
        with pytest.raises(InvalidSolution):
            problem(np.full(10, 0.5))

    def test_float_bits_accepted(self):
        problem = build_pbo_problem(1, 1, 4)
        assert problem(np.array([1.0, 1.0, 0.0, 1.0])) == problem([1, 1, 0, 1])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
