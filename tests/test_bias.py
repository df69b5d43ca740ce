"""
Tests for the Function Bias Table
"""

import pytest

from benchgen.data.bias import BIAS_TABLE, function_bias
from benchgen.errors import UnsupportedVersion


class TestFunctionBias:
    """Test (version, function id) -> offset lookups."""

    def test_hundreds_versions(self):
        assert function_bias(2017, 3) == 300.0
        assert function_bias(2014, 30) == 3000.0
        assert function_bias(2015, 1) == 100.0

    def test_listed_versions(self):
        assert function_bias(2021, 1) == 100.0
        assert function_bias(2021, 4) == 1900.0
        assert function_bias(2022, 1) == 300.0
        assert function_bias(2022, 12) == 2700.0

    def test_2019_uniform_offset(self):
        assert all(function_bias(2019, fid) == 1.0 for fid in range(1, 11))

    def test_bias_disabled(self):
        """Disabling the bias yields 0.0 but still validates the key."""
        assert function_bias(2022, 5, apply_bias=False) == 0.0
        with pytest.raises(UnsupportedVersion):
            function_bias(2022, 13, apply_bias=False)

    def test_unknown_entries(self):
        with pytest.raises(UnsupportedVersion):
            function_bias(2016, 1)
        with pytest.raises(UnsupportedVersion):
            function_bias(2019, 11)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            BIAS_TABLE[(2022, 1)] = 0.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
