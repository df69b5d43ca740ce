"""
Shared fixtures: temporary data roots with synthetic auxiliary data.
"""

import numpy as np
import pytest

from benchgen.config import BenchgenConfig
from benchgen.data.generate import write_auxiliary_data
from benchgen.data.store import AuxiliaryDataStore


def write_text(path, rows):
    """Write rows of numbers as whitespace separated text."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        for row in rows:
            f.write(" ".join(str(v) for v in np.atleast_1d(row)) + "\n")
    return path


@pytest.fixture
def data_root(tmp_path):
    """Empty data root."""
    root = tmp_path / "data"
    root.mkdir()
    return root


@pytest.fixture
def store(data_root):
    return AuxiliaryDataStore(data_root)


@pytest.fixture
def generated(data_root):
    """Callable writing synthetic data for (version, fid, dim) into data_root."""
    def _generate(version, function_id, dimension, seed=0):
        return write_auxiliary_data(data_root, version, function_id, dimension, seed=seed)
    return _generate


@pytest.fixture
def config(data_root):
    return BenchgenConfig(data_root=data_root)
