"""
Synthetic Auxiliary Data

Writes shift, rotation and shuffle files in the official directory layout so
that suites can be exercised without the competition data. Values are drawn
from a seeded numpy Generator; rotations are uniform samples of SO(n).
"""

import logging
from pathlib import Path
from typing import Dict, Union

import numpy as np
from scipy.stats import special_ortho_group

from .layout import DataKind, get_layout

logger = logging.getLogger(__name__)

SHIFT_ROW_WIDTH = 100


def random_rotation(dimension: int, rng: np.random.Generator) -> np.ndarray:
    """Uniformly distributed rotation matrix of size dimension x dimension."""
    if dimension == 1:
        return np.ones((1, 1))
    return special_ortho_group.rvs(dimension, random_state=rng)


def _write_matrix(path: Path, rows: np.ndarray, fmt: str):
    with open(path, "w") as f:
        for row in np.atleast_2d(rows):
            f.write(" ".join(fmt % v for v in row))
            f.write("\n")


def write_auxiliary_data(
    root: Union[str, Path],
    version: int,
    function_id: int,
    dimension: int,
    seed: int = 0,
    bound: float = 80.0
) -> Dict[DataKind, Path]:
    """
    Write a full set of auxiliary files for one function.

    Shift files hold one row per component, padded to 100 columns like the
    official files. Shuffle files hold 1-based permutations, one per
    component.

    Args:
        root: Data root directory
        version: Benchmark version
        function_id: Function id within the version
        dimension: Problem dimension
        seed: Seed for the numpy Generator
        bound: Shift entries are uniform in [-bound, bound]

    Returns:
        Mapping of data kind to the file written
    """
    layout = get_layout(version)
    rng = np.random.default_rng([int(version), int(function_id), int(dimension), int(seed)])
    folder = Path(root) / layout.tag
    folder.mkdir(parents=True, exist_ok=True)

    n_shift = layout.expected_size(DataKind.SHIFT, function_id, dimension) // dimension
    n_rot = layout.expected_size(DataKind.ROTATION, function_id, dimension) // (dimension * dimension)
    n_shuffle = layout.expected_size(DataKind.SHUFFLE, function_id, dimension) // dimension
    width = max(SHIFT_ROW_WIDTH, dimension)

    paths = {}

    path = layout.path(root, DataKind.SHIFT, function_id, dimension)
    _write_matrix(path, rng.uniform(-bound, bound, size=(max(n_shift, 1), width)), "%.16e")
    paths[DataKind.SHIFT] = path

    path = layout.path(root, DataKind.ROTATION, function_id, dimension)
    blocks = [random_rotation(dimension, rng) for _ in range(max(n_rot, 1))]
    _write_matrix(path, np.vstack(blocks), "%.16e")
    paths[DataKind.ROTATION] = path

    path = layout.path(root, DataKind.SHUFFLE, function_id, dimension)
    perms = [rng.permutation(dimension) + 1 for _ in range(max(n_shuffle, 1))]
    _write_matrix(path, np.vstack(perms), "%d")
    paths[DataKind.SHUFFLE] = path

    logger.info("Wrote auxiliary data for %s F%d D%d under %s",
                layout.tag, function_id, dimension, folder)
    return paths
