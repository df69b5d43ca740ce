"""
Coordinate Transformations for Continuous Problems

Shift, scale, rotate and their composition. Every function returns a new
array, so concurrent evaluations never share scratch space.

Forward transform (sr_func), in this order:
    z = M · (rate · (x - o))

The order is load-bearing: scaling before rotating reproduces the
published reference values.
"""

from typing import Optional

import numpy as np
from scipy import linalg

from ..errors import DimensionMismatch


def _as_matrix(matrix: np.ndarray, dimension: int) -> np.ndarray:
    m = np.asarray(matrix, dtype=np.float64)
    if m.ndim == 2:
        return m
    if m.size < dimension * dimension:
        raise DimensionMismatch(dimension * dimension, m.size, "rotation matrix")
    return m[:dimension * dimension].reshape(dimension, dimension)


def shift(x: np.ndarray, shift_vector: np.ndarray) -> np.ndarray:
    """x - o over the first len(x) entries of o."""
    x = np.asarray(x, dtype=np.float64)
    o = np.asarray(shift_vector, dtype=np.float64)
    if len(o) < len(x):
        raise DimensionMismatch(len(x), len(o), "shift vector")
    return x - o[:len(x)]


def unshift(z: np.ndarray, shift_vector: np.ndarray) -> np.ndarray:
    """Inverse of shift: z + o."""
    z = np.asarray(z, dtype=np.float64)
    o = np.asarray(shift_vector, dtype=np.float64)
    if len(o) < len(z):
        raise DimensionMismatch(len(z), len(o), "shift vector")
    return z + o[:len(z)]


def scale(x: np.ndarray, rate: float) -> np.ndarray:
    return np.asarray(x, dtype=np.float64) * rate


def rotate(x: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    """
    Matrix-vector product M · x.

    The product reads from a snapshot of x, so no output component is
    computed from an already rotated one.

    Args:
        x: Input vector
        matrix: n x n matrix or a flat row-major buffer of at least n*n values
    """
    x = np.array(x, dtype=np.float64)
    return _as_matrix(matrix, len(x)) @ x


def unrotate(z: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    """Solve M · x = z for x."""
    z = np.asarray(z, dtype=np.float64)
    return linalg.solve(_as_matrix(matrix, len(z)), z)


def sr_func(
    x: np.ndarray,
    shift_vector: Optional[np.ndarray],
    matrix: Optional[np.ndarray],
    rate: float = 1.0,
    apply_shift: bool = True,
    apply_rotate: bool = True
) -> np.ndarray:
    """Shift (if enabled), scale (always), rotate (if enabled)."""
    y = shift(x, shift_vector) if apply_shift else np.array(x, dtype=np.float64)
    y = scale(y, rate)
    if apply_rotate:
        y = rotate(y, matrix)
    return y


def inverse_sr_func(
    z: np.ndarray,
    shift_vector: Optional[np.ndarray],
    matrix: Optional[np.ndarray],
    rate: float = 1.0,
    apply_shift: bool = True,
    apply_rotate: bool = True
) -> np.ndarray:
    """Map a point of kernel space back to input space."""
    y = unrotate(z, matrix) if apply_rotate else np.array(z, dtype=np.float64)
    y = y / rate
    if apply_shift:
        y = unshift(y, shift_vector)
    return y


def shuffle(x: np.ndarray, permutation: np.ndarray) -> np.ndarray:
    """y[i] = x[perm[i]] using the first len(x) permutation entries."""
    x = np.asarray(x)
    perm = np.asarray(permutation, dtype=np.int64)
    if len(perm) < len(x):
        raise DimensionMismatch(len(x), len(perm), "shuffle permutation")
    return x[perm[:len(x)]]


def unshuffle(y: np.ndarray, permutation: np.ndarray) -> np.ndarray:
    y = np.asarray(y)
    perm = np.asarray(permutation, dtype=np.int64)[:len(y)]
    x = np.empty_like(y)
    x[perm] = y
    return x


def is_permutation(permutation: np.ndarray, dimension: int) -> bool:
    perm = np.asarray(permutation)
    return len(perm) >= dimension and np.array_equal(
        np.sort(perm[:dimension]), np.arange(dimension))
