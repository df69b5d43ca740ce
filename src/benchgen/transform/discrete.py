"""
Bit-String Transformations

Transformations for pseudo-Boolean problems:
- dummy variables: only a seeded subset of positions is inspected
- epistasis: per-block XOR remapping
- neutrality: majority vote over blocks (shrinks the string)
- ruggedness: remapping of objective values
- instance transforms: random bit flips / reordering and an affine
  objective transform, all derived from the instance number
"""

import math
from typing import List

import numpy as np

from .rng import uniform

DUMMY_SEED = 10000
EPISTASIS_BLOCK = 4
NEUTRALITY_MU = 3

FLIP_INSTANCES = range(2, 51)
REORDER_INSTANCES = range(51, 101)


def dummy_variable_mask(n: int, ratio: float, seed: int = DUMMY_SEED) -> np.ndarray:
    """
    Sorted positions of the bits that count toward the objective.

    A partial Fisher-Yates draw over the positions selects floor(n * ratio)
    of them; the draw depends only on (n, ratio, seed).
    """
    select = int(math.floor(n * ratio))
    position = list(range(n))
    r = uniform(max(select, 1), seed)
    for i in range(select):
        j = int(math.floor(r[i] * (n - i)))
        last = n - 1 - i
        position[j], position[last] = position[last], position[j]
    return np.array(sorted(position[n - select:]), dtype=np.int64)


def _epistasis_block(bits: np.ndarray) -> np.ndarray:
    # each output bit is the XOR of the other bits of its block, reversed
    parity = int(np.sum(bits)) % 2
    return (bits ^ parity)[::-1]


def epistasis(x: np.ndarray, block_size: int = EPISTASIS_BLOCK) -> np.ndarray:
    """Remap each block of bits; a trailing short block is its own block."""
    x = np.asarray(x, dtype=np.int64)
    out = np.zeros_like(x)
    for h in range(0, len(x), block_size):
        out[h:h + block_size] = _epistasis_block(x[h:h + block_size])
    return out


def epistasis_optimum(n: int, block_size: int = EPISTASIS_BLOCK) -> np.ndarray:
    """
    A bit string whose epistasis image has the most leading ones.

    Even blocks map all-ones to all-ones. An odd block can reach at most
    size - 1 ones, placed first by clearing the block's first input bit.
    """
    x = np.ones(n, dtype=np.int64)
    for h in range(0, n, block_size):
        if min(block_size, n - h) % 2:
            x[h] = 0
    return x


def neutrality(x: np.ndarray, mu: int = NEUTRALITY_MU) -> np.ndarray:
    """Majority vote over consecutive blocks of mu bits; length n // mu."""
    x = np.asarray(x, dtype=np.int64)
    n = len(x) // mu
    blocks = x[:n * mu].reshape(n, mu)
    return (blocks.sum(axis=1) >= mu / 2.0).astype(np.int64)


def ruggedness1(y: float, n: int) -> float:
    if y == n:
        return math.ceil(y / 2.0) + 1.0
    if y < n and n % 2 == 0:
        return math.floor(y / 2.0) + 1.0
    if y < n:
        return math.ceil(y / 2.0) + 1.0
    return y


def ruggedness2(y: float, n: int) -> float:
    t = int(y + 0.5)
    if t == n:
        return y
    if t < n and (t % 2) == (n % 2):
        return y + 1.0
    if t < n:
        return max(y - 1.0, 0.0)
    return y


def ruggedness3_table(n: int) -> List[float]:
    """Lookup table for the third ruggedness remap, indexed by objective."""
    table = [0.0] * (n + 1)
    for j in range(1, n // 5 + 1):
        for k in range(5):
            table[n - 5 * j + k] = float(n - 5 * j + (4 - k))
    rest = n - n // 5 * 5
    for k in range(rest):
        table[k] = float(rest - 1 - k)
    table[n] = float(n)
    return table


def _reorder_index(n: int, seed: int) -> np.ndarray:
    index = np.arange(n)
    r = uniform(n, seed)
    for i in range(n):
        t = int(math.floor(r[i] * n))
        index[i], index[t] = index[t], index[i]
    return index


def random_flip(x: np.ndarray, seed: int) -> np.ndarray:
    x = np.asarray(x, dtype=np.int64)
    mask = np.floor(uniform(len(x), seed) * 2).astype(np.int64)
    return x ^ mask


def random_reorder(x: np.ndarray, seed: int) -> np.ndarray:
    x = np.asarray(x, dtype=np.int64)
    return x[_reorder_index(len(x), seed)]


def inverse_random_reorder(y: np.ndarray, seed: int) -> np.ndarray:
    y = np.asarray(y, dtype=np.int64)
    x = np.empty_like(y)
    x[_reorder_index(len(y), seed)] = y
    return x


def transform_bits(x: np.ndarray, instance: int) -> np.ndarray:
    """Instance transform applied to a bit string before evaluation."""
    if instance in FLIP_INSTANCES:
        return random_flip(x, instance)
    if instance in REORDER_INSTANCES:
        return random_reorder(x, instance)
    return np.asarray(x, dtype=np.int64).copy()


def reset_bits(x: np.ndarray, instance: int) -> np.ndarray:
    """Inverse of transform_bits."""
    if instance in FLIP_INSTANCES:
        return random_flip(x, instance)
    if instance in REORDER_INSTANCES:
        return inverse_random_reorder(x, instance)
    return np.asarray(x, dtype=np.int64).copy()


def scale_objective(y: float, seed: int) -> float:
    return y * (uniform(1, seed)[0] * 4.8 + 0.2)


def shift_objective(y: float, seed: int) -> float:
    return y + (uniform(1, seed)[0] * 2000.0 - 1000.0)


def transform_objective(y: float, instance: int) -> float:
    if instance > 1:
        return shift_objective(scale_objective(y, instance), instance)
    return y
