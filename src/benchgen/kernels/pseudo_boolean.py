"""
Pseudo-Boolean Kernels

OneMax, LeadingOnes and Linear over {0, 1}^n. All are maximized by the
all-ones string.
"""

from typing import Dict

import numpy as np

from .base import BitKernel


def one_max(x: np.ndarray) -> float:
    return float(np.sum(x))


def leading_ones(x: np.ndarray) -> float:
    zeros = np.flatnonzero(x != 1)
    return float(zeros[0] if len(zeros) else len(x))


def linear(x: np.ndarray) -> float:
    return float(np.sum(np.arange(1, len(x) + 1) * x))


BIT_KERNELS: Dict[str, BitKernel] = {k.name: k for k in [
    BitKernel("one_max", one_max),
    BitKernel("leading_ones", leading_ones),
    BitKernel("linear", linear),
]}
