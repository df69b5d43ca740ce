"""
Kernel Capability

A kernel is the untransformed closed-form function. Problems compose a
kernel with a TransformSpec instead of subclassing per function.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

import numpy as np


class Kernel(ABC):
    """Base class for objective kernels."""

    name: str
    scale_rate: float

    @abstractmethod
    def evaluate(self, z: np.ndarray) -> float:
        """Raw value at a point of kernel space."""
        raise NotImplementedError

    def optimum_input(self, dimension: int) -> np.ndarray:
        """Known optimum in kernel space."""
        return np.zeros(dimension)

    def __call__(self, z: np.ndarray) -> float:
        return self.evaluate(z)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


@dataclass(frozen=True, repr=False)
class FunctionKernel(Kernel):
    """Kernel backed by a plain function of a numpy vector."""
    name: str
    func: Callable[[np.ndarray], float]
    scale_rate: float = 1.0

    def evaluate(self, z: np.ndarray) -> float:
        return float(self.func(np.asarray(z, dtype=np.float64)))


@dataclass(frozen=True, repr=False)
class BitKernel(Kernel):
    """Kernel over bit strings; the optimum is the all-ones string."""
    name: str
    func: Callable[[np.ndarray], float]
    scale_rate: float = 1.0

    def evaluate(self, z: np.ndarray) -> float:
        return float(self.func(np.asarray(z, dtype=np.int64)))

    def optimum_input(self, dimension: int) -> np.ndarray:
        return np.ones(dimension, dtype=np.int64)
