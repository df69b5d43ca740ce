"""
Composition and Hybrid Combination

Composition functions blend k component values with weights that fall off
with the distance between the input and each component's own optimum:

    f(x) = Σ w_i(x) · (raw_i + bias_i) / Σ w_i(x)

Weight derivation is a strategy object so suites with different falloff
rules share the same engine. Hybrid functions instead split the (shuffled)
input into consecutive segments, one per component.
"""

import math
from dataclasses import dataclass, field
from typing import Callable, List, Sequence

import numpy as np

from .errors import DimensionMismatch

INF = 1.0e99

WeightStrategy = Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]


def _squared_distances(x: np.ndarray, shifts: np.ndarray) -> np.ndarray:
    return np.sum((np.asarray(shifts) - np.asarray(x)) ** 2, axis=1)


def _normalize_degenerate(w: np.ndarray) -> np.ndarray:
    if np.max(w) == 0:
        return np.ones_like(w)
    return w


class InverseDistanceGaussian:
    """w_i = exp(-d²/(2·n·δ²)) / d, with w_i = 1e99 at d = 0."""

    def __call__(self, x: np.ndarray, shifts: np.ndarray, deltas: np.ndarray) -> np.ndarray:
        n = len(x)
        d2 = _squared_distances(x, shifts)
        w = np.empty(len(d2))
        for i, (dist2, delta) in enumerate(zip(d2, deltas)):
            if dist2 != 0:
                w[i] = (1.0 / dist2) ** 0.5 * math.exp(-dist2 / (2.0 * n * delta ** 2))
            else:
                w[i] = INF
        return _normalize_degenerate(w)


class GaussianFalloff:
    """w_i = exp(-d²/(2·n·δ²)), with w_i = 1e99 at d = 0."""

    def __call__(self, x: np.ndarray, shifts: np.ndarray, deltas: np.ndarray) -> np.ndarray:
        n = len(x)
        d2 = _squared_distances(x, shifts)
        deltas = np.asarray(deltas, dtype=np.float64)
        w = np.exp(-d2 / (2.0 * n * deltas ** 2))
        w[d2 == 0] = INF
        return _normalize_degenerate(w)


@dataclass
class CompositionEngine:
    """Weighted blend of component values."""
    weights: WeightStrategy = field(default_factory=InverseDistanceGaussian)

    def combine(
        self,
        x: np.ndarray,
        raw: Sequence[float],
        biases: Sequence[float],
        shifts: np.ndarray,
        deltas: Sequence[float]
    ) -> float:
        """
        Combine component values into one scalar.

        Args:
            x: Input vector (untransformed)
            raw: Raw component values (already scaled by their lambda)
            biases: Per-component bias offsets
            shifts: k x n array of component optima
            deltas: Per-component falloff widths

        Returns:
            Σ w_i (raw_i + bias_i) / Σ w_i
        """
        fit = np.asarray(raw, dtype=np.float64) + np.asarray(biases, dtype=np.float64)
        w = self.weights(np.asarray(x, dtype=np.float64), np.asarray(shifts), np.asarray(deltas))
        return float(np.sum(w / np.sum(w) * fit))


@dataclass(frozen=True)
class HybridSplit:
    """Segment sizes for hybrid functions: ceil(p_i·n), remainder to the last."""
    proportions: Sequence[float]

    def _raw_sizes(self, dimension: int) -> List[int]:
        sizes = [int(math.ceil(p * dimension)) for p in self.proportions[:-1]]
        sizes.append(dimension - sum(sizes))
        return sizes

    def minimum_dimension(self) -> int:
        """Smallest dimension that leaves every segment non-empty."""
        if min(self.proportions) <= 0 or sum(self.proportions[:-1]) >= 1:
            raise ValueError(f"invalid hybrid proportions: {tuple(self.proportions)}")
        n = len(self.proportions)
        while min(self._raw_sizes(n)) <= 0:
            n += 1
        return n

    def sizes(self, dimension: int) -> List[int]:
        sizes = self._raw_sizes(dimension)
        if min(sizes) <= 0:
            k = len(self.proportions)
            minimum = self.minimum_dimension()
            raise DimensionMismatch(
                minimum, dimension,
                message=f"a hybrid of {k} components needs dimension >= {minimum}, "
                        f"got {dimension}")
        return sizes

    def split(self, z: np.ndarray) -> List[np.ndarray]:
        bounds = np.cumsum(self.sizes(len(z)))[:-1]
        return np.split(np.asarray(z), bounds)
