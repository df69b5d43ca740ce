"""
Problem Lifecycle

A Problem binds a kernel, its instance-derived transformation parameters and
its bias into one callable, and fixes its known optimum at construction:

    CONSTRUCTED -> OPTIMUM_COMPUTED -> READY

The optimum is obtained by mapping the kernel's known optimum back to input
space and running it through the ordinary evaluate path, so
`problem(problem.optimum.x) == problem.optimum.y` by construction.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

import numpy as np

from .config import BenchgenConfig, DEFAULT_CONFIG
from .core.canonical_json import canonical_hash
from .errors import DimensionMismatch
from .transform.continuous import inverse_sr_func, sr_func

logger = logging.getLogger(__name__)


class ProblemState(Enum):
    CONSTRUCTED = "constructed"
    OPTIMUM_COMPUTED = "optimum_computed"
    READY = "ready"


@dataclass(frozen=True)
class MetaData:
    """Identity of a problem."""
    family: str
    function_id: int
    instance: int
    dimension: int
    name: str
    maximization: bool = False

    def to_canonical(self) -> Dict[str, Any]:
        return {
            "family": self.family,
            "function_id": self.function_id,
            "instance": self.instance,
            "dimension": self.dimension,
            "name": self.name,
            "maximization": self.maximization,
        }


@dataclass
class Solution:
    """A point and its objective value."""
    x: np.ndarray
    y: float

    def __iter__(self):
        return iter((self.x, self.y))

    def to_canonical(self) -> Dict[str, Any]:
        return {"x": np.asarray(self.x).tolist(), "y": float(self.y)}


@dataclass
class Bounds:
    """Box domain of a problem."""
    lower: np.ndarray
    upper: np.ndarray

    def __post_init__(self):
        self.lower = np.asarray(self.lower, dtype=np.float64)
        self.upper = np.asarray(self.upper, dtype=np.float64)

        if len(self.lower) != len(self.upper):
            raise ValueError("Lower and upper bounds must have same length")

        if np.any(self.lower > self.upper):
            raise ValueError("Lower bounds must be <= upper bounds")

    @classmethod
    def uniform(cls, dimension: int, lower: float, upper: float) -> 'Bounds':
        return cls(np.full(dimension, lower), np.full(dimension, upper))

    def contains(self, x: np.ndarray, tol: float = 1e-10) -> bool:
        """Check if a point is within bounds (with tolerance)."""
        return bool(
            np.all(x >= self.lower - tol) and
            np.all(x <= self.upper + tol)
        )


@dataclass
class TransformSpec:
    """
    Which coordinate operations apply to a problem (or component).

    Buffers are references to data owned by the store, never copies.
    """
    apply_shift: bool = False
    apply_rotate: bool = False
    scale_rate: float = 1.0
    shift_vector: Optional[np.ndarray] = None
    rotation: Optional[np.ndarray] = None
    permutation: Optional[np.ndarray] = None

    def forward(self, x: np.ndarray) -> np.ndarray:
        return sr_func(x, self.shift_vector, self.rotation, self.scale_rate,
                       self.apply_shift, self.apply_rotate)

    def inverse(self, z: np.ndarray) -> np.ndarray:
        return inverse_sr_func(z, self.shift_vector, self.rotation, self.scale_rate,
                               self.apply_shift, self.apply_rotate)

    def origin(self, dimension: int) -> np.ndarray:
        """Input point mapped to the kernel-space origin."""
        if self.apply_shift:
            return np.array(self.shift_vector[:dimension], dtype=np.float64)
        return np.zeros(dimension)


class Problem(ABC):
    """
    Base class for benchmark problems.

    Subclasses populate their transformation parameters in `_configure`,
    compute raw values in `_evaluate` and report the input-space optimum in
    `_optimum_input`.

    Evaluation allocates fresh arrays on every call, so one instance can be
    evaluated from several threads; subclasses must keep `_evaluate` free of
    shared scratch buffers.
    """

    def __init__(self, meta: MetaData, bounds: Bounds, config: Optional[BenchgenConfig] = None):
        self.meta = meta
        self.bounds = bounds
        self.config = config or DEFAULT_CONFIG
        self.state = ProblemState.CONSTRUCTED
        self._optimum: Optional[Solution] = None

        self._configure()
        self._optimum = self._compute_optimum()
        self.state = ProblemState.OPTIMUM_COMPUTED

        if not self.bounds.contains(self._optimum.x):
            logger.warning("%s: optimum lies outside the search domain", self.meta.name)
        self.state = ProblemState.READY
        logger.debug("%s ready, optimum y=%r", self.meta.name, self._optimum.y)

    def __repr__(self) -> str:
        m = self.meta
        return (f"{type(self).__name__}({m.name!r}, fid={m.function_id}, "
                f"instance={m.instance}, dimension={m.dimension})")

    @property
    def dimension(self) -> int:
        return self.meta.dimension

    @property
    def optimum(self) -> Solution:
        return self._optimum

    @property
    def fingerprint(self) -> str:
        """SHA-256 of meta data and optimum; stable across runs."""
        return canonical_hash({
            "meta": self.meta.to_canonical(),
            "optimum": self._optimum.to_canonical(),
        })

    @abstractmethod
    def _configure(self):
        """Load data and populate transformation parameters."""

    @abstractmethod
    def _evaluate(self, x: np.ndarray) -> float:
        """Objective value of a validated input vector."""

    @abstractmethod
    def _optimum_input(self) -> np.ndarray:
        """Input-space location of the known optimum."""

    def _compute_optimum(self) -> Solution:
        x = self._optimum_input()
        return Solution(x, self._evaluate(x))

    def _validate(self, x) -> np.ndarray:
        x = np.asarray(x)
        if x.ndim != 1 or len(x) != self.meta.dimension:
            raise DimensionMismatch(self.meta.dimension, x.size if x.ndim != 1 else len(x))
        return x

    def evaluate(self, x) -> float:
        """
        Objective value of x.

        Raises:
            DimensionMismatch: len(x) differs from the problem dimension
        """
        return self._evaluate(self._validate(x))

    def __call__(self, x) -> float:
        return self.evaluate(x)

    def is_consistent(self, rtol: Optional[float] = None) -> bool:
        """Check that evaluating the optimum reproduces its value."""
        rtol = self.config.optimum_rtol if rtol is None else rtol
        y = self.evaluate(self._optimum.x)
        return bool(np.isclose(y, self._optimum.y, rtol=rtol, atol=rtol))
