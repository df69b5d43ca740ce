"""
CEC Single-Objective Suites

Problems built from auxiliary data files:
- simple functions: one kernel behind shift -> scale -> rotate
- hybrid functions: shift/rotate, shuffle, then one kernel per segment
- composition functions: distance-weighted blend of shifted/rotated kernels

Supported suites:
    CEC 2017: F1, F3-F10 (F2 was withdrawn from the competition)
    CEC 2021: F1-F10
    CEC 2022: F1-F12
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

import numpy as np

from ..composition import CompositionEngine, HybridSplit
from ..config import BenchgenConfig, DEFAULT_CONFIG, MissingDataPolicy
from ..data.bias import function_bias
from ..data.layout import DataKind, get_layout
from ..data.store import AuxiliaryDataStore
from ..errors import DataTruncated, DataUnavailable, UnsupportedVersion
from ..kernels.continuous import get_kernel
from ..problem import Bounds, MetaData, Problem, TransformSpec
from ..transform.continuous import is_permutation, rotate, scale, shift, shuffle, unshuffle

logger = logging.getLogger(__name__)

LOWER_BOUND = -100.0
UPPER_BOUND = 100.0


@dataclass(frozen=True)
class SimpleDef:
    name: str
    kernel: str


@dataclass(frozen=True)
class LunacekDef:
    name: str = "Lunacek Bi-Rastrigin"


@dataclass(frozen=True)
class HybridDef:
    name: str
    kernels: Tuple[str, ...]
    proportions: Tuple[float, ...]


@dataclass(frozen=True)
class Component:
    """One kernel of a composition function."""
    kernel: str
    delta: float
    bias: float
    lam: float = 1.0
    rotate: bool = True


@dataclass(frozen=True)
class CompositionDef:
    name: str
    components: Tuple[Component, ...]


FunctionDef = Union[SimpleDef, LunacekDef, HybridDef, CompositionDef]


class CecProblem(Problem):
    """Single kernel evaluated at M · (rate · (x - o)), plus the function bias."""

    def __init__(
        self,
        version: int,
        function_id: int,
        instance: int,
        dimension: int,
        definition: FunctionDef,
        store: Optional[AuxiliaryDataStore] = None,
        config: Optional[BenchgenConfig] = None
    ):
        self.version = int(version)
        self.layout = get_layout(version)
        self.definition = definition
        self.store = store
        config = config or DEFAULT_CONFIG
        self.bias = function_bias(version, function_id, config.apply_bias)
        meta = MetaData(self.layout.tag, function_id, instance, dimension, definition.name)
        super().__init__(meta, Bounds.uniform(dimension, LOWER_BOUND, UPPER_BOUND), config)

    def _load(self, kind: DataKind, n: int, check=None) -> Optional[np.ndarray]:
        """
        Load n values of auxiliary data, applying the missing-data policy.

        Returns None when the data is unusable and the policy allows an
        identity transform in its place.
        """
        fid, dim = self.meta.function_id, self.meta.dimension
        try:
            if self.store is None:
                raise DataUnavailable(
                    self.layout.path(".", kind, fid, dim), "no data root configured")
            result = self.store.load(kind, self.version, fid, dim)
            values = result.require(n)
            if check is not None and not check(values):
                raise DataUnavailable(result.path, f"invalid {kind.name.lower()} data")
            return values
        except (DataUnavailable, DataTruncated):
            if self.config.missing_data is MissingDataPolicy.FAIL:
                raise
            logger.warning("%s: %s data unusable, %s disabled",
                           self.meta.name, kind.value, kind.name.lower())
            return None

    def _single_spec(self, rate: float) -> TransformSpec:
        dim = self.meta.dimension
        o = self._load(DataKind.SHIFT, dim)
        m = self._load(DataKind.ROTATION, dim * dim)
        return TransformSpec(
            apply_shift=o is not None,
            apply_rotate=m is not None,
            scale_rate=rate,
            shift_vector=o,
            rotation=m,
        )

    def _configure(self):
        self.kernel = get_kernel(self.definition.kernel)
        self.spec = self._single_spec(self.kernel.scale_rate)

    def _evaluate(self, x: np.ndarray) -> float:
        return self.kernel(self.spec.forward(x)) + self.bias

    def _optimum_input(self) -> np.ndarray:
        return self.spec.inverse(self.kernel.optimum_input(self.meta.dimension))


class LunacekBiRastriginProblem(CecProblem):
    """
    Lunacek bi-Rastrigin.

    The double-funnel part works on the shifted, scaled point with signs
    taken from the shift vector; only the Rastrigin part is rotated.
    """

    MU0 = 2.5
    D = 1.0
    RATE = 10.0 / 100.0

    def _configure(self):
        self.spec = self._single_spec(self.RATE)
        n = self.meta.dimension
        self._s = 1.0 - 1.0 / (2.0 * np.sqrt(n + 20.0) - 8.2)
        self._mu1 = -np.sqrt((self.MU0 ** 2 - self.D) / self._s)
        if self.spec.apply_shift:
            self._signs = np.where(self.spec.shift_vector[:n] < 0, -1.0, 1.0)
        else:
            self._signs = np.ones(n)

    def _evaluate(self, x: np.ndarray) -> float:
        n = self.meta.dimension
        y = shift(x, self.spec.shift_vector) if self.spec.apply_shift else np.array(x, dtype=np.float64)
        z = 2.0 * scale(y, self.RATE) * self._signs
        t = z + self.MU0
        f1 = np.sum((t - self.MU0) ** 2)
        f2 = self._s * np.sum((t - self._mu1) ** 2) + self.D * n
        if self.spec.apply_rotate:
            z = rotate(z, self.spec.rotation)
        f3 = np.sum(np.cos(2.0 * np.pi * z))
        return float(min(f1, f2) + 10.0 * (n - f3)) + self.bias

    def _optimum_input(self) -> np.ndarray:
        return self.spec.origin(self.meta.dimension)


class CecHybridProblem(CecProblem):
    """Shift/rotate, shuffle, then one kernel per consecutive segment."""

    def _configure(self):
        dim = self.meta.dimension
        self.kernels = [get_kernel(k) for k in self.definition.kernels]
        self.split = HybridSplit(self.definition.proportions)
        self.sizes = self.split.sizes(dim)
        self.spec = self._single_spec(1.0)
        self.spec.permutation = self._load(
            DataKind.SHUFFLE, dim, check=lambda p: is_permutation(p, dim))

    def _evaluate(self, x: np.ndarray) -> float:
        z = self.spec.forward(x)
        if self.spec.permutation is not None:
            z = shuffle(z, self.spec.permutation)
        f = 0.0
        for kernel, part in zip(self.kernels, self.split.split(z)):
            f += kernel(scale(part, kernel.scale_rate))
        return f + self.bias

    def _optimum_input(self) -> np.ndarray:
        z = np.concatenate([k.optimum_input(n) / k.scale_rate
                            for k, n in zip(self.kernels, self.sizes)])
        if self.spec.permutation is not None:
            z = unshuffle(z, self.spec.permutation)
        return self.spec.inverse(z)


class CecCompositionProblem(CecProblem):
    """Distance-weighted blend of shifted and rotated component kernels."""

    engine = CompositionEngine()

    def _configure(self):
        dim = self.meta.dimension
        comps = self.definition.components
        k = len(comps)
        self.kernels = [get_kernel(c.kernel) for c in comps]
        self.biases = np.array([c.bias for c in comps])
        self.deltas = np.array([c.delta for c in comps])
        self.lambdas = np.array([c.lam for c in comps])

        o = self._load(DataKind.SHIFT, k * dim)
        m = self._load(DataKind.ROTATION, k * dim * dim)
        self.shifts = o.reshape(k, dim) if o is not None else np.zeros((k, dim))
        rotations = m.reshape(k, dim, dim) if m is not None else [None] * k

        self.specs = [
            TransformSpec(
                apply_shift=o is not None,
                apply_rotate=m is not None and c.rotate,
                scale_rate=kernel.scale_rate,
                shift_vector=self.shifts[i],
                rotation=rotations[i],
            )
            for i, (c, kernel) in enumerate(zip(comps, self.kernels))
        ]

    def _evaluate(self, x: np.ndarray) -> float:
        raw = [lam * kernel(spec.forward(x))
               for lam, kernel, spec in zip(self.lambdas, self.kernels, self.specs)]
        return self.engine.combine(x, raw, self.biases, self.shifts, self.deltas) + self.bias

    def _optimum_input(self) -> np.ndarray:
        i = int(np.argmin(self.biases))
        return self.specs[i].inverse(self.kernels[i].optimum_input(self.meta.dimension))


CEC2017: Dict[int, FunctionDef] = {
    1: SimpleDef("Bent Cigar", "bent_cigar"),
    3: SimpleDef("Zakharov", "zakharov"),
    4: SimpleDef("Rosenbrock", "rosenbrock"),
    5: SimpleDef("Rastrigin", "rastrigin"),
    6: SimpleDef("Schaffer F7", "schaffer_f7"),
    7: LunacekDef(),
    8: SimpleDef("Non-Continuous Rastrigin", "non_continuous_rastrigin"),
    9: SimpleDef("Levy", "levy"),
    10: SimpleDef("Schwefel", "schwefel"),
}

CEC2021: Dict[int, FunctionDef] = {
    1: SimpleDef("Bent Cigar", "bent_cigar"),
    2: SimpleDef("Schwefel", "schwefel"),
    3: LunacekDef(),
    4: SimpleDef("Expanded Griewank plus Rosenbrock", "griewank_rosenbrock"),
    5: HybridDef("Hybrid Function 1", ("schwefel", "rastrigin", "ellipsoid"),
                 (0.3, 0.3, 0.4)),
    6: HybridDef("Hybrid Function 2",
                 ("expanded_schaffer_f6", "hgbat", "rosenbrock", "schwefel"),
                 (0.2, 0.2, 0.3, 0.3)),
    7: HybridDef("Hybrid Function 3",
                 ("expanded_schaffer_f6", "hgbat", "rosenbrock", "schwefel", "ellipsoid"),
                 (0.1, 0.2, 0.2, 0.2, 0.3)),
    8: CompositionDef("Composition Function 1", (
        Component("rastrigin", 10, 0, 1),
        Component("griewank", 20, 100, 10),
        Component("schwefel", 30, 200, 1, rotate=False),
    )),
    9: CompositionDef("Composition Function 2", (
        Component("ackley", 10, 0, 10),
        Component("ellipsoid", 20, 100, 1e-6),
        Component("griewank", 30, 200, 10),
        Component("rastrigin", 40, 300, 1),
    )),
    10: CompositionDef("Composition Function 3", (
        Component("rastrigin", 10, 0, 10),
        Component("happycat", 20, 100, 1),
        Component("ackley", 30, 200, 10),
        Component("discus", 40, 300, 1e-6),
        Component("rosenbrock", 50, 400, 1),
    )),
}

CEC2022: Dict[int, FunctionDef] = {
    1: SimpleDef("Zakharov", "zakharov"),
    2: SimpleDef("Rosenbrock", "rosenbrock"),
    3: SimpleDef("Schaffer F7", "schaffer_f7"),
    4: SimpleDef("Non-Continuous Rastrigin", "non_continuous_rastrigin"),
    5: SimpleDef("Levy", "levy"),
    6: HybridDef("Hybrid Function 1", ("bent_cigar", "hgbat", "rastrigin"),
                 (0.4, 0.4, 0.2)),
    7: HybridDef("Hybrid Function 2",
                 ("hgbat", "katsuura", "ackley", "rastrigin", "schwefel", "schaffer_f7"),
                 (0.1, 0.2, 0.2, 0.2, 0.1, 0.2)),
    8: HybridDef("Hybrid Function 3",
                 ("katsuura", "happycat", "griewank_rosenbrock", "schwefel", "ackley"),
                 (0.3, 0.2, 0.2, 0.1, 0.2)),
    9: CompositionDef("Composition Function 1", (
        Component("rosenbrock", 10, 0, 1),
        Component("ellipsoid", 20, 200, 1e-6),
        Component("bent_cigar", 30, 300, 1e-26),
        Component("discus", 40, 100, 1e-6),
        Component("ellipsoid", 50, 400, 1e-6, rotate=False),
    )),
    10: CompositionDef("Composition Function 2", (
        Component("schwefel", 20, 0, 1, rotate=False),
        Component("rastrigin", 10, 200, 1),
        Component("hgbat", 10, 100, 1),
    )),
    11: CompositionDef("Composition Function 3", (
        Component("expanded_schaffer_f6", 20, 0, 5e-4),
        Component("schwefel", 20, 200, 1),
        Component("griewank", 30, 300, 10),
        Component("rosenbrock", 30, 400, 1),
        Component("rastrigin", 20, 200, 10),
    )),
    12: CompositionDef("Composition Function 4", (
        Component("hgbat", 10, 0, 10),
        Component("rastrigin", 20, 300, 10),
        Component("schwefel", 30, 500, 2.5),
        Component("bent_cigar", 40, 100, 1e-26),
        Component("ellipsoid", 50, 400, 1e-6),
        Component("expanded_schaffer_f6", 60, 200, 5e-4),
    )),
}

CEC_SUITES: Dict[int, Dict[int, FunctionDef]] = {
    2017: CEC2017,
    2021: CEC2021,
    2022: CEC2022,
}

_PROBLEM_TYPES = {
    SimpleDef: CecProblem,
    LunacekDef: LunacekBiRastriginProblem,
    HybridDef: CecHybridProblem,
    CompositionDef: CecCompositionProblem,
}


def get_definition(version: int, function_id: int) -> FunctionDef:
    try:
        suite = CEC_SUITES[int(version)]
    except KeyError:
        raise UnsupportedVersion(f"cec{version}") from None
    try:
        return suite[int(function_id)]
    except KeyError:
        raise UnsupportedVersion(f"cec{version}", function_id) from None


def build_cec_problem(
    version: int,
    function_id: int,
    instance: int,
    dimension: int,
    store: Optional[AuxiliaryDataStore] = None,
    config: Optional[BenchgenConfig] = None
) -> CecProblem:
    """Construct a CEC problem from its suite table."""
    definition = get_definition(version, function_id)
    cls = _PROBLEM_TYPES[type(definition)]
    return cls(version, function_id, instance, dimension, definition, store, config)
