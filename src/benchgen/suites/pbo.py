"""
Pseudo-Boolean Suite

OneMax, LeadingOnes and Linear with their dummy-variable, neutrality,
epistasis and ruggedness variants (function ids 1-17). All problems are
maximized over {0, 1}^n.

Evaluation order:
    instance bit transform -> variant bit transform -> kernel
    -> ruggedness remap -> instance objective transform
"""

from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from ..config import BenchgenConfig
from ..errors import DimensionMismatch, InvalidSolution, UnsupportedVersion
from ..kernels.pseudo_boolean import BIT_KERNELS
from ..problem import Bounds, MetaData, Problem
from ..transform.discrete import (
    dummy_variable_mask,
    epistasis,
    epistasis_optimum,
    neutrality,
    reset_bits,
    ruggedness1,
    ruggedness2,
    ruggedness3_table,
    transform_bits,
    transform_objective,
)


@dataclass(frozen=True)
class BitVariant:
    """Kernel plus the variant transforms applied around it."""
    name: str
    kernel: str
    dummy_ratio: Optional[float] = None
    neutrality_mu: Optional[int] = None
    epistasis_block: Optional[int] = None
    ruggedness: Optional[int] = None


PBO_SUITE: Dict[int, BitVariant] = {
    1: BitVariant("OneMax", "one_max"),
    2: BitVariant("LeadingOnes", "leading_ones"),
    3: BitVariant("Linear", "linear"),
    4: BitVariant("OneMaxDummy1", "one_max", dummy_ratio=0.5),
    5: BitVariant("OneMaxDummy2", "one_max", dummy_ratio=0.9),
    6: BitVariant("OneMaxNeutrality", "one_max", neutrality_mu=3),
    7: BitVariant("OneMaxEpistasis", "one_max", epistasis_block=4),
    8: BitVariant("OneMaxRuggedness1", "one_max", ruggedness=1),
    9: BitVariant("OneMaxRuggedness2", "one_max", ruggedness=2),
    10: BitVariant("OneMaxRuggedness3", "one_max", ruggedness=3),
    11: BitVariant("LeadingOnesDummy1", "leading_ones", dummy_ratio=0.5),
    12: BitVariant("LeadingOnesDummy2", "leading_ones", dummy_ratio=0.9),
    13: BitVariant("LeadingOnesNeutrality", "leading_ones", neutrality_mu=3),
    14: BitVariant("LeadingOnesEpistasis", "leading_ones", epistasis_block=4),
    15: BitVariant("LeadingOnesRuggedness1", "leading_ones", ruggedness=1),
    16: BitVariant("LeadingOnesRuggedness2", "leading_ones", ruggedness=2),
    17: BitVariant("LeadingOnesRuggedness3", "leading_ones", ruggedness=3),
}


class PBOProblem(Problem):
    """A bit-string problem with instance-derived transformations."""

    def __init__(
        self,
        function_id: int,
        instance: int,
        dimension: int,
        variant: BitVariant,
        config: Optional[BenchgenConfig] = None
    ):
        self.variant = variant
        meta = MetaData("pbo", function_id, instance, dimension, variant.name,
                        maximization=True)
        super().__init__(meta, Bounds.uniform(dimension, 0, 1), config)

    def _configure(self):
        v = self.variant
        n = self.meta.dimension
        self.kernel = BIT_KERNELS[v.kernel]
        self.mask = None
        self.effective_dimension = n

        if v.dummy_ratio is not None:
            self.mask = dummy_variable_mask(n, v.dummy_ratio)
            self.effective_dimension = len(self.mask)
        if v.neutrality_mu is not None:
            self.effective_dimension = n // v.neutrality_mu
        if self.effective_dimension < 1:
            raise DimensionMismatch(
                n, n, message=f"{v.name} needs more than {n} variables")
        if v.ruggedness == 3:
            self._table = ruggedness3_table(self.effective_dimension)

    def _validate(self, x) -> np.ndarray:
        x = super()._validate(x)
        if not np.all(np.isin(x, (0, 1))):
            raise InvalidSolution("bit strings may only hold 0 and 1")
        return x.astype(np.int64)

    def _variant_bits(self, x: np.ndarray) -> np.ndarray:
        v = self.variant
        if v.epistasis_block is not None:
            x = epistasis(x, v.epistasis_block)
        if v.neutrality_mu is not None:
            x = neutrality(x, v.neutrality_mu)
        if self.mask is not None:
            x = x[self.mask]
        return x

    def _remap(self, y: float) -> float:
        r = self.variant.ruggedness
        n = self.effective_dimension
        if r == 1:
            return ruggedness1(y, n)
        if r == 2:
            return ruggedness2(y, n)
        if r == 3:
            return self._table[int(y)]
        return y

    def _evaluate(self, x: np.ndarray) -> float:
        instance = self.meta.instance
        bits = transform_bits(x, instance)
        y = self._remap(self.kernel(self._variant_bits(bits)))
        return float(transform_objective(y, instance))

    def _optimum_input(self) -> np.ndarray:
        n = self.meta.dimension
        if self.variant.epistasis_block is not None:
            raw = epistasis_optimum(n, self.variant.epistasis_block)
        else:
            raw = self.kernel.optimum_input(n)
        return reset_bits(raw, self.meta.instance)


def build_pbo_problem(
    function_id: int,
    instance: int,
    dimension: int,
    config: Optional[BenchgenConfig] = None
) -> PBOProblem:
    try:
        variant = PBO_SUITE[int(function_id)]
    except KeyError:
        raise UnsupportedVersion("pbo", function_id) from None
    return PBOProblem(function_id, instance, dimension, variant, config)
