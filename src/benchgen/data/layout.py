"""
Version Layout Table

Each CEC benchmark version publishes fixed sizing rules for its auxiliary
data. A function id below the version threshold reads a single `dim`-sized
shift vector and a `dim x dim` rotation matrix; at or above the threshold
(composition functions) the sizes are multiplied by the coefficient.

CEC 2015 has no threshold: its coefficient is looked up per function id.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Tuple

from ..errors import UnsupportedVersion


class DataKind(Enum):
    """Kinds of auxiliary data and their file name stem."""
    SHIFT = "shift_data"
    ROTATION = "M"
    SHUFFLE = "shuffle_data"


@dataclass(frozen=True)
class VersionLayout:
    """
    Sizing rules for one benchmark version.

    Attributes:
        version: Benchmark year, e.g. 2022
        threshold: First function id whose data is scaled by the coefficient
        coeff: Coefficient applied from the threshold on
        cf_nums: Per-function coefficient table (overrides coeff when set)
        shuffle_coeff: Coefficient for shuffle data outside the shuffle range
        shuffle_range: Inclusive function id range whose shuffle is `dim` long
    """
    version: int
    threshold: int
    coeff: int
    cf_nums: Optional[Tuple[int, ...]] = None
    shuffle_coeff: int = 10
    shuffle_range: Optional[Tuple[int, int]] = None

    @property
    def tag(self) -> str:
        return f"cec{self.version}"

    def coefficient(self, function_id: int) -> int:
        if self.cf_nums is None:
            return self.coeff
        if not 0 <= function_id < len(self.cf_nums):
            raise UnsupportedVersion(self.tag, function_id)
        return self.cf_nums[function_id]

    def is_scaled(self, function_id: int) -> bool:
        return not function_id < self.threshold

    def is_shuffled(self, function_id: int) -> bool:
        if self.shuffle_range is None:
            return False
        lo, hi = self.shuffle_range
        return lo <= function_id <= hi

    def expected_size(self, kind: DataKind, function_id: int, dimension: int) -> int:
        """Number of values to read for a data file."""
        if kind is DataKind.SHUFFLE:
            if self.is_shuffled(function_id):
                return dimension
            if self.cf_nums is not None:
                return self.coefficient(function_id) * dimension
            return self.shuffle_coeff * dimension

        base = dimension * dimension if kind is DataKind.ROTATION else dimension
        if self.is_scaled(function_id):
            return self.coefficient(function_id) * base
        return base

    def file_name(self, kind: DataKind, function_id: int, dimension: int) -> str:
        if kind is DataKind.SHIFT:
            return f"{kind.value}_{function_id}.txt"
        return f"{kind.value}_{function_id}_D{dimension}.txt"

    def path(self, root: Path, kind: DataKind, function_id: int, dimension: int) -> Path:
        return Path(root) / self.tag / self.file_name(kind, function_id, dimension)


CEC2015_CF_NUMS = (0, 1, 1, 1, 1, 1, 1, 1, 1, 3, 3, 5, 5, 5, 7, 10)

VERSION_LAYOUTS: Dict[int, VersionLayout] = {
    2014: VersionLayout(2014, threshold=23, coeff=10, shuffle_range=(17, 22)),
    2015: VersionLayout(2015, threshold=-1, coeff=0, cf_nums=CEC2015_CF_NUMS),
    2017: VersionLayout(2017, threshold=20, coeff=10, shuffle_range=(11, 20)),
    2019: VersionLayout(2019, threshold=100, coeff=1),
    2021: VersionLayout(2021, threshold=7, coeff=10, shuffle_range=(5, 7)),
    2022: VersionLayout(2022, threshold=9, coeff=12, shuffle_range=(6, 8)),
}


def get_layout(version: int) -> VersionLayout:
    """Look up the layout for a version, raising UnsupportedVersion."""
    try:
        return VERSION_LAYOUTS[int(version)]
    except (KeyError, TypeError, ValueError):
        raise UnsupportedVersion(f"cec{version}") from None
