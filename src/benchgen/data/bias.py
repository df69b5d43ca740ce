"""
Function Bias Table

Fixed offsets added to raw kernel output, keyed by (version, function id).
"""

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from ..errors import UnsupportedVersion


def _hundreds(n: int) -> Dict[int, float]:
    return {fid: 100.0 * fid for fid in range(1, n + 1)}


def _listed(values) -> Dict[int, float]:
    return {fid: float(v) for fid, v in enumerate(values, start=1)}


_TABLE: Dict[Tuple[int, int], float] = {}
for _version, _entries in {
    2014: _hundreds(30),
    2015: _hundreds(15),
    2017: _hundreds(30),
    2019: {fid: 1.0 for fid in range(1, 11)},
    2021: _listed([100, 1100, 700, 1900, 1700, 1600, 2100, 2200, 2400, 2500]),
    2022: _listed([300, 400, 600, 800, 900, 1800, 2000, 2200, 2300, 2400, 2600, 2700]),
}.items():
    for _fid, _bias in _entries.items():
        _TABLE[(_version, _fid)] = _bias

BIAS_TABLE: Mapping[Tuple[int, int], float] = MappingProxyType(_TABLE)


def function_bias(version: int, function_id: int, apply_bias: bool = True) -> float:
    """
    Offset added to the raw value of a function.

    Args:
        version: Benchmark version
        function_id: Function id within the version
        apply_bias: When False the offset is 0.0 (the entry must still exist)

    Raises:
        UnsupportedVersion: No entry for (version, function_id)
    """
    try:
        bias = BIAS_TABLE[(int(version), int(function_id))]
    except KeyError:
        raise UnsupportedVersion(f"cec{version}", function_id) from None
    return bias if apply_bias else 0.0
