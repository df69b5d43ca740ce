"""
Problem Factory

Single entry point that maps a family name to its suite builder:

    create_problem("cec2022", 1, 1, 10)
    create_problem("pbo", 7, 3, 64)
"""

import re
from typing import Optional, Tuple

from .config import BenchgenConfig, DEFAULT_CONFIG
from .data.store import AuxiliaryDataStore
from .errors import UnsupportedVersion
from .problem import Problem
from .suites.cec import CEC_SUITES, build_cec_problem
from .suites.pbo import build_pbo_problem

_CEC_FAMILY = re.compile(r"^cec(\d{4})$")


def parse_family(family: str) -> Tuple[str, Optional[int]]:
    """
    Split a family name into (kind, version).

    >>> parse_family("CEC2022")
    ('cec', 2022)
    >>> parse_family("pbo")
    ('pbo', None)
    """
    name = str(family).strip().lower()
    if name == "pbo":
        return "pbo", None
    m = _CEC_FAMILY.match(name)
    if m is None or int(m.group(1)) not in CEC_SUITES:
        raise UnsupportedVersion(str(family))
    return "cec", int(m.group(1))


def default_store(config: BenchgenConfig) -> Optional[AuxiliaryDataStore]:
    if config.data_root is None:
        return None
    return AuxiliaryDataStore(config.data_root, cache=config.cache_data)


def create_problem(
    family: str,
    function_id: int,
    instance: int,
    dimension: int,
    config: Optional[BenchgenConfig] = None,
    store: Optional[AuxiliaryDataStore] = None
) -> Problem:
    """
    Construct a ready-to-evaluate problem.

    Args:
        family: "cec2017", "cec2021", "cec2022" or "pbo" (case-insensitive)
        function_id: Function id within the suite
        instance: Instance number
        dimension: Problem dimension
        config: Construction options (defaults to DEFAULT_CONFIG)
        store: Data store to share between problems; built from
            config.data_root when omitted

    Returns:
        Problem in READY state

    Raises:
        UnsupportedVersion: Unknown family or function id
        DataUnavailable: Required data missing under the FAIL policy
    """
    config = config or DEFAULT_CONFIG
    if dimension < 1:
        raise ValueError(f"Dimension must be positive, got {dimension}")

    kind, version = parse_family(family)
    if kind == "pbo":
        return build_pbo_problem(function_id, instance, dimension, config)

    if store is None:
        store = default_store(config)
    return build_cec_problem(version, function_id, instance, dimension, store, config)
