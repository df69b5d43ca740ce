"""
Benchgen - Benchmark Problem Generator

Builds single-objective benchmark problems from closed-form kernels,
instance-derived transformations and published auxiliary data:
- CEC 2017/2021/2022 continuous suites (shifted, rotated, hybrid and
  composition functions)
- Pseudo-Boolean suite (OneMax, LeadingOnes, Linear and variants)

Every problem knows its optimum, and evaluating the optimum reproduces its
value. Problems are deterministic functions of (family, function id,
instance, dimension) and the data they were built from.
"""

from .config import BenchgenConfig, MissingDataPolicy, DEFAULT_CONFIG
from .errors import (
    BenchgenError,
    DataUnavailable,
    DataTruncated,
    DimensionMismatch,
    InvalidSolution,
    UnsupportedVersion,
)
from .data import (
    DataKind,
    VersionLayout,
    get_layout,
    AuxiliaryDataStore,
    LoadResult,
    function_bias,
    write_auxiliary_data,
)
from .composition import (
    CompositionEngine,
    HybridSplit,
    InverseDistanceGaussian,
    GaussianFalloff,
)
from .problem import (
    Problem,
    ProblemState,
    MetaData,
    Solution,
    Bounds,
    TransformSpec,
)
from .kernels import Kernel, get_kernel
from .suites import CecProblem, PBOProblem, CEC_SUITES, PBO_SUITE
from .factory import create_problem
from .server import QueryHandler, RunLog

__version__ = "0.1.0"

__all__ = [
    # Configuration
    'BenchgenConfig',
    'MissingDataPolicy',
    'DEFAULT_CONFIG',
    # Errors
    'BenchgenError',
    'DataUnavailable',
    'DataTruncated',
    'DimensionMismatch',
    'InvalidSolution',
    'UnsupportedVersion',
    # Data
    'DataKind',
    'VersionLayout',
    'get_layout',
    'AuxiliaryDataStore',
    'LoadResult',
    'function_bias',
    'write_auxiliary_data',
    # Composition
    'CompositionEngine',
    'HybridSplit',
    'InverseDistanceGaussian',
    'GaussianFalloff',
    # Problems
    'Problem',
    'ProblemState',
    'MetaData',
    'Solution',
    'Bounds',
    'TransformSpec',
    'Kernel',
    'get_kernel',
    'CecProblem',
    'PBOProblem',
    'CEC_SUITES',
    'PBO_SUITE',
    'create_problem',
    # Server
    'QueryHandler',
    'RunLog',
]
