"""
Suites Module - Benchmark Function Tables

Provides:
- CEC 2017/2021/2022 continuous problems (simple, hybrid, composition)
- Pseudo-Boolean (PBO) problems with bit-string variants
"""

from .cec import (
    CecProblem,
    LunacekBiRastriginProblem,
    CecHybridProblem,
    CecCompositionProblem,
    Component,
    CEC_SUITES,
    build_cec_problem,
)
from .pbo import PBOProblem, BitVariant, PBO_SUITE, build_pbo_problem

__all__ = [
    'CecProblem',
    'LunacekBiRastriginProblem',
    'CecHybridProblem',
    'CecCompositionProblem',
    'Component',
    'CEC_SUITES',
    'build_cec_problem',
    'PBOProblem',
    'BitVariant',
    'PBO_SUITE',
    'build_pbo_problem',
]
