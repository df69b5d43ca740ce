"""
Transform Module - Input and Objective Transformations

Provides:
- Continuous: shift, scale, rotate, sr_func and their inverses, shuffle
- Discrete: dummy variables, epistasis, neutrality, ruggedness, instance
  bit flips/reordering
- Legacy deterministic random numbers
"""

from .continuous import (
    shift,
    unshift,
    scale,
    rotate,
    unrotate,
    sr_func,
    inverse_sr_func,
    shuffle,
    unshuffle,
    is_permutation,
)
from .discrete import (
    dummy_variable_mask,
    epistasis,
    epistasis_optimum,
    neutrality,
    ruggedness1,
    ruggedness2,
    ruggedness3_table,
    random_flip,
    random_reorder,
    inverse_random_reorder,
    transform_bits,
    reset_bits,
    scale_objective,
    shift_objective,
    transform_objective,
)
from .rng import uniform, gauss

__all__ = [
    'shift',
    'unshift',
    'scale',
    'rotate',
    'unrotate',
    'sr_func',
    'inverse_sr_func',
    'shuffle',
    'unshuffle',
    'is_permutation',
    'dummy_variable_mask',
    'epistasis',
    'epistasis_optimum',
    'neutrality',
    'ruggedness1',
    'ruggedness2',
    'ruggedness3_table',
    'random_flip',
    'random_reorder',
    'inverse_random_reorder',
    'transform_bits',
    'reset_bits',
    'scale_objective',
    'shift_objective',
    'transform_objective',
    'uniform',
    'gauss',
]
