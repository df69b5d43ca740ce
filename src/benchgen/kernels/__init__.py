"""
Kernels Module - Untransformed Objective Functions
"""

from .base import Kernel, FunctionKernel, BitKernel
from .continuous import KERNELS, get_kernel
from .pseudo_boolean import BIT_KERNELS

__all__ = [
    'Kernel',
    'FunctionKernel',
    'BitKernel',
    'KERNELS',
    'get_kernel',
    'BIT_KERNELS',
]
