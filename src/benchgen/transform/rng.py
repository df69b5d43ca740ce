"""
Legacy Deterministic Random Numbers

The Park-Miller minimal standard generator with a 32-slot shuffle table used
by the BBOB/IOH instance generators. Every call starts from its seed, so no
random state leaks between problems.
"""

import math

import numpy as np

_M = 2147483647.0
_A = 16807.0
_Q = 127773.0
_R = 2836.0


def uniform(n: int, seed: int) -> np.ndarray:
    """n uniform numbers in (0, 1) for a given seed."""
    aktseed = abs(float(seed))
    if aktseed < 1.0:
        aktseed = 1.0

    rgrand = [0.0] * 32
    for i in range(39, -1, -1):
        tmp = math.floor(aktseed / _Q)
        aktseed = _A * (aktseed - tmp * _Q) - _R * tmp
        if aktseed < 0:
            aktseed += _M
        if i < 32:
            rgrand[i] = aktseed
    aktrand = rgrand[0]

    r = np.empty(int(n))
    for i in range(int(n)):
        tmp = math.floor(aktseed / _Q)
        aktseed = _A * (aktseed - tmp * _Q) - _R * tmp
        if aktseed < 0:
            aktseed += _M
        tmp = int(math.floor(aktrand / 67108865.0))
        aktrand = rgrand[tmp]
        rgrand[tmp] = aktseed
        r[i] = aktrand / 2.147483647e9
    r[r == 0] = 1e-99
    return r


def gauss(n: int, seed: int) -> np.ndarray:
    """n standard normal numbers (Box-Muller over uniform)."""
    r = uniform(2 * n, seed)
    g = np.sqrt(-2.0 * np.log(r[:n])) * np.cos(2.0 * np.pi * r[n:2 * n])
    g[g == 0] = 1e-99
    return g
