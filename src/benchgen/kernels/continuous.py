"""
Continuous Kernels

Base functions in kernel space, written so that every optimum sits at the
origin (offsets such as Rosenbrock's +1 are applied inside the kernel).
Each kernel carries the scale rate its suites apply before rotation.

Sphere, Ellipsoid, Bent Cigar, Discus, Zakharov, Rosenbrock, Rastrigin,
Non-continuous Rastrigin, Schaffer F7, Expanded Schaffer F6, Levy,
Schwefel, HGBat, HappyCat, Katsuura, Ackley, Griewank, Expanded
Griewank-plus-Rosenbrock.
"""

import math
from typing import Dict

import numpy as np

from .base import FunctionKernel

PI = math.pi
E = math.e


def sphere(z: np.ndarray) -> float:
    return float(np.sum(z ** 2))


def ellipsoid(z: np.ndarray) -> float:
    n = len(z)
    if n == 1:
        return float(z[0] ** 2)
    powers = 6.0 * np.arange(n) / (n - 1)
    return float(np.sum(10.0 ** powers * z ** 2))


def bent_cigar(z: np.ndarray) -> float:
    return float(z[0] ** 2 + 1e6 * np.sum(z[1:] ** 2))


def discus(z: np.ndarray) -> float:
    return float(1e6 * z[0] ** 2 + np.sum(z[1:] ** 2))


def zakharov(z: np.ndarray) -> float:
    sum1 = np.sum(z ** 2)
    sum2 = np.sum(0.5 * np.arange(1, len(z) + 1) * z)
    return float(sum1 + sum2 ** 2 + sum2 ** 4)


def rosenbrock(z: np.ndarray) -> float:
    z = z + 1.0
    return float(np.sum(100.0 * (z[:-1] ** 2 - z[1:]) ** 2 + (z[:-1] - 1.0) ** 2))


def rastrigin(z: np.ndarray) -> float:
    return float(np.sum(z ** 2 - 10.0 * np.cos(2.0 * PI * z) + 10.0))


def non_continuous_rastrigin(z: np.ndarray) -> float:
    y = np.where(np.abs(z) > 0.5, np.floor(2.0 * z + 0.5) / 2.0, z)
    return rastrigin(y)


def schaffer_f7(z: np.ndarray) -> float:
    n = len(z)
    if n < 2:
        return 0.0
    s = np.sqrt(z[:-1] ** 2 + z[1:] ** 2)
    f = np.sum(np.sqrt(s) + np.sqrt(s) * np.sin(50.0 * s ** 0.2) ** 2)
    return float((f / (n - 1)) ** 2)


def expanded_schaffer_f6(z: np.ndarray) -> float:
    # pairs wrap around: (z0, z1), ..., (z_{n-1}, z0)
    r2 = z ** 2 + np.roll(z, -1) ** 2
    f = 0.5 + (np.sin(np.sqrt(r2)) ** 2 - 0.5) / (1.0 + 0.001 * r2) ** 2
    return float(np.sum(f))


def levy(z: np.ndarray) -> float:
    w = 1.0 + z / 4.0
    term1 = math.sin(PI * w[0]) ** 2
    wi = w[:-1]
    term2 = np.sum((wi - 1.0) ** 2 * (1.0 + 10.0 * np.sin(PI * wi + 1.0) ** 2))
    term3 = (w[-1] - 1.0) ** 2 * (1.0 + math.sin(2.0 * PI * w[-1]) ** 2)
    return float(term1 + term2 + term3)


def schwefel(z: np.ndarray) -> float:
    n = len(z)
    f = 0.0
    for zi in z + 4.209687462275036e+002:
        if zi > 500:
            r = 500.0 - math.fmod(zi, 500.0)
            f -= r * math.sin(math.sqrt(r))
            f += ((zi - 500.0) / 100.0) ** 2 / n
        elif zi < -500:
            r = -500.0 + math.fmod(abs(zi), 500.0)
            f -= r * math.sin(math.sqrt(500.0 - math.fmod(abs(zi), 500.0)))
            f += ((zi + 500.0) / 100.0) ** 2 / n
        else:
            f -= zi * math.sin(math.sqrt(abs(zi)))
    return f + 4.189828872724338e+002 * n


def hgbat(z: np.ndarray) -> float:
    n = len(z)
    z = z - 1.0
    r2 = np.sum(z ** 2)
    sum_z = np.sum(z)
    return float(abs(r2 ** 2 - sum_z ** 2) ** 0.5 + (0.5 * r2 + sum_z) / n + 0.5)


def happycat(z: np.ndarray) -> float:
    n = len(z)
    z = z - 1.0
    r2 = np.sum(z ** 2)
    sum_z = np.sum(z)
    return float(abs(r2 - n) ** 0.25 + (0.5 * r2 + sum_z) / n + 0.5)


def katsuura(z: np.ndarray) -> float:
    n = len(z)
    powers = 2.0 ** np.arange(1, 33)
    t = np.outer(z, powers)
    inner = np.sum(np.abs(t - np.floor(t + 0.5)) / powers, axis=1)
    f = np.prod((1.0 + np.arange(1, n + 1) * inner) ** (10.0 / n ** 1.2))
    c = 10.0 / n ** 2
    return float(f * c - c)


def ackley(z: np.ndarray) -> float:
    n = len(z)
    sum1 = np.sum(z ** 2)
    sum2 = np.sum(np.cos(2.0 * PI * z))
    return float(-20.0 * math.exp(-0.2 * math.sqrt(sum1 / n)) - math.exp(sum2 / n) + 20.0 + E)


def griewank(z: np.ndarray) -> float:
    s = np.sum(z ** 2) / 4000.0
    p = np.prod(np.cos(z / np.sqrt(np.arange(1, len(z) + 1))))
    return float(s - p + 1.0)


def griewank_rosenbrock(z: np.ndarray) -> float:
    z = z + 1.0
    nxt = np.roll(z, -1)
    t = 100.0 * (z ** 2 - nxt) ** 2 + (z - 1.0) ** 2
    return float(np.sum(t ** 2 / 4000.0 - np.cos(t) + 1.0))


KERNELS: Dict[str, FunctionKernel] = {k.name: k for k in [
    FunctionKernel("sphere", sphere),
    FunctionKernel("ellipsoid", ellipsoid),
    FunctionKernel("bent_cigar", bent_cigar),
    FunctionKernel("discus", discus),
    FunctionKernel("zakharov", zakharov),
    FunctionKernel("rosenbrock", rosenbrock, 2.048 / 100.0),
    FunctionKernel("rastrigin", rastrigin, 5.12 / 100.0),
    FunctionKernel("non_continuous_rastrigin", non_continuous_rastrigin, 5.12 / 100.0),
    FunctionKernel("schaffer_f7", schaffer_f7),
    FunctionKernel("expanded_schaffer_f6", expanded_schaffer_f6),
    FunctionKernel("levy", levy),
    FunctionKernel("schwefel", schwefel, 1000.0 / 100.0),
    FunctionKernel("hgbat", hgbat, 5.0 / 100.0),
    FunctionKernel("happycat", happycat, 5.0 / 100.0),
    FunctionKernel("katsuura", katsuura, 5.0 / 100.0),
    FunctionKernel("ackley", ackley),
    FunctionKernel("griewank", griewank, 600.0 / 100.0),
    FunctionKernel("griewank_rosenbrock", griewank_rosenbrock, 5.0 / 100.0),
]}


def get_kernel(name: str) -> FunctionKernel:
    try:
        return KERNELS[name]
    except KeyError:
        raise ValueError(f"Unknown kernel: {name}") from None
