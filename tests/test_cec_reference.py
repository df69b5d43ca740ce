"""
Tests for CEC Values Against Direct Formulas

Each function is rebuilt here from the published competition definitions,
written as plain loops over the files read with np.loadtxt, and compared
with the suite implementation on the same synthetic data.
"""

import math

import numpy as np
import pytest

from benchgen.data.layout import DataKind
from benchgen.suites.cec import build_cec_problem

DIM = 10
INF = 1.0e99


def _read(paths):
    """Rotation rows, shift rows and 1-based shuffle as the competition code reads them."""
    m = np.atleast_2d(np.loadtxt(paths[DataKind.ROTATION]))
    o = np.atleast_2d(np.loadtxt(paths[DataKind.SHIFT]))
    s = np.loadtxt(paths[DataKind.SHUFFLE]).ravel().astype(int)
    return m, o, s


def _sr(x, o, m, rate, rotate=True):
    y = [(x[i] - o[i]) * rate for i in range(len(x))]
    if not rotate:
        return y
    n = len(y)
    return [sum(m[i][j] * y[j] for j in range(n)) for i in range(n)]


def _scaled(z, rate):
    return [v * rate for v in z]


def _zakharov(z):
    s1 = sum(v * v for v in z)
    s2 = sum(0.5 * (i + 1) * v for i, v in enumerate(z))
    return s1 + s2 ** 2 + s2 ** 4


def _ellips(z):
    n = len(z)
    return sum(10.0 ** (6.0 * i / (n - 1)) * z[i] * z[i] for i in range(n))


def _bent_cigar(z):
    return z[0] * z[0] + sum(1e6 * v * v for v in z[1:])


def _discus(z):
    return 1e6 * z[0] * z[0] + sum(v * v for v in z[1:])


def _rosenbrock(z):
    z = [v + 1.0 for v in z]
    return sum(100.0 * (z[i] * z[i] - z[i + 1]) ** 2 + (z[i] - 1.0) ** 2
               for i in range(len(z) - 1))


def _rastrigin(z):
    return sum(v * v - 10.0 * math.cos(2.0 * math.pi * v) + 10.0 for v in z)


def _schwefel(z):
    n = len(z)
    f = 0.0
    for v in z:
        v += 4.209687462275036e002
        if v > 500:
            f -= (500.0 - math.fmod(v, 500)) * math.sin((500.0 - math.fmod(v, 500)) ** 0.5)
            f += ((v - 500.0) / 100) ** 2 / n
        elif v < -500:
            f -= (-500.0 + math.fmod(abs(v), 500)) * math.sin((500.0 - math.fmod(abs(v), 500)) ** 0.5)
            f += ((v + 500.0) / 100) ** 2 / n
        else:
            f -= v * math.sin(abs(v) ** 0.5)
    return f + 4.189828872724338e002 * n


def _hgbat(z):
    n = len(z)
    z = [v - 1.0 for v in z]
    r2 = sum(v * v for v in z)
    sum_z = sum(z)
    return abs(r2 ** 2 - sum_z ** 2) ** 0.5 + (0.5 * r2 + sum_z) / n + 0.5


def _schaffer_f7(z):
    n = len(z)
    f = 0.0
    for i in range(n - 1):
        s = (z[i] * z[i] + z[i + 1] * z[i + 1]) ** 0.5
        f += s ** 0.5 + s ** 0.5 * math.sin(50.0 * s ** 0.2) ** 2
    return f * f / (n - 1) / (n - 1)


def _cf_cal(x, shifts, deltas, biases, fit):
    n = len(x)
    w = []
    for o, delta in zip(shifts, deltas):
        d2 = sum((x[j] - o[j]) ** 2 for j in range(n))
        w.append(INF if d2 == 0 else (1.0 / d2) ** 0.5 * math.exp(-d2 / 2.0 / n / delta ** 2))
    if max(w) == 0:
        w = [1.0] * len(w)
    return sum(wi / sum(w) * (fi + bi) for wi, fi, bi in zip(w, fit, biases))


def _cec2022_f9(x, m, o):
    blocks = [m[i * DIM:(i + 1) * DIM] for i in range(5)]
    fit = [
        _rosenbrock(_sr(x, o[0], blocks[0], 2.048 / 100.0)),
        _ellips(_sr(x, o[1], blocks[1], 1.0)) / 1e6,
        _bent_cigar(_sr(x, o[2], blocks[2], 1.0)) / 1e26,
        _discus(_sr(x, o[3], blocks[3], 1.0)) / 1e6,
        _ellips(_sr(x, o[4], blocks[4], 1.0, rotate=False)) / 1e6,
    ]
    return _cf_cal(x, o[:5], [10, 20, 30, 40, 50], [0, 200, 300, 100, 400], fit) + 2300.0


def _cec2022_f10(x, m, o):
    blocks = [m[i * DIM:(i + 1) * DIM] for i in range(3)]
    fit = [
        _schwefel(_sr(x, o[0], blocks[0], 1000.0 / 100.0, rotate=False)),
        _rastrigin(_sr(x, o[1], blocks[1], 5.12 / 100.0)),
        _hgbat(_sr(x, o[2], blocks[2], 5.0 / 100.0)),
    ]
    return _cf_cal(x, o[:3], [20, 10, 10], [0, 200, 100], fit) + 2400.0


def _cec2022_f6(x, m, o, s):
    z = _sr(x, o[0], m, 1.0)
    y = [z[s[i] - 1] for i in range(DIM)]
    return (_bent_cigar(y[0:4])
            + _hgbat(_scaled(y[4:8], 5.0 / 100.0))
            + _rastrigin(_scaled(y[8:10], 5.12 / 100.0))
            + 1800.0)


def _points(center, seed=7):
    rng = np.random.default_rng(seed)
    return [center + rng.uniform(-1.0, 1.0, DIM) for _ in range(3)] + \
        [rng.uniform(-100.0, 100.0, DIM) for _ in range(3)]


class TestSimpleFunctions:
    """Shifted and rotated single kernels."""

    def test_cec2022_zakharov(self, generated, store):
        m, o, _ = _read(generated(2022, 1, DIM))
        problem = build_cec_problem(2022, 1, 1, DIM, store)
        for x in _points(o[0, :DIM]):
            expected = _zakharov(_sr(x, o[0], m, 1.0)) + 300.0
            assert problem(x) == pytest.approx(expected, rel=1e-10)

    @pytest.mark.parametrize("version,function_id,bias", [(2022, 3, 600.0), (2017, 6, 600.0)])
    def test_schaffer_f7(self, generated, store, version, function_id, bias):
        """Both suites evaluate Schaffer F7 behind the shift and rotation."""
        m, o, _ = _read(generated(version, function_id, DIM))
        problem = build_cec_problem(version, function_id, 1, DIM, store)
        assert problem.meta.name == "Schaffer F7"
        for x in _points(o[0, :DIM]):
            expected = _schaffer_f7(_sr(x, o[0], m, 1.0)) + bias
            assert problem(x) == pytest.approx(expected, rel=1e-10)


class TestHybridFunctions:
    """Shuffled segments with their own kernels."""

    def test_cec2022_f6(self, generated, store):
        m, o, s = _read(generated(2022, 6, DIM))
        problem = build_cec_problem(2022, 6, 1, DIM, store)
        for x in _points(o[0, :DIM]):
            assert problem(x) == pytest.approx(_cec2022_f6(x, m, o, s), rel=1e-10)


class TestCompositionFunctions:
    """Distance-weighted blends of component kernels."""

    def test_cec2022_f9(self, generated, store):
        m, o, _ = _read(generated(2022, 9, DIM))
        problem = build_cec_problem(2022, 9, 1, DIM, store)
        for x in _points(o[4, :DIM]):
            assert problem(x) == pytest.approx(_cec2022_f9(x, m, o), rel=1e-10)

    def test_cec2022_f9_last_ellipsoid_unrotated(self, generated, store):
        """Near the fifth optimum the value follows the plain ellipsoid."""
        m, o, _ = _read(generated(2022, 9, DIM))
        problem = build_cec_problem(2022, 9, 1, DIM, store)
        assert [spec.apply_rotate for spec in problem.specs] == [True, True, True, True, False]
        x = o[4, :DIM] + 0.5
        assert problem(x) == pytest.approx(_cec2022_f9(x, m, o), rel=1e-10)

    def test_cec2022_f10(self, generated, store):
        m, o, _ = _read(generated(2022, 10, DIM))
        problem = build_cec_problem(2022, 10, 1, DIM, store)
        for x in _points(o[1, :DIM]):
            assert problem(x) == pytest.approx(_cec2022_f10(x, m, o), rel=1e-10)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
