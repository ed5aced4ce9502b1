"""Tests for the continued fraction engine of numlib.contfrac."""

import math

import pytest

from numlib.contfrac import ContFrac, IncBetaFrac
from misclib.errwarn import ConvergenceError


class GoldenRatio(ContFrac):
    # 1 + 1/(1 + 1/(1 + ...

    def initvalue(self):
        return 1.0

    def factorsat(self, n):
        return 1.0, 1.0


class SquareRootTwo(ContFrac):
    # 1 + 1/(2 + 1/(2 + ...

    def initvalue(self):
        return 1.0

    def factorsat(self, n):
        return 1.0, 2.0


class TangentFrac(ContFrac):
    # tan(x) = x/(1 - x**2/(3 - x**2/(5 - ...

    def __init__(self, x, **kwargs):
        ContFrac.__init__(self, **kwargs)
        self.x = x

    def initvalue(self):
        return 0.0

    def factorsat(self, n):
        if n == 1:
            return self.x, 1.0
        return -self.x * self.x, 2.0 * n - 1.0


def test_golden_ratio():
    frac = GoldenRatio(tolf=1e-15)
    assert frac.evaluate() == pytest.approx((1.0 + math.sqrt(5.0)) / 2.0,
                                            rel=1e-14)
    assert frac.has_converged()
    assert frac.niter > 10


def test_square_root_two():
    assert SquareRootTwo().evaluate() == pytest.approx(math.sqrt(2.0),
                                                       rel=1e-8)


def test_zero_leading_term_is_guarded():
    assert TangentFrac(0.7).evaluate() == pytest.approx(math.tan(0.7),
                                                        rel=1e-8)


def test_cap_exhausted_raises():
    frac = GoldenRatio(tolf=1e-15, maxniter=3)
    with pytest.raises(ConvergenceError) as excinfo:
        frac.evaluate()
    assert excinfo.value.niter == 3
    assert excinfo.value.caller == 'GoldenRatio'
    assert not frac.has_converged()


def test_evaluate_can_be_repeated():
    frac = SquareRootTwo()
    first = frac.evaluate()
    assert frac.evaluate() == first


def test_incbeta_fraction_gives_incomplete_beta():
    # I(2, 3, 0.2) from the fraction and the prefactor
    a, b, x = 2.0, 3.0, 0.2
    frac = IncBetaFrac(x, a, b).evaluate()
    bt = x**a * (1.0 - x)**b * 12.0
    expected = 6 * 0.04 * 0.64 + 4 * 0.008 * 0.8 + 0.0016
    assert bt / (a * frac) == pytest.approx(expected, rel=1e-10)


def test_incbeta_fraction_rejects_bad_input():
    with pytest.raises(AssertionError):
        IncBetaFrac(1.5, 2.0, 3.0)
    with pytest.raises(AssertionError):
        IncBetaFrac(0.5, 0.0, 3.0)


def test_bad_maxniter_rejected():
    with pytest.raises(AssertionError):
        GoldenRatio(maxniter=0)
