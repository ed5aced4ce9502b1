"""Tests for the gamma and beta functions of numlib.specfunc."""

import math

import pytest

from numlib.specfunc import gamma, lngamma, digamma, lnfactorial
from numlib.specfunc import incgamma, beta, lnbeta, incbeta
from misclib.errwarn import ConvergenceError
from misclib.mathconst import EULERGAM
from machdep.machnum import FOURMACHEPS


@pytest.mark.parametrize("n", [1, 2, 3, 5, 10, 20])
def test_gamma_of_integers_is_factorial(n):
    assert gamma(float(n)) == pytest.approx(math.factorial(n - 1), rel=1e-12)


def test_gamma_five():
    assert gamma(5.0) == pytest.approx(24.0, rel=1e-13)


def test_gamma_half():
    assert gamma(0.5) == pytest.approx(math.sqrt(math.pi), rel=1e-12)


def test_gamma_small_argument_uses_recurrence():
    x = 1.0e-3
    assert gamma(x) == pytest.approx(gamma(x + 1.0) / x, rel=1e-12)


def test_gamma_overflow_is_inf():
    assert gamma(200.0) == float('inf')


@pytest.mark.parametrize("x", [0.1, 0.7, 1.5, 3.3, 12.0, 19.9, 20.0, 55.5, 170.0])
def test_lngamma_agrees_with_math(x):
    assert lngamma(x) == pytest.approx(math.lgamma(x), rel=1e-12, abs=1e-13)


def test_lngamma_large():
    assert lngamma(1000.0) == pytest.approx(math.lgamma(1000.0), rel=1e-13)


def test_lnfactorial_paths_agree():
    for n in [0, 1, 7, 50, 170]:
        assert lnfactorial(n) == pytest.approx(lnfactorial(n, integer=False),
                                                rel=1e-12, abs=1e-12)


def test_digamma_at_one():
    assert digamma(1.0) == pytest.approx(-EULERGAM, abs=1e-9)


def test_digamma_recurrence():
    for x in [0.3, 1.7, 4.2, 11.0]:
        assert digamma(x + 1.0) == pytest.approx(digamma(x) + 1.0 / x,
                                                 rel=1e-10)


def test_digamma_tiny_argument():
    x = 1.0e-7
    assert digamma(x) == pytest.approx(-EULERGAM - 1.0 / x, rel=1e-12)


def test_beta_values():
    assert beta(2.0, 3.0) == pytest.approx(1.0 / 12.0, rel=1e-12)
    assert lnbeta(2.0, 3.0) == pytest.approx(math.log(1.0 / 12.0), rel=1e-12)
    assert beta(0.5, 0.5) == pytest.approx(math.pi, rel=1e-12)


def test_incgamma_reference_value():
    assert incgamma(0.1, 9.0) == pytest.approx(0.999998354830390, abs=1e-8)


@pytest.mark.parametrize("x", [0.01, 0.5, 1.0, 2.0, 7.5, 30.0])
def test_incgamma_shape_one_is_exponential(x):
    expected = 1.0 - math.exp(-x)
    assert incgamma(1.0, x, tolf=FOURMACHEPS) == pytest.approx(expected,
                                                               abs=1e-13)
    assert incgamma(1.0, x) == pytest.approx(expected, abs=1e-8)


def test_incgamma_shape_two():
    # P(2, x) = 1 - (1+x)*exp(-x)
    for x in [0.5, 3.0, 10.0]:
        assert incgamma(2.0, x) == pytest.approx(1.0 - (1.0 + x) * math.exp(-x),
                                                 abs=1e-10)


def test_incgamma_limits():
    assert incgamma(3.0, 0.0) == 0.0
    assert incgamma(3.0, float('inf')) == 1.0


def test_incgamma_precomputed_lngamma():
    lnga = lngamma(4.5)
    assert incgamma(4.5, 3.0, lnga) == pytest.approx(incgamma(4.5, 3.0),
                                                     rel=1e-14)


def test_incgamma_series_cap_raises():
    with pytest.raises(ConvergenceError) as excinfo:
        incgamma(50.0, 45.0, maxniter=3)
    assert excinfo.value.caller == 'incgamma'
    assert excinfo.value.niter == 3


def test_incgamma_fraction_cap_raises():
    with pytest.raises(ConvergenceError):
        incgamma(5.0, 8.0, maxniter=2)


def test_incgamma_rejects_negative_variate():
    with pytest.raises(AssertionError):
        incgamma(1.0, -1.0)


def test_incbeta_binomial_identity():
    # I(2, 3, 0.4) = P(Bin(4, 0.4) >= 2)
    assert incbeta(2.0, 3.0, 0.4) == pytest.approx(0.5248, abs=1e-12)


@pytest.mark.parametrize("x", [0.0, 0.1, 0.33, 0.5, 0.9, 1.0])
def test_incbeta_uniform(x):
    assert incbeta(1.0, 1.0, x) == pytest.approx(x, abs=1e-12)


@pytest.mark.parametrize("a, b, x", [(0.6, 3.3, 0.2), (2.5, 0.7, 0.8),
                                     (10.0, 12.0, 0.45), (0.5, 0.5, 0.01)])
def test_incbeta_symmetry(a, b, x):
    assert incbeta(a, b, x) == pytest.approx(1.0 - incbeta(b, a, 1.0 - x),
                                             abs=1e-12)


def test_incbeta_half_half_is_arcsine():
    x = 0.3
    expected = 2.0 / math.pi * math.asin(math.sqrt(x))
    assert incbeta(0.5, 0.5, x, tolf=FOURMACHEPS) == pytest.approx(expected,
                                                                  abs=1e-13)
    assert incbeta(0.5, 0.5, x) == pytest.approx(expected, abs=1e-8)


def test_incbeta_cap_raises():
    with pytest.raises(ConvergenceError):
        incbeta(30.0, 30.0, 0.49, maxniter=2)
