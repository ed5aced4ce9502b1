"""Tests for the distribution classes of statlib.distrib."""

import math

import pytest

from statlib.distrib import Normal, Gamma, Beta, StudentT, Exponential
from statlib.distrib import Uniform, PearsonType5, PearsonType6
from statlib.distrib import Binomial, Poisson, NegativeBinomial
from statlib.pdf import dgamma, dbeta
from statlib.cdf import cpoisson
from numlib.quadrature import qgauleg


def _integral(func, a, b, nsub=200):
    # Composite 16-point Gauss-Legendre rule
    h = (b - a) / nsub
    return math.fsum(qgauleg(func, a + i*h, a + (i+1)*h) for i in range(nsub))


def _discrete_losses(dist, x, kmax):
    lf1 = math.fsum((k - x)*dist.pmf(k) for k in range(max(x, 0), kmax))
    lf2 = 0.5*math.fsum((k - x)*(k - x - 1)*dist.pmf(k)
                        for k in range(max(x, 0), kmax))
    return lf1, lf2


# Continuous distributions -----------------------------------------------------

def test_normal_losses_at_the_mean():
    dist = Normal(2.0, 3.0)
    assert dist.first_order_loss(2.0) == pytest.approx(3.0*0.3989422804014327)
    assert dist.second_order_loss(2.0) == pytest.approx(0.25*9.0)


@pytest.mark.parametrize("x", [-4.0, 0.5, 5.0])
def test_normal_losses_by_integration(x):
    dist = Normal(1.0, 2.0)
    lf1 = _integral(lambda t: (t - x)*dist.pdf(t), x, 25.0)
    lf2 = 0.5*_integral(lambda t: (t - x)**2*dist.pdf(t), x, 25.0)
    assert dist.first_order_loss(x) == pytest.approx(lf1, rel=1e-9)
    assert dist.second_order_loss(x) == pytest.approx(lf2, rel=1e-9)


@pytest.mark.parametrize("x", [0.7, 3.0, 9.0])
def test_gamma_losses_by_integration(x):
    dist = Gamma(2.5, 1.5, tolf=1.0e-14)
    lf1 = _integral(lambda t: (t - x)*dist.pdf(t), x, 100.0)
    lf2 = 0.5*_integral(lambda t: (t - x)**2*dist.pdf(t), x, 100.0)
    assert dist.first_order_loss(x) == pytest.approx(lf1, rel=1e-7)
    assert dist.second_order_loss(x) == pytest.approx(lf2, rel=1e-7)


def test_gamma_losses_below_the_support():
    dist = Gamma(2.5, 1.5)
    assert dist.first_order_loss(-1.0) == pytest.approx(dist.mean() + 1.0)
    assert dist.second_order_loss(0.0) == \
               pytest.approx(0.5*(dist.variance() + dist.mean()**2))


def test_from_moments():
    normal = Normal.from_moments(1.0, 4.0)
    assert normal.get_parameters() == (1.0, 2.0)
    gamma = Gamma.from_moments(6.0, 12.0)
    assert gamma.get_parameters() == pytest.approx((3.0, 2.0))
    assert gamma.mean() == pytest.approx(6.0)
    assert gamma.variance() == pytest.approx(12.0)


def test_set_parameters_refreshes_cached_constants():
    gamma = Gamma(2.0, 1.0)
    gamma.set_parameters(3.5, 2.0)
    assert gamma.pdf(1.7) == pytest.approx(dgamma(3.5, 2.0, 1.7))
    beta = Beta(1.0, 1.0)
    beta.set_parameters(0.6, 3.3)
    assert beta.pdf(0.2) == pytest.approx(dbeta(0.6, 3.3, 0.2))


@pytest.mark.parametrize("dist", [
    Normal(1.0, 2.0), Gamma(0.7, 3.0), Beta(2.0, 5.0), StudentT(4.0),
    Exponential(2.0), Uniform(-1.0, 3.0), PearsonType5(3.0, 2.0),
    PearsonType6(2.0, 4.0, 1.5),
])
@pytest.mark.parametrize("u", [0.05, 0.5, 0.9])
def test_continuous_variates_invert_cdf(dist, u):
    assert dist.cdf(dist.rvariate(u)) == pytest.approx(u, rel=1e-5)


def test_cdf_outside_the_support():
    assert Gamma(2.0, 1.0).cdf(-1.0) == 0.0
    assert Beta(2.0, 2.0).cdf(1.5) == 1.0
    assert Uniform(0.0, 2.0).cdf(3.0) == 1.0
    assert Exponential(1.0).pdf(-1.0) == 0.0


def test_moments_of_heavy_tailed_distributions():
    assert math.isnan(StudentT(1.0).mean())
    assert StudentT(1.5).variance() == float('inf')
    assert StudentT(4.0).variance() == pytest.approx(2.0)
    assert PearsonType5(3.0, 2.0).mean() == pytest.approx(1.0)
    assert PearsonType5(1.0, 2.0).mean() == float('inf')
    assert PearsonType6(2.0, 4.0, 1.5).mean() == pytest.approx(1.0)
    assert Uniform(1.0, 4.0).stdev() == pytest.approx(math.sqrt(0.75))


def test_normal_complementary_cdf():
    dist = Normal(1.0, 2.0)
    assert dist.ccdf(3.0) == pytest.approx(1.0 - dist.cdf(3.0))


def test_rvariate_rejects_endpoints():
    with pytest.raises(AssertionError):
        Exponential(1.0).rvariate(0.0)
    with pytest.raises(AssertionError):
        Normal().rvariate(1.0)


_PROBS = [1e-6, 1e-3] + [i / 50.0 for i in range(1, 50)] + [0.999, 1.0 - 1e-6]


def _non_decreasing(values):
    return all(a <= b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("dist", [
    Normal(1.0, 2.0), Gamma(0.7, 3.0), Beta(2.0, 5.0), Beta(0.2, 0.3),
    StudentT(4.0), StudentT(1.5), Exponential(2.0), Uniform(-1.0, 3.0),
    PearsonType5(3.0, 2.0), PearsonType6(2.0, 4.0, 1.5),
])
def test_continuous_cdf_and_invcdf_are_monotone(dist):
    quantiles = [dist.invcdf(p) for p in _PROBS]
    assert _non_decreasing(quantiles)
    lo, hi = quantiles[0], quantiles[-1]
    xs = [lo + (hi - lo) * i / 200.0 for i in range(201)]
    assert _non_decreasing([dist.cdf(x) for x in xs])


# Discrete distributions -------------------------------------------------------

@pytest.mark.parametrize("x", range(-3, 15))
def test_binomial_losses(x):
    dist = Binomial(12, 0.35)
    lf1, lf2 = _discrete_losses(dist, x, 13)
    assert dist.first_order_loss(x) == pytest.approx(lf1, rel=1e-9, abs=1e-12)
    assert dist.second_order_loss(x) == pytest.approx(lf2, rel=1e-9, abs=1e-12)


@pytest.mark.parametrize("x", range(-3, 12))
def test_poisson_losses(x):
    dist = Poisson(3.7)
    lf1, lf2 = _discrete_losses(dist, x, 80)
    assert dist.first_order_loss(x) == pytest.approx(lf1, rel=1e-9, abs=1e-12)
    assert dist.second_order_loss(x) == pytest.approx(lf2, rel=1e-9, abs=1e-12)


@pytest.mark.parametrize("x", range(-3, 15))
def test_negbinomial_losses(x):
    dist = NegativeBinomial(2.5, 0.4)
    lf1, lf2 = _discrete_losses(dist, x, 400)
    assert dist.first_order_loss(x) == pytest.approx(lf1, rel=1e-9, abs=1e-12)
    assert dist.second_order_loss(x) == pytest.approx(lf2, rel=1e-9, abs=1e-12)


def test_discrete_loss_argument_must_be_integer():
    with pytest.raises(AssertionError):
        Poisson(2.0).first_order_loss(1.5)
    with pytest.raises(AssertionError):
        Binomial(5, 0.5).second_order_loss(2.0)


def test_discrete_from_moments():
    binomial = Binomial.from_moments(3.0, 2.1)
    assert binomial.n == 10
    assert binomial.phi == pytest.approx(0.3)
    negbin = NegativeBinomial.from_moments(3.0, 7.5)
    assert negbin.get_parameters() == pytest.approx((2.0, 0.4))
    with pytest.raises(AssertionError):
        Binomial.from_moments(3.0, 4.0)
    with pytest.raises(AssertionError):
        NegativeBinomial.from_moments(3.0, 2.0)


def test_discrete_cdf_accepts_floats():
    dist = Poisson(3.0)
    assert dist.cdf(2.7) == cpoisson(3.0, 2)
    assert dist.cdf(-0.5) == 0.0
    assert dist.ccdf(2) == pytest.approx(1.0 - cpoisson(3.0, 2))


@pytest.mark.parametrize("dist", [
    Binomial(20, 0.3), Binomial(20, 0.3, recursive=False),
    Poisson(4.5), Poisson(4.5, recursive=False),
    NegativeBinomial(3.5, 0.4), NegativeBinomial(1.0, 0.3),
])
def test_discrete_variates_invert_cdf(dist):
    for k in range(8):
        assert dist.rvariate(dist.cdf(k)) == k


@pytest.mark.parametrize("dist", [
    Binomial(20, 0.3), Binomial(100, 0.1, recursive=False),
    Poisson(4.5), Poisson(30.0, recursive=False),
    NegativeBinomial(3.5, 0.4), NegativeBinomial(1.0, 0.3),
])
def test_discrete_cdf_and_invcdf_are_monotone(dist):
    cdfs = [dist.cdf(k) for k in range(-2, 80)]
    assert _non_decreasing(cdfs)
    assert _non_decreasing([dist.invcdf(p) for p in _PROBS])


def test_discrete_moments():
    assert Binomial(10, 0.3).mean() == pytest.approx(3.0)
    assert Binomial(10, 0.3).variance() == pytest.approx(2.1)
    assert NegativeBinomial(2.0, 0.5).mean() == pytest.approx(2.0)
    assert NegativeBinomial(2.0, 0.5).variance() == pytest.approx(4.0)
    assert Poisson(3.0).stdev() == pytest.approx(math.sqrt(3.0))
