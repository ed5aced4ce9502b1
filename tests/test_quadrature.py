"""Tests for the Gauss-Legendre rules of numlib.quadrature."""

import math

import pytest

from numlib.quadrature import gaulegnodes, qgauleg


@pytest.mark.parametrize("npoints", [12, 16])
def test_nodes_ascending_and_weights_sum_to_two(npoints):
    nodes, weights = gaulegnodes(npoints)
    assert len(nodes) == len(weights) == npoints
    assert list(nodes) == sorted(nodes)
    assert sum(weights) == pytest.approx(2.0, rel=1e-14)
    assert nodes[0] == -nodes[-1]


@pytest.mark.parametrize("npoints, degree", [(12, 23), (16, 31)])
def test_polynomials_integrated_exactly(npoints, degree):
    value = qgauleg(lambda x: x**degree + x**2, 0.0, 1.0, npoints)
    assert value == pytest.approx(1.0 / (degree + 1) + 1.0 / 3.0, rel=1e-13)


def test_smooth_integrand():
    assert qgauleg(math.exp, 0.0, 2.0) == pytest.approx(math.exp(2.0) - 1.0,
                                                        rel=1e-13)


def test_unsupported_order_rejected():
    with pytest.raises(AssertionError):
        gaulegnodes(10)
