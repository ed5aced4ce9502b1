"""Tests for the studentized range distribution of statlib.tukey."""

import math

import pytest

from statlib.tukey import wprob, ptukey, qtukey
from statlib.cdf import cnormal, cstudent
from misclib.errwarn import ConvergenceError


@pytest.mark.parametrize("w", [0.5, 1.7, 3.2, 5.0])
def test_range_of_two_normals(w):
    expected = 2.0*cnormal(0.0, 1.0, w/math.sqrt(2.0)) - 1.0
    assert wprob(w, 1.0, 2.0) == pytest.approx(expected, abs=1e-6)


def test_range_probability_limits():
    assert wprob(16.0, 1.0, 5.0) == 1.0
    assert 0.0 < wprob(2.0, 1.0, 5.0) < wprob(2.0, 1.0, 3.0) < 1.0
    assert wprob(2.0, 3.0, 5.0) == pytest.approx(wprob(2.0, 1.0, 5.0)**3,
                                                 rel=1e-10)


@pytest.mark.parametrize("q, df", [(1.0, 5.0), (3.0, 10.0), (4.5, 60.0)])
def test_two_means_reduce_to_student(q, df):
    expected = 2.0*cstudent(df, q/math.sqrt(2.0)) - 1.0
    assert ptukey(q, 2.0, df) == pytest.approx(expected, abs=1e-5)


def test_upper_quantile():
    assert qtukey(0.95, 4.0, 20.0) == pytest.approx(3.958, abs=0.01)


@pytest.mark.parametrize("p", [0.1, 0.5, 0.9, 0.99])
def test_quantile_inverts_cdf(p):
    q = qtukey(p, 5.0, 12.0)
    assert ptukey(q, 5.0, 12.0) == pytest.approx(p, abs=1e-3)


def test_large_df_uses_range_distribution():
    assert ptukey(3.0, 3.0, 1.0e5) == wprob(3.0, 1.0, 3.0)


def test_tails_and_logarithms():
    p = ptukey(3.5, 4.0, 20.0)
    assert ptukey(3.5, 4.0, 20.0, lower_tail=False) == \
                                            pytest.approx(1.0 - p, abs=1e-15)
    assert ptukey(3.5, 4.0, 20.0, log_p=True) == pytest.approx(math.log(p))
    assert ptukey(3.5, 4.0, 20.0, lower_tail=False, log_p=True) == \
                                            pytest.approx(math.log1p(-p))


def test_cdf_edge_cases():
    assert ptukey(0.0, 3.0, 10.0) == 0.0
    assert ptukey(-1.0, 3.0, 10.0, lower_tail=False) == 1.0
    assert ptukey(float('inf'), 3.0, 10.0) == 1.0
    assert ptukey(0.0, 3.0, 10.0, log_p=True) == float('-inf')


def test_quantile_tail_and_log_forms():
    q = qtukey(0.95, 4.0, 20.0)
    assert qtukey(0.05, 4.0, 20.0, lower_tail=False) == \
                                                  pytest.approx(q, abs=1e-3)
    assert qtukey(math.log(0.95), 4.0, 20.0, log_p=True) == \
                                                  pytest.approx(q, abs=1e-3)


def test_quantile_edge_cases():
    assert qtukey(0.0, 3.0, 10.0) == 0.0
    assert qtukey(1.0, 3.0, 10.0) == float('inf')
    assert qtukey(1.0, 3.0, 10.0, lower_tail=False) == 0.0
    assert qtukey(0.0, 3.0, 10.0, log_p=True) == float('inf')
    assert qtukey(float('-inf'), 3.0, 10.0, log_p=True) == 0.0


@pytest.mark.parametrize("nmeans, df", [(1.0, 10.0), (3.0, 1.0)])
def test_invalid_parameters_rejected(nmeans, df):
    with pytest.raises(AssertionError):
        ptukey(2.0, nmeans, df)
    with pytest.raises(AssertionError):
        qtukey(0.5, nmeans, df)


def test_quantile_raises_on_exhausted_cap():
    with pytest.raises(ConvergenceError) as excinfo:
        qtukey(0.95, 4.0, 20.0, maxniter=2)
    assert excinfo.value.caller == 'qtukey'


def test_cdf_raises_when_mixing_integral_does_not_settle(monkeypatch):
    monkeypatch.setattr('statlib.tukey.qgauleg', lambda *args: 1.0)
    with pytest.raises(ConvergenceError) as excinfo:
        ptukey(3.0, 4.0, 20.0)
    assert excinfo.value.caller == 'ptukey'


def test_single_degree_of_freedom_rejected():
    with pytest.raises(AssertionError):
        ptukey(3.0, 4.0, 1.5)
    with pytest.raises(AssertionError):
        qtukey(0.9, 4.0, 1.5)
