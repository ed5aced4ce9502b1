"""Tests for the interval, bracketing and root finding tools of numlib.solveq."""

import math

import pytest

from numlib.solveq import Interval, hasroot, findinterval
from numlib.solveq import BisectionRootFinder, zbisect, zsecant
from misclib.errwarn import Error, ConvergenceError


def _square_minus_two(x):
    return x * x - 2.0


def test_interval_accessors():
    interval = Interval(1.0, 3.0)
    assert interval.midpoint() == 2.0
    assert interval.width() == 2.0
    assert interval.contains(1.0) and interval.contains(3.0)
    assert not interval.contains(3.5)


def test_interval_requires_lower_below_upper():
    with pytest.raises(Error):
        Interval(2.0, 2.0)
    interval = Interval(0.0, 1.0)
    with pytest.raises(Error):
        interval.set_interval(1.0, 0.0)
    assert (interval.lower, interval.upper) == (0.0, 1.0)


def test_interval_copy_is_independent():
    interval = Interval(0.0, 1.0)
    other = interval.copy()
    other.set_interval(5.0, 6.0)
    assert (interval.lower, interval.upper) == (0.0, 1.0)


def test_hasroot():
    assert hasroot(_square_minus_two, Interval(0.0, 2.0))
    assert not hasroot(_square_minus_two, Interval(2.0, 3.0))


def test_findinterval_expands_to_bracket():
    interval = Interval(2.0, 3.0)
    assert findinterval(_square_minus_two, interval)
    assert interval.lower < math.sqrt(2.0) < interval.upper


def test_findinterval_failure_leaves_interval_unchanged():
    interval = Interval(0.0, 1.0)
    assert not findinterval(lambda x: x * x + 1.0, interval, maxniter=10)
    assert (interval.lower, interval.upper) == (0.0, 1.0)


def test_bisection_finds_square_root():
    finder = BisectionRootFinder(tolf=1e-12, maxniter=200)
    finder.set_interval(_square_minus_two, Interval(0.0, 2.0))
    finder.evaluate()
    assert finder.has_converged()
    assert finder.get_result() == pytest.approx(math.sqrt(2.0), rel=1e-11)


def test_bisection_decreasing_function():
    finder = BisectionRootFinder(tolf=1e-12, maxniter=200)
    finder.set_interval(lambda x: 1.0 - x, Interval(-3.0, 5.0))
    finder.evaluate()
    assert finder.get_result() == pytest.approx(1.0, rel=1e-11)


def test_bisection_exact_initial_point_stops_at_once():
    finder = BisectionRootFinder()
    finder.set_interval(lambda x: x - 0.25, Interval(0.0, 1.0))
    finder.set_initpoint(0.25)
    finder.evaluate()
    assert finder.niter == 1
    assert finder.get_result() == 0.25


def test_bisection_reports_non_convergence():
    finder = BisectionRootFinder(tolf=1e-12, maxniter=5)
    finder.set_interval(_square_minus_two, Interval(0.0, 2.0))
    finder.evaluate()
    assert not finder.has_converged()
    assert finder.niter == 5


def test_bisection_rejects_non_bracketing_interval():
    finder = BisectionRootFinder()
    with pytest.raises(AssertionError):
        finder.set_interval(_square_minus_two, Interval(2.0, 3.0))


def test_bisection_rejects_initial_point_outside():
    finder = BisectionRootFinder()
    finder.set_interval(_square_minus_two, Interval(0.0, 2.0))
    with pytest.raises(AssertionError):
        finder.set_initpoint(2.5)


def test_zbisect_expands_interval():
    root = zbisect(_square_minus_two, 3.0, 4.0, 'test')
    assert root == pytest.approx(math.sqrt(2.0), rel=1e-14)


def test_zbisect_raises_when_no_bracket_is_found():
    with pytest.raises(Error):
        zbisect(lambda x: x * x + 1.0, 0.0, 1.0, 'test')


def test_zbisect_raises_on_exhausted_cap():
    with pytest.raises(ConvergenceError) as excinfo:
        zbisect(_square_minus_two, 0.0, 2.0, 'test', maxniter=4)
    assert excinfo.value.caller == 'test'


def test_zsecant_solves_cubic():
    root = zsecant(lambda x: x**3 - x - 2.0, 1.0, 2.0, 'test', tolf=1e-12)
    assert root**3 - root - 2.0 == pytest.approx(0.0, abs=1e-10)


def test_zsecant_nonneg_clamps_iterates():
    root = zsecant(lambda x: x - 0.5, 3.0, 2.0, 'test', nonneg=True)
    assert root == pytest.approx(0.5)


def test_zsecant_raises_on_flat_secant():
    with pytest.raises(ConvergenceError):
        zsecant(lambda x: 1.0, 0.0, 1.0, 'test')


def test_zsecant_raises_on_exhausted_cap():
    with pytest.raises(ConvergenceError):
        zsecant(lambda x: math.atan(x), 3.0, 4.0, 'test', maxniter=5)


def test_bisection_width_is_relative_for_a_tiny_root():
    finder = BisectionRootFinder(tolf=1e-12, maxniter=200)
    finder.set_interval(lambda x: x / 1e-14 - 1.0, Interval(0.0, 1.0))
    finder.evaluate()
    assert finder.has_converged()
    assert finder.get_result() == pytest.approx(1e-14, rel=1e-11)


def test_bisection_stops_on_small_residual():
    finder = BisectionRootFinder(tolf=1e-12, maxniter=200)
    finder.set_interval(lambda x: 1e-14 * (x - 0.3), Interval(0.0, 1.0))
    finder.evaluate()
    assert finder.has_converged()
    assert finder.niter == 1
    assert finder.get_result() == 0.5
