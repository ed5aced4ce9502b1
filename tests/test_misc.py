"""Tests for the helpers of misclib and numlib.miscnum/iterproc."""

import pytest

from misclib.numbers import kept_within
from misclib.numbers import is_posinteger, is_nonneginteger
from misclib.errwarn import Error, ConvergenceError, warn
from numlib.miscnum import fsign, polyeval, guardedexp
from numlib.iterproc import checked_tolf, relprecision
from machdep.machnum import DEFPREC, MACHEPS, LNMINFLOAT, LNMAXFLOAT


def test_kept_within():
    assert kept_within(0.0, -0.1, 1.0) == 0.0
    assert kept_within(0.0, 1.1, 1.0) == 1.0
    assert kept_within(0.0, 0.5, 1.0) == 0.5
    assert kept_within(0.0, 1e300) == 1e300


def test_integer_predicates():
    assert is_posinteger(3) and not is_posinteger(0)
    assert is_nonneginteger(0) and not is_nonneginteger(-1)
    assert not is_posinteger(2.0)


def test_error_string():
    err = Error("something broke")
    assert err.string == "something broke"
    assert str(err) == repr("something broke")


def test_convergence_error_attributes():
    err = ConvergenceError("gave up", 'solver', 17, 0.25)
    assert isinstance(err, Error)
    assert (err.caller, err.niter, err.value) == ('solver', 17, 0.25)


def test_warn_prints_user_warning(capsys):
    warn("look out")
    assert "UserWarning: look out!" in capsys.readouterr().out


def test_checked_tolf_clamps_tiny_tolerance(capsys):
    assert checked_tolf(MACHEPS / 10.0, 'test') == DEFPREC
    assert "UserWarning" in capsys.readouterr().out
    assert checked_tolf(1e-6, 'test') == 1e-6
    with pytest.raises(AssertionError):
        checked_tolf(-1.0, 'test')


def test_relprecision():
    assert relprecision(1e-3, 10.0) == pytest.approx(1e-4)
    assert relprecision(1e-3, 1e-12) == pytest.approx(1e9)
    assert relprecision(1e-3, 0.0) == 1e-3


def test_fsign_and_polyeval():
    assert fsign(0.0) == 1.0 and fsign(-2.0) == -1.0
    # 1 + 2x + 3x**2 at x = 2
    assert polyeval((1.0, 2.0, 3.0), 2.0) == 17.0


def test_guardedexp():
    assert guardedexp(LNMINFLOAT - 1.0) == 0.0
    assert guardedexp(0.0) == 1.0
    with pytest.raises(Error):
        guardedexp(LNMAXFLOAT + 1.0, 'test')
