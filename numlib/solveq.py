# numlib/solveq.py
# =============================================================================
#
# This file is part of SpecDist.
# ----------------------------------
#
#  SpecDist is a software package containing the special functions and the
#  inversion machinery needed by the probability distributions of continuous
#  and discrete event simulation. It requires Python 3.0 or later versions.
#
#  Copyright (C) 2010  Nils A. Kjellbert
#  E-mail: <info(at)ambinova(dot)se>
#
#  SpecDist is free software: you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation, either version 3 of the License, or
#  (at your option) any later version.
#
#  SpecDist is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  You should have received a copy of the GNU General Public License
#  along with this program.  If not, see <http://www.gnu.org/licenses/>.
#
# ------------------------------------------------------------------------------
"""
Module contains the tools for solving equations of one variable that are
used for inverting cdfs lacking a closed-form inverse: an interval class,
root bracketing, a bisection root finder and a secant solver.

All the objects are meant to be created anew for each problem to be solved.
Nothing is shared between calls.
"""
# ------------------------------------------------------------------------------

from numlib.iterproc   import IterativeProcess, relprecision
from numlib.iterproc   import checked_tolf
from misclib.numbers   import is_posinteger
from machdep.machnum   import FOURMACHEPS, DEFPREC
from misclib.errwarn   import Error, ConvergenceError

# ------------------------------------------------------------------------------

class Interval:
    """
    A closed interval [lower, upper] with lower < upper. Used for bracketing
    roots - the limits may be reset in place by the bracketing procedures.
    """
# ------------------------------------------------------------------------------

    def __init__(self, lower, upper):

        self.set_interval(lower, upper)

    # end of __init__

# ------------------------------------------------------------------------------

    def set_interval(self, lower, upper):
        """
        Resets the limits. An Error is raised unless lower < upper.
        """

        if not lower < upper:
            raise Error("lower limit must be < upper limit in Interval: " + \
                              "[" + str(lower) + ", " + str(upper) + "]")
        self.lower = lower
        self.upper = upper

    # end of set_interval

# ------------------------------------------------------------------------------

    def contains(self, x):

        return self.lower <= x <= self.upper

    # end of contains

# ------------------------------------------------------------------------------

    def midpoint(self):

        return 0.5*(self.lower + self.upper)

    # end of midpoint

# ------------------------------------------------------------------------------

    def width(self):

        return self.upper - self.lower

    # end of width

# ------------------------------------------------------------------------------

    def copy(self):

        return Interval(self.lower, self.upper)

    # end of copy

# ------------------------------------------------------------------------------

    def __repr__(self):

        return "Interval(" + repr(self.lower) + ", " + repr(self.upper) + ")"

    # end of __repr__

# ------------------------------------------------------------------------------

# end of Interval

# ------------------------------------------------------------------------------

def hasroot(func, interval):
    """
    Logical function. Returns 'True' if func changes sign (or vanishes) at
    the limits of the interval, 'False' otherwise.
    """

    return func(interval.lower) * func(interval.upper) <= 0.0

# end of hasroot

# ------------------------------------------------------------------------------

def findinterval(func, interval, maxniter=50, factor=1.6):
    """
    Brackets a root by expanding the input interval: in each iteration the
    limit having the smallest absolute function value is moved outwards by
    'factor' times the present width, until the function takes on values of
    opposite signs at the two limits.

    Returns 'True' if a bracketing interval was found - the input interval
    is then reset to it. Returns 'False' if no bracketing interval was found
    within 'maxniter' expansions - the input interval is then left as it was.
    """

    assert factor > 0.0, "expansion factor must be positive in findinterval!"
    assert is_posinteger(maxniter), \
      "maximum number of iterations must be a positive integer in findinterval!"

    x1 = interval.lower
    x2 = interval.upper
    f1 = func(x1)
    f2 = func(x2)

    for k in range(0, maxniter):

        if f1*f2 < 0.0:
            interval.set_interval(x1, x2)
            return True

        if abs(f1) < abs(f2):
            x1 += factor*(x1-x2)
            f1  = func(x1)
        else:
            x2 += factor*(x2-x1)
            f2  = func(x2)

    return False

# end of findinterval

# ------------------------------------------------------------------------------

class BisectionRootFinder(IterativeProcess):
    """
    Solves func(x) = 0 on a bracketing interval using bisection. Usage:

        finder = BisectionRootFinder(tolf, maxniter)
        finder.set_interval(func, interval)
        finder.set_initpoint(x0)           # optional
        finder.evaluate()
        if finder.has_converged():
            root = finder.get_result()

    The first point at which func is evaluated is the initial point if one
    has been given, the midpoint of the interval otherwise. After that the
    bracket is halved in each iteration. Convergence is reached when the
    width of the bracket relative to the root estimate is less than tolf,
    or when abs(func) at the estimate is less than tolf. The latter makes
    tolf an absolute tolerance on func as well: scale func accordingly.

    evaluate does NOT raise an exception when maxniter is exhausted - the
    caller must check has_converged and decide what to do.
    """
# ------------------------------------------------------------------------------

    def __init__(self, tolf=DEFPREC, maxniter=100):

        IterativeProcess.__init__(self, tolf, maxniter)
        self.func     = None
        self.interval = None
        self._xneg    = None
        self._xpos    = None
        self._initx   = None

    # end of __init__

# ------------------------------------------------------------------------------

    def set_interval(self, func, interval):
        """
        Sets the function and the bracketing interval. func must take on
        values of opposite signs (or vanish) at the limits of the interval.
        """

        flo = func(interval.lower)
        fup = func(interval.upper)
        assert flo*fup <= 0.0, \
              "the interval does not bracket a root in BisectionRootFinder!"

        self.func     = func
        self.interval = interval.copy()
        if flo < 0.0:
            self._xneg = interval.lower
            self._xpos = interval.upper
        else:
            self._xneg = interval.upper
            self._xpos = interval.lower
        self._initx   = None

    # end of set_interval

# ------------------------------------------------------------------------------

    def set_initpoint(self, x0):
        """
        Sets the first point to be evaluated. It must lie within the interval.
        """

        assert self.interval is not None, \
                 "set_interval must be called before set_initpoint!"
        assert self.interval.contains(x0), \
            "initial point must lie within the interval in BisectionRootFinder!"
        self._initx = x0

    # end of set_initpoint

# ------------------------------------------------------------------------------

    def _initialize(self):

        assert self.func is not None, \
                      "set_interval must be called before evaluate!"

    # end of _initialize

# ------------------------------------------------------------------------------

    def _iterate(self):

        if self.niter == 1 and self._initx is not None:
            self.result = self._initx
        else:
            self.result = 0.5*(self._xpos + self._xneg)

        fx = self.func(self.result)
        if abs(fx) < self.tolf: return 0.0

        if fx > 0.0: self._xpos = self.result
        else:        self._xneg = self.result

        return relprecision(abs(self._xpos - self._xneg), abs(self.result))

    # end of _iterate

# ------------------------------------------------------------------------------

# end of BisectionRootFinder

# ------------------------------------------------------------------------------

def zbisect(func, x1, x2, caller='caller', tolf=FOURMACHEPS, \
                          maxniter=256, initx=None):
    """
    Solves the equation func(x) = 0 on [x1, x2] using the bisection root
    finder above. If func does not change sign over [x1, x2] the interval
    is first expanded using findinterval.

    Arguments:
    ----------
    func      Function having the proposed root as its argument

    x1        Lower search limit

    x2        Upper search limit

    caller    Name of the calling function, used in error messages

    tolf      Desired fractional accuracy of root

    maxniter  Maximum number of iterations

    initx     First point to be evaluated (optional, must be in [x1, x2])

    Returns:
    ---------
    Final value of root

    An Error is raised if no bracketing interval could be found and a
    ConvergenceError if the bisection has not converged after maxniter
    iterations.
    """

    interval = Interval(x1, x2)
    if not hasroot(func, interval):
        if not findinterval(func, interval):
            raise Error("Root bracketing failed in zbisect called by " + caller)
        if initx is not None and not interval.contains(initx): initx = None

    finder = BisectionRootFinder(tolf, maxniter)
    finder.set_interval(func, interval)
    if initx is not None: finder.set_initpoint(initx)
    finder.evaluate()

    if not finder.has_converged():
        raise ConvergenceError("Unable to solve equation in zbisect " + \
                   "called by " + caller + ": " + str(maxniter) + \
                   " iterations not sufficient", caller, finder.niter, \
                                                 finder.get_result())

    return finder.get_result()

# end of zbisect

# ------------------------------------------------------------------------------

def zsecant(func, x0, x1, caller='caller', tolf=1.0e-4, maxniter=50, \
                                                        nonneg=False):
    """
    Solves the equation func(x) = 0 using the secant method, starting from
    the two points x0 and x1. Iteration stops when two successive iterates
    differ by less than tolf (an absolute tolerance). For nonneg=True any
    negative iterate is replaced by 0.0.

    A ConvergenceError is raised if the tolerance has not been reached after
    maxniter function evaluations (the two starting points included).
    """

    tolf = checked_tolf(tolf, 'zsecant')
    assert is_posinteger(maxniter), \
          "Maximum number of iterations must be a positive integer in zsecant!"

    f0 = func(x0)
    f1 = func(x1)

    for niter in range(1, maxniter):
        if f1 == f0:
            raise ConvergenceError("Flat secant in zsecant called by " + \
                                            caller, caller, niter, x1)
        x  = x1 - f1*(x1-x0)/(f1-f0)
        f0 = f1
        x0 = x1
        if nonneg and x < 0.0: x = 0.0
        f1 = func(x)
        x1 = x
        if abs(x1-x0) < tolf: return x1

    raise ConvergenceError(str(maxniter) + " iterations not sufficient in " + \
                "zsecant called by " + caller, caller, maxniter, x1)

# end of zsecant

# ------------------------------------------------------------------------------
