# numlib/iterproc.py
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
Module contains the abstract base class for iterative numerical procedures
(continued fractions, root finders) together with a couple of helper
functions for handling their numerical control parameters.
"""
# ------------------------------------------------------------------------------

from abc import ABCMeta, abstractmethod

from misclib.numbers import is_posinteger
from machdep.machnum import MACHEPS, MAXFLOAT, MINFLOAT, DEFPREC, DEFMAXNITER
from misclib.errwarn import warn

# ------------------------------------------------------------------------------

def checked_tolf(tolf, caller='caller'):
    """
    Returns the tolerance to be used by an iterative procedure: tolerances
    smaller than machine epsilon are replaced by DEFPREC and a warning is
    sent to stdout. Negative tolerances are not accepted.
    """

    assert tolf >= 0.0, "tolerance must not be negative in " + caller + "!"

    if tolf < MACHEPS:
        wtxt1 = "Tolerance less than machine epsilon is not a good idea in "
        wtxt2 = caller + ". The default precision will be used instead"
        warn(wtxt1+wtxt2)
        tolf  = DEFPREC

    return tolf

# end of checked_tolf

# ------------------------------------------------------------------------------

def relprecision(eps, x):
    """
    Turns the absolute precision 'eps' into a relative one with respect to
    x, unless x is zero to machine precision.
    """

    if x > MINFLOAT: return eps/x
    else:            return eps

# end of relprecision

# ------------------------------------------------------------------------------

class IterativeProcess(metaclass=ABCMeta):
    """
    Template for iterative procedures. A subclass supplies the _iterate
    method, which carries out one iteration and returns the precision
    achieved, and it may override _initialize and _finalize. evaluate
    handles the iteration count and the convergence check.

    The following attributes are available from each instance:
      instance.tolf        # Desired precision
      instance.maxniter    # Maximum number of iterations
      instance.niter       # Number of iterations carried out by evaluate
      instance.precision   # Precision achieved by the last iteration
      instance.result      # Present estimate

    An instance holds the state of ONE computation. Create a new instance
    for each evaluation - instances must not be shared between threads.
    """
# ------------------------------------------------------------------------------

    def __init__(self, tolf=DEFPREC, maxniter=DEFMAXNITER):

        self.tolf      = checked_tolf(tolf, self.__class__.__name__)
        assert is_posinteger(maxniter), \
            "maximum number of iterations must be a positive integer in " + \
                                               self.__class__.__name__ + "!"
        self.maxniter  = maxniter
        self.niter     = 0
        self.precision = MAXFLOAT
        self.result    = None

    # end of __init__

# ------------------------------------------------------------------------------

    def evaluate(self):
        """
        Carries out the iterations until the desired precision is reached or
        the maximum number of iterations is exhausted, whichever comes first.
        Returns the final estimate.
        """

        self.niter     = 0
        self.precision = MAXFLOAT
        self._initialize()
        while self.niter < self.maxniter:
            self.niter    += 1
            self.precision = self._iterate()
            if self.has_converged(): break
        self._finalize()

        return self.result

    # end of evaluate

# ------------------------------------------------------------------------------

    def has_converged(self):
        """
        True if the last iteration reached the desired precision.
        """

        return self.precision < self.tolf

    # end of has_converged

# ------------------------------------------------------------------------------

    def get_result(self):

        return self.result

    # end of get_result

# ------------------------------------------------------------------------------

    def _initialize(self):
        pass

    def _finalize(self):
        pass

# ------------------------------------------------------------------------------

    @abstractmethod
    def _iterate(self):
        """
        Carries out one iteration and returns the precision achieved.
        """

        pass

    # end of _iterate

# ------------------------------------------------------------------------------

# end of IterativeProcess

# ------------------------------------------------------------------------------
