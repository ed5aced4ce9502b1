# numlib/contfrac.py
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
Module contains an abstract class for the evaluation of continued fractions
using the modified Lentz method, and the continued fraction of the
incomplete beta function built upon it.
"""
# ------------------------------------------------------------------------------

from abc import abstractmethod

from numlib.iterproc import IterativeProcess
from machdep.machnum import MACHEPS, MINEPSFLOAT, DEFPREC, DEFMAXNITER
from misclib.errwarn import ConvergenceError

# Smallest magnitude allowed for the running numerator and denominator
_FPMIN = MINEPSFLOAT / MACHEPS

# ------------------------------------------------------------------------------

def _guarded(r):
    # Keeps the recurrence away from division by zero

    if abs(r) < _FPMIN: return _FPMIN
    else:               return r

# end of _guarded

# ------------------------------------------------------------------------------

class ContFrac(IterativeProcess):
    """
    Abstract class for evaluating the continued fraction

        f = b0 + a1/(b1 + a2/(b2 + a3/(b3 + ...

    using the modified Lentz method (cf. Press et al., "Numerical Recipes").
    Subclasses must supply initvalue, returning b0, and factorsat(n),
    returning the pair (an, bn) for n = 1, 2, 3,....

    Iteration stops when the last factor applied to the estimate differs
    from 1.0 by less than tolf. evaluate raises a ConvergenceError if that
    has not happened within maxniter iterations.
    """
# ------------------------------------------------------------------------------

    def __init__(self, tolf=DEFPREC, maxniter=DEFMAXNITER):

        IterativeProcess.__init__(self, tolf, maxniter)
        self._num = 0.0
        self._den = 0.0

    # end of __init__

# ------------------------------------------------------------------------------

    @abstractmethod
    def initvalue(self):
        """
        Returns b0, the leading term of the fraction.
        """

        pass

    # end of initvalue

# ------------------------------------------------------------------------------

    @abstractmethod
    def factorsat(self, n):
        """
        Returns the n:th partial numerator and partial denominator (an, bn).
        """

        pass

    # end of factorsat

# ------------------------------------------------------------------------------

    def _initialize(self):

        self._num   = _guarded(self.initvalue())
        self._den   = 0.0
        self.result = self._num

    # end of _initialize

# ------------------------------------------------------------------------------

    def _iterate(self):

        an, bn      = self.factorsat(self.niter)
        self._den   = 1.0 / _guarded(an*self._den + bn)
        self._num   = _guarded(an/self._num + bn)
        delta       = self._num * self._den
        self.result = self.result * delta

        return abs(delta - 1.0)

    # end of _iterate

# ------------------------------------------------------------------------------

    def _finalize(self):

        if not self.has_converged():
            name = self.__class__.__name__
            raise ConvergenceError(str(self.maxniter) + \
                  " iterations not sufficient in " + name + " for tolf = " + \
                  str(self.tolf), name, self.niter, self.result)

    # end of _finalize

# ------------------------------------------------------------------------------

# end of ContFrac

# ------------------------------------------------------------------------------

class IncBetaFrac(ContFrac):
    """
    The continued fraction of the regularized incomplete beta function
    (cf. Abramowitz & Stegun 26.5.8):

        I(a, b, x) = x**a * (1-x)**b / (a * B(a, b) * f)

        f = 1 + d1/(1 + d2/(1 + d3/(1 + ...

    where d(2m)   =  m * (b-m) * x / ((a+2m-1) * (a+2m)) and
          d(2m+1) = -(a+m) * (a+b+m) * x / ((a+2m) * (a+2m+1)).

    The fraction converges rapidly for x < (a+1)/(a+b+2). For larger x the
    caller should use the symmetry I(a, b, x) = 1 - I(b, a, 1-x).
    """
# ------------------------------------------------------------------------------

    def __init__(self, x, a, b, tolf=DEFPREC, maxniter=DEFMAXNITER):

        assert 0.0 <= x <= 1.0, "x must be in [0.0, 1.0] in IncBetaFrac!"
        assert a > 0.0, "both shape parameters must be positive in IncBetaFrac!"
        assert b > 0.0, "both shape parameters must be positive in IncBetaFrac!"

        ContFrac.__init__(self, tolf, maxniter)
        self.x = x
        self.a = a
        self.b = b

    # end of __init__

# ------------------------------------------------------------------------------

    def initvalue(self):

        return 1.0

    # end of initvalue

# ------------------------------------------------------------------------------

    def factorsat(self, n):

        x, a, b = self.x, self.a, self.b
        m   = n // 2
        den = (a+n) * (a+n-1.0)
        if 2*m == n:
            an =  x * m * (b-m) / den
        else:
            an = -x * (a+m) * (a+b+m) / den

        return an, 1.0

    # end of factorsat

# ------------------------------------------------------------------------------

# end of IncBetaFrac

# ------------------------------------------------------------------------------
