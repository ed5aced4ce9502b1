# numlib/specfunc.py
# ==============================================================================
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
Module used to compute the value of "special functions": the gamma function
and its relatives (log-gamma, digamma, the regularized incomplete gamma
function) and the beta function and its relatives (log-beta, the regularized
incomplete beta function).

The incomplete functions are iterative and take the numerical control
parameters tolf (desired fractional precision) and maxniter (maximum number
of iterations). A ConvergenceError is raised if the precision has not been
reached within maxniter iterations.
"""
# ------------------------------------------------------------------------------

from math import factorial, exp, log

from numlib.miscnum    import fsign
from numlib.contfrac   import IncBetaFrac
from numlib.iterproc   import checked_tolf
from misclib.numbers   import is_nonneginteger, is_posinteger, kept_within
from machdep.machnum   import LNMAXFLOAT, DEFPREC, DEFMAXNITER
from misclib.errwarn   import ConvergenceError
from misclib.mathconst import SQRTTWOPI, LNSQRT2PI, EULERGAM

# ------------------------------------------------------------------------------

def lnfactorial(n, integer=True):
    """
    Computation of the natural logarithm of a factorial using integer
    arithmetics (integer=True) or floating point arithmetics using lngamma
    (integer=False). In both cases a floating-point number is returned, of
    course...
    """

    assert is_nonneginteger(n), \
               "the argument to lnfactorial must be a non-negative integer!"

    if integer:
        lnfact = log(factorial(n))
    else:
        lnfact = lngamma(n+1.0)

    return lnfact

# end of lnfactorial

# ------------------------------------------------------------------------------

def gamma(x):
    """
    The gamma function for real, positive argument. Arguments <= 1.0 are
    first moved above 1.0 using gamma(x) = gamma(x+1)/x, after which
    exp(lngamma(x)) is used. float('inf') is returned when the result
    overflows (for x > 171.6 or so).
    """

    assert x > 0.0, "Argument must be real and positive in gamma!"

    fac = 1.0
    while x <= 1.0:
        fac /= x
        x   += 1.0

    lngam = lngamma(x)
    if lngam > LNMAXFLOAT: return float('inf')

    return fac * exp(lngam)

# end of gamma

# ------------------------------------------------------------------------------

def lngamma(alpha):
    """
    The natural logarithm of the gamma function for real, positive argument.
    Maximum fractional error can be estimated to < 1.e-13

    Arguments <= 1.0 are moved above 1.0 using
    ln(gamma(x)) = ln(gamma(x+1)) - ln(x).

    For alpha < 20.0 lngamma uses Lanczos expansion with coefficients taken from
    http://home.att.net/~numericana/answer/info/godfrey.htm where fractional
    error of the gamma function using these specific coefficients is claimed
    to be < 1.e-13

    For alpha >= 20.0 the Euler-McLaurin series expansion for ln(gamma) is used
    (see for instance Dahlquist, Bjorck & Anderson). For EulerMcLaurin the
    fractional  t r u n c a t i o n  error is less than 2.4e-14 (and always
    positive).
    """

    assert alpha > 0.0, "Argument must be real and positive in lngamma!"

    shift = 0.0
    while alpha <= 1.0:
        shift -= log(alpha)
        alpha += 1.0

    if alpha < 20.0:
        coeff = ( \
                 1.000000000000000174663,  5716.400188274341379136,        \
            -14815.30426768413909044,     14291.49277657478554025,         \
             -6348.160217641458813289,     1301.608286058321874105,        \
              -108.1767053514369634679,       2.605696505611755827729,     \
                -0.7423452510201416151527e-2, 0.5384136432509564062961e-7, \
                -0.4023533141268236372067e-8 ) ;  lm1 = len(coeff) - 1

        g     = 9.0
        arg1  = alpha + 0.5
        arg2  = arg1 + g
        summ  = 0.0
        c     = 0.0
        a     = alpha + 11.0
        for k in range(lm1, 0, -1):  # The Kahan summation procedure is used
            a    -= 1.0
            term  = coeff[k]/a
            y     = term + c
            t     = summ + y
            if fsign(y) == fsign(summ):
                f = (0.46*t-t) + t
                c = ((summ-f)-(t-f)) + y
            else:
                c = (summ-t) + y
            summ  =  t
        summ += c
        summ += coeff[0]
        summ *= SQRTTWOPI

        lngam  =  arg1*log(arg2) - arg2 + log(summ/alpha)

    else:
        # coefficients: 1/12, -1/360, 1/1260, -1/1680
        alfa   = alpha - 1.0
        oneoa2 =  1.0 / alfa**2
        summ   = -1.0 + oneoa2*\
                  ( 0.0833333333333333333333333333 + oneoa2*\
                  (-0.0027777777777777777777777778 + oneoa2*\
                  ( 0.0007936507936507936507936508 + oneoa2*\
                   -0.0005952380952380952380952381)))
        summ  *=  alfa

        lngam  =  LNSQRT2PI + (alfa+0.5)*log(alfa) + summ

    return lngam + shift

# end of lngamma

# ------------------------------------------------------------------------------

def digamma(x):
    """
    The digamma (psi) function - the derivative of ln(gamma(x)) - for real,
    positive argument. Algorithm AS 103 (J. M. Bernardo, Applied Statistics,
    vol. 25, 1976, pp. 315-317): for small x the leading term of the
    expansion around 0.0 is used, otherwise the argument is moved above 8.5
    by the recurrence psi(x) = psi(x+1) - 1/x and the asymptotic (Stirling)
    series is applied.
    """

    assert x > 0.0, "Argument must be real and positive in digamma!"

    if x <= 1.0e-5: return -EULERGAM - 1.0/x

    value = 0.0
    y     = x
    while y < 8.5:
        value -= 1.0/y
        y     += 1.0

    r      = 1.0/y
    value += log(y) - 0.5*r
    r      = r*r
    value -= r*(1.0/12.0 - r*(1.0/120.0 - r/252.0))

    return value

# end of digamma

# ------------------------------------------------------------------------------

def incgamma(alpha, x, lngalpha=False, tolf=DEFPREC, maxniter=DEFMAXNITER):
    """
    The regularized lower incomplete gamma function

        P(alpha, x) = integral from 0 to x of t**(alpha-1)*exp(-t) dt /
                                                              gamma(alpha)

    alpha > 0.0; x >= 0.0

    For x < alpha + 1.0 a series expansion is used, otherwise a continued
    fraction for 1 - P(alpha, x) (cf. Abramowitz & Stegun). tolf is the
    desired fractional precision of the expansion and maxniter the maximum
    number of terms - a ConvergenceError is raised if they do not suffice.

    NB It is possible to gain efficiency by providing the value of the
    natural logarithm of the complete gamma function ln(gamma(alpha))
    as a pre-computed input (may be computed using lngamma) instead of
    the default 'False'.
    """

    assert alpha > 0.0, "alpha must be positive in incgamma!"
    assert   x  >= 0.0, "variate must not be negative in incgamma!"
    tolf = checked_tolf(tolf, 'incgamma')
    assert is_posinteger(maxniter), \
         "maximum number of iterations must be a positive integer in incgamma!"

    if x == 0.0:          return 0.0
    if x == float('inf'): return 1.0

    if lngalpha: lnga = lngalpha
    else:        lnga = lngamma(alpha)
    lnfac = -x + alpha*log(x) - lnga

    # -------------------------------------------------------------------------
    def _incgamser():
        # A series expansion is used for x < alpha + 1.0
        apn  = alpha
        dela = 1.0 / alpha
        summ = dela
        for k in range(0, maxniter):
            apn  += 1.0
            dela *= x / apn
            summ += dela
            if abs(dela) < abs(summ)*tolf:
                return summ * exp(lnfac)
        raise ConvergenceError("series not converged in incgamma for " + \
                   "maxniter = " + str(maxniter) + " and tolf = " + str(tolf), \
                   'incgamma', maxniter, summ*exp(lnfac))
    # -------------------------------------------------------------------------
    def _incgamcf():
        # A continued fraction expansion is used for x >= alpha + 1.0
        gold = 0.0
        g    = 0.0
        a0   = 1.0
        a1   = x
        b0   = 0.0
        b1   = 1.0
        fac  = 1.0
        for k in range(1, maxniter+1):
            ak  = float(k)
            aka = ak - alpha
            a0  = (a1+a0*aka) * fac
            b0  = (b1+b0*aka) * fac
            akf = ak * fac
            a1  = x*a0 + akf*a1
            b1  = x*b0 + akf*b1
            if a1 != 0.0:
                fac = 1.0 / a1
                g   = b1 * fac
                if abs(g-gold) < abs(g)*tolf:
                    return 1.0 - exp(lnfac) * g
                gold = g
        raise ConvergenceError("continued fraction not converged in " + \
                   "incgamma for maxniter = " + str(maxniter) + \
                   " and tolf = " + str(tolf), 'incgamma', maxniter, \
                                                   1.0 - exp(lnfac)*g)
    # -------------------------------------------------------------------------

    if x < alpha + 1.0:
        p = _incgamser()
    else:
        p = _incgamcf()

    return kept_within(0.0, p, 1.0)

# end of incgamma

# ------------------------------------------------------------------------------

def beta(a, b):
    """
    The beta function (uses exp(lngamma(a) + lngamma(b) - lngamma(a+b))).
    ---------
    NB If you need the logarithm of beta: use lnbeta instead!!!
    """

    assert a > 0.0, "both arguments to beta must be positive floats!"
    assert b > 0.0, "both arguments to beta must be positive floats!"

    return exp(lngamma(a) + lngamma(b) - lngamma(a+b))

# end of beta

# ------------------------------------------------------------------------------

def lnbeta(a, b):
    """
    The natural logarithm of the beta function
    (uses lngamma(a) + lngamma(b) - lngamma(a+b)).
    """

    assert a > 0.0, "both arguments to lnbeta must be positive floats!"
    assert b > 0.0, "both arguments to lnbeta must be positive floats!"

    return lngamma(a) + lngamma(b) - lngamma(a+b)

# end of lnbeta

# ------------------------------------------------------------------------------

def incbeta(a, b, x, lnbetaab=False, tolf=DEFPREC, maxniter=DEFMAXNITER):
    """
    The regularized incomplete beta function

        I(a, b, x) = integral from 0 to x of t**(a-1)*(1-t)**(b-1) dt / B(a, b)

    a, b > 0.0; 0.0 <= x <= 1.0

    The continued fraction of numlib.contfrac.IncBetaFrac is used directly for
    x < (a+1)/(a+b+2) and through the symmetry I(a, b, x) = 1 - I(b, a, 1-x)
    otherwise, which keeps the fraction rapidly converging all the way up to
    x = 1.0. tolf and maxniter are handed over to the continued fraction - a
    ConvergenceError is raised if they do not suffice.

    NB It is possible to gain efficiency by providing the value of the natural
    logarithm of the complete beta function ln(beta(a, b)) as a pre-computed
    input (may be computed using lnbeta) instead of the default "False".
    """

    assert a > 0.0, "both shape parameters must be positive in incbeta!"
    assert b > 0.0, "both shape parameters must be positive in incbeta!"
    assert 0.0 <= x <= 1.0, "variate must be in [0.0, 1.0] in incbeta!"

    if x == 0.0: return 0.0
    if x == 1.0: return 1.0

    if lnbetaab: lnb = lnbetaab
    else:        lnb = lnbeta(a, b)

    bt = exp(-lnb + a*log(x) + b*log(1.0-x))

    if x < (a+1.0) / (a+b+2.0):
        frac = IncBetaFrac(x, a, b, tolf, maxniter).evaluate()
        ib   = bt / (frac*a)
    else:
        frac = IncBetaFrac(1.0-x, b, a, tolf, maxniter).evaluate()
        ib   = 1.0 - bt / (frac*b)

    return kept_within(0.0, ib, 1.0)

# end of incbeta

# ------------------------------------------------------------------------------
