# statlib/cdf.py
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
Module with functions for the cdf of various probability distributions. 

The cdfs of the binomial, Poisson and negative binomial distributions may be
computed in two ways: by summing the log-space pmf recursion term by term
(recursive=True, the default) or through the incomplete beta and gamma
functions (recursive=False), the latter evaluated to full machine precision.
The two ways agree to within 1.e-10.
"""
# ------------------------------------------------------------------------------

from math import exp, log, sqrt, atan

from numlib.specfunc   import incgamma, incbeta
from numlib.miscnum    import fsign, guardedexp
from misclib.numbers   import kept_within
from machdep.machnum   import DEFPREC, DEFMAXNITER, FOURMACHEPS, LNMINFLOAT
from misclib.mathconst import PIINV, SQRTTWOPII

# ------------------------------------------------------------------------------

def cunifab(left, right, x):
    """
    The cdf of the uniform distribution with support on [left, right].
    """

    # Input check -----------------
    assert right > left, "support range must be positive in cunifab!"
    assert left <= x and x <= right, \
                    "variate must be within support range in cunifab!"
    # -----------------------------

    cdf  =  (x-left) / float(right-left)

    return cdf

# end of cunifab

# ------------------------------------------------------------------------------

def cexpo(mean, x):
    """
    cdf for the exponential distribution with mean = 1/lambda (mean > 0.0)
    """

    assert mean > 0.0, "mean must be positive in cexpo!"
    assert  x  >= 0.0, "variate must not be negative in cexpo!"

    cdf  =  1.0 - exp(-x/mean)

    return cdf

# end of cexpo

# ------------------------------------------------------------------------------

def cnormal(mu, sigma, x):
    """
    cdf for the normal (Gaussian) distribution based on Marsaglia's Taylor
    series (G. Marsaglia, "Evaluating the Normal Distribution", Journal of
    Statistical Software 11(4), 2004) having an absolute error < 8.e-16.
    The series is summed until adding the next term no longer changes the
    sum. 0.0 is returned for z < -8 and 1.0 for z > 8.
    
    sigma > 0.0
    """

    assert sigma > 0.0, "sigma must be a positive float in cnormal!"

    z = (x-mu) / float(sigma)
    if z < -8.0: return 0.0
    if z >  8.0: return 1.0

    summ = 0.0
    term = z
    zz   = z*z
    i    = 3
    while summ + term != summ:
        summ += term
        term *= zz / i
        i    += 2

    cdf = 0.5 + summ * SQRTTWOPII * exp(-0.5*zz)

    return kept_within(0.0, cdf, 1.0)

# end of cnormal

# ------------------------------------------------------------------------------

def ccnormal(mu, sigma, x):
    """
    The complementary cdf (the survival function) of the normal distribution,
    computed by reflecting the variate in the mean so that no precision is
    lost in forming 1 - cnormal.
    """

    return cnormal(mu, sigma, 2.0*mu - x)

# end of ccnormal

# ------------------------------------------------------------------------------

def cgamma(alpha, scale, x, lngalpha=False, tolf=DEFPREC, maxniter=DEFMAXNITER):
    """
    The gamma distribution with shape alpha and scale parameter scale:
    cdf = incgamma(alpha, x/scale)
    alpha, scale > 0; x >= 0

    NB It is possible to gain efficiency by providing the value of the
    natural logarithm of the complete gamma function ln(gamma(alpha))
    as a pre-computed input instead of the default 'False'.

    A ConvergenceError is raised if the incomplete gamma function cannot
    be computed to within tolf using maxniter iterations.
    """

    assert alpha > 0.0, "alpha must be positive in cgamma!"
    assert scale > 0.0, "scale must be positive in cgamma!"
    assert   x  >= 0.0, "variate must not be negative in cgamma!"

    return incgamma(alpha, x/scale, lngalpha, tolf, maxniter)

# end of cgamma

# ------------------------------------------------------------------------------

def cbeta(a, b, x, lnbetaab=False, tolf=DEFPREC, maxniter=DEFMAXNITER):
    """
    The cdf of the beta distribution on [0.0, 1.0], the regularized 
    incomplete beta function I(a, b, x). a, b > 0

    NB It is possible to provide the value of the natural logarithm of the 
    complete beta function as a pre-computed input instead of the default 
    "False".
    """

    assert a > 0.0, "both parameters must be positive in cbeta!"
    assert b > 0.0, "both parameters must be positive in cbeta!"
    assert 0.0 <= x <= 1.0, "variate must be in [0.0, 1.0] in cbeta!"

    return incbeta(a, b, x, lnbetaab, tolf, maxniter)

# end of cbeta

# ------------------------------------------------------------------------------

def cstudent(df, x):
    """
    The cdf of Student's t distribution with df > 0 degrees of freedom.
    Closed forms are used for df = 1 (the Cauchy distribution) and df = 2,
    the incomplete beta function otherwise.
    """

    assert df > 0.0, "degrees of freedom must be positive in cstudent!"

    if df == 1.0:
        cdf = 0.5 + PIINV*atan(x)

    elif df == 2.0:
        cdf = 0.5*(1.0 + x/sqrt(2.0 + x*x))

    elif x == 0.0:
        cdf = 0.5

    else:
        y   = df / (x*x + df)
        cdf = 0.5*(1.0 + fsign(x)*(1.0 - incbeta(0.5*df, 0.5, y)))

    return kept_within(0.0, cdf, 1.0)

# end of cstudent

# ------------------------------------------------------------------------------

def cpearson5(alpha, scale, x, lngalpha=False):
    """
    The cdf of the Pearson type V (inverted gamma) distribution: if X is 
    Pearson V with shape alpha and scale 'scale' then 1/X is gamma with 
    shape alpha and scale 1/scale, i. e. cdf = 1 - incgamma(alpha, scale/x).
    alpha, scale > 0; x >= 0
    """

    assert alpha > 0.0, "alpha must be positive in cpearson5!"
    assert scale > 0.0, "scale must be positive in cpearson5!"
    assert   x  >= 0.0, "variate must not be negative in cpearson5!"

    if x == 0.0: return 0.0

    cdf = 1.0 - incgamma(alpha, scale/x, lngalpha)

    return kept_within(0.0, cdf, 1.0)

# end of cpearson5

# ------------------------------------------------------------------------------

def cpearson6(alpha1, alpha2, scale, x, lnbetaab=False):
    """
    The cdf of the Pearson type VI (beta prime) distribution:
    cdf = I(alpha1, alpha2, x/(x+scale))
    alpha1, alpha2, scale > 0; x >= 0
    """

    assert alpha1 > 0.0, "both shape parameters must be positive in cpearson6!"
    assert alpha2 > 0.0, "both shape parameters must be positive in cpearson6!"
    assert scale  > 0.0, "scale must be positive in cpearson6!"
    assert  x    >= 0.0, "variate must not be negative in cpearson6!"

    if x == 0.0: return 0.0

    return incbeta(alpha1, alpha2, x/(x+scale), lnbetaab)

# end of cpearson6

# ------------------------------------------------------------------------------

def cbinomial(n, phi, k, recursive=True):
    """
    The binomial cdf P(N <= k), n >= 1, 0 < phi < 1. 0.0 is returned for 
    k < 0 and 1.0 for k >= n.

    recursive=True: the pmf terms are generated by the log-space recursion
    and summed (terms that would underflow are skipped, a term that would 
    overflow raises an Error).
    recursive=False: cdf = I(n-k, k+1, 1-phi) using the incomplete beta 
    function.
    """

    # Input check -----------
    assert isinstance(n, int) and n > 0, \
                               "n must be a positive integer in cbinomial!"
    assert 0.0 < phi < 1.0, \
                 "success frequency must be in (0.0, 1.0) in cbinomial!"
    assert isinstance(k, int), "variate must be an integer in cbinomial!"
    # -----------------------

    if k <  0: return 0.0
    if k >= n: return 1.0

    if recursive:
        lnp  = log(phi)
        lnq  = log(1.0-phi)
        c    = lnp - lnq
        f    = n*lnq
        cdf  = 0.0
        if f > LNMINFLOAT: cdf = exp(f)
        for i in range(1, k+1):
            f   += c + log(n-i+1.0) - log(i)
            cdf += guardedexp(f, 'cbinomial')
    else:
        cdf = incbeta(float(n-k), k+1.0, 1.0-phi, False, FOURMACHEPS)

    return kept_within(0.0, cdf, 1.0)

# end of cbinomial

# ------------------------------------------------------------------------------

def cpoisson(mean, k, recursive=True):
    """
    The Poisson cdf P(N <= k) (mean > 0). 0.0 is returned for k < 0.

    recursive=True: summation of the log-space pmf recursion.
    recursive=False: cdf = 1 - incgamma(k+1, mean).
    """

    # Input check -----------
    assert mean > 0.0, "mean must be positive in cpoisson!"
    assert isinstance(k, int), "variate must be an integer in cpoisson!"
    # -----------------------

    if k < 0: return 0.0

    if recursive:
        lnmu = log(mean)
        lnp  = -mean
        cdf  = guardedexp(lnp, 'cpoisson')
        for i in range(1, k+1):
            lnp += lnmu - log(i)
            cdf += guardedexp(lnp, 'cpoisson')
    else:
        cdf = 1.0 - incgamma(k+1.0, mean, False, FOURMACHEPS)

    return kept_within(0.0, cdf, 1.0)

# end of cpoisson

# ------------------------------------------------------------------------------

def cnegbinomial(r, phi, k, recursive=True):
    """
    The negative binomial cdf P(N <= k) for the number of failures before 
    the r:th success, r > 0, 0 < phi < 1. 0.0 is returned for k < 0.

    recursive=True: summation of the log-space pmf recursion.
    recursive=False: cdf = I(r, k+1, phi).
    """

    # Input check -----------
    assert r > 0.0, "number of successes must be positive in cnegbinomial!"
    assert 0.0 < phi < 1.0, \
                 "success frequency must be in (0.0, 1.0) in cnegbinomial!"
    assert isinstance(k, int), "variate must be an integer in cnegbinomial!"
    # -----------------------

    if k < 0: return 0.0

    if recursive:
        lnq = log(1.0-phi)
        y   = r*log(phi)
        cdf = guardedexp(y, 'cnegbinomial')
        for i in range(1, k+1):
            y   += log(r-1.0+i) - log(i) + lnq
            cdf += guardedexp(y, 'cnegbinomial')
    else:
        cdf = incbeta(r, k+1.0, phi, False, FOURMACHEPS)

    return kept_within(0.0, cdf, 1.0)

# end of cnegbinomial

# ------------------------------------------------------------------------------
