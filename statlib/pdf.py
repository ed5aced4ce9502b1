# statlib/pdf.py
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
MODULE WITH FUNCTIONS FOR THE PDF OF VARIOUS PROBABILITY DISTRIBUTIONS AND
THE PMF (PROBABILITY MASS FUNCTION) OF THE DISCRETE ONES.
NB. Some functions may return float('inf') !

The pmfs of the binomial, Poisson and negative binomial distributions may be
computed in two ways: recursively in log-space (recursive=True, the default)
or directly from binomial coefficients/factorials (recursive=False). The
recursive computation raises an Error on term overflow and returns 0.0 for
terms that underflow.
"""
# ------------------------------------------------------------------------------

from math import exp, log

from numlib.specfunc   import lngamma, lnbeta, lnfactorial
from numlib.miscnum    import guardedexp
from statlib.binco     import fbincoeff
from misclib.numbers   import kept_within
from machdep.machnum   import LNMINFLOAT
from misclib.mathconst import SQRTTWOPI, PI

# ------------------------------------------------------------------------------

def dunifab(left, right, x):
    """
    The pdf of the uniform distribution on [left, right].
    """

    assert right > left, "support range must be positive in dunifab!"

    if left <= x <= right: return 1.0 / (right-left)
    else:                  return 0.0

# end of dunifab

# ------------------------------------------------------------------------------

def dexpo(mean, x):
    """
    The pdf of the exponential distribution with mean = 1/lambda (mean >= 0.0).
    """

    # Input check ----
    assert mean >  0.0, "mean must be positive in dexpo!"
    assert x    >= 0.0, "variate must not be negative in dexpo!"
    # ----------------

    pdf  =  exp(-x/mean) / mean   # Will always be >= 0

    return pdf

# end of dexpo

# ------------------------------------------------------------------------------

def dnormal(mu, sigma, x):
    """
    The pdf of the normal (Gaussian) distribution.
    sigma must be > 0.0
    """

    # Input check -----------------
    assert sigma > 0.0, "sigma must be positive in dnormal!"
    # -----------------------------

    fsigma = float(sigma)
    z      = (x-mu) / fsigma

    return exp(-0.5*z*z) / (SQRTTWOPI*fsigma)

# end of dnormal

# ------------------------------------------------------------------------------

def dgamma(alpha, scale, x, lngalpha=False):
    """
    The gamma distribution with shape alpha and scale parameter scale:
    f = x**(alpha-1) * exp(-x/scale) / (scale**alpha * gamma(alpha))
    alpha, scale > 0; x >= 0

    NB It is possible to gain efficiency by providing the value of the
    natural logarithm of the complete gamma function ln(gamma(alpha))
    as a pre-computed input (may be computed using numlib.specfunc.lngamma)
    instead of the default 'False'.

    NB  dgamma returns float('inf') for alpha < 1.0 and x = 0.0!
    """

    assert alpha >  0.0, "alpha must be positive in dgamma!"
    assert scale >  0.0, "scale must be positive in dgamma!"
    assert   x   >= 0.0, "variate must not be negative in dgamma!"

    if x == 0.0:
        if   alpha < 1.0:  return float('inf')
        elif alpha == 1.0: return 1.0/scale
        else:              return 0.0

    if lngalpha: lnga = lngalpha
    else:        lnga = lngamma(alpha)

    norm = alpha*log(scale) + lnga

    return exp((alpha-1.0)*log(x) - x/scale - norm)

# end of dgamma

# ------------------------------------------------------------------------------

def dbeta(a, b, x, lnbetaab=False):
    """
    The pdf of the beta distribution on [0.0, 1.0]:
    f = x**(a-1) * (1-x)**(b-1) / beta(a, b)
    a, b > 0; 0 <= x <= 1

    NB It is possible to provide the value of the natural logarithm of the
    complete beta function as a pre-computed input instead of the default
    "False".

    NB  dbeta may return float('inf') for a or b < 1.0!
    """

    assert a > 0.0, "both parameters must be positive in dbeta!"
    assert b > 0.0, "both parameters must be positive in dbeta!"
    assert 0.0 <= x <= 1.0, "variate must be in [0.0, 1.0] in dbeta!"

    if x == 0.0:
        if   a < 1.0:  return float('inf')
        elif a > 1.0:  return 0.0
    if x == 1.0:
        if   b < 1.0:  return float('inf')
        elif b > 1.0:  return 0.0

    if lnbetaab: lnb = lnbetaab
    else:        lnb = lnbeta(a, b)

    lnpdf = -lnb
    if a != 1.0: lnpdf += (a-1.0)*log(x)
    if b != 1.0: lnpdf += (b-1.0)*log(1.0-x)

    return exp(lnpdf)

# end of dbeta

# ------------------------------------------------------------------------------

def dstudent(df, x):
    """
    The pdf of Student's t distribution with df > 0 degrees of freedom.
    """

    assert df > 0.0, "degrees of freedom must be positive in dstudent!"

    dfp1h = 0.5*(df+1.0)
    lnc   = lngamma(dfp1h) - lngamma(0.5*df) - 0.5*log(df*PI)

    return exp(lnc - dfp1h*log(1.0 + x*x/df))

# end of dstudent

# ------------------------------------------------------------------------------

def dpearson5(alpha, scale, x):
    """
    The pdf of the Pearson type V (inverted gamma) distribution:
    f = x**(-(alpha+1)) * exp(-scale/x) / (scale**(-alpha) * gamma(alpha))
    alpha, scale > 0; x >= 0
    """

    assert alpha >  0.0, "alpha must be positive in dpearson5!"
    assert scale >  0.0, "scale must be positive in dpearson5!"
    assert   x   >= 0.0, "variate must not be negative in dpearson5!"

    if x == 0.0: return 0.0

    return exp(-scale/x - (alpha+1.0)*log(x) + alpha*log(scale) - \
                                                         lngamma(alpha))

# end of dpearson5

# ------------------------------------------------------------------------------

def dpearson6(alpha1, alpha2, scale, x):
    """
    The pdf of the Pearson type VI (beta prime) distribution:
    f = (x/scale)**(alpha1-1) / (scale*beta(alpha1, alpha2) *
                                      (1+x/scale)**(alpha1+alpha2))
    alpha1, alpha2, scale > 0; x >= 0
    """

    assert alpha1 > 0.0, "both shape parameters must be positive in dpearson6!"
    assert alpha2 > 0.0, "both shape parameters must be positive in dpearson6!"
    assert scale  > 0.0, "scale must be positive in dpearson6!"
    assert  x    >= 0.0, "variate must not be negative in dpearson6!"

    if x == 0.0:
        if   alpha1 < 1.0:  return float('inf')
        elif alpha1 > 1.0:  return 0.0
        else:               return 1.0 / (scale*exp(lnbeta(alpha1, alpha2)))

    y = x / scale
    return exp((alpha1-1.0)*log(y) - (alpha1+alpha2)*log(1.0+y) - \
                                       lnbeta(alpha1, alpha2)) / scale

# end of dpearson6

# ------------------------------------------------------------------------------

def dbinomial(n, phi, k, recursive=True):
    """
    The binomial distribution: p(N=k) = bincoeff * phi**k * (1-phi)**(n-k),
    n >= 1, 0 < phi < 1, k = 0, 1,...., n
    0.0 is returned for k outside of [0, n].
    """

    # Input check -----------
    assert isinstance(n, int) and n > 0, \
                               "n must be a positive integer in dbinomial!"
    assert 0.0 < phi < 1.0, "success frequency must be in (0.0, 1.0) in dbinomial!"
    assert isinstance(k, int), "variate must be an integer in dbinomial!"
    # -----------------------

    if k < 0 or k > n: return 0.0

    lnq = log(1.0-phi)
    f   = n*lnq
    if k == 0:
        if f <= LNMINFLOAT: return 0.0
        else:               return exp(f)

    lnp = log(phi)
    if k == n:
        g = n*lnp
        if g <= LNMINFLOAT: return 0.0
        else:               return exp(g)

    if recursive:
        c = lnp - lnq
        for i in range(1, k+1):
            f += c + log(n-i+1.0) - log(i)
        return guardedexp(f, 'dbinomial')

    lnpk  = k*lnp
    lnqnk = (n-k)*lnq
    if lnpk <= LNMINFLOAT or lnqnk <= LNMINFLOAT: return 0.0

    return fbincoeff(n, k) * exp(lnpk) * exp(lnqnk)

# end of dbinomial

# ------------------------------------------------------------------------------

def dpoisson(mean, k, recursive=True):
    """
    The Poisson distribution: p(N=k) = exp(-mean) * mean**k / k!
    k = 0, 1,...., inf
    0.0 is returned for k < 0.
    """

    # Input check -----------
    assert mean > 0.0, "mean must be positive in dpoisson!"
    assert isinstance(k, int), "variate must be an integer in dpoisson!"
    # -----------------------

    if k < 0: return 0.0

    lnp = -mean
    if k > 0:
        if recursive:
            lnmu = log(mean)
            for i in range(1, k+1):
                lnp += lnmu - log(i)
        else:
            lnp = k*log(mean) - mean - lnfactorial(k)

    pmf = guardedexp(lnp, 'dpoisson')

    return kept_within(0.0, pmf, 1.0)

# end of dpoisson

# ------------------------------------------------------------------------------

def dnegbinomial(r, phi, k, recursive=True):
    """
    The negative binomial distribution - the number of failures k before
    the r:th success in a series of Bernoulli trials with success frequency
    phi: p(N=k) = gamma(k+r)/(k! * gamma(r)) * phi**r * (1-phi)**k
    r > 0 (need not be an integer), 0 < phi < 1, k = 0, 1,...., inf
    0.0 is returned for k < 0.
    """

    # Input check -----------
    assert r > 0.0, "number of successes must be positive in dnegbinomial!"
    assert 0.0 < phi < 1.0, \
                 "success frequency must be in (0.0, 1.0) in dnegbinomial!"
    assert isinstance(k, int), "variate must be an integer in dnegbinomial!"
    # -----------------------

    if k < 0: return 0.0

    lnq = log(1.0-phi)
    if recursive:
        y = r*log(phi)
        for i in range(1, k+1):
            y += log(r-1.0+i) - log(i) + lnq
    else:
        y = lngamma(k+r) - lngamma(r) - lnfactorial(k) + r*log(phi) + k*lnq

    return guardedexp(y, 'dnegbinomial')

# end of dnegbinomial

# ------------------------------------------------------------------------------
