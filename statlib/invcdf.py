# statlib/invcdf.py
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
MODULE WITH FUNCTIONS FOR INVERTING VARIOUS PROBABILITY DISTRIBUTIONS. 
NB. Some functions may return float('inf') or float('-inf') !

Closed forms are used where they exist. The chi-square and gamma quantiles 
come from algorithm AS 91, the beta quantile from bisection started at the 
AS 109 approximation, and the quantiles of the discrete distributions from a 
Cornish-Fisher start followed by a search along the cdf.
"""
# ------------------------------------------------------------------------------

from math import exp, log, sqrt, tan, floor, ceil

from statlib.cdf       import cstudent, cbinomial, cpoisson, cnegbinomial
from statlib.pdf       import dbinomial, dpoisson, dnegbinomial
from numlib.specfunc   import lngamma, lnbeta, incgamma, incbeta
from numlib.solveq     import Interval, BisectionRootFinder
from numlib.solveq     import findinterval, zbisect
from numlib.miscnum    import polyeval
from misclib.numbers   import is_posinteger, kept_within
from machdep.machnum   import FOURMACHEPS, DEFPREC, DEFMAXNITER
from misclib.errwarn   import ConvergenceError
from misclib.mathconst import PI, LN2

# ------------------------------------------------------------------------------

def iunifab(prob, left=0.0, right=1.0):
    """
    Returns the inverse of the cumulative uniform distribution function on
    [left, right].
    """

    _assertprob(prob, 'iunifab')
    assert right > left, "support range must be positive in iunifab!"

    x  =  left + prob*(right-left)

    return x

# end of iunifab

# ------------------------------------------------------------------------------

def iexpo(prob, mean=1.0):
    """
    Inverse of the exponential distribution with mean = 1/lambda (mean > 0.0)
    """

    _assertprob(prob, 'iexpo')
    assert mean > 0.0, "mean must be positive in iexpo!"

    if prob == 1.0: return float('inf')

    x  =  - mean * log(1.0-prob)

    return x

# end of iexpo

# ------------------------------------------------------------------------------

def inormal(prob, mu=0.0, sigma=1.0):
    """
    Returns the inverse of the cumulative normal distribution function using
    the rational approximation of Peter J. Acklam ("An algorithm for 
    computing the inverse normal cumulative distribution function", 2003). 
    The relative error is less than 1.15e-9 over the entire range. Separate 
    approximations are used for the lower tail (prob < 0.02425), the central 
    region and the upper tail (prob > 0.97575).

    inormal(0.0) = float('-inf') and inormal(1.0) = float('inf')
    """

    _assertprob(prob, 'inormal')
    assert sigma >= 0.0, "sigma must not be negative in inormal!"

    if prob == 0.0: return float('-inf')
    if prob == 1.0: return float('inf')

    plow  = 0.02425
    phigh = 1.0 - plow

    if prob < plow:     # Lower tail
        q = sqrt(-2.0*log(prob))
        z = polyeval(_ACKLAM_C, q) / polyeval(_ACKLAM_D, q)

    elif prob > phigh:  # Upper tail
        q = sqrt(-2.0*log(1.0-prob))
        z = - polyeval(_ACKLAM_C, q) / polyeval(_ACKLAM_D, q)

    else:               # Central region
        q = prob - 0.5
        r = q*q
        z = q * polyeval(_ACKLAM_A, r) / polyeval(_ACKLAM_B, r)

    return mu + sigma*z

# end of inormal

# Coefficients in increasing order of power, as expected by polyeval
_ACKLAM_A = ( 2.506628277459239e+00, -3.066479806614716e+01, \
              1.383577518672690e+02, -2.759285104469687e+02, \
              2.209460984245205e+02, -3.969683028665376e+01)
_ACKLAM_B = ( 1.0,                   -1.328068155288572e+01, \
              6.680131188771972e+01, -1.556989798598866e+02, \
              1.615858368580409e+02, -5.447609879822406e+01)
_ACKLAM_C = ( 2.938163982698783e+00,  4.374664141464968e+00, \
             -2.549732539343734e+00, -2.400758277161838e+00, \
             -3.223964580411365e-01, -7.784894002430293e-03)
_ACKLAM_D = ( 1.0,                    3.754408661907416e+00, \
              2.445134137142996e+00,  3.224671290700398e-01, \
              7.784695709041462e-03)

# ------------------------------------------------------------------------------

def ichisquare(prob, v, lngvhalf=False, tolf=DEFPREC, maxniter=DEFMAXNITER):
    """
    Returns the inverse of the chi-square distribution function with v 
    degrees of freedom using algorithm AS 91 (D. J. Best & D. E. Roberts, 
    Applied Statistics 24, 1975, p. 385) including the changes suggested in 
    AS R85 (Applied Statistics 40, 1991, pp. 233-235). 

    A starting value is obtained from a closed-form approximation for small 
    chi-square values, the Wilson-Hilferty approximation (corrected for prob 
    approaching 1) or, for v <= 0.32, a Newton-type iteration. The start is 
    then refined using a seven-term Taylor series, each step calling the 
    incomplete gamma function with tolf and maxniter. The refinement stops 
    when the relative change is less than 5.e-7.

    NB It is possible to gain efficiency by providing the value of 
    ln(gamma(v/2)) as a pre-computed input instead of the default 'False'.

    A ConvergenceError is raised if the refinement has not converged after 
    500 steps.
    """

    _assertprob(prob, 'ichisquare')
    assert v > 0.0, "degrees of freedom must be positive in ichisquare!"

    if prob == 0.0: return 0.0
    if prob == 1.0: return float('inf')

    maxit = 500
    e     = 0.5e-6

    xx = 0.5*v
    c  = xx - 1.0
    if lngvhalf: g = lngvhalf
    else:        g = lngamma(xx)

    if v >= -1.24*log(prob):
        if v > 0.32:
            # Wilson-Hilferty
            x  = inormal(prob)
            p1 = 0.222222 / v
            ch = v * (x*sqrt(p1) + 1.0 - p1)**3
            # prob approaching 1
            if ch > 2.2*v + 6.0:
                ch = -2.0*(log(1.0-prob) - c*log(0.5*ch) + g)

        else:
            ch = 0.4
            a  = log(1.0-prob)
            for k in range(0, maxit):
                q  = ch
                p1 = 1.0 + ch*(4.67 + ch)
                p2 = ch*(6.73 + ch*(6.66 + ch))
                t  = -0.5 + (4.67 + 2.0*ch)/p1 - \
                            (6.73 + ch*(13.32 + 3.0*ch))/p2
                ch = ch - (1.0 - exp(a + g + 0.5*ch + c*LN2)*p2/p1) / t
                if abs(q/ch - 1.0) <= 0.01: break
            else:
                raise ConvergenceError("No starting value found in " + \
                            "ichisquare", 'ichisquare', maxit, ch)

    else:
        # Small chi-square values
        ch = (prob*xx*exp(g + xx*LN2))**(1.0/xx)
        if ch < e: return ch

    for k in range(0, maxit):
        q  = ch
        p1 = 0.5*ch
        p2 = prob - incgamma(xx, p1, g, tolf, maxniter)

        t  = p2 * exp(xx*LN2 + g + p1 - c*log(ch))
        b  = t / ch
        a  = 0.5*t - b*c
        s1 = (210.0 + a*(140.0 + a*(105.0 + a*(84.0 + a*(70.0 + 60.0*a))))) \
                                                                     / 420.0
        s2 = (420.0 + a*(735.0 + a*(966.0 + a*(1141.0 + 1278.0*a)))) / 2520.0
        s3 = (210.0 + a*(462.0 + a*(707.0 + 932.0*a))) / 2520.0
        s4 = (252.0 + a*(672.0 + 1182.0*a) + c*(294.0 + a*(889.0 + \
                                                     1740.0*a))) / 5040.0
        s5 = (84.0 + 2264.0*a + c*(1175.0 + 606.0*a)) / 2520.0
        s6 = (120.0 + c*(346.0 + 127.0*c)) / 5040.0
        ch = ch + t*(1.0 + 0.5*t*s1 - b*c*(s1 - b*(s2 - b*(s3 - b*(s4 - \
                                                   b*(s5 - b*s6))))))
        if abs(q/ch - 1.0) <= e: return ch

    raise ConvergenceError(str(maxit) + " Taylor steps not sufficient in " + \
                        "ichisquare", 'ichisquare', maxit, ch)

# end of ichisquare

# ------------------------------------------------------------------------------

def igamma(prob, alpha, scale=1.0, lngalpha=False, tolf=DEFPREC, \
                                                   maxniter=DEFMAXNITER):
    """
    Inverse of the gamma cdf with shape alpha and scale parameter scale,
    obtained from the chi-square quantile: x = scale * chi2(prob, 2*alpha)/2
    (the exponential distribution is used directly for alpha = 1).

    NB It is possible to gain efficiency by providing the value of 
    ln(gamma(alpha)) as a pre-computed input instead of the default 'False'.
    """

    _assertprob(prob, 'igamma')
    assert alpha > 0.0, "alpha must be positive in igamma!"
    assert scale > 0.0, "scale must be positive in igamma!"

    if alpha == 1.0: return iexpo(prob, scale)

    return 0.5 * scale * ichisquare(prob, 2.0*alpha, lngalpha, tolf, maxniter)

# end of igamma

# ------------------------------------------------------------------------------

def ibeta(prob, a, b, lnbetaab=False, initx=None, delta=0.01, \
                      tolf=FOURMACHEPS, maxniter=1100, \
                      cftolf=DEFPREC, cfmaxniter=DEFMAXNITER):
    """
    Inverse of the beta cdf on [0.0, 1.0]. The root of I(a, b, x) - prob is 
    found by bisection. The search is started at initx if given, otherwise at 
    the approximation of algorithm AS 109 (K. L. Majumder & G. P. Bhattacharjee,
    Applied Statistics 22, 1973, p. 411). An interval of half-width delta 
    around the start is expanded until it brackets the root; if that fails 
    the whole of [0.0, 1.0] is used.

    NB It is possible to provide the value of the natural logarithm of the 
    complete beta function as a pre-computed input instead of the default 
    "False".

    tolf and maxniter control the bisection, whose residual is measured 
    relative to prob. maxniter must allow for halving the bracket all the 
    way down to roots close to the smallest positive float. cftolf and 
    cfmaxniter are handed over to the continued fraction of incbeta, so 
    that ibeta inverts the very cdf computed by incbeta with the same 
    parameters.

    A ConvergenceError is raised if the bisection has not converged to 
    within tolf after maxniter iterations.
    """

    _assertprob(prob, 'ibeta')
    assert a > 0.0, "both parameters must be positive in ibeta!"
    assert b > 0.0, "both parameters must be positive in ibeta!"
    assert delta > 0.0, "search half-width must be positive in ibeta!"

    if prob == 0.0: return 0.0
    if prob == 1.0: return 1.0

    if lnbetaab: lnb = lnbetaab
    else:        lnb = lnbeta(a, b)

    if initx is None:
        x0 = _ibeta_as109(a, b, prob, lnb)
    else:
        assert 0.0 <= initx <= 1.0, "initx must be in [0.0, 1.0] in ibeta!"
        x0 = initx

    def _fibeta(x):
        x = kept_within(0.0, x, 1.0)
        return incbeta(a, b, x, lnb, cftolf, cfmaxniter)/prob - 1.0

    interval = Interval(max(0.0, x0-delta), min(1.0, x0+delta))
    if findinterval(_fibeta, interval):
        interval.set_interval(max(0.0, interval.lower), \
                              min(1.0, interval.upper))
    else:
        interval.set_interval(0.0, 1.0)

    finder = BisectionRootFinder(tolf, maxniter)
    finder.set_interval(_fibeta, interval)
    if interval.contains(x0): finder.set_initpoint(x0)
    finder.evaluate()

    if not finder.has_converged():
        raise ConvergenceError("Unable to invert cdf in ibeta", 'ibeta', \
                                      finder.niter, finder.get_result())

    return kept_within(0.0, finder.get_result(), 1.0)

# end of ibeta

# ------------------------------------------------------------------------------

def _ibeta_as109(a, b, prob, lnb):
    # Starting approximation of AS 109, valid for the lower tail. For
    # prob > 0.5 the distribution is reflected: x(prob; a, b) = 
    # 1 - x(1-prob; b, a)

    if prob > 0.5:
        pp, qq, aa = b, a, 1.0 - prob
    else:
        pp, qq, aa = a, b, prob

    r = sqrt(-log(aa*aa))
    y = r - (2.30753 + 0.27061*r) / (1.0 + (0.99229 + 0.04481*r)*r)

    if pp > 1.0 and qq > 1.0:
        r = (y*y - 3.0) / 6.0
        s = 1.0 / (pp + pp - 1.0)
        t = 1.0 / (qq + qq - 1.0)
        h = 2.0 / (s + t)
        w = y*sqrt(h + r)/h - (t - s)*(r + 5.0/6.0 - 2.0/(3.0*h))
        x = pp / (pp + qq*exp(w + w))

    else:
        r = qq + qq
        t = 1.0 / (9.0*qq)
        t = r * (1.0 - t + y*sqrt(t))**3
        if t <= 0.0:
            x = 1.0 - exp((log((1.0-aa)*qq) + lnb) / qq)
        else:
            t = (4.0*pp + r - 2.0) / t
            if t <= 1.0: x = exp((log(aa*pp) + lnb) / pp)
            else:        x = 1.0 - 2.0/(t + 1.0)

    x = kept_within(0.0, x, 1.0)
    if prob > 0.5: x = 1.0 - x

    return x

# end of _ibeta_as109

# ------------------------------------------------------------------------------

def icontinuous(cdf, prob, lo, hi, initx=None, caller='icontinuous', \
                                   tolf=FOURMACHEPS, maxniter=256):
    """
    Generic inversion of a continuous cdf (a function of one variable) by 
    bisection: the root of cdf(x) - prob is searched for on [lo, hi], which 
    is expanded if it does not bracket the root. initx is the first point
    to be evaluated (optional). The residual is measured relative to prob
    (prob > 0). A ConvergenceError is raised on failure.
    """

    _assertprob(prob, caller)

    if prob > 0.0: pscale = prob
    else:          pscale = 1.0

    return zbisect(lambda x: (cdf(x) - prob)/pscale, lo, hi, caller, tolf, \
                                                           maxniter, initx)

# end of icontinuous

# ------------------------------------------------------------------------------

def istudent(prob, df):
    """
    Inverse of Student's t distribution with df > 0 degrees of freedom. 
    Closed forms are used for df = 1 and df = 2, for other df the cdf is 
    inverted by bisection starting at the normal quantile.
    """

    _assertprob(prob, 'istudent')
    assert df > 0.0, "degrees of freedom must be positive in istudent!"

    if prob == 0.0: return float('-inf')
    if prob == 1.0: return float('inf')

    if df == 1.0: return tan(PI*(prob-0.5))
    if df == 2.0: return (2.0*prob - 1.0) / sqrt(2.0*prob*(1.0-prob))

    x0 = inormal(prob)
    if df > 2.0: sd = sqrt(df/(df-2.0))
    else:        sd = 1.0
    span = 6.0*sd

    return icontinuous(lambda x: cstudent(df, x), prob, x0-span, x0+span, \
                                                         x0, 'istudent')

# end of istudent

# ------------------------------------------------------------------------------

def ipearson5(prob, alpha, scale, lngalpha=False):
    """
    Inverse of the Pearson type V (inverted gamma) cdf:
    x = 1 / igamma(1-prob, alpha, 1/scale)
    """

    _assertprob(prob, 'ipearson5')
    assert alpha > 0.0, "alpha must be positive in ipearson5!"
    assert scale > 0.0, "scale must be positive in ipearson5!"

    if prob == 0.0: return 0.0
    if prob == 1.0: return float('inf')

    return 1.0 / igamma(1.0-prob, alpha, 1.0/scale, lngalpha)

# end of ipearson5

# ------------------------------------------------------------------------------

def ipearson6(prob, alpha1, alpha2, scale, lnbetaab=False):
    """
    Inverse of the Pearson type VI (beta prime) cdf: x = scale * y/(1-y)
    where y = ibeta(prob, alpha1, alpha2)
    """

    _assertprob(prob, 'ipearson6')
    assert scale > 0.0, "scale must be positive in ipearson6!"

    y = ibeta(prob, alpha1, alpha2, lnbetaab)
    if y >= 1.0: return float('inf')

    return scale * y / (1.0-y)

# end of ipearson6

# ------------------------------------------------------------------------------

def cornishfisher(prob, mu, sigma, skew):
    """
    Approximate quantile of a discrete distribution with mean mu, standard
    deviation sigma and skewness skew from the normal quantile and the first
    Cornish-Fisher correction, rounded to the nearest integer.
    """

    z = inormal(prob)

    return int(floor(mu + sigma*(z + skew*(z*z - 1.0)/6.0) + 0.5))

# end of cornishfisher

# ------------------------------------------------------------------------------

def isearch_discrete(prob, start, cdf, pmf, lower=0, upper=None):
    """
    Finds the smallest integer k in [lower, upper] for which cdf(k) >= prob,
    starting at the integer 'start' and moving upwards or downwards from it.
    cdf and pmf are functions of an integer. upper=None means that there is
    no upper limit.

    The walk adds (or subtracts) pmf values to (or from) cdf(start), and the
    sum may drift a few ulps away from cdf itself. The neighbourhood of the
    point reached is therefore settled using cdf directly, so that k is
    always recovered from prob = cdf(k) as long as cdf(k) < 1.0.
    """

    if upper is None: start = max(lower, start)
    else:             start = kept_within(lower, start, upper)

    i    = start
    cdfi = cdf(start)

    if cdfi < prob:
        while cdfi < prob:
            if upper is not None and i >= upper: break
            step = pmf(i+1)
            if cdfi + step == cdfi and cdfi > 0.5: break  # saturated tail
            cdfi += step
            i    += 1

    else:
        while i > lower:
            cdfim1 = cdfi - pmf(i)
            if cdfim1 < prob: break
            cdfi = cdfim1
            i   -= 1

    while i > lower and cdf(i-1) >= prob: i -= 1
    while (upper is None or i < upper) and cdf(i) < prob:
        if pmf(i+1) == 0.0: break
        i += 1

    return i

# end of isearch_discrete

# ------------------------------------------------------------------------------

def ibinomial(prob, n, phi, recursive=True):
    """
    Inverse of the binomial cdf, n >= 1, 0 < phi < 1.
    """

    _assertprob(prob, 'ibinomial')
    assert is_posinteger(n), "n must be a positive integer in ibinomial!"
    assert 0.0 < phi < 1.0, \
                  "success frequency must be in (0.0, 1.0) in ibinomial!"

    if prob == 0.0: return 0
    if prob == 1.0: return n

    q     = 1.0 - phi
    mu    = n*phi
    sigma = sqrt(mu*q)
    start = cornishfisher(prob, mu, sigma, (q-phi)/sigma)

    return isearch_discrete(prob, start, \
                            lambda k: cbinomial(n, phi, k, recursive), \
                            lambda k: dbinomial(n, phi, k, recursive), 0, n)

# end of ibinomial

# ------------------------------------------------------------------------------

def ipoisson(prob, mean, recursive=True):
    """
    Inverse of the Poisson cdf (mean > 0). ipoisson(1.0) = float('inf')
    """

    _assertprob(prob, 'ipoisson')
    assert mean > 0.0, "mean must be positive in ipoisson!"

    if prob == 0.0: return 0
    if prob == 1.0: return float('inf')

    sigma = sqrt(mean)
    start = cornishfisher(prob, mean, sigma, 1.0/sigma)

    return isearch_discrete(prob, start, \
                            lambda k: cpoisson(mean, k, recursive), \
                            lambda k: dpoisson(mean, k, recursive))

# end of ipoisson

# ------------------------------------------------------------------------------

def inegbinomial(prob, r, phi, recursive=True):
    """
    Inverse of the negative binomial cdf for the number of failures before 
    the r:th success, r > 0, 0 < phi < 1. In the geometric case r = 1 the
    search starts at the closed form. inegbinomial(1.0) = float('inf')
    """

    _assertprob(prob, 'inegbinomial')
    assert r > 0.0, "number of successes must be positive in inegbinomial!"
    assert 0.0 < phi < 1.0, \
                  "success frequency must be in (0.0, 1.0) in inegbinomial!"

    if prob == 0.0: return 0
    if prob == 1.0: return float('inf')

    if r == 1.0:
        start = int(ceil(log(1.0-prob)/log(1.0-phi) - 1.0))

    else:
        dq    = 1.0 / phi
        dp    = (1.0-phi) * dq
        mu    = r*dp
        sigma = sqrt(r*dp*dq)
        start = cornishfisher(prob, mu, sigma, (dq+dp)/sigma)

    return isearch_discrete(prob, start, \
                            lambda k: cnegbinomial(r, phi, k, recursive), \
                            lambda k: dnegbinomial(r, phi, k, recursive))

# end of inegbinomial

# ------------------------------------------------------------------------------
# Auxiliary function:
# ------------------------------------------------------------------------------

def _assertprob(prob, caller='caller'):
    assert 0.0 <= prob and prob <= 1.0, \
            "input probability must be within [0.0, 1.0] in " + caller + "!"

# ------------------------------------------------------------------------------
