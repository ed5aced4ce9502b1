# statlib/tukey.py
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
Module with the cdf and the inverse cdf of the studentized range 
distribution, the distribution of the range of nmeans independent normal 
variates divided by an independent estimate of their standard deviation 
having df degrees of freedom. Used with Tukey's multiple comparison test.

The algorithms are those of R. E. Lund & J. R. Lund, "Algorithm AS 190: 
Probabilities and Upper Quantiles for the Studentized Range", Applied 
Statistics 32, 1983, pp. 204-210, with the modifications made in the R 
project (functions ptukey and qtukey of the R math library). 

Probabilities for more than one range (nranges > 1) refer to the largest 
of nranges independent ranges.
"""
# ------------------------------------------------------------------------------

from math import exp, log, sqrt, log1p, expm1

from statlib.cdf       import cnormal
from numlib.specfunc   import lngamma
from numlib.quadrature import qgauleg
from numlib.solveq     import zsecant
from misclib.errwarn   import ConvergenceError
from misclib.mathconst import SQRTTWOPII, LN2

# ------------------------------------------------------------------------------

def wprob(w, rr, cc):
    """
    The probability integral of Hartley's form of the range over [0, w] 
    for rr independent ranges of cc standard normal variates, i. e. the
    cdf of the range of the normal distribution (the limit of ptukey for 
    an infinite number of degrees of freedom).

    The first term of Hartley's form is (2*Phi(w/2) - 1)**cc, the second
    is integrated from w/2 to 8 using 12-point Gauss-Legendre quadrature 
    over two (w > 3) or three equal-length subintervals. Contributions less
    than about 9.e-14 are dropped.
    """

    bb   =   8.0        # Upper limit of integration
    wlar =   3.0
    c1   = -30.0
    c2   = -50.0
    c3   =  60.0

    qsqz = 0.5*w

    # The lower bound of the integral is 0.99999999999995 for qsqz >= 8
    if qsqz >= bb: return 1.0

    prw = 2.0*cnormal(0.0, 1.0, qsqz) - 1.0
    if prw >= exp(c2/cc): prw = prw**cc
    else:                 prw = 0.0

    if w > wlar: wincr = 2
    else:        wincr = 3

    cc1      = cc - 1.0
    rinsmin  = exp(c1/cc1)

    def _hartley(ac):
        qexpo = ac*ac
        if qexpo > c3: return 0.0
        rinsum = cnormal(0.0, 1.0, ac) - cnormal(0.0, 1.0, ac-w)
        if rinsum < rinsmin: return 0.0
        return exp(-0.5*qexpo) * rinsum**cc1

    binc   = (bb - qsqz) / wincr
    blb    = qsqz
    einsum = 0.0
    for k in range(0, wincr):
        bub     = blb + binc
        einsum += 2.0 * cc * SQRTTWOPII * qgauleg(_hartley, blb, bub, 12)
        blb     = bub

    prw = einsum + prw
    if prw <= exp(c1/rr): return 0.0

    prw = prw**rr
    if prw >= 1.0: return 1.0

    return prw

# end of wprob

# ------------------------------------------------------------------------------

def ptukey(q, nmeans, df, nranges=1.0, lower_tail=True, log_p=False):
    """
    The cdf of the studentized range distribution. nmeans >= 2 is the number 
    of means (columns/treatments), df >= 2 the degrees of freedom of the 
    error term (df < 2 is rejected, although the distribution exists for 
    df >= 1) and nranges >= 1 the number of independent ranges (rows/
    groups). lower_tail=False returns the complementary cdf, log_p=True the 
    natural logarithm of the probability.

    The mixing integral over the chi distribution of the standard deviation
    estimate is evaluated with 16-point Gauss-Legendre quadrature over 
    successive subintervals whose length depends on df. For df > 25000 the
    range distribution itself (wprob) is used. 

    A ConvergenceError is raised if the contribution of the last of 50 
    subintervals is still larger than 1.e-14.
    """

    assert nmeans  >= 2.0, "number of means must be >= 2 in ptukey!"
    assert df      >= 2.0, "degrees of freedom must be >= 2 in ptukey!"
    assert nranges >= 1.0, "number of ranges must be >= 1 in ptukey!"

    if q <= 0.0:           return _tukeytail(0.0, lower_tail, log_p)
    if q == float('inf'):  return _tukeytail(1.0, lower_tail, log_p)

    if df > 25000.0:
        return _tukeytail(wprob(q, nranges, nmeans), lower_tail, log_p)

    eps1 = -30.0
    eps2 = 1.0e-14

    f2   = 0.5*df
    f21  = f2 - 1.0
    ff4  = 0.25*df

    if   df <=  100.0: ulen = 1.0
    elif df <=  800.0: ulen = 0.5
    elif df <= 5000.0: ulen = 0.25
    else:              ulen = 0.125

    # The leading constant includes the length of the subintervals
    f2lf = f2*log(df) - df*LN2 - lngamma(f2) + log(ulen)

    def _mixing(u):
        t1 = f2lf + f21*log(u) - u*ff4
        if t1 < eps1: return 0.0
        return wprob(q*sqrt(0.5*u), nranges, nmeans) * exp(t1)

    ans = 0.0
    for i in range(1, 51):
        otsum = qgauleg(_mixing, (2*i-2)*ulen, 2*i*ulen, 16) / ulen
        if i*ulen >= 1.0 and otsum <= eps2: break
        ans += otsum
    else:
        raise ConvergenceError("Tukey cdf did not converge in ptukey", \
                                                   'ptukey', 50, ans)

    if ans > 1.0: ans = 1.0

    return _tukeytail(ans, lower_tail, log_p)

# end of ptukey

# ------------------------------------------------------------------------------

def qtukey(p, nmeans, df, nranges=1.0, lower_tail=True, log_p=False, \
                                       tolf=1.0e-4, maxniter=50):
    """
    The inverse of ptukey above, with the same parameter domain: nmeans >= 2,
    df >= 2 and nranges >= 1. The initial value is obtained from the 
    approximation of algorithm AS 70 (R. E. Odeh & J. O. Evans, Applied 
    Statistics 23, 1974, pp. 96-97), after which the secant method is used
    until two successive iterates differ by less than tolf. Iterates are not
    allowed to be negative.

    A ConvergenceError is raised if the secant method has not converged 
    after maxniter iterations.
    """

    assert nmeans  >= 2.0, "number of means must be >= 2 in qtukey!"
    assert df      >= 2.0, "degrees of freedom must be >= 2 in qtukey!"
    assert nranges >= 1.0, "number of ranges must be >= 1 in qtukey!"

    if log_p:
        assert p <= 0.0, "log probability must not be positive in qtukey!"
        if p == 0.0:
            if lower_tail: return float('inf')
            else:          return 0.0
        if p == float('-inf'):
            if lower_tail: return 0.0
            else:          return float('inf')
        if lower_tail: p = exp(p)
        else:          p = -expm1(p)

    else:
        assert 0.0 <= p <= 1.0, \
                  "input probability must be within [0.0, 1.0] in qtukey!"
        if p == 0.0:
            if lower_tail: return 0.0
            else:          return float('inf')
        if p == 1.0:
            if lower_tail: return float('inf')
            else:          return 0.0
        if not lower_tail: p = 0.5 - p + 0.5

    def _ftukey(x):
        return ptukey(x, nmeans, df, nranges) - p

    x0    = _qinv(p, nmeans, df)
    valx0 = _ftukey(x0)
    if valx0 > 0.0: x1 = max(0.0, x0-1.0)
    else:           x1 = x0 + 1.0

    return zsecant(_ftukey, x0, x1, 'qtukey', tolf, maxniter, nonneg=True)

# end of qtukey

# ------------------------------------------------------------------------------
# Auxiliary functions:
# ------------------------------------------------------------------------------

def _qinv(p, nmeans, df):
    # Initial estimate of the quantile of the studentized range (AS 70)

    p0 =  0.322232421088
    q0 =  0.993484626060e-01
    p1 = -1.0
    q1 =  0.588581570495
    p2 = -0.342242088547
    q2 =  0.531103462366
    p3 = -0.204231210125
    q3 =  0.103537752850
    p4 = -0.453642210148e-04
    q4 =  0.38560700634e-02
    c1 =  0.8832
    c2 =  0.2368
    c3 =  1.214
    c4 =  1.208
    c5 =  1.4142
    vmax = 120.0

    ps = 0.5 - 0.5*p
    yi = sqrt(log(1.0/(ps*ps)))
    t  = yi + ((((yi*p4 + p3)*yi + p2)*yi + p1)*yi + p0) \
            / ((((yi*q4 + q3)*yi + q2)*yi + q1)*yi + q0)
    if df < vmax: t += (t*t*t + t) / df / 4.0
    q  = c1 - c2*t
    if df < vmax: q += -c3/df + c4*t/df

    return t * (q*log(nmeans - 1.0) + c5)

# end of _qinv

# ------------------------------------------------------------------------------

def _tukeytail(x, lower_tail, log_p):
    # Converts a lower-tail probability to the requested form

    if lower_tail:
        if log_p:
            if x == 0.0: return float('-inf')
            return log(x)
        return x

    if log_p:
        if x == 1.0: return float('-inf')
        return log1p(-x)
    return 0.5 - x + 0.5

# end of _tukeytail

# ------------------------------------------------------------------------------
