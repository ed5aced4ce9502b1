# statlib/binco.py
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
Computation of binomial coefficients. Integer arithmetics (integer=True) is
exact and never overflows, floating-point arithmetics (integer=False) based
on the log-gamma function is faster for large n. The binomial pmf of
statlib.pdf uses fbincoeff on its direct (non-recursive) path.
"""
# ------------------------------------------------------------------------------

from math import exp, log

from numlib.specfunc import lngamma
from misclib.numbers import is_posinteger, is_nonneginteger

# ------------------------------------------------------------------------------

def ibincoeff(n, k, integer=True):
    """
    Computation of a single binomial coefficient n over k, returning an 
    integer. For integer=True integer arithmetics is used throughout and 
    there is no risk of overflow. For integer=False a floating-point gamma 
    function approximation is used and the result rounded to an integer at 
    the end (an OverflowError is propagated for huge coefficients). 
    """

    assert is_posinteger(n), \
               "n in n_over_k in ibincoeff must be a positive integer!"
    assert is_nonneginteger(k), \
           "k in n_over_k in ibincoeff must be a non-negative integer!"
    assert n >= k, "n must be >= k in n_over_k in ibincoeff!"

    if integer:
        return _bicolongint(n, k)

    lnbico = lngamma(n+1) - lngamma(k+1) - lngamma(n-k+1)

    return int(round(exp(lnbico)))

# end of ibincoeff

# ------------------------------------------------------------------------------

def fbincoeff(n, k, integer=True):
    """
    Computation of a single binomial coefficient n over k, returning a float 
    (an OverflowError returns float('inf'), which would occur for n > 1029 
    for IEEE754 floating-point standard). 
    """

    assert is_posinteger(n), \
               "n in n_over_k in fbincoeff must be a positive integer!"
    assert is_nonneginteger(k), \
           "k in n_over_k in fbincoeff must be a non-negative integer!"
    assert n >= k, "n must be >= k in n_over_k in fbincoeff!"

    if integer:
        bico = _bicolongint(n, k)
        try:
            fbico = float(bico)
        except OverflowError:
            fbico = float('inf')

    else:
        try:
            lnbico  =  lngamma(n+1) - lngamma(k+1) - lngamma(n-k+1)
            fbico   =  float(round(exp(lnbico)))
        except OverflowError:
            fbico   =  float('inf')

    return fbico

# end of fbincoeff

# ------------------------------------------------------------------------------

def lnbincoeff(n, k, integer=True):
    """
    Computation of the natural logarithm of a single binomial coefficient 
    n over k
    """

    assert is_posinteger(n), \
               "n in n_over_k in lnbincoeff must be a positive integer!"
    assert is_nonneginteger(k), \
           "k in n_over_k in lnbincoeff must be a non-negative integer!"
    assert n >= k, "n must be >= k in n_over_k in lnbincoeff!"

    if integer:
        lnbico  =  log(_bicolongint(n, k))

    else:
        lnbico  =  lngamma(n+1) - lngamma(k+1) - lngamma(n-k+1)

    return lnbico

# end of lnbincoeff

# ------------------------------------------------------------------------------

def _bicolongint(n, k):
    """
    Exact integer value of a binomial coefficient: the product of the
    max(k, n-k)+1,...., n factors divided by min(k, n-k)! 
    """

    if k == 0 or k == n: return 1

    num0  = max(k, n-k) + 1
    denN  = min(k, n-k)

    numer = num0
    for j in range(num0+1, n+1): numer = numer*j

    denom = 1
    for j in range(1, denN+1): denom = denom*j

    return numer//denom  # Integer division will not give a remainder here

# end of _bicolongint

# ------------------------------------------------------------------------------
