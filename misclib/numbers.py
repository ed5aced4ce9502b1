# misclib/numbers.py
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
Module contains functions for checking and bounding numbers.
"""
# ------------------------------------------------------------------------------

def is_posinteger(x):
    """
    Logical function. Returns 'True' if argument is a positive integer,
    'False' otherwise.
    """

    return isinstance(x, int) and x > 0

# end of is_posinteger

# ------------------------------------------------------------------------------

def is_nonneginteger(x):
    """
    Logical function. Returns 'True' if argument is a non-negative integer,
    'False' otherwise.
    """

    return isinstance(x, int) and x >= 0

# end of is_nonneginteger

# ------------------------------------------------------------------------------

def kept_within(minimum, x, maximum=float('inf')):
    """
    Makes certain that the input stays in the interval [minimum, maximum].
    """

    if   x < minimum: return minimum
    elif x > maximum: return maximum
    else:             return x

# end of kept_within

# ------------------------------------------------------------------------------

