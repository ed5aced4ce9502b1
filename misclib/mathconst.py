# misclib/mathconst.py
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
File contains the math constants used by the special functions and the
distributions, most of which were taken from Abramowitz & Stegun and from
L. Rade & B. Westergren, "Beta - Mathematics Handbook", 2nd Ed.,
Chartwell-Bratt, 1990.
"""
# ------------------------------------------------------------------------------

SQRT2      = 1.4142135623730950488016887  # sqrt(2.0)
PI         = 3.1415926535897932384626434  # There is also a built-in 'pi'
PIINV      = 0.3183098861837906715377675  # 1.0/PI
SQRTTWOPI  = 2.506628274631000502415765   # sqrt(2.0*PI)
SQRTTWOPII = 0.3989422804014326779399461  # 1.0/sqrt(2.0*PI)
LNSQRT2PI  = 0.9189385332046727417803297  # 0.5*log(2.0*PI)
LN2        = 0.6931471805599453094172321  # natural logarithm of 2.0
EULERGAM   = 0.5772156649015328606065121  # Euler's constant

# ------------------------------------------------------------------------------
