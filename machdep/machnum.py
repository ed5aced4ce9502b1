# machdep/machnum.py
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
File contains the machine-specific constants (mainly numerically related)
that guard the special functions and the iterative procedures of the package
against overflow, underflow and endless iteration. The numbers are those of
an IEEE 754 double.

LNMINFLOAT and LNMAXFLOAT are the smallest and the largest arguments that may
safely be handed over to exp: below LNMINFLOAT a term is a definite zero,
above LNMAXFLOAT it overflows. DEFPREC and DEFMAXNITER are the default
numerical controls of all iterative procedures (series, continued fractions,
root finders).
"""
# ------------------------------------------------------------------------------

from math import sqrt, log

# ------------------------------------------------------------------------------
_X          = 52           # Machine epsilon exponent - multiple of 4 preferred
MACHEPS     = 0.5**_X      # 2.220446049250313080847263336181640625e-016 exactly
TWOMACHEPS  = 2.0*MACHEPS  # 4.44089209850062616169452667236328125e-016 exactly
FOURMACHEPS = 4.0*MACHEPS  # 8.8817841970012523233890533447265625e-016  exactly
SQRTMACHEPS = 0.5**(_X/2)  # = sqrt(MACHEPS) = 1.490116119384765625e-008 exactly
MINFLOAT    = 0.5**1074      # 4.9406564584124654e-324 = absolute minimum pos.
MAXFLOAT    = 1.797693134862315708e+308  # = 2.0**1023 + 2.0*(1023-1) + ... +
                                         #     + 2.0**(1023-52)
MINEPSFLOAT = 0.5**1022   # = 2.2250738585072013830902327e-308 =
                          #    = smallest pos. float with full precision
TINY        = 0.5**511   # = sqrt(MINEPSFLOAT), 1.4916681462400413486581931e-154
SQRTTINY    = sqrt(TINY)  # 1.2213386697554620e-077

LNMINFLOAT  = log(MINFLOAT)  # -744.44007192138126, smallest exp argument
LNMAXFLOAT  = log(MAXFLOAT)  #  709.78271289338397, largest exp argument

DEFPREC     = SQRTMACHEPS  # Default precision of the iterative procedures
DEFMAXNITER = 5000         # Default maximum number of iterations

# ------------------------------------------------------------------------------
