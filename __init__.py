# __init__.py
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
# -----------------------------------------------------------------------------
"""
The SpecDist package contains the special functions (gamma, beta and their
incomplete forms), the continued fraction and root finding machinery, and
the cdfs, pdfs and inverse cdfs of the probability distributions used for
generating random variates in continuous and discrete event simulation.
The distribution of the studentized range is included as well.

Subpackages:
  machdep   machine-dependent numerical constants
  misclib   errors, warnings, number predicates and mathematical constants
  numlib    special functions, continued fractions, equation solving and
            quadrature
  statlib   pdfs, cdfs, inverse cdfs and distribution classes
"""
# -----------------------------------------------------------------------------

__version__ = "1.0"

__author__  = "Nils A. Kjellbert"

__all__     = [ 'machdep', 'misclib', 'numlib', 'statlib' ]

# -----------------------------------------------------------------------------
