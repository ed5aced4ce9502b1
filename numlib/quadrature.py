# numlib/quadrature.py
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
Module contains Gauss-Legendre quadrature of fixed order. Only the positive
half of the symmetric nodes and their weights are tabulated.
"""
# ------------------------------------------------------------------------------

# 12-point rule: positive nodes in descending order and their weights
_XLEG12 = (0.981560634246719250690549090149, 0.904117256370474856678465866119, \
           0.769902674194304687036893833213, 0.587317954286617447296702418941, \
           0.367831498998180193752691536644, 0.125233408511468915472441369464)
_ALEG12 = (0.047175336386511827194615961485, 0.106939325995318430960254718194, \
           0.160078328543346226334652529543, 0.203167426723065921749064455810, \
           0.233492536538354808760849898925, 0.249147045813402785000562436043)

# 16-point rule
_XLEG16 = (0.989400934991649932596154173450, 0.944575023073232576077988415535, \
           0.865631202387831743880467897712, 0.755404408355003033895101194847, \
           0.617876244402643748446671764049, 0.458016777657227386342419442984, \
           0.281603550779258913230460501460, 0.950125098376374401853193354250e-1)
_ALEG16 = (0.271524594117540948517805724560e-1, 0.622535239386478928628438369944e-1,
           0.951585116824927848099251076022e-1, 0.124628971255533872052476282192, \
           0.149595988816576732081501730547, 0.169156519395002538189312079030, \
           0.182603415044923588866763667969, 0.189450610455068496285396723208)

_TABLES = {12: (_XLEG12, _ALEG12), 16: (_XLEG16, _ALEG16)}

# ------------------------------------------------------------------------------

def gaulegnodes(npoints):
    """
    Returns the nodes and the weights of the 'npoints' Gauss-Legendre rule on
    [-1.0, 1.0] as two tuples with the nodes in ascending order. npoints must
    be 12 or 16.
    """

    assert npoints in _TABLES, "npoints must be 12 or 16 in gaulegnodes!"

    xhalf, ahalf = _TABLES[npoints]
    nodes   = tuple(-x for x in xhalf) + tuple(reversed(xhalf))
    weights = ahalf + tuple(reversed(ahalf))

    return nodes, weights

# end of gaulegnodes

# ------------------------------------------------------------------------------

def qgauleg(func, a, b, npoints=16):
    """
    Gauss-Legendre integration of a function of one variable over [a, b]
    using a rule with 'npoints' nodes (12 or 16). The nodes are visited in
    ascending order.
    """

    nodes, weights = gaulegnodes(npoints)

    center = 0.5*(a+b)
    half   = 0.5*(b-a)
    summ   = 0.0
    for x, w in zip(nodes, weights):
        summ += w * func(center + half*x)

    return half * summ

# end of qgauleg

# ------------------------------------------------------------------------------
