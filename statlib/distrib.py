# statlib/distrib.py
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
Module with classes for probability distributions built upon the functions 
in statlib.pdf, statlib.cdf and statlib.invcdf. Parameters are checked when 
an instance is created and each time they are reset using set_parameters; 
quantities derived from the parameters (the logarithms of the complete 
gamma and beta functions) are cached and recomputed on every reset.

The abstract base classes Distribution, ContinuousDistribution and 
DiscreteDistribution define the common interface. Classes that also inherit 
from LossFunctions provide the first- and second-order loss functions 
E[(X-x)+] and E[(X-x)+ **2]/2 used in inventory models (for the discrete 
distributions the second-order loss is based on the binomial moment, 
cf. Zipkin, "Foundations of Inventory Management", 2000).

rvariate(u) returns the inverse of the cdf for a random number u in (0, 1)
supplied by the caller, making it possible to generate variates from any 
of the distributions using any source of uniform random numbers.

NB  Some methods may return float('inf') or float('-inf') !
"""
# ------------------------------------------------------------------------------

from abc  import ABCMeta, abstractmethod
from math import sqrt, floor

from statlib.pdf       import dnormal, dgamma, dbeta, dstudent, dexpo
from statlib.pdf       import dunifab, dpearson5, dpearson6
from statlib.pdf       import dbinomial, dpoisson, dnegbinomial
from statlib.cdf       import cnormal, ccnormal, cgamma, cbeta, cstudent
from statlib.cdf       import cexpo, cunifab, cpearson5, cpearson6
from statlib.cdf       import cbinomial, cpoisson, cnegbinomial
from statlib.invcdf    import inormal, igamma, ibeta, istudent, iexpo
from statlib.invcdf    import iunifab, ipearson5, ipearson6
from statlib.invcdf    import ibinomial, ipoisson, inegbinomial
from numlib.specfunc   import lngamma, lnbeta
from misclib.numbers   import is_posinteger
from machdep.machnum   import DEFPREC, DEFMAXNITER

# ------------------------------------------------------------------------------

class Distribution(metaclass=ABCMeta):
    """
    Abstract base class for all the distributions of the module.
    """
# ------------------------------------------------------------------------------

    @abstractmethod
    def cdf(self, x):
        pass

    @abstractmethod
    def invcdf(self, prob):
        pass

    @abstractmethod
    def mean(self):
        pass

    @abstractmethod
    def variance(self):
        pass

# ------------------------------------------------------------------------------

    def ccdf(self, x):
        """
        The complementary cdf P(X > x).
        """

        return 1.0 - self.cdf(x)

    # end of ccdf

# ------------------------------------------------------------------------------

    def stdev(self):

        return sqrt(self.variance())

    # end of stdev

# ------------------------------------------------------------------------------

    def rvariate(self, u):
        """
        Returns the random variate corresponding to the random number u, 
        0.0 < u < 1.0, by way of the inverse of the cdf.
        """

        assert 0.0 < u < 1.0, \
                   "random number must be in (0.0, 1.0) in rvariate!"

        return self.invcdf(u)

    # end of rvariate

# ------------------------------------------------------------------------------

# end of Distribution

# ------------------------------------------------------------------------------

class ContinuousDistribution(Distribution):
    """
    Abstract base class for distributions having a pdf.
    """

    @abstractmethod
    def pdf(self, x):
        pass

# end of ContinuousDistribution

# ------------------------------------------------------------------------------

class DiscreteDistribution(Distribution):
    """
    Abstract base class for distributions on the non-negative integers. The
    cdf may be called with a float, it is then evaluated at floor(x).
    """

    @abstractmethod
    def pmf(self, k):
        pass

# end of DiscreteDistribution

# ------------------------------------------------------------------------------

class LossFunctions(metaclass=ABCMeta):
    """
    Abstract class for distributions having first- and second-order loss 
    functions.
    """

    @abstractmethod
    def first_order_loss(self, x):
        pass

    @abstractmethod
    def second_order_loss(self, x):
        pass

# end of LossFunctions

# ------------------------------------------------------------------------------

class Normal(ContinuousDistribution, LossFunctions):
    """
    The normal (Gaussian) distribution with mean mu and standard deviation 
    sigma > 0.
    """
# ------------------------------------------------------------------------------

    def __init__(self, mu=0.0, sigma=1.0):

        self.set_parameters(mu, sigma)

    # end of __init__

# ------------------------------------------------------------------------------

    @classmethod
    def from_moments(cls, mean, variance):

        assert variance > 0.0, "variance must be positive in Normal!"

        return cls(mean, sqrt(variance))

    # end of from_moments

# ------------------------------------------------------------------------------

    def set_parameters(self, mu, sigma):

        assert sigma > 0.0, "sigma must be positive in Normal!"
        self.mu    = mu
        self.sigma = sigma

    # end of set_parameters

# ------------------------------------------------------------------------------

    def get_parameters(self):

        return self.mu, self.sigma

    # end of get_parameters

# ------------------------------------------------------------------------------

    def pdf(self, x):       return dnormal(self.mu, self.sigma, x)
    def cdf(self, x):       return cnormal(self.mu, self.sigma, x)
    def ccdf(self, x):      return ccnormal(self.mu, self.sigma, x)
    def invcdf(self, prob): return inormal(prob, self.mu, self.sigma)
    def mean(self):         return self.mu
    def variance(self):     return self.sigma*self.sigma

# ------------------------------------------------------------------------------

    def first_order_loss(self, x):

        z = (x-self.mu) / self.sigma
        return self.sigma * (dnormal(0.0, 1.0, z) - z*ccnormal(0.0, 1.0, z))

    # end of first_order_loss

# ------------------------------------------------------------------------------

    def second_order_loss(self, x):

        z = (x-self.mu) / self.sigma
        return 0.5 * self.variance() * ((z*z + 1.0)*ccnormal(0.0, 1.0, z) - \
                                               z*dnormal(0.0, 1.0, z))

    # end of second_order_loss

# ------------------------------------------------------------------------------

# end of Normal

# ------------------------------------------------------------------------------

class Gamma(ContinuousDistribution, LossFunctions):
    """
    The gamma distribution with shape > 0 and scale > 0. tolf and maxniter 
    are passed on to the incomplete gamma function and to the chi-square 
    quantile.
    """
# ------------------------------------------------------------------------------

    def __init__(self, shape=1.0, scale=1.0, tolf=DEFPREC, \
                                             maxniter=DEFMAXNITER):

        self.tolf     = tolf
        self.maxniter = maxniter
        self.set_parameters(shape, scale)

    # end of __init__

# ------------------------------------------------------------------------------

    @classmethod
    def from_moments(cls, mean, variance):

        assert mean     > 0.0, "mean must be positive in Gamma!"
        assert variance > 0.0, "variance must be positive in Gamma!"

        return cls(mean*mean/variance, variance/mean)

    # end of from_moments

# ------------------------------------------------------------------------------

    def set_parameters(self, shape, scale):

        assert shape > 0.0, "shape must be positive in Gamma!"
        assert scale > 0.0, "scale must be positive in Gamma!"
        self.shape     = shape
        self.scale     = scale
        self._lngshape = lngamma(shape)

    # end of set_parameters

# ------------------------------------------------------------------------------

    def get_parameters(self):

        return self.shape, self.scale

    # end of get_parameters

# ------------------------------------------------------------------------------

    def pdf(self, x):

        if x < 0.0: return 0.0
        return dgamma(self.shape, self.scale, x, self._lngshape)

    # end of pdf

# ------------------------------------------------------------------------------

    def cdf(self, x):

        if x <= 0.0: return 0.0
        return cgamma(self.shape, self.scale, x, self._lngshape, \
                                  self.tolf, self.maxniter)

    # end of cdf

# ------------------------------------------------------------------------------

    def invcdf(self, prob):

        return igamma(prob, self.shape, self.scale, self._lngshape, \
                                        self.tolf, self.maxniter)

    # end of invcdf

# ------------------------------------------------------------------------------

    def mean(self):     return self.shape*self.scale
    def variance(self): return self.shape*self.scale*self.scale

# ------------------------------------------------------------------------------

    def first_order_loss(self, x):

        if x <= 0.0: return self.mean() - x

        rate = 1.0 / self.scale
        return ((self.shape - rate*x)*self.ccdf(x) + x*self.pdf(x)) / rate

    # end of first_order_loss

# ------------------------------------------------------------------------------

    def second_order_loss(self, x):

        if x <= 0.0:
            m = self.mean()
            return 0.5*(self.variance() + m*m - 2.0*x*m + x*x)

        rate = 1.0 / self.scale
        smx  = self.shape - rate*x
        g2   = (smx*smx + self.shape)*self.ccdf(x) + (smx + 1.0)*x*self.pdf(x)

        return 0.5*g2 / (rate*rate)

    # end of second_order_loss

# ------------------------------------------------------------------------------

# end of Gamma

# ------------------------------------------------------------------------------

class Beta(ContinuousDistribution):
    """
    The beta distribution on [0.0, 1.0] with shape parameters alpha1 > 0 and
    alpha2 > 0. tolf and maxniter are passed on to the continued fraction of 
    the incomplete beta function, both by cdf and by invcdf.
    """
# ------------------------------------------------------------------------------

    def __init__(self, alpha1=1.0, alpha2=1.0, tolf=DEFPREC, \
                                               maxniter=DEFMAXNITER):

        self.tolf     = tolf
        self.maxniter = maxniter
        self.set_parameters(alpha1, alpha2)

    # end of __init__

# ------------------------------------------------------------------------------

    def set_parameters(self, alpha1, alpha2):

        assert alpha1 > 0.0, "both shape parameters must be positive in Beta!"
        assert alpha2 > 0.0, "both shape parameters must be positive in Beta!"
        self.alpha1  = alpha1
        self.alpha2  = alpha2
        self._lnbeta = lnbeta(alpha1, alpha2)

    # end of set_parameters

# ------------------------------------------------------------------------------

    def get_parameters(self):

        return self.alpha1, self.alpha2

    # end of get_parameters

# ------------------------------------------------------------------------------

    def pdf(self, x):

        if x < 0.0 or x > 1.0: return 0.0
        return dbeta(self.alpha1, self.alpha2, x, self._lnbeta)

    # end of pdf

# ------------------------------------------------------------------------------

    def cdf(self, x):

        if x <= 0.0: return 0.0
        if x >= 1.0: return 1.0
        return cbeta(self.alpha1, self.alpha2, x, self._lnbeta, \
                                  self.tolf, self.maxniter)

    # end of cdf

# ------------------------------------------------------------------------------

    def invcdf(self, prob):

        return ibeta(prob, self.alpha1, self.alpha2, self._lnbeta, \
                     cftolf=self.tolf, cfmaxniter=self.maxniter)

    # end of invcdf

# ------------------------------------------------------------------------------

    def mean(self):

        return self.alpha1 / (self.alpha1 + self.alpha2)

    # end of mean

# ------------------------------------------------------------------------------

    def variance(self):

        a1, a2 = self.alpha1, self.alpha2
        summ   = a1 + a2
        return a1*a2 / (summ*summ*(summ + 1.0))

    # end of variance

# ------------------------------------------------------------------------------

# end of Beta

# ------------------------------------------------------------------------------

class StudentT(ContinuousDistribution):
    """
    Student's t distribution with df > 0 degrees of freedom. The mean is 
    undefined (nan) for df <= 1 and the variance is infinite for 1 < df <= 2.
    """
# ------------------------------------------------------------------------------

    def __init__(self, df=1.0):

        self.set_parameters(df)

    # end of __init__

# ------------------------------------------------------------------------------

    def set_parameters(self, df):

        assert df > 0.0, "degrees of freedom must be positive in StudentT!"
        self.df = df

    # end of set_parameters

# ------------------------------------------------------------------------------

    def get_parameters(self):

        return (self.df,)

    # end of get_parameters

# ------------------------------------------------------------------------------

    def pdf(self, x):       return dstudent(self.df, x)
    def cdf(self, x):       return cstudent(self.df, x)
    def invcdf(self, prob): return istudent(prob, self.df)

# ------------------------------------------------------------------------------

    def mean(self):

        if self.df > 1.0: return 0.0
        else:             return float('nan')

    # end of mean

# ------------------------------------------------------------------------------

    def variance(self):

        if   self.df > 2.0: return self.df / (self.df - 2.0)
        elif self.df > 1.0: return float('inf')
        else:               return float('nan')

    # end of variance

# ------------------------------------------------------------------------------

# end of StudentT

# ------------------------------------------------------------------------------

class Exponential(ContinuousDistribution):
    """
    The exponential distribution with mean > 0.
    """
# ------------------------------------------------------------------------------

    def __init__(self, mean=1.0):

        self.set_parameters(mean)

    # end of __init__

# ------------------------------------------------------------------------------

    def set_parameters(self, mean):

        assert mean > 0.0, "mean must be positive in Exponential!"
        self._mean = mean

    # end of set_parameters

# ------------------------------------------------------------------------------

    def get_parameters(self):

        return (self._mean,)

    # end of get_parameters

# ------------------------------------------------------------------------------

    def pdf(self, x):

        if x < 0.0: return 0.0
        return dexpo(self._mean, x)

    # end of pdf

# ------------------------------------------------------------------------------

    def cdf(self, x):

        if x <= 0.0: return 0.0
        return cexpo(self._mean, x)

    # end of cdf

# ------------------------------------------------------------------------------

    def invcdf(self, prob): return iexpo(prob, self._mean)
    def mean(self):         return self._mean
    def variance(self):     return self._mean*self._mean

# ------------------------------------------------------------------------------

# end of Exponential

# ------------------------------------------------------------------------------

class Uniform(ContinuousDistribution):
    """
    The uniform distribution on [left, right], left < right.
    """
# ------------------------------------------------------------------------------

    def __init__(self, left=0.0, right=1.0):

        self.set_parameters(left, right)

    # end of __init__

# ------------------------------------------------------------------------------

    def set_parameters(self, left, right):

        assert right > left, "support range must be positive in Uniform!"
        self.left  = left
        self.right = right

    # end of set_parameters

# ------------------------------------------------------------------------------

    def get_parameters(self):

        return self.left, self.right

    # end of get_parameters

# ------------------------------------------------------------------------------

    def pdf(self, x):

        return dunifab(self.left, self.right, x)

    # end of pdf

# ------------------------------------------------------------------------------

    def cdf(self, x):

        if x <= self.left:  return 0.0
        if x >= self.right: return 1.0
        return cunifab(self.left, self.right, x)

    # end of cdf

# ------------------------------------------------------------------------------

    def invcdf(self, prob):

        return iunifab(prob, self.left, self.right)

    # end of invcdf

# ------------------------------------------------------------------------------

    def mean(self):

        return 0.5*(self.left + self.right)

    # end of mean

# ------------------------------------------------------------------------------

    def variance(self):

        width = self.right - self.left
        return width*width / 12.0

    # end of variance

# ------------------------------------------------------------------------------

# end of Uniform

# ------------------------------------------------------------------------------

class PearsonType5(ContinuousDistribution):
    """
    The Pearson type V (inverted gamma) distribution with shape > 0 and 
    scale > 0: 1/X is gamma distributed with shape 'shape' and scale 1/scale.
    """
# ------------------------------------------------------------------------------

    def __init__(self, shape=1.0, scale=1.0):

        self.set_parameters(shape, scale)

    # end of __init__

# ------------------------------------------------------------------------------

    def set_parameters(self, shape, scale):

        assert shape > 0.0, "shape must be positive in PearsonType5!"
        assert scale > 0.0, "scale must be positive in PearsonType5!"
        self.shape     = shape
        self.scale     = scale
        self._lngshape = lngamma(shape)

    # end of set_parameters

# ------------------------------------------------------------------------------

    def get_parameters(self):

        return self.shape, self.scale

    # end of get_parameters

# ------------------------------------------------------------------------------

    def pdf(self, x):

        if x <= 0.0: return 0.0
        return dpearson5(self.shape, self.scale, x)

    # end of pdf

# ------------------------------------------------------------------------------

    def cdf(self, x):

        if x <= 0.0: return 0.0
        return cpearson5(self.shape, self.scale, x, self._lngshape)

    # end of cdf

# ------------------------------------------------------------------------------

    def invcdf(self, prob):

        return ipearson5(prob, self.shape, self.scale, self._lngshape)

    # end of invcdf

# ------------------------------------------------------------------------------

    def mean(self):

        if self.shape > 1.0: return self.scale / (self.shape - 1.0)
        else:                return float('inf')

    # end of mean

# ------------------------------------------------------------------------------

    def variance(self):

        if self.shape > 2.0:
            sm1 = self.shape - 1.0
            return self.scale*self.scale / (sm1*sm1*(self.shape - 2.0))
        else:
            return float('inf')

    # end of variance

# ------------------------------------------------------------------------------

# end of PearsonType5

# ------------------------------------------------------------------------------

class PearsonType6(ContinuousDistribution):
    """
    The Pearson type VI (beta prime) distribution with shape parameters 
    alpha1 > 0, alpha2 > 0 and scale > 0: X/(X+scale) is beta distributed 
    with shape parameters alpha1 and alpha2.
    """
# ------------------------------------------------------------------------------

    def __init__(self, alpha1=1.0, alpha2=1.0, scale=1.0):

        self.set_parameters(alpha1, alpha2, scale)

    # end of __init__

# ------------------------------------------------------------------------------

    def set_parameters(self, alpha1, alpha2, scale):

        assert alpha1 > 0.0, \
                      "both shape parameters must be positive in PearsonType6!"
        assert alpha2 > 0.0, \
                      "both shape parameters must be positive in PearsonType6!"
        assert scale  > 0.0, "scale must be positive in PearsonType6!"
        self.alpha1  = alpha1
        self.alpha2  = alpha2
        self.scale   = scale
        self._lnbeta = lnbeta(alpha1, alpha2)

    # end of set_parameters

# ------------------------------------------------------------------------------

    def get_parameters(self):

        return self.alpha1, self.alpha2, self.scale

    # end of get_parameters

# ------------------------------------------------------------------------------

    def pdf(self, x):

        if x < 0.0: return 0.0
        return dpearson6(self.alpha1, self.alpha2, self.scale, x)

    # end of pdf

# ------------------------------------------------------------------------------

    def cdf(self, x):

        if x <= 0.0: return 0.0
        return cpearson6(self.alpha1, self.alpha2, self.scale, x, self._lnbeta)

    # end of cdf

# ------------------------------------------------------------------------------

    def invcdf(self, prob):

        return ipearson6(prob, self.alpha1, self.alpha2, self.scale, \
                                                         self._lnbeta)

    # end of invcdf

# ------------------------------------------------------------------------------

    def mean(self):

        if self.alpha2 > 1.0:
            return self.scale*self.alpha1 / (self.alpha2 - 1.0)
        else:
            return float('inf')

    # end of mean

# ------------------------------------------------------------------------------

    def variance(self):

        a1, a2 = self.alpha1, self.alpha2
        if a2 > 2.0:
            return self.scale*self.scale * a1*(a1 + a2 - 1.0) / \
                                    ((a2 - 1.0)*(a2 - 1.0)*(a2 - 2.0))
        else:
            return float('inf')

    # end of variance

# ------------------------------------------------------------------------------

# end of PearsonType6

# ------------------------------------------------------------------------------

class _DiscreteLoss(DiscreteDistribution, LossFunctions):
    """
    The parts of the loss functions that are common to the discrete 
    distributions: the values at x <= 0 are obtained from the mean and the 
    second binomial moment, E[X*(X-1)]/2. The argument must be an integer.
    """
# ------------------------------------------------------------------------------

    def _binmoment2(self):

        m = self.mean()
        return 0.5*(self.variance() + m*m - m)

    # end of _binmoment2

# ------------------------------------------------------------------------------

    def _first_loss_nonpos(self, x):

        return abs(x) + self.mean()

    # end of _first_loss_nonpos

# ------------------------------------------------------------------------------

    def _second_loss_nonpos(self, x):

        summ = 0.0
        for y in range(0, x, -1):
            summ += self.first_order_loss(y)

        return summ + self._binmoment2()

    # end of _second_loss_nonpos

# ------------------------------------------------------------------------------

# end of _DiscreteLoss

# ------------------------------------------------------------------------------

class Binomial(_DiscreteLoss):
    """
    The binomial distribution for the number of successes in n >= 1 trials 
    with success frequency 0 < phi < 1. recursive=True (the default) means 
    that the pmf and the cdf are computed using the log-space recursion, 
    recursive=False that they are computed directly from the binomial 
    coefficient and the incomplete beta function.
    """
# ------------------------------------------------------------------------------

    def __init__(self, n=1, phi=0.5, recursive=True):

        self.recursive = recursive
        self.set_parameters(n, phi)

    # end of __init__

# ------------------------------------------------------------------------------

    @classmethod
    def from_moments(cls, mean, variance):
        """
        n and phi are matched to the mean and the variance (n is rounded to 
        the nearest integer), which requires 0 < variance < mean.
        """

        assert mean > 0.0, "mean must be positive in Binomial!"
        assert 0.0 < variance < mean, \
              "variance must be positive and less than the mean in Binomial!"

        n = int(mean*mean/(mean - variance) + 0.5)
        n = max(n, 1)

        return cls(n, min(mean/n, 1.0 - DEFPREC))

    # end of from_moments

# ------------------------------------------------------------------------------

    def set_parameters(self, n, phi):

        assert is_posinteger(n), "n must be a positive integer in Binomial!"
        assert 0.0 < phi < 1.0, \
                     "success frequency must be in (0.0, 1.0) in Binomial!"
        self.n   = n
        self.phi = phi

    # end of set_parameters

# ------------------------------------------------------------------------------

    def get_parameters(self):

        return self.n, self.phi

    # end of get_parameters

# ------------------------------------------------------------------------------

    def pmf(self, k):

        return dbinomial(self.n, self.phi, k, self.recursive)

    # end of pmf

# ------------------------------------------------------------------------------

    def cdf(self, x):

        return cbinomial(self.n, self.phi, int(floor(x)), self.recursive)

    # end of cdf

# ------------------------------------------------------------------------------

    def invcdf(self, prob):

        return ibinomial(prob, self.n, self.phi, self.recursive)

    # end of invcdf

# ------------------------------------------------------------------------------

    def mean(self):     return self.n*self.phi
    def variance(self): return self.n*self.phi*(1.0-self.phi)

# ------------------------------------------------------------------------------

    def first_order_loss(self, x):
        """
        E[(X-x)+] = mean - sum of P(X > i) for i = 0,...., x-1
        """

        assert isinstance(x, int), "argument must be an integer in Binomial!"

        if x <= 0: return self._first_loss_nonpos(x)

        summ = 0.0
        for i in range(0, min(x, self.n)):
            summ += self.ccdf(i)

        return self.mean() - summ

    # end of first_order_loss

# ------------------------------------------------------------------------------

    def second_order_loss(self, x):

        assert isinstance(x, int), "argument must be an integer in Binomial!"

        if x <= 0: return self._second_loss_nonpos(x)

        summ = 0.0
        for i in range(1, x+1):
            summ += self.first_order_loss(i)

        return self._binmoment2() - summ

    # end of second_order_loss

# ------------------------------------------------------------------------------

# end of Binomial

# ------------------------------------------------------------------------------

class Poisson(_DiscreteLoss):
    """
    The Poisson distribution with mean > 0. recursive=True (the default) 
    means that the pmf and the cdf are computed using the log-space 
    recursion, recursive=False that they are computed from the factorial 
    and the incomplete gamma function.
    """
# ------------------------------------------------------------------------------

    def __init__(self, mean=1.0, recursive=True):

        self.recursive = recursive
        self.set_parameters(mean)

    # end of __init__

# ------------------------------------------------------------------------------

    def set_parameters(self, mean):

        assert mean > 0.0, "mean must be positive in Poisson!"
        self._mean = mean

    # end of set_parameters

# ------------------------------------------------------------------------------

    def get_parameters(self):

        return (self._mean,)

    # end of get_parameters

# ------------------------------------------------------------------------------

    def pmf(self, k):

        return dpoisson(self._mean, k, self.recursive)

    # end of pmf

# ------------------------------------------------------------------------------

    def cdf(self, x):

        return cpoisson(self._mean, int(floor(x)), self.recursive)

    # end of cdf

# ------------------------------------------------------------------------------

    def invcdf(self, prob):

        return ipoisson(prob, self._mean, self.recursive)

    # end of invcdf

# ------------------------------------------------------------------------------

    def mean(self):     return self._mean
    def variance(self): return self._mean

# ------------------------------------------------------------------------------

    def first_order_loss(self, x):

        assert isinstance(x, int), "argument must be an integer in Poisson!"

        if x <= 0: return self._first_loss_nonpos(x)

        mu = self._mean
        return -(x - mu)*self.ccdf(x) + mu*self.pmf(x)

    # end of first_order_loss

# ------------------------------------------------------------------------------

    def second_order_loss(self, x):

        assert isinstance(x, int), "argument must be an integer in Poisson!"

        if x <= 0: return self._second_loss_nonpos(x)

        mu  = self._mean
        xmu = x - mu
        return 0.5*((xmu*xmu + x)*self.ccdf(x) - mu*xmu*self.pmf(x))

    # end of second_order_loss

# ------------------------------------------------------------------------------

# end of Poisson

# ------------------------------------------------------------------------------

class NegativeBinomial(_DiscreteLoss):
    """
    The negative binomial distribution for the number of failures before 
    the r:th success (r > 0, need not be an integer) in a series of trials 
    with success frequency 0 < phi < 1. recursive=True (the default) means 
    that the pmf and the cdf are computed using the log-space recursion, 
    recursive=False that they are computed from the gamma and the 
    incomplete beta functions.
    """
# ------------------------------------------------------------------------------

    def __init__(self, r=1.0, phi=0.5, recursive=True):

        self.recursive = recursive
        self.set_parameters(r, phi)

    # end of __init__

# ------------------------------------------------------------------------------

    @classmethod
    def from_moments(cls, mean, variance):
        """
        r and phi are matched to the mean and the variance, which requires 
        0 < mean < variance.
        """

        assert mean > 0.0, "mean must be positive in NegativeBinomial!"
        assert variance > mean, \
                 "variance must be greater than the mean in NegativeBinomial!"

        phi = mean / variance

        return cls(mean*phi/(1.0 - phi), phi)

    # end of from_moments

# ------------------------------------------------------------------------------

    def set_parameters(self, r, phi):

        assert r > 0.0, \
               "number of successes must be positive in NegativeBinomial!"
        assert 0.0 < phi < 1.0, \
             "success frequency must be in (0.0, 1.0) in NegativeBinomial!"
        self.r   = r
        self.phi = phi

    # end of set_parameters

# ------------------------------------------------------------------------------

    def get_parameters(self):

        return self.r, self.phi

    # end of get_parameters

# ------------------------------------------------------------------------------

    def pmf(self, k):

        return dnegbinomial(self.r, self.phi, k, self.recursive)

    # end of pmf

# ------------------------------------------------------------------------------

    def cdf(self, x):

        return cnegbinomial(self.r, self.phi, int(floor(x)), self.recursive)

    # end of cdf

# ------------------------------------------------------------------------------

    def invcdf(self, prob):

        return inegbinomial(prob, self.r, self.phi, self.recursive)

    # end of invcdf

# ------------------------------------------------------------------------------

    def mean(self):     return self.r*(1.0-self.phi) / self.phi
    def variance(self): return self.r*(1.0-self.phi) / (self.phi*self.phi)

# ------------------------------------------------------------------------------

    def first_order_loss(self, x):

        assert isinstance(x, int), \
                          "argument must be an integer in NegativeBinomial!"

        if x <= 0: return self._first_loss_nonpos(x)

        r = self.r
        b = (1.0-self.phi) / self.phi
        return -(x - r*b)*self.ccdf(x) + (x + r)*b*self.pmf(x)

    # end of first_order_loss

# ------------------------------------------------------------------------------

    def second_order_loss(self, x):

        assert isinstance(x, int), \
                          "argument must be an integer in NegativeBinomial!"

        if x <= 0: return self._second_loss_nonpos(x)

        r  = self.r
        b  = (1.0-self.phi) / self.phi
        g2 = (r*(r+1.0)*b*b - 2.0*r*b*x + x*(x+1.0))*self.ccdf(x) + \
                                  ((r+1.0)*b - x)*(x + r)*b*self.pmf(x)

        return 0.5*g2

    # end of second_order_loss

# ------------------------------------------------------------------------------

# end of NegativeBinomial

# ------------------------------------------------------------------------------
