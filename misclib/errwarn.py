# misclib/errwarn.py
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
Module with the warning function and the error classes of the package.

Invalid input is rejected with assertions at the top of each function. Hard
failures are raised as Error. An iterative procedure that has used up its
maximum number of iterations without reaching the desired precision ALWAYS
raises a ConvergenceError - no function in the package returns a value that
has not converged as if it were the answer.
"""
# ------------------------------------------------------------------------------

def warn(string):     # Does not belong to the Error class!
    """
    Prints out a warning to stdout consisting of the user-provided input
    string preceded by the text "UserWarning: " and closed with a "!".
    DOES NOT FORMALLY BELONG TO THE Error CLASS!

    'warn' is used when a numerical control parameter has been replaced by
    a more sensible value, i. e. when the computation goes on regardless.
    """

    warning  =  "\nUserWarning: " + string + "!"
    print(warning)

# end of warn

# ------------------------------------------------------------------------------

class Error(Exception):
    """
    The class inherits from the built-in Exception class and makes it possible
    to raise an Error without alluding to a built-in exception type by:
    raise Error(string)
    """
# ------------------------------------------------------------------------------

    def __init__(self, string):
        """
        'string' is some user-provided description of the possible error.
        """

        Exception.__init__(self, string)
        self.string = string

    # end of __init__

# ------------------------------------------------------------------------------

    def __str__(self):
        """
        Returns the user-provided input text string in its repr form.
        """

        string = self.string
        return repr(string)

    # end of __str__

# ------------------------------------------------------------------------------

# end of Error

# ------------------------------------------------------------------------------

class ConvergenceError(Error):
    """
    Raised by series expansions, continued fractions, root finders and other
    iterative procedures when the maximum number of iterations has been
    exhausted without the desired precision having been reached. Besides the
    text string the following attributes are available from the instance:
      instance.caller   # Name of the function that gave up
      instance.niter    # Number of iterations carried out
      instance.value    # The last (unconverged!) estimate - for inspection
    """
# ------------------------------------------------------------------------------

    def __init__(self, string, caller='caller', niter=0, value=None):

        Error.__init__(self, string)
        self.caller = caller
        self.niter  = niter
        self.value  = value

    # end of __init__

# ------------------------------------------------------------------------------

# end of ConvergenceError

# ------------------------------------------------------------------------------
