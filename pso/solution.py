"""PSO sub module providing the abstract Solution class and the
SolutionParameters it is evaluated with.
"""

import abc
import logging

import numpy as np

from .exceptions import ArityMismatchError
from .exceptions import TypeMismatchError
from .helper import clamp

_logger = logging.getLogger(__name__)


class SolutionParameters:
    """Parameters converted for evaluation by one Solution variant
    """

    def __init__(self, variant, values, extras=None):
        """SolutionParameters constructor
        Arguments:
            variant {str} -- Tag of the Solution variant these were built for
            values {numpy array} -- Converted parameter values
        Keyword Arguments:
            extras {dictionary} -- Variant specific data (default: {None})
        """
        self.variant = variant
        self.values = values
        self.extras = extras or {}

    def __repr__(self):
        return "SolutionParameters(variant={!r}, values={!r})".format(
            self.variant, self.values)


class Solution(abc.ABC):
    """A candidate solution of a particle swarm: a point in a bounded
    parameter space and its fitness.

    Concrete variants implement copy, test_solution and convert_parameters
    and declare a unique 'variant' tag. The base class keeps every parameter
    inside [minimum_parameter_threshold, maximum_parameter_threshold] and
    keeps fitness in step with the parameters.

    Moving and evaluating are separate steps: update_parameters does not
    refresh fitness, so a driver can move the whole swarm before paying for
    evaluation. Call update_fitness before comparing moved solutions.

    Higher fitness is better. Variants that minimize negate their objective
    in test_solution.
    """

    variant = None

    def __init__(self, parameters, minimum_threshold, maximum_threshold):
        """Solution constructor
        The initial parameters are trusted to be within the thresholds.
        Arguments:
            parameters {list or numpy array} -- Initial parameters
            minimum_threshold {float} -- Lowest value a parameter can assume
            maximum_threshold {float} -- Highest value a parameter can assume
        """
        self._x = np.array(parameters, dtype=float)
        self._minimum = minimum_threshold
        self._maximum = maximum_threshold
        self._fitness = None
        self.update_fitness()

    @property
    def parameters(self):
        """numpy array -- Read-only view of the current parameters"""
        view = self._x.view()
        view.flags.writeable = False
        return view

    @property
    def fitness(self):
        """float -- Fitness of the parameters at the last update_fitness call"""
        return self._fitness

    @property
    def minimum_parameter_threshold(self):
        return self._minimum

    @property
    def maximum_parameter_threshold(self):
        return self._maximum

    @property
    def dimension(self):
        return self._x.size

    def better_than(self, other):
        """Compare fitness with another solution
        Arguments:
            other {Solution} -- Solution to compare with
        Returns:
            bool -- True if this solution's fitness is strictly greater
        """
        return self._fitness > other._fitness

    def update_parameters(self, speeds):
        """Move the parameters by speeds, clamped into the thresholds.
        Fitness is not refreshed.
        Arguments:
            speeds {list or numpy array} -- Delta for each parameter
        """
        speeds = np.asarray(speeds, dtype=float)
        if speeds.ndim != 1 or len(speeds) != len(self._x):
            raise ArityMismatchError(len(self._x), len(speeds) if speeds.ndim else 1)
        moved = self._x + speeds
        self._x[...] = clamp(moved, self._minimum, self._maximum)
        if _logger.isEnabledFor(logging.DEBUG):
            n_clamped = int(np.count_nonzero((moved != self._x) & ~np.isnan(moved)))
            if n_clamped:
                _logger.debug("%s: clamped %d of %d parameters",
                              type(self).__name__, n_clamped, self._x.size)

    def update_fitness(self):
        """Evaluate the current parameters and store the result as fitness
        """
        solution_parameters = self.convert_parameters(self.parameters)
        if solution_parameters.variant != self.variant:
            raise TypeMismatchError(self.variant, solution_parameters.variant)
        self._fitness = float(self.test_solution(solution_parameters))
        _logger.debug("%s: fitness %g", type(self).__name__, self._fitness)

    @abc.abstractmethod
    def copy(self):
        """Get an independent deep copy of this solution
        Returns:
            Solution -- Copy with the same parameters, thresholds and fitness
        """

    @abc.abstractmethod
    def test_solution(self, solution_parameters):
        """Evaluate converted parameters
        Must depend on solution_parameters only.
        Arguments:
            solution_parameters {SolutionParameters} -- Converted parameters
        Returns:
            float -- Fitness of the parameters
        """

    @abc.abstractmethod
    def convert_parameters(self, parameters):
        """Convert raw parameters into the SolutionParameters test_solution expects
        Arguments:
            parameters {numpy array} -- Raw parameters (read-only)
        Returns:
            SolutionParameters -- Converted parameters tagged with self.variant
        """

    def __repr__(self):
        return "{}(x={}, f={})".format(type(self).__name__, self._x.tolist(), self._fitness)
