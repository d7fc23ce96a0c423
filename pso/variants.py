"""PSO sub module providing concrete Solution variants driven by a
black-box objective function.
    ObjectiveSolution   -- continuous parameters
    DiscreteSolution    -- parameters rounded to integers before evaluation
    ConstrainedSolution -- constraint violations penalize the fitness
"""

import copy

import numpy as np

from .solution import Solution
from .solution import SolutionParameters


class ObjectiveSolution(Solution):
    """Solution evaluated by an objective function f(x).
    Fitness is f(x) when maximizing and -f(x) when minimizing, so that
    better_than always prefers the higher fitness.

    Example:
        def sphere(x):
            return sum(xi*xi for xi in x)
        s = ObjectiveSolution([1.0, -2.0], -10.0, 10.0, sphere)
        s.fitness            # -5.0
        s.objective_value    # 5.0
    """

    variant = "continuous"

    def __init__(self, parameters, minimum_threshold, maximum_threshold,
                 objective, maximize=False):
        """ObjectiveSolution constructor
        Arguments:
            parameters {list or numpy array} -- Initial parameters
            minimum_threshold {float} -- Lowest value a parameter can assume
            maximum_threshold {float} -- Highest value a parameter can assume
            objective {callable} -- Function mapping a numpy array to a float
        Keyword Arguments:
            maximize {bool} -- Maximize the objective instead of minimizing (default: {False})
        """
        self.objective = objective
        self.maximize = maximize
        super().__init__(parameters, minimum_threshold, maximum_threshold)

    @property
    def objective_value(self):
        """float -- Objective value matching the current fitness"""
        return self.fitness if self.maximize else -self.fitness

    def copy(self):
        clone = copy.copy(self)
        clone._x = self._x.copy()
        return clone

    def convert_parameters(self, parameters):
        return SolutionParameters(self.variant, np.array(parameters, dtype=float))

    def test_solution(self, solution_parameters):
        value = float(self.objective(solution_parameters.values))
        return value if self.maximize else -value


class DiscreteSolution(ObjectiveSolution):
    """Solution over integer parameters.
    The swarm moves through continuous space; each value is rounded to the
    nearest integer only when converted for evaluation.
    """

    variant = "discrete"

    def convert_parameters(self, parameters):
        return SolutionParameters(self.variant, np.rint(parameters).astype(int))


class ConstrainedSolution(ObjectiveSolution):
    """Solution with inequality constraints g(x) <= 0.
    Each violated constraint lowers the fitness by penalty * g(x).
    """

    variant = "constrained"

    def __init__(self, parameters, minimum_threshold, maximum_threshold,
                 objective, constraints=(), penalty=1e3, maximize=False):
        """ConstrainedSolution constructor
        Arguments:
            parameters {list or numpy array} -- Initial parameters
            minimum_threshold {float} -- Lowest value a parameter can assume
            maximum_threshold {float} -- Highest value a parameter can assume
            objective {callable} -- Function mapping a numpy array to a float
        Keyword Arguments:
            constraints {list of callable} -- Functions g with g(x) <= 0 when satisfied (default: {()})
            penalty {float} -- Fitness lost per unit of violation (default: {1e3})
            maximize {bool} -- Maximize the objective instead of minimizing (default: {False})
        """
        self.constraints = tuple(constraints)
        self.penalty = penalty
        super().__init__(parameters, minimum_threshold, maximum_threshold,
                         objective, maximize=maximize)

    @property
    def violation(self):
        """float -- Summed violation of the current parameters"""
        return self._violation(self._x)

    @property
    def is_feasible(self):
        return self.violation == 0.0

    @property
    def objective_value(self):
        """float -- Unpenalized objective value matching the current fitness"""
        value = self.fitness + self.penalty * self._evaluated_violation
        return value if self.maximize else -value

    def update_fitness(self):
        super().update_fitness()
        self._evaluated_violation = self._violation(self._x)

    def _violation(self, values):
        return float(sum(max(0.0, float(g(values))) for g in self.constraints))

    def convert_parameters(self, parameters):
        values = np.array(parameters, dtype=float)
        return SolutionParameters(self.variant, values,
                                  extras={"violation": self._violation(values)})

    def test_solution(self, solution_parameters):
        penalty = self.penalty * solution_parameters.extras["violation"]
        return super().test_solution(solution_parameters) - penalty
