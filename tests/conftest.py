import numpy as np
import pytest

from pso import Solution
from pso import SolutionParameters


class LinearSolution(Solution):
    """Fitness is the plain sum of the parameters."""

    variant = "linear"

    def __init__(self, parameters, minimum_threshold, maximum_threshold):
        self.evaluations = 0
        self.wrong_tag = None
        super().__init__(parameters, minimum_threshold, maximum_threshold)

    def copy(self):
        clone = LinearSolution(self.parameters, self.minimum_parameter_threshold,
                               self.maximum_parameter_threshold)
        clone.evaluations = self.evaluations
        return clone

    def convert_parameters(self, parameters):
        return SolutionParameters(self.wrong_tag or self.variant, np.array(parameters))

    def test_solution(self, solution_parameters):
        self.evaluations += 1
        return float(np.sum(solution_parameters.values))


class MislabelledSolution(LinearSolution):
    """Converts parameters for the linear variant while declaring its own tag."""

    variant = "mislabelled"

    def convert_parameters(self, parameters):
        return SolutionParameters(LinearSolution.variant, np.array(parameters))


@pytest.fixture
def linear_cls():
    return LinearSolution


@pytest.fixture
def mislabelled_cls():
    return MislabelledSolution


def sphere(x):
    return sum(xi*xi for xi in x)


@pytest.fixture
def objective():
    return sphere
