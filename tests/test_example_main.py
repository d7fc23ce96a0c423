"""Tests for the example driver."""

import numpy as np

from pso import DiscreteSolution
from pso import ObjectiveSolution
from pso.example_main import objective_func
from pso.example_main import run


def test_run_returns_consistent_best():
    best = run(objective_func, 2, -10.0, 10.0, 30, options={'seed': 1, 'population': 5})
    assert isinstance(best, ObjectiveSolution)
    assert np.all(best.parameters >= -10.0)
    assert np.all(best.parameters <= 10.0)
    assert best.objective_value == objective_func(best.parameters)


def test_run_is_reproducible_with_seed():
    a = run(objective_func, 3, -5.0, 5.0, 10, options={'seed': 7})
    b = run(objective_func, 3, -5.0, 5.0, 10, options={'seed': 7})
    np.testing.assert_array_equal(a.parameters, b.parameters)


def test_run_with_other_variant():
    best = run(objective_func, 2, -10.0, 10.0, 10,
               options={'seed': 3, 'solution_class': DiscreteSolution})
    assert isinstance(best, DiscreteSolution)
