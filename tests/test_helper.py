"""Tests for the helper functions."""

import numpy as np
import pytest

from pso import ObjectiveSolution
from pso import best_of
from pso import clamp


class TestClamp:

    def test_clamps_each_dimension(self):
        np.testing.assert_array_equal(
            clamp([-1.0, 0.5, 2.0], 0.0, 1.0), [0.0, 0.5, 1.0])

    def test_bounds_are_inclusive(self):
        np.testing.assert_array_equal(clamp([0.0, 1.0], 0.0, 1.0), [0.0, 1.0])

    def test_does_not_modify_input(self):
        values = np.array([5.0])
        clamp(values, 0.0, 1.0)
        assert values[0] == 5.0

    def test_nan_is_kept(self):
        assert np.isnan(clamp([np.nan], 0.0, 1.0)[0])


class TestBestOf:

    def test_picks_highest_fitness(self):
        swarm = [ObjectiveSolution([v], 0.0, 10.0, np.sum, maximize=True)
                 for v in (2.0, 7.0, 4.0)]
        assert best_of(swarm) is swarm[1]

    def test_ties_keep_first(self):
        swarm = [ObjectiveSolution([v], 0.0, 10.0, np.sum, maximize=True)
                 for v in (3.0, 3.0)]
        assert best_of(swarm) is swarm[0]

    def test_empty(self):
        with pytest.raises(ValueError):
            best_of([])
