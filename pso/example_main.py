"""Example driver moving a population of solutions by a random walk.

Run as a script:
    python -m pso.example_main
"""

import logging

import numpy as np

from pso import ObjectiveSolution
from pso import best_of

_logger = logging.getLogger(__name__)


def sphere(x):
    return sum(xi*xi for xi in x)

def objective_func(x):
    return min(sphere(x-2)+0.1, 10*sphere(x+2))


def run(objective, dimension, bounds_min, bounds_max, iterations, options=None):
    """Search the objective with a population moved by uniform random speeds
    Arguments:
        objective {callable} -- Function mapping a numpy array to a float
        dimension {int} -- Number of parameters
        bounds_min {float} -- Lowest value a parameter can assume
        bounds_max {float} -- Highest value a parameter can assume
        iterations {int} -- Number of move/evaluate steps
    Keyword Arguments:
        options {dictionary} -- "population", "step", "seed", "solution_class" (default: {None})
    Returns:
        Solution -- Copy of the best solution found
    """
    settings = {
        'population': 10,
        'step': 0.5,
        'seed': None,
        'solution_class': ObjectiveSolution,
    }
    if options:
        for key, value in options.items():
            settings[key] = value

    rng = np.random.default_rng(settings['seed'])
    bounds_range = bounds_max - bounds_min
    swarm = [settings['solution_class'](
                 rng.random(dimension) * bounds_range + bounds_min,
                 bounds_min, bounds_max, objective)
             for _ in range(settings['population'])]
    best = best_of(swarm).copy()
    step = settings['step'] * bounds_range
    for i in range(iterations):
        # move every solution first, then evaluate
        for s in swarm:
            s.update_parameters(rng.uniform(-step, step, s.dimension))
        for s in swarm:
            s.update_fitness()
        candidate = best_of(swarm)
        if candidate.better_than(best):
            best = candidate.copy()
            _logger.info("iter: %d f_best: %g", i + 1, best.fitness)
    return best


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    best = run(objective_func, 2, -10.0, 10.0, 200, options={'step': 0.05})
    print("best x", best.parameters)
    print("best f", best.objective_value)
