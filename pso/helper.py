"""PSO helper functions
"""

import numpy as np


def clamp(values, minimum, maximum):
    """Clamp every element of values into [minimum, maximum]
    Values above maximum become maximum, otherwise values below minimum
    become minimum. Each dimension is clamped independently.
    Arguments:
        values {numpy array} -- Target values
        minimum {float} -- Floor shared by every dimension
        maximum {float} -- Ceiling shared by every dimension
    Returns:
        numpy array -- Clamped copy of values
    """
    values = np.asarray(values, dtype=float)
    return np.where(values > maximum, float(maximum),
                    np.where(values < minimum, float(minimum), values))


def best_of(solutions):
    """Get the best solution under the better_than ordering
    Ties keep the earliest solution.
    Arguments:
        solutions {iterable of Solution} -- Candidates
    Returns:
        Solution -- The first solution no other candidate is better than
    """
    best = None
    for s in solutions:
        if best is None or s.better_than(best):
            best = s
    if best is None:
        raise ValueError("best_of() requires at least one solution")
    return best
