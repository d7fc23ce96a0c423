"""Candidate solutions for Particle Swarm Optimization.

A Solution is a point in a bounded parameter space plus its fitness.
Concrete variants implement copy, test_solution and convert_parameters.
"""

from .exceptions import ArityMismatchError
from .exceptions import SolutionError
from .exceptions import TypeMismatchError
from .helper import best_of
from .helper import clamp
from .solution import Solution
from .solution import SolutionParameters
from .variants import ConstrainedSolution
from .variants import DiscreteSolution
from .variants import ObjectiveSolution

__version__ = "1.0.0"
