"""
1D Symbolic Regression Implementation for CGP

This module implements symbolic regression of a one-dimensional function:
evolve an expression over the symbolic regression function set that
matches a target function at a number of sample points.

Fitness Function:
    Fitness = Σ |output(x) - f(x)| over the sample points

    Lower is better; a run succeeds once the total error falls below a
    small tolerance.

Classes:
    Problem_Regression1D: Symbolic regression of a 1D function

Usage:
    config  = Config("configs/config_regression.ini")
    problem = Problem_Regression1D(config, lambda x: x**4 + x**3 + x**2 + x, -1.0, 1.0)
    trial   = Trial(config, problem, MuPlusLambda(config), FixedPointMutator(config))
    results = trial.run()
"""

import numpy as np
from loguru  import logger
from typing  import Callable

from evocgp.functions   import SymbolicRegressionFunctions
from evocgp.pool        import Population
from evocgp.run.config  import Config, FitnessOrientation
from evocgp.run.problem import Problem

logger.enable("evocgp")

class Problem_Regression1D(Problem):
    """
    Approximate 'function' on [x_min, x_max] from evenly spaced samples.
    """

    name = "1D regression"

    NUM_POINTS = 20
    TOLERANCE  = 0.01

    def __init__(self,
                 config  : Config,
                 function: Callable[[float], float],
                 x_min   : float,
                 x_max   : float):
        """
        Parameters:
            config:   Configuration parameters
            function: The 1D function being approximated
            x_min:    The beginning of the range on which the function is approximated
            x_max:    The end of the range on which the function is approximated
        """
        super().__init__(config, SymbolicRegressionFunctions(), FitnessOrientation.LOW)

        self._Xs = np.linspace(x_min, x_max, self.NUM_POINTS)
        self._Ys = np.array([function(x) for x in self._Xs])

    def evaluate(self, population: Population):
        for chromosome in population:
            outputs = np.array([chromosome.evaluate(x)[0] for x in self._Xs], dtype=float)
            error   = float(np.sum(np.abs(outputs - self._Ys)))
            chromosome.fitness = error if np.isfinite(error) else np.inf

    def has_perfect_solution(self, population: Population) -> int | None:
        for i, chromosome in enumerate(population):
            if chromosome.fitness < self.TOLERANCE:
                return i
        return None
