"""
CGP Problem Module

This module defines the abstract base class for the problems CGP solves.
A problem supplies the function set, decides whether high or low fitness is
better, and assigns a fitness to every chromosome of a population.

Classes:
    Problem: Abstract base class for fitness evaluation
"""

import math
from abc    import ABC, abstractmethod
from typing import TYPE_CHECKING

from evocgp.run.config import Config, FitnessOrientation

if TYPE_CHECKING:
    from evocgp.functions import FunctionSet
    from evocgp.pool      import Population

class Problem(ABC):
    """
    Abstract base class for implementing a CGP problem.

    Subclasses must implement:
    - evaluate(population):             Set the fitness of every chromosome
    - has_perfect_solution(population): Return the index of a perfect chromosome, or None

    Evaluation should present each test case with chromosome.set_inputs(),
    read each output with output.calculate(), and finally assign
    chromosome.fitness. has_perfect_solution() and has_improvement() read
    fitness only; they never change genes.

    Public Attributes:
        function_set:        Functions available to the nodes
        fitness_orientation: Whether higher or lower fitness is better
        best_fitness:        Best fitness reported by has_improvement() since the last reset

    Public Methods:
        reset():                       Forget the best fitness seen
        has_improvement(population):   Look for a chromosome better than the best seen so far
    """

    name = "Problem"

    def __init__(self,
                 config             : Config,
                 function_set       : 'FunctionSet',
                 fitness_orientation: FitnessOrientation | None = None):
        """
        Parameters:
            config:              Stores configuration parameters
            function_set:        Functions available to the nodes
            fitness_orientation: If None, the orientation of the configuration is used
        """
        self._config             : Config             = config
        self.function_set        : 'FunctionSet'      = function_set
        self.fitness_orientation : FitnessOrientation = (config.fitness_orientation if fitness_orientation is None
                                                         else fitness_orientation)
        self.best_fitness        : float              = self._worst_fitness()

    def _worst_fitness(self) -> float:
        return -math.inf if self.fitness_orientation == FitnessOrientation.HIGH else math.inf

    def reset(self):
        self.best_fitness = self._worst_fitness()

    @abstractmethod
    def evaluate(self, population: 'Population'):
        pass

    @abstractmethod
    def has_perfect_solution(self, population: 'Population') -> int | None:
        pass

    def has_improvement(self, population: 'Population') -> int | None:
        """
        Return the index of the first chromosome whose fitness beats the best
        fitness seen so far, after recording its fitness as the new best.
        Return None if no chromosome improves on it.
        """
        for i, chromosome in enumerate(population):
            if self.fitness_orientation == FitnessOrientation.HIGH:
                improved = chromosome.fitness > self.best_fitness
            else:
                improved = chromosome.fitness < self.best_fitness
            if improved:
                self.best_fitness = chromosome.fitness
                return i
        return None

    def __str__(self):
        return self.name
