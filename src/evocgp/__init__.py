"""
evocgp - Cartesian Genetic Programming in Python.

This package evolves programs represented as directed acyclic graphs of
function nodes laid out on a fixed grid. Populations are improved by
mutation and selection against a user-supplied fitness function.

Main components:
- functions:  Function sets nodes compute against (symbolic regression, digital circuits, polynomials)
- genotype:   Chromosomes (inputs, node grid, outputs) and their text encoding
- pool:       Population management
- mutation:   Point and probabilistic mutators
- strategies: (mu + lambda) and tournament selection
- run:        Configuration, problem interface and experiment driver

Example:
    >>> from loguru import logger
    >>> logger.enable("evocgp")
    >>> from evocgp import Config, Problem, Trial, MuPlusLambda, FixedPointMutator
    >>> from evocgp import SymbolicRegressionFunctions
    >>> config = Config("config.ini")
    >>> class MyProblem(Problem):
    ...     def evaluate(self, population):
    ...         # Assign chromosome.fitness for every chromosome
    ...         pass
    ...     def has_perfect_solution(self, population):
    ...         return None
    >>> problem = MyProblem(config, SymbolicRegressionFunctions())
    >>> trial = Trial(config, problem, MuPlusLambda(config), FixedPointMutator(config))
    >>> trial.run()
"""

__version__ = "0.1.0"

from loguru import logger

# Silent unless the application asks for it: logger.enable("evocgp")
logger.disable("evocgp")

# Import main classes for convenient access
from evocgp.run.config  import Config, ConfigError, FitnessOrientation
from evocgp.run.problem import Problem
from evocgp.run.trial   import RunResult, Trial
from evocgp.functions   import (Function,
                                FunctionSet,
                                SymbolicRegressionFunctions,
                                DigitalCircuitFunctions,
                                PolynomialFunctions)
from evocgp.genotype    import Input, Node, Output, Chromosome
from evocgp.pool        import Population
from evocgp.mutation    import (Mutator,
                                FixedPointMutator,
                                PercentPointMutator,
                                ProbabilisticMutator)
from evocgp.strategies  import EvolutionaryStrategy, MuPlusLambda, TournamentSelection

__all__ = [
    "Config",
    "ConfigError",
    "FitnessOrientation",
    "Problem",
    "RunResult",
    "Trial",
    "Function",
    "FunctionSet",
    "SymbolicRegressionFunctions",
    "DigitalCircuitFunctions",
    "PolynomialFunctions",
    "Input",
    "Node",
    "Output",
    "Chromosome",
    "Population",
    "Mutator",
    "FixedPointMutator",
    "PercentPointMutator",
    "ProbabilisticMutator",
    "EvolutionaryStrategy",
    "MuPlusLambda",
    "TournamentSelection",
]
