"""
Even Parity Problem Implementation for CGP

This module implements the even-n-parity problem, a standard benchmark for
evolving digital circuits. The output must be 1 exactly when an even number
of the n inputs are 1.

Bit-parallel Evaluation:
    The digital circuit functions operate on whole 32-bit words, so every
    row of the truth table is packed into its own bit position: input i
    holds, at bit k, the value of input i in the k-th row. A single
    evaluation of the chromosome then computes all 2^n rows at once
    (for n <= 5).

Fitness Function:
    Fitness = number of truth table rows answered correctly

    Maximum fitness of 2^n is a perfect solution.

Classes:
    Problem_Parity: Even-n-parity problem over the digital circuit functions

Usage:
    config  = Config("configs/config_parity.ini")
    problem = Problem_Parity(config)
    trial   = Trial(config, problem, MuPlusLambda(config), FixedPointMutator(config))
    results = trial.run()
"""

from loguru import logger

from evocgp.functions   import DigitalCircuitFunctions
from evocgp.pool        import Population
from evocgp.run.config  import Config, FitnessOrientation
from evocgp.run.problem import Problem

logger.enable("evocgp")

class Problem_Parity(Problem):
    """
    Even-n-parity over 'config.num_inputs' inputs, evaluated bit-parallel.
    """

    name = "Even parity"

    def __init__(self, config: Config):
        super().__init__(config, DigitalCircuitFunctions(), FitnessOrientation.HIGH)

        num_inputs = config.num_inputs
        if num_inputs > 5:
            raise ValueError(f"At most 5 inputs fit in a 32-bit word, received {num_inputs}")

        self.num_cases = 2 ** num_inputs
        self.case_mask = (1 << self.num_cases) - 1

        # bit k of input i is bit i of the row number k
        self.inputs = [sum(((k >> i) & 1) << k for k in range(self.num_cases))
                       for i in range(num_inputs)]

        # even parity: 1 where the row number has an even number of set bits
        self.target = sum((bin(k).count("1") % 2 == 0) << k for k in range(self.num_cases))

    def evaluate(self, population: Population):
        for chromosome in population:
            output, = chromosome.evaluate(*self.inputs)
            correct = ~(output ^ self.target) & self.case_mask
            chromosome.fitness = bin(correct).count("1")

    def has_perfect_solution(self, population: Population) -> int | None:
        for i, chromosome in enumerate(population):
            if chromosome.fitness == self.num_cases:
                logger.info(f"[Parity] Circuit found with {len(chromosome.get_active_nodes())} active gates")
                return i
        return None
