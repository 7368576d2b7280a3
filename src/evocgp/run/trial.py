"""
CGP Trial Module

This module implements the Trial class, which drives a CGP experiment: a
number of independent runs, each evolving a population for up to a given
number of generations or until a perfect solution is found.

Classes:
    RunResult: Outcome of a single run
    Trial:     Experiment driver tying together problem, strategy and mutator
"""

from loguru import logger
from typing import TYPE_CHECKING, NamedTuple

from evocgp.run.config  import Config, ConfigError
from evocgp.run.problem import Problem

if TYPE_CHECKING:
    from evocgp.mutation   import Mutator
    from evocgp.pool       import Population
    from evocgp.strategies import EvolutionaryStrategy

class RunResult(NamedTuple):
    """
    How a run ended.

    Attributes:
        run:          Run number, starting at 1
        generation:   Generation of the solution, or of the last improvement if none was found
        fitness:      Fitness of that chromosome
        active_nodes: Number of active nodes of that chromosome
        success:      Whether a perfect solution was found
    """
    run         : int
    generation  : int
    fitness     : float | None
    active_nodes: int
    success     : bool

class Trial:
    """
    Drives a CGP experiment.

    Each generation the problem evaluates the population. If a perfect
    solution exists the run ends; otherwise any improvement on the best
    fitness so far is reported, and the strategy (with the mutator) produces
    the next generation. A run that exhausts its generations ends without a
    solution. After each run the population is re-randomized and the next
    run starts, until all runs are done.

    Public Attributes:
        problem:    Assigns fitness and supplies the function set
        strategy:   Produces each new generation
        mutator:    Perturbs new chromosomes
        population: The current population (None before reset())
        generation: Current generation of the current run, starting at 1
        run_number: Current run, starting at 1
        finished:   Whether every run has completed
        results:    One RunResult per completed run

    Public Methods:
        reset():                         Validate the setup and start a new experiment
        run():                           Reset, then evolve until every run is done
        next_generation():               Advance the experiment by one generation
        load_chromosome(path, index):    Read a ".chr" file into a population slot
        save_chromosome(path, index):    Write a population slot to a ".chr" file
    """

    def __init__(self,
                 config  : Config,
                 problem : Problem,
                 strategy: 'EvolutionaryStrategy',
                 mutator : 'Mutator'):
        self._config   : Config                 = config
        self.problem   : Problem                = problem
        self.strategy  : 'EvolutionaryStrategy' = strategy
        self.mutator   : 'Mutator'              = mutator

        self.population: 'Population | None' = None
        self.generation: int                  = 1
        self.run_number: int                  = 1
        self.finished  : bool                 = True
        self.results   : list[RunResult]      = []

        self._reset_run_statistics()

    def _reset_run_statistics(self):
        self.problem.reset()
        self._last_improvement_generation: int          = 0
        self._best_fitness_found         : float | None = None
        self._active_nodes               : int          = 0

    def reset(self):
        """
        Start a new experiment.

        The arity is worked out from the problem's function set, every
        parameter is validated, the random number generator is reseeded and
        a new random population is created.

        Raises:
            ConfigError: If the configuration, the mutator or the strategy is invalid
        """
        # Import here to avoid circular import
        from evocgp.pool import Population

        config = self._config
        if config.function_set is not self.problem.function_set:
            config.set_function_set(self.problem.function_set)
        else:
            config.refresh_arity()
        config.fitness_orientation = self.problem.fitness_orientation

        if config.arity < 1:
            logger.error("[CGP] Error: arity is smaller than 1. Check that at least one function is enabled")
            raise ConfigError("Arity is smaller than 1. Check that at least one function is enabled")

        config.validate()
        self.mutator.validate()
        self.strategy.validate()

        config.reseed(config.seed)
        self.population = Population(config)
        self._reset_run_statistics()
        self.generation = 1
        self.run_number = 1
        self.results    = []
        self.finished   = False

        logger.info("*********************************************************")
        logger.info(f"[CGP] New experiment: {self.problem}")
        logger.info(f"[CGP] Rows: {config.rows}")
        logger.info(f"[CGP] Columns: {config.columns}")
        logger.info(f"[CGP] Levels back: {config.levels_back}")
        logger.info(f"[CGP] Population size: {config.population_size}")
        logger.info(f"[CGP] Total generations: {config.generations}")
        logger.info(f"[CGP] Total runs: {config.runs}")
        logger.info(f"[CGP] Report interval: {config.report_interval}")
        logger.info(f"[CGP] Seed: {config.seed}")
        logger.info(f"[CGP] Evolutionary strategy: {self.strategy}")
        logger.info(f"[CGP] Mutator: {self.mutator}")

    def run(self) -> list[RunResult]:
        """
        Run the whole experiment and return the outcome of every run.
        """
        self.reset()
        while not self.finished:
            self.next_generation()
        return self.results

    def next_generation(self):
        """
        Evaluate the population and either end the run or evolve it.
        Does nothing once the experiment has finished.
        """
        if self.finished:
            return

        self.problem.evaluate(self.population)

        perfect = self.problem.has_perfect_solution(self.population)
        if perfect is not None:
            chromosome = self.population[perfect]
            logger.info(f"[CGP] Solution found: generation {self.generation}, chromosome {perfect}")
            chromosome.log_nodes()
            self._end_run(RunResult(self.run_number, self.generation, chromosome.fitness,
                                    len(chromosome.get_active_nodes()), True))
            return

        improvement = self.problem.has_improvement(self.population)
        if improvement is not None:
            chromosome = self.population[improvement]
            logger.info(f"[CGP] Generation: {self.generation}, fittest chromosome ({improvement}) "
                        f"has fitness: {chromosome.fitness}")
            self._last_improvement_generation = self.generation
            self._best_fitness_found          = chromosome.fitness
            self._active_nodes                = len(chromosome.get_active_nodes())
        elif self._config.report_interval > 0 and self.generation % self._config.report_interval == 0:
            logger.info(f"[CGP] Generation: {self.generation}, best fitness: {self.problem.best_fitness}")

        if self.generation < self._config.generations:
            self.generation += 1
            self.strategy.evolve(self.population, self.mutator)
        else:
            logger.info(f"[CGP] Solution not found, best fitness achieved was {self._best_fitness_found}")
            self._end_run(RunResult(self.run_number, self._last_improvement_generation,
                                    self._best_fitness_found, self._active_nodes, False))

    def _end_run(self, result: RunResult):
        self.results.append(result)
        self._reset_run_statistics()

        if self.run_number < self._config.runs:
            self.run_number += 1
            self.generation  = 1
            self.population.reinitialise()
        else:
            successes = sum(r.success for r in self.results)
            logger.info(f"[CGP] Experiment finished, perfect solutions: {successes}/{len(self.results)}")
            self.finished = True

    # ------------------------------------------------------------------
    # Chromosome persistence
    # ------------------------------------------------------------------

    def _require_population(self):
        if self.population is None:
            raise RuntimeError("The trial has no population, call reset() first")

    def load_chromosome(self, path: str, index: int):
        # Import here to avoid circular import
        from evocgp.genotype.chromosome_codec import load_chromosome

        self._require_population()
        load_chromosome(path, self.population[index])

    def save_chromosome(self, path: str, index: int):
        # Import here to avoid circular import
        from evocgp.genotype.chromosome_codec import save_chromosome

        self._require_population()
        save_chromosome(path, self.population[index])
