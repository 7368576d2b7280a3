from loguru import logger
from typing import TYPE_CHECKING

from evocgp.run.config                        import Config, ConfigError
from evocgp.strategies.evolutionary_strategy import EvolutionaryStrategy

if TYPE_CHECKING:
    from evocgp.mutation import Mutator
    from evocgp.pool     import Population

class MuPlusLambda(EvolutionaryStrategy):
    """
    The (mu + lambda) evolutionary strategy.

    The last 'mu' slots of the population hold the parents and the first
    'lambda' slots hold their offspring. Each generation the best 'mu' of all
    of them become the new parents, and 'lambda' mutated copies of randomly
    chosen new parents replace the offspring.

    An offspring whose fitness equals that of a parent replaces it, provided
    the parent was not itself promoted earlier in the same selection. This
    lets the population drift neutrally across genotypes of equal fitness.

    Public Attributes:
        mu:      Number of parents
        lambda_: Number of offspring
    """

    name = "(mu + lambda)"

    def __init__(self,
                 config : Config,
                 mu     : int | None  = None,
                 lambda_: int | None  = None,
                 report : bool | None = None):
        super().__init__(config, report)
        self.mu     : int = config.mu      if mu      is None else mu
        self.lambda_: int = config.lambda_ if lambda_ is None else lambda_

    def validate(self):
        population_size = self._config.population_size
        if self.mu <= 0:
            message = "ES needs at least 1 parent."
        elif self.lambda_ <= 0:
            message = "ES needs at least 1 offspring."
        elif self.mu + self.lambda_ != population_size:
            message = f"Parents + offspring must equal population size ({population_size})."
        else:
            return
        logger.error(f"[ES] {self.name}: {message}")
        raise ConfigError(message)

    def evolve(self, population: 'Population', mutator: 'Mutator'):
        self._select_parents(population)

        # The new parents are now in the last mu positions
        size = len(population)
        for i in range(size - self.mu):
            random_parent = size - 1 - self._config.random_int(self.mu)
            if self.report:
                logger.debug(f"[ES] Copying Chr {random_parent} to population position {i}")
            population.copy_chromosome(random_parent, i)
            mutator.mutate(population[i])

        if self.report:
            logger.debug("[ES] Generation is complete")

    def _select_parents(self, population: 'Population'):
        """
        Choose the next parents and copy them into the last mu slots.
        """
        lambda_ = len(population) - self.mu
        parents = [lambda_ + i for i in range(self.mu)]

        for o in range(lambda_):
            offspring_fitness = population[o].fitness
            for p in range(self.mu):
                parent_fitness = population[parents[p]].fitness
                if (self._better(offspring_fitness, parent_fitness)
                        or (offspring_fitness == parent_fitness and parents[p] >= lambda_)):
                    parents[p] = o
                    break

        # Each parent slot now names either its own chromosome or an offspring
        for c, parent in enumerate(parents):
            population.copy_chromosome(parent, lambda_ + c)
