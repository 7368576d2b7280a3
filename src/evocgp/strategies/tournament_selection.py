from loguru import logger
from typing import TYPE_CHECKING

from evocgp.run.config                        import Config, ConfigError
from evocgp.strategies.evolutionary_strategy import EvolutionaryStrategy

if TYPE_CHECKING:
    from evocgp.mutation import Mutator
    from evocgp.pool     import Population

class TournamentSelection(EvolutionaryStrategy):
    """
    Tournament selection.

    The whole population is replaced every generation. Each new individual is
    a mutated copy of the winner of a tournament between 'tournament_size'
    distinct, randomly chosen members of the current population. The winner
    is the contender with the best fitness.

    Contenders are drawn without replacement, 'tournament_size' random
    numbers per tournament, so with a tournament as large as the population
    the best chromosome always wins. Drawing 'tournament_size - 1' contenders
    with replacement next to a fixed contender at position 0 would break that,
    and would consume a different sequence of random numbers; runs made with
    such a scheme cannot be reproduced by this class from the same seed.

    Public Attributes:
        tournament_size: Number of contenders per tournament
    """

    name = "Tournament selection"

    def __init__(self, config: Config, tournament_size: int | None = None, report: bool | None = None):
        super().__init__(config, report)
        self.tournament_size: int = config.tournament_size if tournament_size is None else tournament_size

    def validate(self):
        population_size = self._config.population_size
        if self.tournament_size <= 0:
            message = "Tournament size must be greater than 0."
        elif self.tournament_size > population_size:
            message = "Tournament size must not be greater than the population size."
        else:
            if self.tournament_size == 1:
                logger.warning(f"[ES] {self.name}: a tournament size of 1 results in a random search.")
            elif self.tournament_size == population_size:
                logger.warning(f"[ES] {self.name}: a tournament size equal to population size "
                               f"results in the same individual being selected every time.")
            return
        logger.error(f"[ES] {self.name}: {message}")
        raise ConfigError(message)

    def _select_contenders(self, size: int) -> list[int]:
        """
        Draw 'tournament_size' distinct positions out of 'size'.
        """
        positions = list(range(size))
        for k in range(self.tournament_size):
            j = k + self._config.random_int(size - k)
            positions[k], positions[j] = positions[j], positions[k]
        return positions[:self.tournament_size]

    def evolve(self, population: 'Population', mutator: 'Mutator'):
        # Import here to avoid circular import
        from evocgp.genotype import Chromosome

        # Sorted so that a higher position means a better chromosome
        population.sort()

        staged = []
        for i in range(len(population)):
            contenders = self._select_contenders(len(population))
            winner     = max(contenders)
            if self.report:
                logger.debug(f"[ES] Tournament {i}: contenders {sorted(contenders)}, Chr {winner} wins")

            chromosome = Chromosome.from_chromosome(population[winner])
            mutator.mutate(chromosome)
            staged.append(chromosome)

        if self.report:
            logger.debug("[ES] Tournaments are finished, copying new chromosomes into population")
        for chromosome, new_genes in zip(population, staged):
            chromosome.copy_genes(new_genes)

        if self.report:
            logger.debug("[ES] Generation is complete")
