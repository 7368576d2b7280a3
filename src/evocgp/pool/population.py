"""
CGP Population Module

This module implements the Population class, a fixed-size collection of
chromosomes sharing one topology. Strategies reorder, copy and mutate its
chromosomes in place; the chromosomes themselves are only allocated when the
population is created.

Classes:
    Population: Fixed-size array of chromosomes with sorting and copying utilities
"""

from typing import TYPE_CHECKING

from evocgp.run.config import Config, FitnessOrientation

if TYPE_CHECKING:
    from evocgp.genotype import Chromosome

class Population:
    """
    A population of CGP chromosomes.

    Public Attributes:
        chromosomes: List of all Chromosome objects

    Public Methods:
        get_random_chromosome():          Return a chromosome chosen uniformly at random
        copy_chromosome(source, target):  Copy the genes of one slot into another
        reinitialise():                   Re-randomize every chromosome in place
        sort():                           Order chromosomes so that the best is last
        get_fittest_chromosome():         Return the best chromosome
    """

    def __init__(self, config: Config, parent: 'Chromosome | None' = None):
        """
        Create 'config.population_size' chromosomes.

        Parameters:
            config: Stores configuration parameters
            parent: If given, every chromosome starts as a copy of it;
                    otherwise every chromosome is random
        """
        # Import here to avoid circular import
        from evocgp.genotype import Chromosome

        self._config = config
        if parent is None:
            self.chromosomes = [Chromosome(config) for _ in range(config.population_size)]
        else:
            self.chromosomes = [Chromosome.from_chromosome(parent) for _ in range(config.population_size)]

    def __getitem__(self, index: int) -> 'Chromosome':
        return self.chromosomes[index]

    def __len__(self):
        return len(self.chromosomes)

    def __iter__(self):
        return iter(self.chromosomes)

    def get_random_chromosome(self) -> 'Chromosome':
        return self.chromosomes[self._config.random_int(len(self.chromosomes))]

    def copy_chromosome(self, source: int, target: int):
        """
        Overwrite the genes of the chromosome at 'target' with those at 'source'.
        Does nothing if both indices are the same.
        """
        if source != target:
            self.chromosomes[target].copy_genes(self.chromosomes[source])

    def reinitialise(self):
        for chromosome in self.chromosomes:
            chromosome.reinitialise_connections()

    def sort(self):
        """
        Sort the chromosomes by fitness so that the best one ends up last,
        whatever the fitness orientation. Chromosomes of equal fitness keep
        their relative order.
        """
        if self._config.fitness_orientation == FitnessOrientation.HIGH:
            self.chromosomes.sort()
        else:
            self.chromosomes.sort(reverse=True)

    def get_fittest_chromosome(self) -> 'Chromosome':
        """
        Return the chromosome with the best fitness (the first one, on ties).
        """
        if self._config.fitness_orientation == FitnessOrientation.HIGH:
            return max(self.chromosomes, key=lambda c: c.fitness)
        return min(self.chromosomes, key=lambda c: c.fitness)
