"""
CGP Point Mutation Module

Point mutation picks a number of genes uniformly at random, each time
drawing a node or output and changing one of its genes. The two variants
differ only in how many genes are changed.

Classes:
    PointMutator:        Abstract base, mutates 'genes_mutated' random genes
    FixedPointMutator:   Mutates a fixed number of genes
    PercentPointMutator: Mutates a percentage of all genes
"""

from abc    import abstractmethod
from loguru import logger
from typing import TYPE_CHECKING

from evocgp.mutation.mutator import Mutator
from evocgp.run.config       import Config, ConfigError

if TYPE_CHECKING:
    from evocgp.genotype import Chromosome

class PointMutator(Mutator):

    @property
    @abstractmethod
    def genes_mutated(self) -> int:
        pass

    def mutate(self, chromosome: 'Chromosome'):
        count = self.genes_mutated
        if self.report:
            logger.debug(f"[Mutator] Number of mutations to be performed: {count}")
        for i in range(count):
            mutable = chromosome.get_random_mutable()
            mutable.mutate()
            if self.report:
                logger.debug(f"[Mutator] Mutation {i} changed {mutable}")

class FixedPointMutator(PointMutator):
    """
    Mutates the same number of genes every time.

    Public Attributes:
        num_genes: Number of genes mutated per call
    """

    name = "Fixed point mutation"

    def __init__(self, config: Config, genes_mutated: int | None = None, report: bool | None = None):
        super().__init__(config, report)
        self.num_genes: int = config.genes_mutated if genes_mutated is None else genes_mutated

    @property
    def genes_mutated(self) -> int:
        return self.num_genes

    def validate(self):
        if self.num_genes <= 0:
            logger.error(f"[Mutator] {self.name}: at least 1 mutation must take place.")
            raise ConfigError("At least 1 mutation must take place.")
        if self.num_genes > self._config.total_genes:
            logger.warning(f"[Mutator] {self.name}: more genes are mutated than there are genes in the genotype.")

class PercentPointMutator(PointMutator):
    """
    Mutates a percentage of all the genes of the chromosome.

    The number of genes is worked out on every call, from the topology and
    arity current at that time, and rounded down.

    Public Attributes:
        mutation_rate: Percentage of genes mutated per call, in (0, 100]
    """

    name = "Percent point mutation"

    def __init__(self, config: Config, mutation_rate: float | None = None, report: bool | None = None):
        super().__init__(config, report)
        self.mutation_rate: float = config.mutation_rate if mutation_rate is None else mutation_rate

    @property
    def genes_mutated(self) -> int:
        return int(self.mutation_rate * self._config.total_genes / 100)

    def validate(self):
        if self.mutation_rate <= 0 or self.mutation_rate > 100:
            logger.error(f"[Mutator] {self.name}: mutation rate must be > 0 and <= 100.")
            raise ConfigError("Mutation rate must be > 0 and <= 100")
        if self.genes_mutated <= 0:
            logger.warning(f"[Mutator] {self.name}: with mutation rate {self.mutation_rate}, 0 genes will be mutated.")
