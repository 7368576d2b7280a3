from loguru import logger
from typing import TYPE_CHECKING

from evocgp.mutation.mutator import Mutator
from evocgp.run.config       import Config, ConfigError

if TYPE_CHECKING:
    from evocgp.genotype import Chromosome

class ProbabilisticMutator(Mutator):
    """
    Gives every gene of the chromosome the same chance of being mutated.

    Nodes are visited row by row; for each node every connection is tried,
    then the function. Outputs are tried last. One random number is drawn per
    gene, plus whatever the replacement value needs.

    Public Attributes:
        mutation_probability: Chance, in percent, that any single gene mutates
    """

    name = "Probabilistic mutation"

    def __init__(self, config: Config, mutation_probability: float | None = None, report: bool | None = None):
        super().__init__(config, report)
        self.mutation_probability: float = (config.mutation_probability if mutation_probability is None
                                            else mutation_probability)

    def _mutate_gene(self) -> bool:
        return self._config.random_double(100) < self.mutation_probability

    def mutate(self, chromosome: 'Chromosome'):
        config = self._config

        for row in chromosome.nodes:
            for node in row:
                for a in range(config.arity):
                    if self._mutate_gene():
                        previous = node.get_connection(a)
                        node.set_connection(a, chromosome.get_random_connection(node.column))
                        if self.report:
                            logger.debug(f"[Mutator] Mutating {node}, changed connection {a} "
                                         f"from {previous} to {node.get_connection(a)}")

                if self._mutate_gene():
                    previous = node.function
                    node.set_function(config.random_function())
                    if self.report:
                        logger.debug(f"[Mutator] Mutating {node}, changed function from {previous} to {node.function}")

        for output in chromosome.outputs:
            if self._mutate_gene():
                previous = output.source
                output.set_source(chromosome.get_random_connection())
                if self.report:
                    logger.debug(f"[Mutator] Mutating {output}, changed source from {previous} to {output.source}")

    def validate(self):
        if self.mutation_probability <= 0 or self.mutation_probability > 100:
            logger.error(f"[Mutator] {self.name}: mutation probability must be > 0 and <= 100.")
            raise ConfigError("Mutation probability must be > 0 and <= 100")
