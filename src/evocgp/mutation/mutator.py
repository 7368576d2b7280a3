from abc    import ABC, abstractmethod
from typing import TYPE_CHECKING

from evocgp.run.config import Config

if TYPE_CHECKING:
    from evocgp.genotype import Chromosome

class Mutator(ABC):
    """
    Abstract base class for mutation operators.

    A mutator rewrites some of the genes of a chromosome in place. Mutation
    never fails once validate() has accepted the mutator's parameters.

    Per-gene changes are logged at debug level only when 'report' is set.

    Subclasses must implement:
    - mutate(chromosome): Perturb the chromosome
    - validate():         Raise ConfigError for unusable parameters, log warnings for odd ones
    """

    name = "Mutator"

    def __init__(self, config: Config, report: bool | None = None):
        """
        Parameters:
            config: Stores configuration parameters
            report: Whether to log every mutation; if None, 'config.report_mutator' is used
        """
        self._config: Config = config
        self.report : bool   = config.report_mutator if report is None else report

    @abstractmethod
    def mutate(self, chromosome: 'Chromosome'):
        pass

    @abstractmethod
    def validate(self):
        pass

    def __str__(self):
        return self.name
