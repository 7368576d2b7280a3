from abc    import ABC, abstractmethod
from typing import TYPE_CHECKING

from evocgp.run.config import Config, FitnessOrientation

if TYPE_CHECKING:
    from evocgp.mutation import Mutator
    from evocgp.pool     import Population

class EvolutionaryStrategy(ABC):
    """
    Abstract base class for selection and replacement strategies.

    A strategy turns an evaluated population into the next generation, in
    place, using a mutator to create new individuals.

    The parent choices of each generation are logged at debug level only when
    'report' is set.

    Subclasses must implement:
    - evolve(population, mutator): Produce the next generation
    - validate():                  Raise ConfigError for unusable parameters, log warnings for odd ones
    """

    name = "Evolutionary strategy"

    def __init__(self, config: Config, report: bool | None = None):
        """
        Parameters:
            config: Stores configuration parameters
            report: Whether to log each generation in detail; if None, 'config.report_strategy' is used
        """
        self._config: Config = config
        self.report : bool   = config.report_strategy if report is None else report

    @abstractmethod
    def evolve(self, population: 'Population', mutator: 'Mutator'):
        pass

    @abstractmethod
    def validate(self):
        pass

    def _better(self, fitness: float, other: float) -> bool:
        """
        Whether 'fitness' is strictly better than 'other' under the configured orientation.
        """
        if self._config.fitness_orientation == FitnessOrientation.HIGH:
            return fitness > other
        return fitness < other

    def __str__(self):
        return self.name
