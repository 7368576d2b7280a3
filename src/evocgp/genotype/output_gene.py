from typing import TYPE_CHECKING

from evocgp.genotype.gene      import Connection, Mutable
from evocgp.genotype.node_gene import same_address

if TYPE_CHECKING:
    from evocgp.genotype.chromosome import Chromosome

class Output(Mutable):
    """
    A program output, reading its value from a single source connection.
    The source may be any input or any node of the grid.

    Public Attributes:
        index: Position of this output in the chromosome

    Public Properties:
        source: The connection this output reads from (changed through set_source())
    """

    def __init__(self, chromosome: 'Chromosome', index: int):
        self._chromosome: 'Chromosome'        = chromosome
        self.index      : int                 = index
        self._source    : 'Connection | None' = None

    @property
    def source(self) -> 'Connection | None':
        return self._source

    def calculate(self):
        return self._source.get_value()

    def set_source(self, connection: Connection):
        self._source = connection
        self._chromosome.recompute_active_nodes()

    def mutate(self):
        self.set_source(self._chromosome.get_random_connection())

    def copy_of(self, other: Mutable) -> bool:
        if other is self or not isinstance(other, Output):
            return False
        return self.index == other.index and same_address(self.source, other.source)

    def __str__(self):
        return f"Output {self.index}"

    def __repr__(self):
        return str(self)
