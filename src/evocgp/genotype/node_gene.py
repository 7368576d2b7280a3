"""
CGP Node Gene Module

This module implements the Node class, a computational element of the
chromosome grid.

Classes:
    Node: A function applied to the values of a fixed number of connections
"""

from typing import TYPE_CHECKING

from evocgp.genotype.gene       import Connection, Mutable
from evocgp.genotype.input_gene import Input

if TYPE_CHECKING:
    from evocgp.functions          import Function
    from evocgp.genotype.chromosome import Chromosome

def same_address(connection: Connection, other: Connection) -> bool:
    """
    Whether two distinct connections occupy the same position in their
    respective chromosomes: inputs with the same index, or nodes with the
    same row and column.
    """
    if connection is other:
        return False
    if isinstance(connection, Input) and isinstance(other, Input):
        return connection.index == other.index
    if isinstance(connection, Node) and isinstance(other, Node):
        return connection.row == other.row and connection.column == other.column
    return False

class Node(Connection, Mutable):
    """
    A node of the chromosome grid.

    Each node holds a function and exactly 'arity' connections, where arity is
    the largest arity among the enabled functions. Only the first
    'function.arity' connections are used; the rest are carried along so that
    a later function mutation can make them active.

    Connections are normally drawn from the inputs and from nodes in earlier
    columns, within the levels-back window. Assigning a connection directly
    performs no such check.

    Public Attributes:
        row:    Row of this node in the grid
        column: Column of this node in the grid

    Public Properties:
        function:           Function computed by this node (changed through set_function())
        connections:        All connections, in order
        active_connections: The connections read by the current function

    Public Methods:
        initialise(function, *connections): Set the function and all connections at once
        set_function(function):             Replace the function
        get_connection(index):              Return one connection
        set_connection(index, connection):  Replace one connection
        get_value():                        Evaluate this node
        mutate():                           Change the function or one connection
        copy_of(other):                     Structural copy test
    """

    def __init__(self, chromosome: 'Chromosome', row: int, column: int):
        self._chromosome : 'Chromosome'       = chromosome
        self.row         : int                = row
        self.column      : int                = column
        self._function   : 'Function | None'  = None
        self._connections: list[Connection]   = []

    def initialise(self, function: 'Function', *connections: Connection):
        """
        Set the function and every connection of this node.

        Raises:
            ValueError: If the number of connections differs from the arity
        """
        arity = self._chromosome.config.arity
        if len(connections) != arity:
            raise ValueError(f"Received {len(connections)} connections but needed exactly {arity}")

        self._function    = function
        self._connections = list(connections)
        self._chromosome.recompute_active_nodes()

    @property
    def function(self) -> 'Function | None':
        return self._function

    def set_function(self, function: 'Function'):
        self._function = function
        self._chromosome.recompute_active_nodes()

    def get_connection(self, index: int) -> Connection:
        return self._connections[index]

    def set_connection(self, index: int, connection: Connection):
        self._connections[index] = connection
        self._chromosome.recompute_active_nodes()

    @property
    def connections(self) -> tuple[Connection, ...]:
        return tuple(self._connections)

    @property
    def active_connections(self) -> list[Connection]:
        """
        The connections actually read by the current function.
        """
        return self._connections[:self.function.arity]

    def get_value(self):
        args = [connection.get_value() for connection in self.active_connections]
        return self.function(*args)

    def mutate(self):
        config = self._chromosome.config

        # Gene 0 is the function, genes 1..arity are the connections
        gene = config.random_int(config.arity + 1)
        if gene == 0:
            self.set_function(config.random_function())
        else:
            self.set_connection(gene - 1, self._chromosome.get_random_connection(self.column))

    def copy_of(self, other: Mutable) -> bool:
        if other is self or not isinstance(other, Node):
            return False
        if self.function is not other.function:
            return False
        if self.row != other.row or self.column != other.column:
            return False
        if len(self._connections) != len(other._connections):
            return False
        return all(same_address(mine, theirs)
                   for mine, theirs in zip(self._connections, other._connections))

    def __str__(self):
        return f"Node [{self.row}, {self.column}]"

    def __repr__(self):
        return str(self)
