"""
CGP Chromosome Module

This module implements the Chromosome class, the genotype of Cartesian
Genetic Programming: a fixed grid of function nodes fed by program inputs
and read by program outputs. The chromosome encodes a directed acyclic graph;
only the nodes reachable from the outputs (the active nodes) contribute to
the program it expresses.

Classes:
    Chromosome: Inputs, node grid and outputs of one individual
"""

from loguru import logger

from evocgp.genotype.gene        import Connection, Mutable
from evocgp.genotype.input_gene  import Input
from evocgp.genotype.node_gene   import Node
from evocgp.genotype.output_gene import Output
from evocgp.run.config           import Config, ConfigError

class Chromosome:
    """
    A CGP individual.

    The node grid is indexed [row][column]. Elements are allocated once, when
    the chromosome is created; copying and mutation only rewrite the genes
    they hold. The list of active nodes is computed lazily and cached until
    a function or a connection changes.

    Chromosomes order by fitness (ascending) so that lists of them can be
    sorted; whether high or low fitness is better is decided by the caller.

    Public Attributes:
        config:  Shared configuration, also the source of randomness
        inputs:  List of Input elements
        nodes:   Grid of Node elements, nodes[row][column]
        outputs: List of Output elements
        fitness: Fitness assigned by the last evaluation (0.0 initially)

    Public Methods:
        from_chromosome(source):           Create a copy of another chromosome
        reinitialise_connections():        Re-randomize every gene
        copy_genes(source):                Overwrite every gene with those of another chromosome
        set_inputs(*values):               Present values to the program inputs
        get_input(index):                  Return one input
        get_node(row, column):             Return one node
        get_output(index):                 Return one output
        get_random_connection(column):     Draw a legal connection for a node (or, without column, any connection)
        get_random_mutable():              Draw a node or output to mutate
        get_active_nodes():                Return the nodes reachable from the outputs
        recompute_active_nodes():          Invalidate the active node cache
        compare_genes_to(other):           Whether 'other' is a structural copy
        compare_active_genes_to(other):    Whether the active parts are structural copies
    """

    def __init__(self, config: Config, initialise: bool = True):
        """
        Allocate a chromosome and, unless 'initialise' is False, give it random genes.

        Parameters:
            config:     Topology, function set and random number generator
            initialise: If False, leave genes unset (used when copying)

        Raises:
            ConfigError: If the arity is smaller than 1 (no functions enabled)
        """
        if config.arity < 1:
            raise ConfigError("Cannot create a chromosome with arity smaller than 1")

        self.config : Config = config
        self.fitness: float  = 0.0

        self._active_nodes : list[Node] = []
        self._recompute    : bool       = True

        self._instantiate_elements()
        if initialise:
            self.reinitialise_connections()

    @classmethod
    def from_chromosome(cls, source: 'Chromosome') -> 'Chromosome':
        """
        Create a new chromosome holding a copy of the genes of 'source'.
        No random numbers are drawn.
        """
        chromosome = cls(source.config, initialise=False)
        chromosome.copy_genes(source)
        return chromosome

    def _instantiate_elements(self):
        config = self.config
        self.inputs : list[Input]      = [Input(i) for i in range(config.num_inputs)]
        self.nodes  : list[list[Node]] = [[Node(self, r, c) for c in range(config.columns)]
                                          for r in range(config.rows)]
        self.outputs: list[Output]     = [Output(self, o) for o in range(config.num_outputs)]

    def reinitialise_connections(self):
        """
        Give every node a random function and random connections, and every
        output a random source.

        Nodes are visited row by row. For each node, all connections are drawn
        before the function.
        """
        arity = self.config.arity
        for row in self.nodes:
            for node in row:
                connections = [self.get_random_connection(node.column) for _ in range(arity)]
                node.initialise(self.config.random_function(), *connections)

        for output in self.outputs:
            output.set_source(self.get_random_connection())

    def _equivalent(self, connection: Connection) -> Connection:
        """
        Return the element of this chromosome at the same address as 'connection'.
        """
        if isinstance(connection, Input):
            return self.inputs[connection.index]
        return self.nodes[connection.row][connection.column]

    def copy_genes(self, source: 'Chromosome'):
        """
        Overwrite the functions, connections and fitness of this chromosome with
        those of 'source'. Both chromosomes must share the same topology.
        """
        for row in self.nodes:
            for node in row:
                other = source.nodes[node.row][node.column]
                connections = [self._equivalent(c) for c in other.connections]
                node.initialise(other.function, *connections)

        for output, other in zip(self.outputs, source.outputs):
            output.set_source(self._equivalent(other.source))

        self.fitness = source.fitness

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def get_input(self, index: int) -> Input:
        if not 0 <= index < len(self.inputs):
            raise IndexError(f"Input {index} does not exist, the chromosome has {len(self.inputs)} inputs")
        return self.inputs[index]

    def get_node(self, row: int, column: int) -> Node:
        if not (0 <= row < self.config.rows and 0 <= column < self.config.columns):
            raise IndexError(f"Node [{row}, {column}] does not exist, "
                             f"the grid has {self.config.rows} rows and {self.config.columns} columns")
        return self.nodes[row][column]

    def get_output(self, index: int) -> Output:
        if not 0 <= index < len(self.outputs):
            raise IndexError(f"Output {index} does not exist, the chromosome has {len(self.outputs)} outputs")
        return self.outputs[index]

    def set_inputs(self, *values):
        """
        Present one value to each program input.

        Raises:
            ValueError: If the number of values differs from the number of inputs
        """
        if len(values) != len(self.inputs):
            raise ValueError(f"Received {len(values)} inputs but needed exactly {len(self.inputs)}")
        for input_, value in zip(self.inputs, values):
            input_.value = value

    def evaluate(self, *values) -> list:
        """
        Set the inputs and return the value of every output.
        """
        self.set_inputs(*values)
        return [output.calculate() for output in self.outputs]

    # ------------------------------------------------------------------
    # Random element selection
    # ------------------------------------------------------------------

    def get_random_connection(self, column: int | None = None) -> Connection:
        """
        Draw a random connection.

        With a column, the result is an input or a node of one of the
        'levels_back' columns immediately preceding it, so the graph stays
        acyclic. Without a column, any input or node can be returned; this is
        used for outputs.
        """
        num_inputs = len(self.inputs)
        rows       = self.config.rows
        columns    = self.config.columns

        if column is None:
            index = self.config.random_int(num_inputs + rows * columns)
            if index < num_inputs:
                return self.inputs[index]
            index -= num_inputs
            return self.nodes[index // columns][index % columns]

        allowed = min(column, self.config.levels_back)
        index   = self.config.random_int(num_inputs + rows * allowed)
        if index < num_inputs:
            return self.inputs[index]

        # Walk the window column by column, starting at its leftmost column
        index += (column - allowed) * rows - num_inputs
        return self.nodes[index % rows][index // rows]

    def get_random_mutable(self) -> Mutable:
        """
        Draw an output or a node uniformly at random.
        """
        num_outputs = len(self.outputs)
        columns     = self.config.columns

        index = self.config.random_int(num_outputs + self.config.num_nodes)
        if index < num_outputs:
            return self.outputs[index]
        index -= num_outputs
        return self.nodes[index // columns][index % columns]

    # ------------------------------------------------------------------
    # Active nodes
    # ------------------------------------------------------------------

    def recompute_active_nodes(self):
        self._recompute = True

    def get_active_nodes(self) -> list[Node]:
        """
        Return the nodes that contribute to at least one output.

        Nodes appear in the order a depth-first walk from each output (in
        order) first discovers them. Only the connections read by each node's
        current function are followed. The same list object is returned until
        a gene changes.
        """
        if self._recompute:
            self._recompute = False

            active = []
            seen   = set()
            for output in self.outputs:
                stack = [output.source]
                while stack:
                    node = stack.pop()
                    if not isinstance(node, Node) or id(node) in seen:
                        continue
                    seen.add(id(node))
                    active.append(node)
                    stack.extend(reversed(node.active_connections))

            self._active_nodes = active
        return self._active_nodes

    # ------------------------------------------------------------------
    # Structural comparison
    # ------------------------------------------------------------------

    def compare_genes_to(self, other: 'Chromosome') -> bool:
        """
        Whether every node and output of 'other' is a structural copy of ours.
        """
        for row in self.nodes:
            for node in row:
                if not node.copy_of(other.nodes[node.row][node.column]):
                    return False
        return all(output.copy_of(theirs) for output, theirs in zip(self.outputs, other.outputs))

    def compare_active_genes_to(self, other: 'Chromosome') -> bool:
        """
        Whether both chromosomes have equally many active nodes, pairwise structural copies.
        """
        mine   = self.get_active_nodes()
        theirs = other.get_active_nodes()
        if len(mine) != len(theirs):
            return False
        return all(node.copy_of(other_node) for node, other_node in zip(mine, theirs))

    # ------------------------------------------------------------------

    def __lt__(self, other: 'Chromosome') -> bool:
        return self.fitness < other.fitness

    def __str__(self):
        lines = []
        for r, row in enumerate(self.nodes):
            cells = []
            for node in row:
                connections = " ".join(f"C{i}: ({c})" for i, c in enumerate(node.connections))
                cells.append(f"N: ({node.row}, {node.column}) {connections} F: {node.function}")
            lines.append(f"r: {r}\t" + "\t".join(cells))
        lines.append("\t".join(f"o: {o.index} ({o.source})" for o in self.outputs))
        return "\n".join(lines)

    def log_nodes(self):
        logger.info(f"[CGP] Chromosome (fitness {self.fitness}):\n{self}")
