from evocgp.genotype.gene import Connection

class Input(Connection):
    """
    A program input. Its value is set once per evaluation, through
    Chromosome.set_inputs(), and read by every node connected to it.

    Public Attributes:
        index: Position of this input in the chromosome
        value: The value currently presented to the program
    """

    def __init__(self, index: int):
        self.index: int = index
        self.value      = None

    def get_value(self):
        return self.value

    def __str__(self):
        return f"Input {self.index}"

    def __repr__(self):
        return str(self)
