"""
CGP Genotype Package

This package implements the genotype of Cartesian Genetic Programming: a
chromosome made of program inputs, a grid of function nodes, and program
outputs, together with its flat text encoding.

Modules:
    gene:             Connection and Mutable interfaces
    input_gene:       Input class
    node_gene:        Node class
    output_gene:      Output class
    chromosome:       Chromosome class
    chromosome_codec: Reading and writing chromosomes in the ".chr" format

Exported Classes:
    Connection: Interface of elements that can be read from
    Mutable:    Interface of elements that can be mutated
    Input:      A program input
    Node:       A function node of the grid
    Output:     A program output
    Chromosome: A complete CGP individual
"""

from evocgp.genotype.gene        import Connection, Mutable
from evocgp.genotype.input_gene  import Input
from evocgp.genotype.node_gene   import Node
from evocgp.genotype.output_gene import Output
from evocgp.genotype.chromosome  import Chromosome
from evocgp.genotype.chromosome_codec import (format_chromosome,
                                              save_chromosome,
                                              parse_chromosome,
                                              load_chromosome)

__all__ = ['Connection',
           'Mutable',
           'Input',
           'Node',
           'Output',
           'Chromosome',
           'format_chromosome',
           'save_chromosome',
           'parse_chromosome',
           'load_chromosome']
