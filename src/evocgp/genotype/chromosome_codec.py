"""
CGP Chromosome Codec Module

This module reads and writes chromosomes in the flat, positional ".chr" text
format.

Nodes are written column by column, and within a column row by row. Each node
record holds its connection indices followed by its function index, every
number preceded by a space, and ends with a tab. Two more tabs separate the
nodes from the outputs, which follow as one space-prefixed index each.

An index smaller than the number of inputs addresses that input; any other
index addresses the node at 'num_inputs + column * rows + row'. Function
indices refer to registration order in the function set.

Functions:
    format_chromosome(chromosome):        Encode a chromosome as a string
    save_chromosome(path, chromosome):    Write a chromosome to a file
    parse_chromosome(text, chromosome):   Decode a string into an existing chromosome
    load_chromosome(path, chromosome):    Read a file into an existing chromosome
"""

import os
import re
from loguru import logger
from typing import TYPE_CHECKING

from evocgp.genotype.gene       import Connection
from evocgp.genotype.input_gene import Input

if TYPE_CHECKING:
    from evocgp.genotype.chromosome import Chromosome

_NUMBER = re.compile(r"-?\d+")

def _encode(connection: Connection, config) -> int:
    if isinstance(connection, Input):
        return connection.index
    return config.num_inputs + connection.column * config.rows + connection.row

def format_chromosome(chromosome: 'Chromosome') -> str:
    config = chromosome.config
    parts  = []

    for c in range(config.columns):
        for r in range(config.rows):
            node = chromosome.nodes[r][c]
            for connection in node.connections:
                parts.append(f" {_encode(connection, config)}")
            parts.append(f" {config.get_function_index(node.function)}")
            parts.append("\t")

    parts.append("\t\t")
    for output in chromosome.outputs:
        parts.append(f" {_encode(output.source, config)}")

    return "".join(parts)

def save_chromosome(path: str, chromosome: 'Chromosome'):
    logger.info(f"[Parser] Saving to {os.path.abspath(path)}...")
    with open(path, "w") as f:
        f.write(format_chromosome(chromosome))
    logger.info("[Parser] Chromosome saved successfully")

def parse_chromosome(text: str, chromosome: 'Chromosome'):
    """
    Decode 'text' and apply it to 'chromosome'.

    The whole text is decoded and checked before any gene is changed, so a
    malformed encoding leaves the chromosome untouched. Node connections must
    address an input or a node in an earlier column.

    Raises:
        ValueError: If the encoding does not match the chromosome's topology
                    and function set, or is otherwise malformed
    """
    config = chromosome.config
    arity  = config.arity

    sections = text.split("\t\t\t")
    if len(sections) != 2:
        raise ValueError("Chromosome encoding must contain exactly one node/output separator")

    node_tokens   = sections[0].split()
    output_tokens = sections[1].split()
    for token in node_tokens + output_tokens:
        if not _NUMBER.fullmatch(token):
            raise ValueError(f"Invalid gene '{token}' in chromosome encoding")

    node_genes   = [int(token) for token in node_tokens]
    output_genes = [int(token) for token in output_tokens]

    expected_genes = config.num_nodes * (arity + 1)
    if len(node_genes) != expected_genes or len(output_genes) != config.num_outputs:
        raise ValueError(f"The chromosome encoding has {len(node_genes)} node genes and "
                         f"{len(output_genes)} output genes, but the experiment needs "
                         f"{expected_genes} and {config.num_outputs}")

    num_addresses = config.num_inputs + config.num_nodes
    num_functions = config.function_set.total_function_count

    def decode(gene: int, column: int | None = None) -> Connection:
        if gene < 0 or gene >= num_addresses:
            raise ValueError(f"Connection index {gene} is out of range")
        if gene < config.num_inputs:
            return chromosome.inputs[gene]
        row, source_column = (gene - config.num_inputs) % config.rows, (gene - config.num_inputs) // config.rows
        if column is not None and source_column >= column:
            raise ValueError(f"Node in column {column} cannot connect to column {source_column}")
        return chromosome.nodes[row][source_column]

    # Decode everything first
    decoded = []
    genes   = iter(node_genes)
    for c in range(config.columns):
        for r in range(config.rows):
            connections = [decode(next(genes), c) for _ in range(arity)]
            function_index = next(genes)
            if not 0 <= function_index < num_functions:
                raise ValueError(f"Function index {function_index} is out of range")
            decoded.append((chromosome.nodes[r][c], config.get_function(function_index), connections))
    sources = [decode(gene) for gene in output_genes]

    # Then apply
    for node, function, connections in decoded:
        node.initialise(function, *connections)
    for output, source in zip(chromosome.outputs, sources):
        output.set_source(source)

def load_chromosome(path: str, chromosome: 'Chromosome'):
    """
    Read the chromosome stored at 'path' into 'chromosome'.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError:        If its contents are malformed (the chromosome is left unchanged)
    """
    if not os.path.exists(path):
        logger.error(f"[Parser] Could not find {os.path.abspath(path)}")
        raise FileNotFoundError(f"Chromosome file '{path}' not found")

    with open(path) as f:
        text = f.read()

    logger.info(f"[Parser] Parsing file: {os.path.abspath(path)}...")
    try:
        parse_chromosome(text, chromosome)
    except ValueError as e:
        logger.error(f"[Parser] {os.path.basename(path)}: {e}")
        raise
    logger.info("[Parser] File parsed successfully")
