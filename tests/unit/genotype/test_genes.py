"""
Unit tests for the chromosome elements: Input, Node and Output.
"""

import pytest
from unittest.mock import patch

from evocgp.genotype   import Chromosome, Input, Node, Output
from evocgp.genotype.node_gene import same_address


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def chromosome(small_config):
    return Chromosome(small_config)

@pytest.fixture
def other(small_config):
    return Chromosome(small_config)


# ============================================================================
# Input
# ============================================================================

class TestInput:

    def test_value(self):
        input_ = Input(2)
        input_.value = 7
        assert input_.get_value() == 7
        assert input_.index == 2

    def test_str(self):
        assert str(Input(1)) == "Input 1"


# ============================================================================
# Node
# ============================================================================

class TestNodeInitialise:
    """Test setting node genes."""

    def test_initialise(self, chromosome, small_config):
        node     = chromosome.get_node(0, 1)
        function = small_config.get_function(2)
        node.initialise(function, chromosome.get_input(0), chromosome.get_node(2, 0))
        assert node.function is function
        assert node.connections == (chromosome.get_input(0), chromosome.get_node(2, 0))

    def test_initialise_wrong_connection_count(self, chromosome, small_config):
        node = chromosome.get_node(0, 1)
        with pytest.raises(ValueError, match="Received 1 connections but needed exactly 2"):
            node.initialise(small_config.get_function(0), chromosome.get_input(0))

    def test_initialise_invalidates_cache(self, chromosome, small_config):
        chromosome.get_active_nodes()
        chromosome.get_node(0, 1).initialise(small_config.get_function(0),
                                             chromosome.get_input(0), chromosome.get_input(1))
        assert chromosome._recompute

    def test_set_connection_unchecked(self, chromosome):
        # direct assignment trusts the caller
        node = chromosome.get_node(0, 0)
        node.set_connection(1, chromosome.get_node(2, 2))
        assert node.get_connection(1) is chromosome.get_node(2, 2)


class TestNodeValue:
    """Test node evaluation."""

    def test_get_value(self, chromosome, small_config):
        node = chromosome.get_node(0, 0)
        node.initialise(small_config.get_function(2), chromosome.get_input(0), chromosome.get_input(1))
        chromosome.set_inputs(3, 4, 5)
        assert node.get_value() == 12

    def test_recursive_value(self, chromosome, small_config):
        add = small_config.get_function(0)
        chromosome.get_node(0, 0).initialise(add, chromosome.get_input(0), chromosome.get_input(1))
        chromosome.get_node(0, 1).initialise(add, chromosome.get_node(0, 0), chromosome.get_node(0, 0))
        chromosome.set_inputs(1, 2, 3)
        assert chromosome.get_node(0, 1).get_value() == 6

    def test_str(self, chromosome):
        assert str(chromosome.get_node(1, 2)) == "Node [1, 2]"


class TestNodeMutate:
    """Test node mutation."""

    def test_gene_zero_mutates_function(self, chromosome, small_config):
        node        = chromosome.get_node(1, 1)
        connections = node.connections
        with patch.object(small_config, "random_int", side_effect=[0, 3]):
            node.mutate()
        assert node.function is small_config.get_function(3)
        assert node.connections == connections

    def test_other_genes_mutate_connections(self, chromosome, small_config):
        node     = chromosome.get_node(1, 1)
        function = node.function
        # gene 2 is connection 1; the picker then draws input 2
        with patch.object(small_config, "random_int", side_effect=[2, 2]):
            node.mutate()
        assert node.get_connection(1) is chromosome.get_input(2)
        assert node.function is function

    def test_mutated_connection_stays_in_window(self, chromosome):
        node = chromosome.get_node(0, 0)
        for _ in range(200):
            node.mutate()
            assert all(isinstance(c, Input) for c in node.connections)

    def test_function_changes_only_through_setter(self, chromosome, small_config):
        node = chromosome.get_node(0, 0)
        with pytest.raises(AttributeError):
            node.function = small_config.get_function(0)
        # set_function keeps the active node list in step
        chromosome.get_output(0).set_source(node)
        active = chromosome.get_active_nodes()
        node.set_function(small_config.get_function(1))
        assert chromosome.get_active_nodes() is not active


class TestNodeCopyOf:
    """Test the structural copy relation between nodes."""

    def test_copy(self, chromosome, other):
        other.copy_genes(chromosome)
        assert chromosome.get_node(1, 1).copy_of(other.get_node(1, 1))
        assert other.get_node(1, 1).copy_of(chromosome.get_node(1, 1))

    def test_not_reflexive(self, chromosome):
        node = chromosome.get_node(1, 1)
        assert not node.copy_of(node)

    def test_different_position(self, chromosome, other):
        other.copy_genes(chromosome)
        assert not chromosome.get_node(1, 1).copy_of(other.get_node(1, 2))

    def test_different_function(self, chromosome, other, small_config):
        other.copy_genes(chromosome)
        node = other.get_node(1, 1)
        functions = [small_config.get_function(i) for i in range(4)]
        node.set_function(next(f for f in functions if f is not node.function))
        assert not chromosome.get_node(1, 1).copy_of(node)

    def test_connection_differing_only_in_row(self, chromosome, other, small_config):
        add = small_config.get_function(0)
        chromosome.get_node(0, 2).initialise(add, chromosome.get_node(0, 1), chromosome.get_input(0))
        other.get_node(0, 2).initialise(add, other.get_node(1, 1), other.get_input(0))
        assert not chromosome.get_node(0, 2).copy_of(other.get_node(0, 2))

    def test_shared_connection_instance(self, chromosome, other, small_config):
        add = small_config.get_function(0)
        chromosome.get_node(0, 2).initialise(add, chromosome.get_input(0), chromosome.get_input(1))
        other.get_node(0, 2).initialise(add, chromosome.get_input(0), other.get_input(1))
        assert not chromosome.get_node(0, 2).copy_of(other.get_node(0, 2))

    def test_output_is_not_a_node_copy(self, chromosome, other):
        assert not chromosome.get_node(0, 0).copy_of(other.get_output(0))


class TestSameAddress:

    def test_inputs(self, chromosome, other):
        assert same_address(chromosome.get_input(1), other.get_input(1))
        assert not same_address(chromosome.get_input(1), other.get_input(2))
        assert not same_address(chromosome.get_input(1), chromosome.get_input(1))

    def test_mixed_types(self, chromosome, other):
        assert not same_address(chromosome.get_input(0), other.get_node(0, 0))


# ============================================================================
# Output
# ============================================================================

class TestOutput:
    """Test program outputs."""

    def test_calculate(self, chromosome):
        output = chromosome.get_output(0)
        output.set_source(chromosome.get_input(1))
        chromosome.set_inputs(1, 9, 3)
        assert output.calculate() == 9

    def test_set_source_invalidates_cache(self, chromosome):
        chromosome.get_active_nodes()
        chromosome.get_output(0).set_source(chromosome.get_node(2, 2))
        assert chromosome.get_node(2, 2) in chromosome.get_active_nodes()

    def test_source_changes_only_through_setter(self, chromosome):
        output = chromosome.get_output(0)
        before = output.source
        with pytest.raises(AttributeError):
            output.source = chromosome.get_node(2, 2)
        assert output.source is before

    def test_mutate_uses_whole_grid(self, chromosome, small_config):
        output = chromosome.get_output(0)
        # 3 inputs, then nodes row-major: index 3 + 8 is node (2, 2)
        with patch.object(small_config, "random_int", return_value=11):
            output.mutate()
        assert output.source is chromosome.get_node(2, 2)

    def test_copy_of(self, chromosome, other):
        other.copy_genes(chromosome)
        assert chromosome.get_output(1).copy_of(other.get_output(1))
        assert not chromosome.get_output(1).copy_of(chromosome.get_output(1))
        assert not chromosome.get_output(0).copy_of(other.get_output(1))

    def test_copy_of_different_source(self, chromosome, other):
        other.copy_genes(chromosome)
        other.get_output(0).set_source(other.get_node(2, 2))
        chromosome.get_output(0).set_source(chromosome.get_input(0))
        assert not chromosome.get_output(0).copy_of(other.get_output(0))

    def test_str(self, chromosome):
        assert str(chromosome.get_output(1)) == "Output 1"
        assert isinstance(chromosome.get_output(1), Output)
