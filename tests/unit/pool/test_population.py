"""
Unit tests for evocgp.pool.population module.
"""

import pytest
from unittest.mock import patch

from evocgp.genotype   import Chromosome
from evocgp.pool       import Population
from evocgp.run.config import FitnessOrientation


# ============================================================================
# Helpers
# ============================================================================

def assign_fitness(population, values):
    for chromosome, fitness in zip(population, values):
        chromosome.fitness = fitness


# ============================================================================
# Construction
# ============================================================================

class TestPopulationInit:
    """Test population construction."""

    def test_size(self, config):
        population = Population(config)
        assert len(population) == config.population_size

    def test_distinct_random_chromosomes(self, config):
        population = Population(config)
        assert len({id(c) for c in population}) == config.population_size
        assert not population[0].compare_genes_to(population[1])

    def test_from_parent(self, config):
        parent     = Chromosome(config)
        population = Population(config, parent)
        for chromosome in population:
            assert chromosome is not parent
            assert chromosome.compare_genes_to(parent)


# ============================================================================
# Access and copying
# ============================================================================

class TestPopulationAccess:

    def test_iteration_and_indexing(self, config):
        population = Population(config)
        assert list(population) == [population[i] for i in range(len(population))]

    def test_out_of_range(self, config):
        with pytest.raises(IndexError):
            Population(config)[config.population_size]

    def test_random_chromosome(self, config):
        population = Population(config)
        with patch.object(config, "random_int", return_value=3):
            assert population.get_random_chromosome() is population[3]

    def test_copy_chromosome(self, config):
        population = Population(config)
        target     = population[2]
        population.copy_chromosome(0, 2)
        assert population[2] is target
        assert population[2].compare_genes_to(population[0])

    def test_copy_to_itself_does_nothing(self, config):
        population = Population(config)
        with patch.object(Chromosome, "copy_genes") as copy_genes:
            population.copy_chromosome(1, 1)
        copy_genes.assert_not_called()

    def test_reinitialise_keeps_objects(self, config):
        population = Population(config)
        before     = list(population)
        snapshot   = Chromosome.from_chromosome(population[0])
        population.reinitialise()
        assert list(population) == before
        assert not population[0].compare_genes_to(snapshot)


# ============================================================================
# Sorting
# ============================================================================

class TestPopulationSort:
    """Test that sorting puts the best chromosome last."""

    def test_high_orientation(self, config):
        population = Population(config)
        assign_fitness(population, [3, 9, 1, 4, 2])
        population.sort()
        assert [c.fitness for c in population] == [1, 2, 3, 4, 9]

    def test_low_orientation(self, config):
        config.fitness_orientation = FitnessOrientation.LOW
        population = Population(config)
        assign_fitness(population, [3, 9, 1, 4, 2])
        population.sort()
        assert [c.fitness for c in population] == [9, 4, 3, 2, 1]

    def test_stable(self, config):
        population = Population(config)
        assign_fitness(population, [1, 1, 0, 1, 0])
        order = [population[0], population[1], population[3]]
        population.sort()
        assert list(population)[2:] == order

    def test_fittest(self, config):
        population = Population(config)
        assign_fitness(population, [3, 9, 1, 9, 2])
        assert population.get_fittest_chromosome() is population[1]
        config.fitness_orientation = FitnessOrientation.LOW
        assert population.get_fittest_chromosome() is population[2]
