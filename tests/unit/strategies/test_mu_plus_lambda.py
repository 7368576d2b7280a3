"""
Unit tests for evocgp.strategies.mu_plus_lambda module.
"""

import pytest
from unittest.mock import Mock, patch

from evocgp.genotype   import Chromosome
from evocgp.mutation   import Mutator
from evocgp.pool       import Population
from evocgp.run.config import ConfigError, FitnessOrientation
from evocgp.strategies import MuPlusLambda


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def population(config):
    return Population(config)

@pytest.fixture
def mutator():
    return Mock(spec=Mutator)

def assign_fitness(population, values):
    for chromosome, fitness in zip(population, values):
        chromosome.fitness = fitness

def snapshot(population):
    return [Chromosome.from_chromosome(c) for c in population]


# ============================================================================
# Validation
# ============================================================================

class TestValidation:

    def test_defaults_from_config(self, config):
        strategy = MuPlusLambda(config)
        assert (strategy.mu, strategy.lambda_) == (1, 4)
        strategy.validate()

    @pytest.mark.parametrize("mu, lambda_", [(0, 5), (5, 0), (2, 2), (3, 4)])
    def test_invalid(self, config, mu, lambda_):
        with pytest.raises(ConfigError):
            MuPlusLambda(config, mu, lambda_).validate()


# ============================================================================
# Parent selection
# ============================================================================

class TestSelection:
    """Test which chromosomes become the new parents."""

    def test_worse_offspring_keep_parents(self, config, population, mutator):
        # parents are the last two slots
        strategy = MuPlusLambda(config, 2, 3)
        assign_fitness(population, [1, 2, 3, 10, 20])
        before = snapshot(population)
        strategy.evolve(population, mutator)
        assert population[3].compare_genes_to(before[3])
        assert population[4].compare_genes_to(before[4])
        assert [population[3].fitness, population[4].fitness] == [10, 20]

    def test_better_offspring_replaces_parent(self, config, population, mutator):
        strategy = MuPlusLambda(config)
        assign_fitness(population, [1, 7, 2, 3, 5])
        before = snapshot(population)
        strategy.evolve(population, mutator)
        assert population[4].compare_genes_to(before[1])
        assert population[4].fitness == 7

    def test_equal_offspring_replaces_old_parent(self, config, population, mutator):
        strategy = MuPlusLambda(config)
        assign_fitness(population, [1, 5, 2, 3, 5])
        before = snapshot(population)
        strategy.evolve(population, mutator)
        assert population[4].compare_genes_to(before[1])

    def test_equal_offspring_does_not_replace_promoted_offspring(self, config, population, mutator):
        strategy = MuPlusLambda(config)
        # offspring 1 displaces the parent, offspring 3 ties with offspring 1
        assign_fitness(population, [1, 5, 2, 5, 5])
        before = snapshot(population)
        strategy.evolve(population, mutator)
        assert population[4].compare_genes_to(before[1])

    def test_each_offspring_replaces_one_parent(self, config, population, mutator):
        strategy = MuPlusLambda(config, 2, 3)
        assign_fitness(population, [9, 1, 1, 5, 5])
        before = snapshot(population)
        strategy.evolve(population, mutator)
        # offspring 0 takes the first parent slot only
        assert population[3].compare_genes_to(before[0])
        assert population[4].compare_genes_to(before[4])

    def test_low_orientation(self, config, population, mutator):
        config.fitness_orientation = FitnessOrientation.LOW
        strategy = MuPlusLambda(config)
        assign_fitness(population, [4, 0.5, 2, 3, 1])
        before = snapshot(population)
        strategy.evolve(population, mutator)
        assert population[4].compare_genes_to(before[1])


# ============================================================================
# Offspring generation
# ============================================================================

class TestOffspring:
    """Test how the offspring slots are refilled."""

    def test_offspring_are_mutated_copies_of_parents(self, config, population, mutator):
        strategy = MuPlusLambda(config)
        assign_fitness(population, [1, 2, 3, 4, 5])
        strategy.evolve(population, mutator)
        # the mock mutator changes nothing, so every offspring equals the parent
        for i in range(4):
            assert population[i].compare_genes_to(population[4])
        assert [call.args[0] for call in mutator.mutate.call_args_list] == list(population)[:4]

    def test_random_parent_choice(self, config, population, mutator):
        strategy = MuPlusLambda(config, 2, 3)
        assign_fitness(population, [0, 0, 0, 8, 9])
        with patch.object(config, "random_int", side_effect=[0, 1, 0]):
            strategy.evolve(population, mutator)
        # random_int(mu) = 0 picks the last slot, 1 the one before it
        assert population[0].compare_genes_to(population[4])
        assert population[1].compare_genes_to(population[3])
        assert population[2].compare_genes_to(population[4])

    def test_chromosome_objects_never_replaced(self, config, population, mutator):
        before = list(population)
        MuPlusLambda(config).evolve(population, mutator)
        assert list(population) == before


# ============================================================================
# Generation reports
# ============================================================================

class TestReport:

    def test_silent_by_default(self, config, population, mutator, log_messages):
        MuPlusLambda(config).evolve(population, mutator)
        assert log_messages == []

    def test_report_from_config(self, config, population, mutator, log_messages):
        config.report_strategy = True
        MuPlusLambda(config).evolve(population, mutator)
        assert len([m for m in log_messages if m.startswith("[ES] Copying Chr 4")]) == 4
        assert log_messages[-1] == "[ES] Generation is complete"
