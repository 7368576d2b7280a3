"""
CGP Configuration Module

This module implements the Config class, which stores every parameter of a
CGP experiment and owns the single random number generator shared by all
stochastic decisions (connection picking, function picking, mutation trials,
tournament sampling).

Classes:
    FitnessOrientation: Whether higher or lower fitness values are better
    ConfigError:        Raised when a parameter combination cannot be run
    Config:             Experiment parameters, random number source and function lookups
"""

import configparser
import os
import numpy as np
from enum   import Enum
from loguru import logger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from evocgp.functions import Function, FunctionSet

class FitnessOrientation(Enum):
    """
    Which end of the fitness scale holds the best individuals.
    """
    HIGH = "high"
    LOW  = "low"

class ConfigError(ValueError):
    """
    A parameter (or combination of parameters) that makes evolution impossible.
    Raised before a run starts, never from inside the evolutionary loop.
    """

class Config:

    @staticmethod
    def _parse_disabled_functions(raw_value) -> list[int]:
        """
        Parse 'disabled_functions' from string to list of function indices.

        Parameters:
            raw_value: Either None, "none", a comma-separated list of indices, or already a list

        Returns:
            List of function indices
        """
        if raw_value is None:
            return []
        if isinstance(raw_value, list):
            return raw_value
        if raw_value.strip().lower() in ('', 'none'):
            return []

        indices = []
        for token in raw_value.split(','):
            token = token.strip()
            if not token.isdigit():
                raise ValueError(f"Invalid function index '{token}' in disabled_functions")
            indices.append(int(token))
        return indices

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a default Config for manual attribute setting.
        """

        # Attributes not read from the configuration file
        self.arity       : int                  = 0
        self.function_set: 'FunctionSet | None' = None

        # Default config for testing/manual setup
        if config_file is None:
            self.rows        = 5
            self.columns     = 5
            self.levels_back = 2

            self.num_inputs          = 3
            self.num_outputs         = 3
            self.fitness_orientation = FitnessOrientation.HIGH

            self.population_size = 5

            self.generations     = 1000000
            self.runs            = 5
            self.seed            = 1234
            self.report_interval = 1

            self.genes_mutated        = 5
            self.mutation_rate        = 10.0
            self.mutation_probability = 10.0
            self.report_mutator       = False

            self.mu              = 1
            self.lambda_         = 4
            self.tournament_size = 1
            self.report_strategy = False

            self.disabled_functions = []

            self.reseed(self.seed)
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [CHROMOSOME]

        # The number of rows and columns of the node grid.
        self.rows    = get_value('CHROMOSOME', 'rows'   , int)
        self.columns = get_value('CHROMOSOME', 'columns', int)

        # How many preceding columns a node may connect into.
        # Set it equal to 'columns' for unrestricted (but still acyclic) connectivity.
        self.levels_back = get_value('CHROMOSOME', 'levels_back', int)

        # [PROBLEM]

        # The number of program inputs and outputs.
        # These are usually dictated by the problem being solved.
        self.num_inputs  = get_value('PROBLEM', 'num_inputs' , int)
        self.num_outputs = get_value('PROBLEM', 'num_outputs', int)

        # Whether higher ("high") or lower ("low") fitness is better.
        # Usually dictated by the problem being solved.
        orientation = get_value('PROBLEM', 'fitness_orientation', str, default='high')
        self.fitness_orientation = FitnessOrientation(orientation.strip().lower())

        # [POPULATION]

        # The number of chromosomes in each generation.
        self.population_size = get_value('POPULATION', 'population_size', int)

        # [EXPERIMENT]

        # The maximum number of generations per run.
        self.generations = get_value('EXPERIMENT', 'generations', int)

        # The number of independent runs in the experiment.
        self.runs = get_value('EXPERIMENT', 'runs', int, default=1)

        # The seed of the random number generator; fixes the whole experiment.
        self.seed = get_value('EXPERIMENT', 'seed', int, default=1234)

        # Report progress every this many generations (0 disables periodic reports).
        self.report_interval = get_value('EXPERIMENT', 'report_interval', int, default=1)

        # [MUTATOR]

        # Number of genes changed by the fixed point mutator.
        self.genes_mutated = get_value('MUTATOR', 'genes_mutated', int, default=5)

        # Percentage of all genes changed by the percent point mutator.
        self.mutation_rate = get_value('MUTATOR', 'mutation_rate', float, default=10.0)

        # Per-gene probability (in percent) used by the probabilistic mutator.
        self.mutation_probability = get_value('MUTATOR', 'mutation_probability', float, default=10.0)

        # Log every gene the mutators change (debug level).
        self.report_mutator = get_value('MUTATOR', 'report', bool, default=False)

        # [STRATEGY]

        # Parents and offspring of the (mu + lambda) strategy.
        # mu + lambda must equal 'population_size'.
        self.mu      = get_value('STRATEGY', 'mu'    , int, default=1)
        self.lambda_ = get_value('STRATEGY', 'lambda', int, default=self.population_size - 1)

        # Contenders per tournament (tournament selection only).
        self.tournament_size = get_value('STRATEGY', 'tournament_size', int, default=1)

        # Log the parent choices of every generation (debug level).
        self.report_strategy = get_value('STRATEGY', 'report', bool, default=False)

        # [FUNCTIONS]

        # Indices of functions (in the problem's function set) which nodes may not use.
        raw_disabled = get_value('FUNCTIONS', 'disabled_functions', str, default=None)
        self.disabled_functions = self._parse_disabled_functions(raw_disabled)

        self.reseed(self.seed)

    # ------------------------------------------------------------------
    # Topology helpers
    # ------------------------------------------------------------------

    @property
    def num_nodes(self) -> int:
        return self.rows * self.columns

    @property
    def total_genes(self) -> int:
        """
        Number of genes in a chromosome: every node has one gene
        per connection plus one for its function, every output has one.
        """
        return self.num_nodes * (self.arity + 1) + self.num_outputs

    # ------------------------------------------------------------------
    # Random number generation
    # ------------------------------------------------------------------

    def reseed(self, seed: int) -> None:
        """
        Replace the random number generator with a fresh one seeded with 'seed'.
        """
        self.seed = seed
        self.rng  = np.random.default_rng(seed)

    def random_int(self, limit: int) -> int:
        """
        Draw an integer uniformly from [0, limit).
        """
        return int(self.rng.integers(limit))

    def random_double(self, limit: float = 1.0) -> float:
        """
        Draw a float uniformly from [0, limit).
        """
        return float(self.rng.random()) * limit

    # ------------------------------------------------------------------
    # Function lookups
    # ------------------------------------------------------------------

    def set_function_set(self, function_set: 'FunctionSet') -> None:
        """
        Bind the function set nodes compute against.

        Any functions listed in 'disabled_functions' are disabled, after
        which the arity is updated to the largest arity still enabled.
        """
        self.function_set = function_set
        for index in self.disabled_functions:
            function_set.disable_function(index)
        self.refresh_arity()

    def refresh_arity(self) -> None:
        """
        Recompute the arity, which can change as functions are enabled or disabled.
        """
        self.arity = self.function_set.max_arity if self.function_set is not None else 0

    def random_function(self) -> 'Function':
        """
        Draw one of the enabled functions uniformly at random.
        """
        count = self.function_set.allowed_function_count
        return self.function_set.get_allowed_function(self.random_int(count))

    def get_function(self, index: int) -> 'Function':
        return self.function_set.get_function(index)

    def get_function_index(self, function: 'Function') -> int:
        return self.function_set.index_of(function)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self) -> None:
        """
        Check that evolution can proceed with the current parameters.

        Problems that make a run impossible are collected and raised together;
        legal but degenerate settings are only logged as warnings.

        Raises:
            ConfigError: If any parameter is invalid
        """
        errors = []

        if self.function_set is None:
            errors.append("No function set has been assigned.")
        elif self.arity < 1:
            errors.append("Arity is smaller than 1. Check that at least one function is enabled.")

        if self.rows is None or self.rows <= 0:
            errors.append("Chromosome must have at least 1 row.")
        if self.columns is None or self.columns <= 0:
            errors.append("Chromosome must have at least 1 column.")
        if self.levels_back is None or self.levels_back <= 0:
            errors.append("Levels back must be at least 1.")
        elif self.columns is not None and self.levels_back > self.columns:
            errors.append("Levels back must be less than or equal to the number of columns.")
        if self.num_inputs is None or self.num_inputs <= 0:
            errors.append("There must be at least 1 input.")
        if self.num_outputs is None or self.num_outputs <= 0:
            errors.append("There must be at least 1 output.")
        if self.population_size is None or self.population_size <= 0:
            errors.append("Population size must be at least 1.")
        if self.generations is None or self.generations <= 0:
            errors.append("Number of generations must be greater than 0.")
        if self.runs is None or self.runs <= 0:
            errors.append("Number of runs must be greater than 0.")

        if errors:
            for message in errors:
                logger.error(f"[CGP] Invalid configuration: {message}")
            raise ConfigError(" ".join(errors))

        if self.report_interval > self.generations:
            logger.warning("[CGP] Report interval exceeds the number of generations, no reports will be printed.")
