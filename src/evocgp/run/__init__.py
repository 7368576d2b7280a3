"""
CGP Run Package

Modules:
    config:  Config, ConfigError and FitnessOrientation
    problem: Problem abstract base class
    trial:   Trial experiment driver and RunResult
"""

from evocgp.run.config  import Config, ConfigError, FitnessOrientation
from evocgp.run.problem import Problem
from evocgp.run.trial   import RunResult, Trial

__all__ = ['Config',
           'ConfigError',
           'FitnessOrientation',
           'Problem',
           'RunResult',
           'Trial']
