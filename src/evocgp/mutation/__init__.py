"""
CGP Mutation Package

Modules:
    mutator:               Mutator abstract base class
    point_mutator:         PointMutator, FixedPointMutator and PercentPointMutator
    probabilistic_mutator: ProbabilisticMutator
"""

from evocgp.mutation.mutator               import Mutator
from evocgp.mutation.point_mutator         import PointMutator, FixedPointMutator, PercentPointMutator
from evocgp.mutation.probabilistic_mutator import ProbabilisticMutator

__all__ = ['Mutator',
           'PointMutator',
           'FixedPointMutator',
           'PercentPointMutator',
           'ProbabilisticMutator']
