"""
CGP Evolutionary Strategies Package

Modules:
    evolutionary_strategy: EvolutionaryStrategy abstract base class
    mu_plus_lambda:        The (mu + lambda) strategy
    tournament_selection:  Tournament selection
"""

from evocgp.strategies.evolutionary_strategy import EvolutionaryStrategy
from evocgp.strategies.mu_plus_lambda        import MuPlusLambda
from evocgp.strategies.tournament_selection  import TournamentSelection

__all__ = ['EvolutionaryStrategy',
           'MuPlusLambda',
           'TournamentSelection']
