from evocgp.pool.population import Population

__all__ = ['Population']
