"""
CGP Gene Interfaces Module

This module defines the two roles a chromosome element can play. Inputs are
connections only, outputs are mutable only, and nodes are both.

Classes:
    Connection: Something a node or an output can read a value from
    Mutable:    Something a mutator can change
"""

from abc import ABC, abstractmethod

class Connection(ABC):
    """
    An element whose value can be read by a node or an output.
    """

    @abstractmethod
    def get_value(self):
        pass

class Mutable(ABC):
    """
    An element carrying genes that a mutator can change.
    """

    @abstractmethod
    def mutate(self):
        """
        Replace one of this element's genes with a valid random value.
        """
        pass

    @abstractmethod
    def copy_of(self, other: 'Mutable') -> bool:
        """
        Whether 'other' is a structural copy of this element.

        A copy sits at the same position of a different chromosome and holds
        equivalent genes: the same function object, and connections to the
        same addresses but not to the same instances. The relation is
        symmetric but not reflexive, an element is never a copy of itself.
        """
        pass
