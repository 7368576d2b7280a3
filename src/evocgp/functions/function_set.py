"""
CGP Function Set Module

This module implements the function registry that chromosome nodes compute
against. A function set is an ordered list of distinct functions plus a
subset of them which nodes are currently allowed to use.

Classes:
    Function:    A named primitive with a fixed arity
    FunctionSet: Ordered collection of functions with an enabled subset
"""

from typing import Any, Callable

class Function:
    """
    A primitive operation available to the nodes of a chromosome.

    Public Attributes:
        name:     Human-readable name, used when printing chromosomes
        arity:    Number of arguments the function takes
        behavior: The callable that computes the result

    Functions are called like the callable they wrap. Calling one with fewer
    arguments than its arity raises ValueError; extra arguments are ignored.
    """

    def __init__(self, name: str, arity: int, behavior: Callable[..., Any]):
        self.name     : str                = name
        self.arity    : int                = arity
        self.behavior : Callable[..., Any] = behavior

    def __call__(self, *args):
        if len(args) < self.arity:
            raise ValueError(f"{self.name} received {len(args)} arguments but arity is {self.arity}.")
        return self.behavior(*args[:self.arity])

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"Function({self.name!r}, arity={self.arity})"

class FunctionSet:
    """
    An ordered registry of functions, some of which are enabled.

    Indices refer to the position of a function in the registration order
    and never change. The enabled indices are kept sorted and free of
    duplicates; only enabled functions are offered to the random picker,
    and only they count towards the maximum arity.

    Public Methods:
        register_functions(*functions): Append unseen functions and enable them
        enable_function(index):         Allow nodes to use a function
        disable_function(index):        Forbid nodes from using a function
        get_allowed_function(index):    Return the index-th enabled function
        get_function(index):            Return the index-th registered function
        index_of(function):             Return the registration index of a function
        is_enabled(function):           Whether a function is enabled

    Public Properties:
        allowed_function_count: Number of enabled functions
        total_function_count:   Number of registered functions
        max_arity:              Largest arity among the enabled functions (0 if none)
        enabled_indices:        Sorted copy of the enabled indices
    """

    def __init__(self, *functions: Function):
        self._functions : list[Function] = []
        self._enabled   : list[int]      = []
        self.register_functions(*functions)

    def register_functions(self, *functions: Function):
        """
        Add functions to the set and enable them.

        A function whose behavior is already registered is skipped, so
        registering the same primitive twice leaves the set unchanged.
        """
        for function in functions:
            if self._already_have(function):
                continue
            self._functions.append(function)
            self.enable_function(len(self._functions) - 1)

    def _already_have(self, function: Function) -> bool:
        return any(f is function or f.behavior is function.behavior for f in self._functions)

    def _check_index(self, index: int):
        if not 0 <= index < len(self._functions):
            raise IndexError(f"Function {index} does not exist, "
                             f"the set only has {len(self._functions)} functions.")

    def enable_function(self, index: int):
        self._check_index(index)
        if index not in self._enabled:
            self._enabled.append(index)
            self._enabled.sort()

    def disable_function(self, index: int):
        self._check_index(index)
        if index in self._enabled:
            self._enabled.remove(index)

    def get_allowed_function(self, index: int) -> Function:
        return self._functions[self._enabled[index]]

    def get_function(self, index: int) -> Function:
        return self._functions[index]

    def index_of(self, function: Function) -> int:
        """
        Return the registration index of 'function'.

        Raises:
            ValueError: If the function is not part of this set
        """
        for index, f in enumerate(self._functions):
            if f is function:
                return index
        raise ValueError(f"Function {function} is not part of this function set")

    def is_enabled(self, function: Function) -> bool:
        return any(self._functions[index] is function for index in self._enabled)

    @property
    def allowed_function_count(self) -> int:
        return len(self._enabled)

    @property
    def total_function_count(self) -> int:
        return len(self._functions)

    @property
    def max_arity(self) -> int:
        return max((self._functions[index].arity for index in self._enabled), default=0)

    @property
    def enabled_indices(self) -> list[int]:
        return list(self._enabled)

    def __len__(self):
        return len(self._functions)

    def __iter__(self):
        return iter(self._functions)

    def __str__(self):
        return f"{type(self).__name__}({', '.join(f.name for f in self._functions)})"
