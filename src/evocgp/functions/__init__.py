"""
CGP Functions Package

This package implements the primitives that chromosome nodes compute, and
the registry which controls which of them evolution may use.

Modules:
    function_set:        Function and FunctionSet classes
    symbolic_regression: Floating point functions with protected division
    digital_circuit:     Bit-parallel boolean functions on 32-bit words
    polynomial:          Integer arithmetic functions

Exported Classes:
    Function:                    A named primitive with a fixed arity
    FunctionSet:                 Ordered registry with an enabled subset
    SymbolicRegressionFunctions: Built-in set for symbolic regression
    DigitalCircuitFunctions:     Built-in set for digital circuit synthesis
    PolynomialFunctions:         Built-in set for polynomial fitting
"""

from evocgp.functions.function_set        import Function, FunctionSet
from evocgp.functions.symbolic_regression import SymbolicRegressionFunctions
from evocgp.functions.digital_circuit     import DigitalCircuitFunctions
from evocgp.functions.polynomial          import PolynomialFunctions

__all__ = ['Function',
           'FunctionSet',
           'SymbolicRegressionFunctions',
           'DigitalCircuitFunctions',
           'PolynomialFunctions']
