import numpy as np

from evocgp.functions.function_set import Function, FunctionSet

# Division by anything smaller than this returns the dividend unchanged
DIVISION_LIMIT = 0.0001

INT_MIN = -2**31
INT_MAX =  2**31 - 1

def _to_int(value: float) -> int:
    """
    Convert a float to an integer the way a saturating cast does:
    NaN becomes 0 and out-of-range values are clamped to 32 bits.
    """
    if np.isnan(value):
        return 0
    return int(min(max(value, INT_MIN), INT_MAX))

def square_root(in0):
    return int(np.sqrt(abs(in0)))

def power(in0, in1):
    with np.errstate(all='ignore'):
        return _to_int(float(np.power(np.float64(in0), np.float64(in1))))

def addition(in0, in1):
    return in0 + in1

def subtraction(in0, in1):
    return in0 - in1

def multiplication(in0, in1):
    return in0 * in1

def division(in0, in1):
    if in1 < DIVISION_LIMIT:
        return in0
    # integer division truncates towards zero
    quotient = abs(in0) // abs(in1)
    return quotient if (in0 >= 0) == (in1 >= 0) else -quotient

polynomial_functions = [
    Function("Square root"   , 1, square_root),
    Function("Power"         , 2, power),
    Function("Addition"      , 2, addition),
    Function("Subtraction"   , 2, subtraction),
    Function("Multiplication", 2, multiplication),
    Function("Division"      , 2, division),
    ]

class PolynomialFunctions(FunctionSet):
    """
    Integer functions for polynomial fitting problems.
    """

    def __init__(self):
        super().__init__(*polynomial_functions)
