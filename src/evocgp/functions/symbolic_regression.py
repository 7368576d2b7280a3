import numpy as np

from evocgp.functions.function_set import Function, FunctionSet

# Protected operations return their input unchanged below this limit
DIVISION_LIMIT = 0.0001

def absolute(in0):
    return abs(in0)

def square_root(in0):
    return float(np.sqrt(abs(in0)))

def reciprocal(in0):
    return in0 if in0 < DIVISION_LIMIT else 1.0 / in0

def sine(in0):
    return float(np.sin(in0))

def cosine(in0):
    return float(np.cos(in0))

def tangent(in0):
    return in0 if in0 < DIVISION_LIMIT else float(np.tan(in0))

def exponential(in0):
    with np.errstate(over='ignore'):
        return float(np.exp(in0))

def hyperbolic_sine(in0):
    with np.errstate(over='ignore'):
        return float(np.sinh(in0))

def hyperbolic_cosine(in0):
    with np.errstate(over='ignore'):
        return float(np.cosh(in0))

def hyperbolic_tangent(in0):
    return float(np.tanh(in0))

def natural_log(in0):
    return in0 if in0 < DIVISION_LIMIT else float(np.log(abs(in0)))

def log_base_ten(in0):
    return in0 if in0 < DIVISION_LIMIT else float(np.log10(abs(in0)))

def sine_ab(in0, in1):
    return float(np.sin(in0 + in1))

def cosine_ab(in0, in1):
    return float(np.cos(in0 + in1))

def hypotenuse(in0, in1):
    return float(np.hypot(in0, in1))

def power(in0, in1):
    # overflow and 0 ** negative give inf, as IEEE arithmetic does
    with np.errstate(all='ignore'):
        return float(np.power(np.abs(np.float64(in0)), np.float64(in1)))

def addition(in0, in1):
    return in0 + in1

def subtraction(in0, in1):
    return in0 - in1

def multiplication(in0, in1):
    return in0 * in1

def division(in0, in1):
    return in0 if in1 < DIVISION_LIMIT else in0 / in1

symbolic_regression_functions = [
    Function("Absolute"      , 1, absolute),
    Function("Square root"   , 1, square_root),
    Function("Reciprocal"    , 1, reciprocal),
    Function("Sin"           , 1, sine),
    Function("Cos"           , 1, cosine),
    Function("Tan"           , 1, tangent),
    Function("Exp"           , 1, exponential),
    Function("Sinh"          , 1, hyperbolic_sine),
    Function("Cosh"          , 1, hyperbolic_cosine),
    Function("Tanh"          , 1, hyperbolic_tangent),
    Function("Ln"            , 1, natural_log),
    Function("Log"           , 1, log_base_ten),
    Function("Sin(a+b)"      , 2, sine_ab),
    Function("Cos(a+b)"      , 2, cosine_ab),
    Function("Hypotenuse"    , 2, hypotenuse),
    Function("Power"         , 2, power),
    Function("Addition"      , 2, addition),
    Function("Subtraction"   , 2, subtraction),
    Function("Multiplication", 2, multiplication),
    Function("Division"      , 2, division),
    ]

class SymbolicRegressionFunctions(FunctionSet):
    """
    Floating point functions for symbolic regression problems.
    Division-like functions are protected by DIVISION_LIMIT.
    """

    def __init__(self):
        super().__init__(*symbolic_regression_functions)
