"""
Digital circuit functions.

Values are unsigned 32-bit integers treated as 32 independent boolean lanes,
so a single evaluation processes 32 rows of a truth table at once. Every
result is masked back into the unsigned 32-bit range.
"""

from evocgp.functions.function_set import Function, FunctionSet

MASK = 0xFFFFFFFF

def constant_zero():
    return 0

def constant_one():
    return MASK

def wire_a(a, b):
    return a & MASK

def wire_b(a, b):
    return b & MASK

def not_a(a, b):
    return ~a & MASK

def not_b(a, b):
    return ~b & MASK

def and_(a, b):
    return a & b & MASK

def and_not_a(a, b):
    return ~a & b & MASK

def and_not_b(a, b):
    return a & ~b & MASK

def nor(a, b):
    return ~(a | b) & MASK

def xor(a, b):
    return (a ^ b) & MASK

def xnor(a, b):
    return ~(a ^ b) & MASK

def or_(a, b):
    return (a | b) & MASK

def or_not_a(a, b):
    return (~a | b) & MASK

def or_not_b(a, b):
    return (a | ~b) & MASK

def nand(a, b):
    return ~(a & b) & MASK

def mux1(a, b, c):
    return ((a & ~c) | (b & c)) & MASK

def mux2(a, b, c):
    return ((a & ~c) | (~b & c)) & MASK

def mux3(a, b, c):
    return ((~a & ~c) | (b & c)) & MASK

def mux4(a, b, c):
    return ((~a & ~c) | (~b & c)) & MASK

digital_circuit_functions = [
    Function("0"     , 0, constant_zero),
    Function("1"     , 0, constant_one),
    Function("Wire A", 2, wire_a),
    Function("Wire B", 2, wire_b),
    Function("Not A" , 2, not_a),
    Function("Not B" , 2, not_b),
    Function("And"   , 2, and_),
    Function("And !A", 2, and_not_a),
    Function("And !B", 2, and_not_b),
    Function("Nor"   , 2, nor),
    Function("Xor"   , 2, xor),
    Function("Xnor"  , 2, xnor),
    Function("Or"    , 2, or_),
    Function("Or !A" , 2, or_not_a),
    Function("Or !B" , 2, or_not_b),
    Function("Nand"  , 2, nand),
    Function("Mux1"  , 3, mux1),
    Function("Mux2"  , 3, mux2),
    Function("Mux3"  , 3, mux3),
    Function("Mux4"  , 3, mux4),
    ]

class DigitalCircuitFunctions(FunctionSet):

    def __init__(self):
        super().__init__(*digital_circuit_functions)
