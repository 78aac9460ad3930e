from __future__ import annotations
from typing import Callable

from lispy.reader.builder import LONG_MAX, LONG_MIN
from lispy.types import Value, Number, Double, Error, SExpr

CANNOT_OPERATE = "Cannot operate on non-number!"
DIVISION_BY_ZERO = "Division By Zero!"
INTEGER_OVERFLOW = "Integer overflow!"


# -------------------------------
# Integer helpers (C semantics: truncate toward zero)
# -------------------------------
def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q

def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)

def _checked(n: int) -> Value:
    """Integer results live in the same range as integer literals."""
    if not LONG_MIN <= n <= LONG_MAX:
        return Error(INTEGER_OVERFLOW)
    return Number(n)

def _as_float(v: Value) -> float:
    return float(v.value)


# -------------------------------
# Arithmetic
# Each takes the accumulator and the next operand and returns the new
# accumulator, or an Error that ends the fold.
# -------------------------------
def add(x: Value, y: Value) -> Value:
    if isinstance(x, Double) or isinstance(y, Double):
        return Double(_as_float(x) + _as_float(y))
    return _checked(x.value + y.value)

def sub(x: Number, y: Number) -> Value:
    return _checked(x.value - y.value)

def mul(x: Number, y: Number) -> Value:
    return _checked(x.value * y.value)

def div(x: Number, y: Number) -> Value:
    if y.value == 0:
        return Error(DIVISION_BY_ZERO)
    return _checked(_trunc_div(x.value, y.value))

def mod(x: Number, y: Number) -> Value:
    if y.value == 0:
        return Error(DIVISION_BY_ZERO)
    return Number(_trunc_mod(x.value, y.value))

def power(x: Number, y: Number) -> Value:
    if y.value >= 0:
        # |x| >= 2 to the 64th is past LONG_MAX already
        if abs(x.value) > 1 and y.value >= 64:
            return Error(INTEGER_OVERFLOW)
        return _checked(x.value ** y.value)
    if x.value == 0:
        return Error(DIVISION_BY_ZERO)
    # 1 / x**n truncated: only |x| == 1 survives
    if x.value in (1, -1):
        return Number(x.value ** -y.value)
    return Number(0)


# Operator -> (fold step, operand types it admits)
OPERATORS: dict[str, tuple[Callable[[Value, Value], Value], tuple[type, ...]]] = {
    '+': (add, (Number, Double)),
    '-': (sub, (Number,)),
    '*': (mul, (Number,)),
    '/': (div, (Number,)),
    '%': (mod, (Number,)),
    '^': (power, (Number,)),
}


def builtin_op(a: SExpr, op: str) -> Value:
    """
    Apply operator `op` left-to-right over the operands in `a`.

    `a` is consumed: every operand is popped off it, and whatever is left
    when the fold stops early is released.
    """
    if not len(a):
        return Error("No operands given!")
    if op not in OPERATORS:
        a.cells.clear()
        return Error(f"Unknown operator '{op}'!")
    step, admits = OPERATORS[op]

    if not all(isinstance(cell, admits) for cell in a):
        a.cells.clear()
        return Error(CANNOT_OPERATE)

    x = a.pop(0)

    # Unary negation
    if op == '-' and not len(a):
        return _checked(-x.value)

    while len(a):
        y = a.pop(0)
        x = step(x, y)
        if isinstance(x, Error):
            a.cells.clear()
            break
    return x
