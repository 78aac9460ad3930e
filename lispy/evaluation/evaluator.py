"""Core evaluator for Lispy.

Reduces a value tree to a single value. Failures are Error values, so
evaluate() always returns; an Error found among a list's children
replaces the whole list.
"""

from __future__ import annotations

import logging

from lispy.types import Value, Symbol, Error, SExpr
from lispy.builtins import builtin_op

logger = logging.getLogger(__name__)


def evaluate(v: Value) -> Value:
    if isinstance(v, SExpr):
        return evaluate_sexpr(v)
    # All other values evaluate to themselves
    return v


def evaluate_sexpr(v: SExpr) -> Value:
    # Evaluate children in place
    for i, cell in enumerate(v.cells):
        v.cells[i] = evaluate(cell)

    # Error checking
    for i, cell in enumerate(v.cells):
        if isinstance(cell, Error):
            return v.take(i)

    # Empty expression
    if not len(v):
        return v

    # Single expression
    if len(v) == 1:
        return v.take(0)

    f = v.pop(0)
    if not isinstance(f, Symbol):
        v.cells.clear()
        return Error("S-expression Does not start with symbol!")

    result = builtin_op(v, f.name)
    logger.debug("(%s ...) -> %s", f.name, result)
    return result
