"""
Tree builder: turns a parse tree into Lispy values.

Literal conversion never halts the build. A literal that does not fit
its representation becomes an Error value in place of the number.
"""

from __future__ import annotations

import sys

from lark import Token, Transformer, Tree
from lark.exceptions import VisitError

from lispy.types import Value, Number, Double, Symbol, Error, SExpr

# Range of the C long the language's integers are defined over.
LONG_MIN = -(2 ** 63)
LONG_MAX = 2 ** 63 - 1


def read_number(text: str) -> Value:
    try:
        x = int(text, 10)
    except ValueError:
        return Error("invalid number")
    if not LONG_MIN <= x <= LONG_MAX:
        return Error("invalid number")
    return Number(x)


def read_double(text: str) -> Value:
    try:
        x = float(text)
    except ValueError:
        return Error("invalid double")
    if x in (float("inf"), float("-inf")):
        return Error("invalid double")
    # Underflow: a non-zero literal that lost its magnitude
    if abs(x) < sys.float_info.min and any(c in "123456789" for c in text):
        return Error("invalid double")
    return Double(x)


class ValueBuilder(Transformer):
    """One method per grammar category; lark calls them bottom-up."""

    def number(self, children):
        return read_number(str(children[0]))

    def double(self, children):
        return read_double(str(children[0]))

    def symbol(self, children):
        return Symbol(str(children[0]))

    def sexpr(self, children):
        x = SExpr()
        for child in children:
            # Bare tokens here are parens or other punctuation
            if isinstance(child, Token):
                continue
            x.add(child)
        return x

    def lispy(self, children):
        return self.sexpr(children)


def read(tree: Tree) -> Value:
    try:
        return ValueBuilder().transform(tree)
    except VisitError as e:
        # lark wraps whatever a callback raised
        raise e.orig_exc from e
