"""
Grammar for Lispy source text.

    number : /-?[0-9]+/
    double : /-?[0-9]+\\.[0-9]+/
    symbol : '+' | '-' | '*' | '/' | '^' | '%'
    sexpr  : '(' <expr>* ')'
    expr   : <double> | <number> | <symbol> | <sexpr>
    lispy  : <expr>+

The parse tree keeps one node per grammar category (number, double,
symbol, sexpr and the lispy root); expr is inlined away.
"""

from __future__ import annotations

from lark import Lark


GRAMMAR = r"""
lispy: expr+

?expr: double
     | number
     | symbol
     | sexpr

double: DOUBLE
number: INTEGER
symbol: SYMBOL
sexpr: "(" expr* ")"

DOUBLE.2: /-?[0-9]+\.[0-9]+/
INTEGER: /-?[0-9]+/
SYMBOL: "+" | "-" | "*" | "/" | "^" | "%"

%import common.WS
%ignore WS
"""


def make_parser() -> Lark:
    return Lark(GRAMMAR, start="lispy", parser="lalr")
