"""Rendering of Lispy values to their canonical text."""

from __future__ import annotations

import sys
from typing import TextIO

from lispy.types import Value, Number, Double, Symbol, Error, SExpr


def to_str(v: Value) -> str:
    match v:
        case Number(value=n):
            return str(n)
        case Double(value=d):
            # Same shape as printf("%f")
            return f"{d:f}"
        case Error(message=m):
            return f"Error: {m}"
        case Symbol(name=s):
            return s
        case SExpr():
            return "(" + " ".join(to_str(c) for c in v.cells) + ")"
    raise TypeError(f"Cannot print {v!r}")


def print_value(v: Value, file: TextIO | None = None) -> None:
    (file or sys.stdout).write(to_str(v))


def println(v: Value, file: TextIO | None = None) -> None:
    out = file or sys.stdout
    out.write(to_str(v))
    out.write("\n")
