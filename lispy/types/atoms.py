from __future__ import annotations
from dataclasses import dataclass

from lispy.types.value import Value


@dataclass(frozen=True, slots=True)
class Number(Value):
    value: int


@dataclass(frozen=True, slots=True)
class Double(Value):
    value: float


@dataclass(frozen=True, slots=True)
class Symbol(Value):
    name: str


@dataclass(frozen=True, slots=True)
class Error(Value):
    """Terminal failure value. Never evaluated further."""
    message: str
