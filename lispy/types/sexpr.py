from __future__ import annotations
from typing import Iterable, Iterator

from lispy.types.value import Value


class SExpr(Value):
    """
    An s-expression: an ordered list of child values it owns outright.

    Children only ever leave through pop() or take(), so a child handed
    back to a caller is no longer reachable from the list.
    """
    __slots__ = ("cells",)

    def __init__(self, cells: Iterable[Value] = ()):
        self.cells: list[Value] = list(cells)

    def add(self, value: Value) -> SExpr:
        self.cells.append(value)
        return self

    def pop(self, i: int) -> Value:
        return self.cells.pop(i)

    def take(self, i: int) -> Value:
        """Pop child i and release the rest of the list."""
        x = self.cells.pop(i)
        self.cells.clear()
        return x

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.cells)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SExpr) and self.cells == other.cells

    __hash__ = None

    def __repr__(self) -> str:
        return f"SExpr({self.cells!r})"
