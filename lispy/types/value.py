from __future__ import annotations


class Value:
    """Base of every Lispy value. Subclasses are the tagged cases."""
    __slots__ = ()

    def __str__(self) -> str:
        # Lazy import to avoid circular imports
        from lispy.printer import to_str
        return to_str(self)
