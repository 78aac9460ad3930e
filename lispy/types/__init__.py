from lispy.types.value import Value
from lispy.types.atoms import Number, Double, Symbol, Error
from lispy.types.sexpr import SExpr

__all__ = ["Value", "Number", "Double", "Symbol", "Error", "SExpr"]
