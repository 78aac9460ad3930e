# Core names for Lispy's data model.
# Every value the reader builds and the evaluator returns is one of the
# tagged cases in lispy.types: Number, Double, Symbol, Error or SExpr.
# There is no environment; each input line is read, evaluated and dropped.

__version__ = "0.0.0.0.5"
