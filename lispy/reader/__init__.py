from lispy.reader.parser import parse
from lispy.reader.builder import read

__all__ = ["parse", "read"]
