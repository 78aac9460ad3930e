from __future__ import annotations

import logging
from typing import Optional

from lark import Lark

from lispy.errors import LispySyntaxError
from lispy.evaluation.evaluator import evaluate
from lispy.printer import to_str
from lispy.reader.builder import read
from lispy.reader.parser import default_parser, parse
from lispy.types import Value, Error

logger = logging.getLogger(__name__)

NESTED_TOO_DEEPLY = "Expression nested too deeply!"


class Interpreter:
    """
    Reads, evaluates and prints Lispy expressions.
    Holds only the parser; every call starts from fresh values.
    """

    def __init__(self, parser: Optional[Lark] = None, filename: str = "<stdin>"):
        self.parser = default_parser() if parser is None else parser
        self.filename = filename

    def read(self, code: str) -> Value:
        tree = parse(code, self.parser, self.filename)
        return read(tree)

    def eval(self, code: str) -> Value:
        """Raises LispySyntaxError for malformed input; otherwise always returns a value."""
        try:
            result = evaluate(self.read(code))
        except RecursionError:
            logger.warning("recursion limit hit evaluating %.40r", code)
            return Error(NESTED_TOO_DEEPLY)
        logger.debug("%r => %s", code, result)
        return result

    def rep(self, code: str) -> str:
        try:
            return to_str(self.eval(code))
        except LispySyntaxError as e:
            return str(e)
