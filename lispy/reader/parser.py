from __future__ import annotations

import logging
from typing import Optional

from lark import Lark, Tree
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken

from lispy.errors import LispySyntaxError
from lispy.reader.grammar import make_parser

logger = logging.getLogger(__name__)

_default_parser: Optional[Lark] = None


def default_parser() -> Lark:
    global _default_parser
    if _default_parser is None:
        _default_parser = make_parser()
    return _default_parser


def _describe(e: UnexpectedInput) -> str:
    if isinstance(e, UnexpectedCharacters):
        found = repr(e.char)
        expected = e.allowed
    elif isinstance(e, UnexpectedToken):
        found = "end of input" if e.token.type == "$END" else repr(str(e.token))
        expected = e.expected
    else:
        found = "end of input"
        expected = getattr(e, "expected", None)
    msg = f"unexpected {found}"
    if expected:
        msg += f", expected one of {', '.join(sorted(expected))}"
    return msg


def parse(source: str, parser: Optional[Lark] = None, filename: str = "<stdin>") -> Tree:
    """Parse source text into a tree tagged by grammar category."""
    if parser is None:
        parser = default_parser()
    try:
        tree = parser.parse(source)
    except UnexpectedInput as e:
        message = f"{filename}:{e.line}:{e.column}: error: {_describe(e)}"
        logger.debug("parse failed: %s", message)
        raise LispySyntaxError(message, line=e.line, column=e.column) from e
    logger.debug("parsed %.60r", source)
    return tree
