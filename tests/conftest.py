import logging

import pytest

from lispy.interpreter import Interpreter
from lispy.reader.parser import parse
from lispy.reader.builder import read
from lispy.evaluation.evaluator import evaluate


@pytest.fixture(autouse=True)
def _reset_lispy_logger():
    # setup_loggers() binds handlers to whatever stderr was current
    yield
    logger = logging.getLogger("lispy")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run():
    """Parse, build and evaluate a source string."""
    def _run(source):
        return evaluate(read(parse(source)))
    return _run
