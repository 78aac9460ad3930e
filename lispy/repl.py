"""
Interactive read-eval-print loop.

The loop runs until end of input (Ctrl-D) or an interrupt (Ctrl-C).
Line history lives in a readline history file that is loaded when the
loop starts and saved when it stops, however it stops.
"""

from __future__ import annotations

import logging
import readline
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Optional, TextIO

from lispy import __version__
from lispy import config
from lispy.interpreter import Interpreter

logger = logging.getLogger(__name__)


@contextmanager
def history(path: Optional[Path], length: int = 1000) -> Iterator[None]:
    """Load readline history from `path` and write it back on exit."""
    if path is None:
        yield
        return

    readline.set_history_length(length)
    readline.set_auto_history(False)
    try:
        readline.read_history_file(path)
    except FileNotFoundError:
        logger.debug("no history file at %s yet", path)
    except OSError as e:
        logger.warning("could not read history file %s: %s", path, e)

    try:
        yield
    finally:
        try:
            readline.write_history_file(path)
        except OSError as e:
            logger.warning("could not write history file %s: %s", path, e)
        readline.clear_history()
        readline.set_auto_history(True)


class Repl:
    def __init__(
        self,
        interpreter: Optional[Interpreter] = None,
        prompt: Optional[str] = None,
        history_file: Optional[Path] = None,
        history_length: Optional[int] = None,
        input_fn: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
    ):
        self.interpreter = interpreter or Interpreter()
        self.prompt = config.get_prompt() if prompt is None else prompt
        self.history_file = history_file
        self.history_length = config.get_history_length() if history_length is None else history_length
        self.input_fn = input_fn
        self.output = output or sys.stdout

    def banner(self) -> None:
        self.output.write(f"Lispy Version {__version__}\n")
        self.output.write("Press Ctrl+c to Exit\n\n")

    def run(self) -> int:
        self.banner()
        with history(self.history_file, self.history_length):
            while True:
                try:
                    line = self.input_fn(self.prompt)
                except (EOFError, KeyboardInterrupt):
                    self.output.write("\n")
                    break
                if not line.strip():
                    continue
                if self.history_file is not None:
                    readline.add_history(line)
                self.output.write(self.interpreter.rep(line) + "\n")
                self.output.flush()
        logger.debug("repl finished")
        return 0
