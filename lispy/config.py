from __future__ import annotations
import logging
import os
from pathlib import Path


# Defaults
_DEFAULT_PROMPT = 'lispy> '
_DEFAULT_HISTORY_FILE = Path('~/.lispy_history')
_DEFAULT_HISTORY_LENGTH = 1000
_DEFAULT_LOG_LEVEL = 'WARNING'


def get_prompt() -> str:
    return os.environ.get('LISPY_PROMPT', _DEFAULT_PROMPT)


def get_history_file() -> Path:
    raw = os.environ.get('LISPY_HISTORY_FILE')
    p = Path(raw.strip()) if raw and raw.strip() else _DEFAULT_HISTORY_FILE
    return p.expanduser()


def get_history_length() -> int:
    raw = os.environ.get('LISPY_HISTORY_LENGTH')
    if not raw:
        return _DEFAULT_HISTORY_LENGTH
    try:
        return int(raw)
    except ValueError:
        return _DEFAULT_HISTORY_LENGTH


def get_log_level() -> int:
    name = os.environ.get('LISPY_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName hands back "Level X" for names it does not know
    return level if isinstance(level, int) else logging.WARNING
