# cidrcalc/utils/logging.py

from __future__ import annotations
import logging
import sys

DEFAULT_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"

_ROOT = "cidrcalc"


class _StderrHandler(logging.StreamHandler):
    """
    StreamHandler that writes to whatever sys.stderr is at emit time.

    The handler is installed once per process, but sys.stderr can be
    replaced afterwards (click's CliRunner, pytest capture, a caller
    redirecting output). A handler bound at construction would keep writing
    to the old, possibly closed, stream. Same approach as the stdlib's
    logging.lastResort handler; the stream cannot be reassigned.
    """

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger under the cidrcalc hierarchy.

    Modules call this once at import time:

        log = get_logger(__name__)
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int = logging.WARNING) -> None:
    """
    Attach a single stderr handler to the package logger and set its level.

    stdout carries the report, so log records never go there. Safe to call
    more than once; the handler is only added the first time.
    """
    root = logging.getLogger(_ROOT)
    root.setLevel(level)

    handler = next((h for h in root.handlers if isinstance(h, _StderrHandler)), None)
    if handler is None:
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATEFMT))
        root.addHandler(handler)
    handler.setLevel(level)
