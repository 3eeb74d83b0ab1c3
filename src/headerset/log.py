"""Logger helpers for the `headerset` namespace."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_BASE_NAME = "headerset"


def setup_logging(*, verbose: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """
    Configure the base `headerset` logger once and return it.
    Later calls only adjust the level.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    base = logging.getLogger(_BASE_NAME)
    base.setLevel(level)
    if base.handlers:
        return base

    base.propagate = False
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    base.addHandler(handler)
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under `headerset`."""
    if not name or name == _BASE_NAME:
        return logging.getLogger(_BASE_NAME)
    if name.startswith(_BASE_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_BASE_NAME}.{name}")
