"""Logging setup shared by the XD loader, parsers and command-line entry point.

Records go to stderr so they never mix with the font report on stdout.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

_DEFAULT_LEVEL = logging.INFO
_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the logger for ``name``, installing a stderr handler on the root logger once."""
    logger = logging.getLogger(name)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=_DEFAULT_LEVEL, format=_DEFAULT_FORMAT, stream=sys.stderr)
    return logger
