"""Process-wide logging setup for the command-line stages.

Log records go to stderr; stdout carries pipeline data and reports.
"""

from __future__ import annotations

import logging
import sys
import time
from typing import Optional


class TextFormatter(logging.Formatter):
    converter = time.gmtime  # UTC

    def __init__(self) -> None:
        super().__init__("%(asctime)sZ | %(levelname)s | %(name)s | %(message)s")


def setup_logging(level: Optional[str] = None) -> None:
    """Attach a stderr handler to the root logger unless one is already configured."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, (level or "WARNING").upper(), logging.WARNING))

    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(TextFormatter())
        root.addHandler(handler)

    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
