"""
logger.py: Console logging for the game.
"""

import logging
import sys
from datetime import datetime
from typing import Optional

from .constants import DEBUG


class HumanFormatter(logging.Formatter):
    """Compact one-line format for terminal display."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now().strftime("%H:%M:%S")
        name = record.name.replace("puffbird.", "")
        line = f"{ts} [{record.levelname[0]}] {name}: {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(debug: Optional[bool] = None) -> logging.Logger:
    """Configures the puffbird logger. Calling it again replaces the handler."""
    if debug is None:
        debug = DEBUG
    root = logging.getLogger("puffbird")
    root.setLevel(logging.DEBUG if debug else logging.INFO)
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(HumanFormatter())
    root.addHandler(console)
    return root
