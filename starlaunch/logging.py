"""Root logger setup for the launcher.

The "Running component server" and "Server starting..." lines come from the
``starlaunch.arguments`` and ``starlaunch.launcher`` loggers; ``--json-logs``
turns them into one JSON object per line for log shippers.
"""

import logging
from typing import Optional

from pythonjsonlogger import jsonlogger

_JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "INFO", fmt: Optional[str] = None, json_format: bool = False) -> None:
    """Install a single stderr handler on the root logger, replacing any existing ones.

    Unknown ``level`` names fall back to INFO. ``fmt`` applies to plain text
    output only; JSON output always carries asctime, levelname, name and message.
    """

    resolved = getattr(logging, level.upper(), logging.INFO)
    if json_format:
        handler = logging.StreamHandler()
        handler.setFormatter(jsonlogger.JsonFormatter(_JSON_FORMAT))
        logging.basicConfig(level=resolved, handlers=[handler], force=True)
    else:
        if fmt is None:
            fmt = "%(asctime)s %(levelname)s %(name)s - %(message)s"
        logging.basicConfig(level=resolved, format=fmt, force=True)


__all__ = ["configure_logging"]
