# uniplex/manage/core/logging.py
from __future__ import annotations

import logging
import sys

from pythonjsonlogger import jsonlogger

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "INFO", *, json: bool = False) -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())

    # stdout belongs to the outer transport
    handler = logging.StreamHandler(sys.stderr)
    if json:
        formatter: logging.Formatter = jsonlogger.JsonFormatter(_FORMAT)
    else:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s  %(message)s"
        )
    handler.setFormatter(formatter)

    # Avoid duplicate handlers on repeated bootstrap
    root.handlers = [handler]


def redact_key(api_key: str, visible: int = 10) -> str:
    """Return a loggable prefix of a credential."""
    if not api_key:
        return "<unset>"
    return f"{api_key[:visible]}..."
