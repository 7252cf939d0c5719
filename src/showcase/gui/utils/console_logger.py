"""Console logging setup shared by the CLI and GUI entry points."""

from __future__ import annotations

import logging
import sys

_INSTALLED_HANDLERS: set[str] = set()

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def ensure_console_logger(
    logger: logging.Logger,
    handler_name: str,
    *,
    level: int = logging.INFO,
) -> None:
    """Attach one named stderr handler to *logger*; later calls only adjust the level."""
    logger.setLevel(level)
    if handler_name in _INSTALLED_HANDLERS:
        for handler in logger.handlers:
            if handler.get_name() == handler_name:
                handler.setLevel(level)
        return
    for handler in logger.handlers:
        if handler.get_name() == handler_name:
            handler.setLevel(level)
            _INSTALLED_HANDLERS.add(handler_name)
            return
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.set_name(handler_name)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    _INSTALLED_HANDLERS.add(handler_name)
