"""Diagnostics for gen-readme; standard output is reserved for the README itself."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

ROOT_LOGGER = "genreadme"
_CLI_HANDLER = "genreadme-cli"
_FORMATS = {
    False: "[gen-readme] %(levelname)s %(message)s",
    True: "[gen-readme] %(levelname)s %(name)s: %(message)s",
}


def get_logger(name: str | None = None) -> logging.Logger:
    """``get_logger("registry")`` returns the ``genreadme.registry`` logger."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def configure_logging(*, verbose: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Send genreadme diagnostics to ``stream`` (stderr by default).

    Calling it again swaps the CLI handler rather than stacking another one;
    handlers attached by embedding code are left alone.
    """
    verbose = bool(verbose)
    logger = get_logger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False

    for handler in [h for h in logger.handlers if h.get_name() == _CLI_HANDLER]:
        logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.set_name(_CLI_HANDLER)
    handler.setFormatter(logging.Formatter(_FORMATS[verbose]))
    logger.addHandler(handler)
    return logger


__all__ = ["ROOT_LOGGER", "configure_logging", "get_logger"]
