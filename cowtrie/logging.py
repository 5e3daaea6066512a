"""Package logger helper."""

from __future__ import annotations

import logging


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the ``cowtrie`` logger, or a child of it named ``name``.

    The library only emits records; handlers and levels are left to the
    hosting application.
    """
    logger_name = "cowtrie" if name is None else f"cowtrie.{name}"
    return logging.getLogger(logger_name)
