"""Logging utilities."""
from __future__ import annotations

import logging

LOGGER_NAME = "opaque_ids"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logger(*, level: int = logging.WARNING) -> logging.Logger:
    """Route package records to stderr; the library alone never adds handlers."""
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers = [h for h in logger.handlers if not getattr(h, "_opaque_ids_cli", False)]

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._opaque_ids_cli = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
