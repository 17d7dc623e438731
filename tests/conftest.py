from __future__ import annotations

import logging

import pytest

from opaque_ids.utils.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Undo handler changes made by the CLI so ``caplog`` keeps seeing records."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    for handler in handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate
