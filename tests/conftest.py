"""Shared fixtures."""

import logging

import pytest

from hackman_bot._shared.protocol_logger import get_protocol_logger


@pytest.fixture(autouse=True)
def reset_package_logging():
    """Leave the package logger and tracer as a fresh process would."""
    yield
    pkg_logger = logging.getLogger("hackman_bot")
    for handler in list(pkg_logger.handlers):
        handler.close()
    pkg_logger.handlers.clear()
    tracer = get_protocol_logger()
    tracer.set_enabled(False)
    tracer.set_round(0)
