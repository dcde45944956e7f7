import pytest

from optionette.utils.logging import log


@pytest.fixture(autouse=True)
def _restore_logger():
    """Give every test the package logger's original level, propagation and handlers."""
    level, propagate, handlers = log.level, log.propagate, list(log.handlers)
    yield
    log.setLevel(level)
    log.propagate = propagate
    log.handlers[:] = handlers
