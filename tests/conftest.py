import logging

import pytest

from ultimate_logger.core import logging as diagnostics
from ultimate_logger.core.config import settings


@pytest.fixture(autouse=True)
def plain_console(monkeypatch):
    """Keep console output uncolored unless a test asks for color."""
    monkeypatch.setattr(settings, "COLOR", "never")


@pytest.fixture
def color_always(monkeypatch):
    monkeypatch.setattr(settings, "COLOR", "always")


@pytest.fixture
def reset_diagnostics():
    yield
    if diagnostics._installed_handler is not None:
        diagnostics.logger.removeHandler(diagnostics._installed_handler)
        diagnostics._installed_handler = None
    diagnostics.logger.setLevel(logging.NOTSET)
