"""
Shared test fixtures and helpers for the MailBridge test suite.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from mailbridge.config import MailConfig
from mailbridge.drivers import LocalMailDriver
from mailbridge.testing import clear_outbox, get_outbox


@pytest.fixture
def mock_logger():
    """Logger double satisfying the injected logger capability."""
    logger = MagicMock()
    logger.info = MagicMock()
    logger.error = MagicMock()
    return logger


@pytest.fixture
def mock_view():
    """View renderer double returning a fixed string."""
    view = MagicMock()
    view.render = AsyncMock(return_value="<p>rendered</p>")
    return view


@pytest.fixture
def local_config():
    return MailConfig(
        default="local",
        drivers=[MailConfig.define(name="local", driver=LocalMailDriver)],
    )


@pytest.fixture
def mail_outbox():
    """
    Clear the mail outbox before the test and return it.
    """
    clear_outbox()
    yield get_outbox()
    clear_outbox()
