"""
Pytest configuration and shared fixtures.
"""
import logging

import pytest

from tests.fake_browser import cookie_dict, target_dict


@pytest.fixture
def cookies():
    """Three cookies across two domains."""
    return [
        cookie_dict("sid", "s3cr3t", ".mail.example.com", expires=1700000000.0),
        cookie_dict("theme", "dark", "docs.example.com", path="/app", expires=-1),
        cookie_dict("_ga", "GA1.2.3", ".tracker.net", expires=1800000000.5),
    ]


@pytest.fixture
def targets():
    """Two page targets, mail first."""
    return [
        target_dict("Inbox", "https://mail.example.com/u/0", "ws://127.0.0.1:9/devtools/page/A", "A"),
        target_dict("Docs", "https://docs.example.com/d/1", "ws://127.0.0.1:9/devtools/page/B", "B"),
    ]


@pytest.fixture(autouse=True)
def debug_logging():
    """Run with debug logging so every log call is formatted."""
    logger = logging.getLogger("cdp_cookies")
    handlers = list(logger.handlers)
    logger.setLevel(logging.DEBUG)
    yield
    for handler in logger.handlers[:]:
        if handler not in handlers:
            logger.removeHandler(handler)

