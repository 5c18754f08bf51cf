"""
Shared fixtures for the dashboard tests.

No test talks to a real service: the orchestrator is driven by an
in-memory FakeTransactionSource, the HTTP source by httpx.MockTransport.
"""

import os

import pytest

from finance_dashboard.config import get_settings
from tests.helpers import FakeTransactionSource, fake_source as build_fake_source


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Default settings for every test, regardless of the host environment."""
    for name in list(os.environ):
        if name.startswith("DASHBOARD_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_source() -> FakeTransactionSource:
    return build_fake_source()
