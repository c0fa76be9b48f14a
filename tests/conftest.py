"""
PyTest configuration

Shared fixtures for the z/OSMF SDK tests.
"""

import pytest

from zosmf_sdk.api.connection import ZOSConnection
from zosmf_sdk.config.settings import reload_settings

_ENV_VARS = (
    "ZOSMF_HOST",
    "ZOSMF_PORT",
    "ZOSMF_USER",
    "ZOSMF_PASSWORD",
    "ZOSMF_VERIFY_SSL",
    "ZOSMF_TIMEOUT",
    "JOB_MONITOR_ATTEMPTS",
    "JOB_MONITOR_WATCH_DELAY_MS",
    "JOB_MONITOR_LINE_LIMIT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from the caller's ZOSMF_* environment."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reload_settings()
    yield
    monkeypatch.undo()
    reload_settings()


@pytest.fixture
def connection() -> ZOSConnection:
    return ZOSConnection(host="zos.example.com", zosmf_port=10443, user="ibmuser", password="secret")
