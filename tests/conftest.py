"""Shared pytest fixtures for Beepboard tests."""

import pytest
from httpx import ASGITransport, AsyncClient

from beepboard.beeps.router import get_beep_log
from beepboard.config import Settings, get_settings
from beepboard.events.store import BeepLog
from beepboard.main import app
from tests.fixtures import SECRET, FixedClock


@pytest.fixture
def clock():
    """Deterministic clock, one second per tick."""
    return FixedClock()


@pytest.fixture
def beep_log(clock):
    """Empty BeepLog with a deterministic clock."""
    return BeepLog(clock=clock)


@pytest.fixture
def settings():
    return Settings(secret=SECRET)


@pytest.fixture
async def client(beep_log, settings):
    """Async test client with the beep log and settings wired into the app."""
    app.dependency_overrides[get_beep_log] = lambda: beep_log
    app.dependency_overrides[get_settings] = lambda: settings
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
    app.dependency_overrides.clear()
