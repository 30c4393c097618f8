"""
Pytest configuration and fixtures
"""
import asyncio
import sys
from pathlib import Path

import pytest

# Add backend directory to path for imports
backend_dir = Path(__file__).parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

from uptime_demo.core.clock import Clock
from uptime_demo.core.config import get_settings
from uptime_demo.core.logging_config import LoggingConfig
from uptime_demo.core.styling import plain


class FakeClock(Clock):
    """Simulated time: sleeping advances `now` instantly and records the delay"""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def monotonic(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds
        # Still yield to the loop like a real suspension point
        await asyncio.sleep(0)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def plain_decorator():
    return plain


@pytest.fixture
def tagging_decorator():
    """Decorator that marks styled text so tests can see which lines were styled"""
    def _decorate(text, style):
        if style is None:
            return text
        return f"<styled>{text}"
    return _decorate


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from UPTIME_*/LOG_* variables, the settings cache and installed log handlers"""
    import os

    for key in list(os.environ):
        if key.upper().startswith(("UPTIME_", "LOG_")):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    LoggingConfig.reset()
