# tests/conftest.py
"""Global PyTest fixtures for the test-suite."""

from __future__ import annotations

import logging
import signal
from types import FrameType
from typing import Callable, Generator

import pytest

from suitemeta.config import ParserConfig
from suitemeta.parser import AttributeParser


DEFAULT_TEST_TIMEOUT_SECONDS = 10.0


def _build_timeout_handler(
    timeout_seconds: float,
) -> Callable[[int, FrameType | None], None]:
    """Create SIGALRM handler that fails the test when timeout is reached."""

    def _handle_timeout(signum: int, frame: FrameType | None) -> None:
        pytest.fail(
            f"Test exceeded {timeout_seconds:.0f}s timeout (includes setup/teardown)",
            pytrace=True,
        )

    return _handle_timeout


@pytest.fixture(autouse=True)
def per_test_timeout() -> Generator[None, None, None]:
    """Fail any test that runs longer than the default timeout."""
    if not hasattr(signal, "SIGALRM") or not hasattr(signal, "setitimer"):
        yield
        return

    handler = _build_timeout_handler(DEFAULT_TEST_TIMEOUT_SECONDS)
    previous_handler = signal.getsignal(signal.SIGALRM)
    signal.signal(signal.SIGALRM, handler)
    signal.setitimer(signal.ITIMER_REAL, DEFAULT_TEST_TIMEOUT_SECONDS)
    try:
        yield
    finally:
        signal.setitimer(signal.ITIMER_REAL, 0.0)
        signal.signal(signal.SIGALRM, previous_handler)


@pytest.fixture
def parser() -> AttributeParser:
    """Attribute parser with the default configuration."""
    return AttributeParser(ParserConfig())


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture suitemeta DEBUG records."""
    caplog.set_level(logging.DEBUG, logger="suitemeta")
    return caplog
