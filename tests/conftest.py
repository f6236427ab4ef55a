"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from tallyunit import reset
from tallyunit.logging import logger
from tallyunit.recorder import Recorder
from tallyunit.registry import Registry

from tests.fakes import CallLog, RecordingReporter


@pytest.fixture(autouse=True)
def clean_process_state():
    """Start and finish every test with an empty global registry and recorder."""
    reset()
    yield
    reset()


@pytest.fixture(autouse=True)
def silence_logging():
    """Drop sinks added by setup_logging() so closed capture streams are never written."""
    yield
    logger.remove()
    logger.disable("tallyunit")


@pytest.fixture
def registry() -> Registry:
    """Isolated registry -- avoids relying on the process-wide one."""
    return Registry()


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def log() -> CallLog:
    return CallLog()
