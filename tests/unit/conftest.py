"""Unit test fixtures.

Most helpers are in tests/conftest.py.
"""

import pytest

from tests.conftest import (
    FakeEditor,
    FakeRepository,
    RecordingClipboard,
    RecordingNotifier,
    run_cmd,
)

__all__ = [
    "FakeEditor",
    "FakeRepository",
    "RecordingClipboard",
    "RecordingNotifier",
    "run_cmd",
]


@pytest.fixture
def clipboard() -> RecordingClipboard:
    return RecordingClipboard()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()
