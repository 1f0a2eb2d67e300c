"""Shared pytest configuration and fixtures for all tests."""

import json
import logging
from pathlib import Path

import pytest

from gitlink.api.clipboard._BaseClipboard import BaseClipboard
from gitlink.api.editor._BaseEditor import BaseEditor
from gitlink.api.git._BaseRepository import BaseRepository
from gitlink.api.git.Remote import Remote
from gitlink.api.link.Selection import Selection


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external tools")
    config.addinivalue_line("markers", "integration: tests that run git")


# =============================================================================
# Fakes for the injected collaborators
# =============================================================================


class FakeRepository(BaseRepository):
    """In-memory repository state."""

    def __init__(
        self,
        root: Path = Path("/work/widgets"),
        remotes: list[Remote] | None = None,
        head: str | None = "deadbeef",
        changes: list[str] | None = None,
    ):
        self._root = root
        self._remotes = [Remote("origin", fetch_url="git@github.com:acme/widgets.git")] if remotes is None else remotes
        self._head = head
        self._changes = changes or []

    @property
    def root(self) -> Path:
        return self._root

    def remotes(self) -> list[Remote]:
        return list(self._remotes)

    def head_commit(self) -> str | None:
        return self._head

    def working_tree_changes(self) -> list[str]:
        return list(self._changes)


class FakeEditor(BaseEditor):
    def __init__(self, document: Path | None, selections: list[Selection] | None = None):
        self._document = document
        self._selections = selections or [Selection.at(0)]

    def active_document(self) -> Path | None:
        return self._document

    def selections(self) -> list[Selection]:
        return list(self._selections)


class RecordingClipboard(BaseClipboard):
    def __init__(self):
        self.writes: list[str] = []

    def write(self, text: str) -> None:
        self.writes.append(text)


class RecordingNotifier:
    def __init__(self):
        self.calls: list[tuple] = []

    def __call__(self, severity, message: str) -> None:
        self.calls.append((severity, message))


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def gitlink_home(tmp_path: Path, monkeypatch) -> Path:
    """Point GITLINK_HOME at an empty temporary directory for every test."""
    home = tmp_path / ".gitlink"
    monkeypatch.setenv("GITLINK_HOME", str(home))
    return home


@pytest.fixture(autouse=True)
def isolated_logging(monkeypatch):
    """Let each test configure logging afresh and drop the handlers it added."""
    from gitlink.utils import logger as logger_module

    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    gitlink_logger = logging.getLogger("gitlink")
    handlers = list(gitlink_logger.handlers)
    level = gitlink_logger.level
    yield gitlink_logger
    for handler in gitlink_logger.handlers:
        if handler not in handlers:
            handler.close()
    gitlink_logger.handlers = handlers
    gitlink_logger.setLevel(level)


@pytest.fixture
def write_config(gitlink_home: Path):
    """Write a config.json into the temporary gitlink home."""

    def _write(data) -> Path:
        gitlink_home.mkdir(parents=True, exist_ok=True)
        config_path = gitlink_home / "config.json"
        text = data if isinstance(data, str) else json.dumps(data)
        config_path.write_text(text, encoding="utf-8")
        return config_path

    return _write


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
