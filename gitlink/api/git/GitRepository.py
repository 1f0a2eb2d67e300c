"""Repository state read through the git executable."""

from __future__ import annotations

__all__ = [
    "GitRepository",
]

import subprocess
from pathlib import Path

from ...utils.logger import get_logger
from ._BaseRepository import BaseRepository
from .Remote import Remote

logger = get_logger("git")


def _run_git(executable: str, args: list[str], cwd: Path, timeout: float) -> subprocess.CompletedProcess | None:
    """Run a git command, returning None if it could not be started or timed out."""
    command = [executable, *args]
    logger.debug(f"Running {' '.join(command)} in {cwd}")
    try:
        return subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        logger.error(f"{' '.join(command)} timed out after {timeout}s")
    except OSError as exc:
        logger.debug(f"Could not run {executable}: {exc}")
    return None


class GitRepository(BaseRepository):
    """Query a working copy by running git."""

    def __init__(self, root: Path, executable: str = "git", timeout: float = 10.0):
        """
        Args:
            root: Top-level directory of the working tree
            executable: Git executable name or path
            timeout: Seconds to wait for each git invocation
        """
        self._root = root
        self.executable = executable
        self.timeout = timeout

    @classmethod
    def discover(cls, path: Path, executable: str = "git", timeout: float = 10.0) -> GitRepository | None:
        """Find the working copy containing ``path``.

        Returns:
            The repository, or None when git is unavailable or ``path`` is not
            inside a work tree
        """
        start = path if path.is_dir() else path.parent
        result = _run_git(executable, ["rev-parse", "--show-toplevel"], start, timeout)
        if result is None or result.returncode != 0:
            logger.debug(f"No git work tree at {start}")
            return None

        root = Path(result.stdout.strip())
        logger.debug(f"Found git work tree at {root}")
        return cls(root, executable=executable, timeout=timeout)

    @property
    def root(self) -> Path:
        return self._root

    def _git(self, *args: str) -> subprocess.CompletedProcess | None:
        return _run_git(self.executable, list(args), self._root, self.timeout)

    def _parse_remote_line(self, line: str, remotes: dict[str, dict[str, str]]) -> None:
        """Parse a single line from git remote -v output.

        Format: "<name>\\t<url> (fetch)" or "<name>\\t<url> (push)"
        """
        if "\t" not in line:
            return

        name, rest = line.split("\t", 1)
        url, _, kind = rest.rpartition(" ")
        if kind not in ("(fetch)", "(push)"):
            return

        remotes.setdefault(name, {})[kind.strip("()")] = url

    def remotes(self) -> list[Remote] | None:
        result = self._git("remote", "-v")
        if result is None:
            return None
        if result.returncode != 0:
            logger.error(f"git remote failed: {result.stderr.strip()}")
            return None

        # dicts keep git's reporting order
        parsed: dict[str, dict[str, str]] = {}
        for line in result.stdout.splitlines():
            self._parse_remote_line(line, parsed)

        return [Remote(name=name, fetch_url=urls.get("fetch"), push_url=urls.get("push")) for name, urls in parsed.items()]

    def head_commit(self) -> str | None:
        result = self._git("rev-parse", "--verify", "--quiet", "HEAD")
        if result is None or result.returncode != 0:
            return None
        return result.stdout.strip() or None

    def working_tree_changes(self) -> list[str] | None:
        result = self._git("status", "--porcelain")
        if result is None:
            return None
        if result.returncode != 0:
            logger.error(f"git status failed: {result.stderr.strip()}")
            return None

        # Format: "XY path", see https://git-scm.com/docs/git-status#_short_format
        return [line[3:] for line in result.stdout.splitlines() if line]
