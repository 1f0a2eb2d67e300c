"""Fixtures for tests that run the real git executable."""

import shutil
import subprocess
from pathlib import Path

import pytest

GIT = shutil.which("git")


def git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        [
            "git",
            "-c",
            "user.name=gitlink tests",
            "-c",
            "user.email=tests@example.com",
            "-c",
            "commit.gpgsign=false",
            *args,
        ],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
        timeout=30,
    )
    return result.stdout.strip()


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """A committed working copy with a GitHub origin."""
    if GIT is None:
        pytest.skip("git is not installed")

    repo = tmp_path / "widgets"
    (repo / "src").mkdir(parents=True)
    (repo / "src" / "main.ts").write_text("".join(f"line {n}\n" for n in range(1, 21)))
    git(repo, "init", "--quiet")
    git(repo, "add", ".")
    git(repo, "commit", "--quiet", "-m", "initial")
    git(repo, "remote", "add", "origin", "git@github.com:acme/widgets.git")
    return repo
