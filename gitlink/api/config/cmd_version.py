"""Version command.

CLI: gitlink config version (also gitlink --version)
"""

from collections.abc import Iterator
from pathlib import Path

from ...utils.get_package_version import get_package_version
from .._output_schemas.config import ConfigVersionOutput
from ..git.GitRepository import _run_git
from ..StageResult import StageResult

# Checkout holding the gitlink package, when running from source
_SOURCE_ROOT = Path(__file__).resolve().parents[3]


def _source_commit() -> str:
    """Short HEAD commit of a gitlink source checkout, or "" for an installed copy."""
    completed = _run_git("git", ["rev-parse", "--short", "HEAD"], _SOURCE_ROOT, timeout=5)
    if completed is None or completed.returncode != 0:
        return ""
    return completed.stdout.strip()


def cmd_version() -> StageResult:
    """Report the gitlink version."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Getting package version...")
        version = get_package_version()

        yield (0.6, "Checking git commit...")
        git_sha = _source_commit()

        yield (1.0, "Complete")
        full_version = f"{version} ({git_sha})" if git_sha else version
        result_obj.result = f"gitlink version: {full_version}"
        result_obj.output = ConfigVersionOutput(
            version=version,
            git_sha=git_sha,
            full_version=full_version,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Getting version information...", progress_callback=do_work)
