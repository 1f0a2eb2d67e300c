"""Unit tests for gitlink.api.git.GitRepository with git mocked out."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

from gitlink.api.git.GitRepository import GitRepository
from gitlink.api.git.Remote import Remote


def _completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> MagicMock:
    result = MagicMock()
    result.returncode = returncode
    result.stdout = stdout
    result.stderr = stderr
    return result


class TestDiscover:
    @patch("subprocess.run")
    def test_returns_repository_at_toplevel(self, mock_run, tmp_path):
        mock_run.return_value = _completed(stdout=f"{tmp_path}\n")

        repository = GitRepository.discover(tmp_path / "src" / "main.ts", executable="git", timeout=3.0)

        assert repository is not None
        assert repository.root == tmp_path
        assert repository.timeout == 3.0
        args, kwargs = mock_run.call_args
        assert args[0] == ["git", "rev-parse", "--show-toplevel"]
        assert kwargs["cwd"] == tmp_path / "src"

    @patch("subprocess.run")
    def test_searches_from_directory_itself(self, mock_run, tmp_path):
        mock_run.return_value = _completed(stdout=f"{tmp_path}\n")

        GitRepository.discover(tmp_path)

        assert mock_run.call_args.kwargs["cwd"] == tmp_path

    @patch("subprocess.run")
    def test_not_a_work_tree(self, mock_run, tmp_path):
        mock_run.return_value = _completed(returncode=128, stderr="fatal: not a git repository")
        assert GitRepository.discover(tmp_path) is None

    @patch("subprocess.run", side_effect=FileNotFoundError("git"))
    def test_git_missing(self, mock_run, tmp_path):
        assert GitRepository.discover(tmp_path) is None

    @patch("subprocess.run", side_effect=subprocess.TimeoutExpired(["git"], 10))
    def test_git_timeout(self, mock_run, tmp_path):
        assert GitRepository.discover(tmp_path) is None


class TestRemotes:
    @patch("subprocess.run")
    def test_parses_fetch_and_push(self, mock_run):
        mock_run.return_value = _completed(
            stdout=(
                "origin\tgit@github.com:acme/widgets.git (fetch)\n"
                "origin\tgit@github.com:acme/widgets.git (push)\n"
                "upstream\thttps://x@bitbucket.org/team/widgets.git (fetch)\n"
                "upstream\tgit@bitbucket.org:team/widgets.git (push)\n"
            )
        )

        remotes = GitRepository(Path("/repo")).remotes()

        assert remotes == [
            Remote("origin", "git@github.com:acme/widgets.git", "git@github.com:acme/widgets.git"),
            Remote("upstream", "https://x@bitbucket.org/team/widgets.git", "git@bitbucket.org:team/widgets.git"),
        ]
        assert mock_run.call_args.args[0] == ["git", "remote", "-v"]

    @patch("subprocess.run")
    def test_push_only_remote(self, mock_run):
        mock_run.return_value = _completed(stdout="origin\thttps://github.com/a/b.git (push)\n")

        (remote,) = GitRepository(Path("/repo")).remotes()

        assert remote.fetch_url is None
        assert remote.url == "https://github.com/a/b.git"

    @patch("subprocess.run")
    def test_ignores_malformed_lines(self, mock_run):
        mock_run.return_value = _completed(stdout="garbage\norigin\tgit@github.com:a/b.git (mirror)\n\n")
        assert GitRepository(Path("/repo")).remotes() == []

    @patch("subprocess.run")
    def test_no_remotes(self, mock_run):
        mock_run.return_value = _completed(stdout="")
        assert GitRepository(Path("/repo")).remotes() == []

    @patch("subprocess.run")
    def test_git_error_is_not_an_empty_list(self, mock_run):
        mock_run.return_value = _completed(returncode=1, stderr="boom")
        assert GitRepository(Path("/repo")).remotes() is None

    @patch("subprocess.run", side_effect=subprocess.TimeoutExpired(["git"], 10))
    def test_timeout(self, mock_run):
        assert GitRepository(Path("/repo")).remotes() is None


class TestHeadCommit:
    @patch("subprocess.run")
    def test_head(self, mock_run):
        mock_run.return_value = _completed(stdout="deadbeefcafe\n")

        assert GitRepository(Path("/repo")).head_commit() == "deadbeefcafe"
        assert mock_run.call_args.args[0] == ["git", "rev-parse", "--verify", "--quiet", "HEAD"]

    @patch("subprocess.run")
    def test_unborn_branch(self, mock_run):
        mock_run.return_value = _completed(returncode=1)
        assert GitRepository(Path("/repo")).head_commit() is None

    @patch("subprocess.run", side_effect=subprocess.TimeoutExpired(["git"], 10))
    def test_timeout(self, mock_run):
        assert GitRepository(Path("/repo")).head_commit() is None


class TestWorkingTreeChanges:
    @patch("subprocess.run")
    def test_porcelain_paths(self, mock_run):
        mock_run.return_value = _completed(stdout=" M src/main.ts\n?? new.txt\nR  old.py -> new.py\n")

        changes = GitRepository(Path("/repo")).working_tree_changes()

        assert changes == ["src/main.ts", "new.txt", "old.py -> new.py"]

    @patch("subprocess.run")
    def test_clean(self, mock_run):
        mock_run.return_value = _completed(stdout="")
        assert GitRepository(Path("/repo")).working_tree_changes() == []

    @patch("subprocess.run")
    def test_custom_executable(self, mock_run):
        mock_run.return_value = _completed(stdout="")

        GitRepository(Path("/repo"), executable="/opt/git/bin/git").working_tree_changes()

        assert mock_run.call_args.args[0][0] == "/opt/git/bin/git"
        assert mock_run.call_args.kwargs["cwd"] == Path("/repo")

    @patch("subprocess.run")
    def test_status_failure_is_unknown(self, mock_run):
        mock_run.return_value = _completed(returncode=128, stderr="fatal: index file corrupt")

        repository = GitRepository(Path("/repo"))

        assert repository.working_tree_changes() is None
        assert repository.has_local_changes() is True

    @patch("subprocess.run", side_effect=subprocess.TimeoutExpired(["git"], 10))
    def test_status_timeout_counts_as_changed(self, mock_run):
        assert GitRepository(Path("/repo")).has_local_changes() is True

    @patch("subprocess.run")
    def test_clean_tree_has_no_local_changes(self, mock_run):
        mock_run.return_value = _completed(stdout="")
        assert GitRepository(Path("/repo")).has_local_changes() is False
