"""Build the repository and editor for a file named on the command line."""

from pathlib import Path

from ..config.GitLinkConfig import GitLinkConfig
from ..editor.CommandLineEditor import CommandLineEditor
from ..editor.parse_selection import parse_selection
from ..git.GitRepository import GitRepository


def _open_context(
    config: GitLinkConfig, path: str, selections: list[str] | None, repo: str | None
) -> tuple[GitRepository | None, CommandLineEditor]:
    """Discover the repository and wrap the file and selections as editor state.

    The repository is searched from ``repo`` when given, otherwise from the file.

    Raises:
        ValueError: If a selection cannot be parsed
    """
    parsed = [parse_selection(text) for text in selections or []]
    file_path = Path(path).expanduser().resolve()
    search_from = Path(repo).expanduser().resolve() if repo else file_path

    repository = GitRepository.discover(search_from, executable=config.git.executable, timeout=config.git.timeout)
    return repository, CommandLineEditor(file_path, parsed)
