"""Link show API command.

CLI: gitlink link show <file> [--selection LINE[:CHAR][-LINE[:CHAR]] ...] [--repo PATH]

Same resolution as link copy, without touching the clipboard.
"""

from collections.abc import Iterator
from dataclasses import replace

from .._output_schemas.link import LinkShowOutput
from ..config.GitLinkConfig import GitLinkConfig
from ..StageResult import StageResult
from . import _messages
from ._link_output import _link_output
from ._open_context import _open_context
from .resolve_link import resolve_link


def cmd_show(path: str, selections: list[str] | None = None, repo: str | None = None) -> StageResult:
    """Show the permalink for lines of a file.

    Args:
        path: File to link to.
        selections: Zero-based selections, LINE[:CHAR][-LINE[:CHAR]]; none means line 1.
        repo: Directory to search for the repository instead of the file's own.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = GitLinkConfig.load()
        except ValueError as e:
            result_obj.output = _link_output(LinkShowOutput, None, [str(e)], [])
            result_obj.result = "Failed to load configuration"
            result_obj.success = False
            return

        yield (0.3, "Reading repository state...")
        try:
            repository, editor = _open_context(config, path, selections, repo)
        except ValueError as e:
            result_obj.output = _link_output(LinkShowOutput, None, [str(e)], [])
            result_obj.result = str(e)
            result_obj.success = False
            return

        yield (0.6, "Building link...")
        resolved, reason = resolve_link(repository, editor)
        if resolved is None:
            yield (1.0, "Complete")
            message = f"{_messages.SHOW_FAILURE_MESSAGE} {reason}"
            result_obj.output = _link_output(LinkShowOutput, None, [message], [])
            result_obj.result = message
            result_obj.success = False
            return

        yield (0.8, "Checking working tree...")
        warnings: list[str] = []
        if repository is not None and repository.has_local_changes():
            resolved = replace(resolved, dirty=True)
            warnings.append(f"{_messages.DIRTY_WARNING.capitalize()}.")

        yield (1.0, "Complete")
        result_obj.output = _link_output(LinkShowOutput, resolved, [], warnings)
        result_obj.result = resolved.link
        result_obj.success = True

    return StageResult(announce=f"Building remote Git link for {path}...", progress_callback=do_work)
