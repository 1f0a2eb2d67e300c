"""Link copy API command.

CLI: gitlink link copy <file> [--selection LINE[:CHAR][-LINE[:CHAR]] ...] [--repo PATH]
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkCopyOutput
from ..clipboard.ClipboardError import ClipboardError
from ..clipboard.SystemClipboard import SystemClipboard
from ..config.GitLinkConfig import GitLinkConfig
from ..StageResult import StageResult
from ._link_output import _link_output
from ._open_context import _open_context
from .copy_remote_link import copy_remote_link
from .Severity import Severity


def cmd_copy(path: str, selections: list[str] | None = None, repo: str | None = None) -> StageResult:
    """Copy the permalink for lines of a file to the system clipboard.

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
            result_obj.output = _link_output(LinkCopyOutput, None, [str(e)], [])
            result_obj.result = "Failed to load configuration"
            result_obj.success = False
            return

        yield (0.3, "Reading repository state...")
        try:
            repository, editor = _open_context(config, path, selections, repo)
        except ValueError as e:
            result_obj.output = _link_output(LinkCopyOutput, None, [str(e)], [])
            result_obj.result = str(e)
            result_obj.success = False
            return

        yield (0.6, "Building link...")
        clipboard = SystemClipboard(config.clipboard.command, timeout=config.clipboard.timeout)
        notifications: list[tuple[Severity, str]] = []

        def notify(severity: Severity, message: str) -> None:
            notifications.append((severity, message))

        try:
            resolved = copy_remote_link(repository, editor, clipboard, notify)
        except ClipboardError as e:
            result_obj.output = _link_output(LinkCopyOutput, None, [str(e)], [])
            result_obj.result = f"Could not copy remote Git link to clipboard: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        severity, message = notifications[-1]
        errors = [message] if severity is Severity.ERROR else []
        warnings = [message] if severity is Severity.WARNING else []

        result_obj.output = _link_output(LinkCopyOutput, resolved, errors, warnings)
        result_obj.result = message
        result_obj.success = resolved is not None

    return StageResult(announce=f"Copying remote Git link for {path}...", progress_callback=do_work)
