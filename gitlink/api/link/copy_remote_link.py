"""Copy the permalink for the active selection to the clipboard."""

from collections.abc import Callable
from dataclasses import replace

from ...utils.logger import get_logger
from ..clipboard._BaseClipboard import BaseClipboard
from ..editor._BaseEditor import BaseEditor
from ..git._BaseRepository import BaseRepository
from . import _messages
from .ResolvedLink import ResolvedLink
from .resolve_link import resolve_link
from .Severity import Severity

logger = get_logger("link")

Notify = Callable[[Severity, str], None]


def copy_remote_link(
    repository: BaseRepository | None,
    editor: BaseEditor | None,
    clipboard: BaseClipboard,
    notify: Notify,
) -> ResolvedLink | None:
    """Resolve the permalink, copy it and report the outcome through ``notify``.

    Exactly one notification is sent. The clipboard is written only on
    success. A dirty working tree, or one whose status git could not report,
    still copies the link but downgrades the notification to a warning.

    Returns:
        The copied link, or None if a precondition failed
    """
    resolved, reason = resolve_link(repository, editor)
    if resolved is None:
        message = f"{_messages.FAILURE_MESSAGE} {reason}"
        logger.info(message)
        notify(Severity.ERROR, message)
        return None

    clipboard.write(resolved.link)
    logger.info(f"Copied {resolved.link}")

    if repository is not None and repository.has_local_changes():
        notify(Severity.WARNING, f"{_messages.SUCCESS_MESSAGE}, but {_messages.DIRTY_WARNING}.")
        return replace(resolved, dirty=True)

    notify(Severity.INFO, f"{_messages.SUCCESS_MESSAGE}.")
    return resolved
