"""Gather repository and editor state into a permalink."""

from ..editor._BaseEditor import BaseEditor
from ..git._BaseRepository import BaseRepository
from . import _messages
from .build_link import build_link
from .errors import UnknownRemoteHostError
from .LinkRequest import LinkRequest
from .reduce_selections import reduce_selections
from .ResolvedLink import ResolvedLink


def resolve_link(
    repository: BaseRepository | None, editor: BaseEditor | None
) -> tuple[ResolvedLink | None, str | None]:
    """Build the permalink for the active document's selection.

    Preconditions are checked in order and the first one that fails ends the
    resolution. Only the first configured remote is used.

    Returns:
        (resolved, None) on success; (None, reason) on failure, where reason
        completes the sentence "Could not ... because"
    """
    if repository is None:
        return None, _messages.REPOSITORY_UNAVAILABLE

    remotes = repository.remotes()
    if remotes is None:
        return None, _messages.REPOSITORY_UNAVAILABLE
    if not remotes:
        return None, _messages.NO_REMOTES

    # A listed remote has a fetch URL, a push URL or both
    remote_url = remotes[0].url

    commit = repository.head_commit()
    if not commit:
        return None, _messages.NO_HEAD

    document = editor.active_document() if editor is not None else None
    if editor is None or document is None:
        return None, _messages.NO_ACTIVE_EDITOR

    relative_path = repository.relative_path(document)
    if relative_path is None:
        return None, _messages.OUTSIDE_REPOSITORY

    line_range = reduce_selections(editor.selections())
    request = LinkRequest(remote_url=remote_url, commit=commit, path=relative_path, range=line_range)

    try:
        resolved = build_link(request)
    except UnknownRemoteHostError:
        return None, _messages.UNKNOWN_HOST

    if not resolved.link:
        return None, _messages.UNKNOWN_HOST

    return resolved, None
