"""Classify a link request's remote and format its permalink."""

from .classify_remote import classify_remote
from .errors import UnknownRemoteHostError
from .format_link import format_link
from .LinkRequest import LinkRequest
from .ResolvedLink import ResolvedLink


def build_link(request: LinkRequest) -> ResolvedLink:
    """Build the permalink for ``request``.

    Raises:
        UnknownRemoteHostError: If the remote URL matches no supported provider
    """
    remote = classify_remote(request.remote_url)
    if not remote.is_known:
        raise UnknownRemoteHostError(request.remote_url)

    link = format_link(remote, request.commit, request.path, request.range)
    return ResolvedLink(link=link, request=request, remote=remote)
