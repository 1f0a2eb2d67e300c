"""Render provider permalinks."""

from .errors import UnknownRemoteHostError
from .LineRange import LineRange
from .Provider import Provider
from .RemoteDescriptor import RemoteDescriptor


def _github_link(remote: RemoteDescriptor, commit: str, path: str, line_range: LineRange) -> str:
    first_line = f"L{line_range.start}"
    second_line = "" if line_range.is_single_line else f"-L{line_range.end}"
    return f"https://github.com/{remote.owner}/{remote.project}/blob/{commit}/{path}#{first_line}{second_line}"


def _bitbucket_link(remote: RemoteDescriptor, commit: str, path: str, line_range: LineRange) -> str:
    first_line = line_range.start
    second_line = "" if line_range.is_single_line else f":{line_range.end}"
    return f"https://bitbucket.org/{remote.owner}/{remote.project}/src/{commit}/{path}#lines-{first_line}{second_line}"


_FORMATTERS = {
    Provider.GITHUB: _github_link,
    Provider.BITBUCKET: _bitbucket_link,
}


def format_link(remote: RemoteDescriptor, commit: str, path: str, line_range: LineRange) -> str:
    """Render the permalink for ``path`` at ``commit`` highlighting ``line_range``.

    Owner, project, commit and path are inserted verbatim, without escaping.

    Raises:
        UnknownRemoteHostError: If ``remote`` is not a supported provider
    """
    formatter = _FORMATTERS.get(remote.provider)
    if formatter is None:
        raise UnknownRemoteHostError()
    return formatter(remote, commit, path, line_range)
