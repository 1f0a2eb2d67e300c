"""Classify a remote URL by hosting provider."""

import re

from .Provider import Provider
from .RemoteDescriptor import RemoteDescriptor

# Compiled regex patterns. Wildcards are greedy and dots are unescaped so that
# owners containing "/" resolve the same way existing links always have.
GITHUB_SSH_REMOTE_PATTERN = re.compile(r"git@github.com:(.*)/(.*).git")
GITHUB_HTTPS_REMOTE_PATTERN = re.compile(r"https://github.com/(.*)/(.*).git")
BITBUCKET_SSH_REMOTE_PATTERN = re.compile(r"git@bitbucket.org:(.*)/(.*).git")
BITBUCKET_HTTPS_REMOTE_PATTERN = re.compile(r"https://(.*)@bitbucket.org/(.*)/(.*).git")

# (provider, pattern, owner group, project group), in match order
_REMOTE_PATTERNS: tuple[tuple[Provider, re.Pattern[str], int, int], ...] = (
    (Provider.GITHUB, GITHUB_SSH_REMOTE_PATTERN, 1, 2),
    (Provider.GITHUB, GITHUB_HTTPS_REMOTE_PATTERN, 1, 2),
    (Provider.BITBUCKET, BITBUCKET_SSH_REMOTE_PATTERN, 1, 2),
    (Provider.BITBUCKET, BITBUCKET_HTTPS_REMOTE_PATTERN, 2, 3),
)


def classify_remote(remote_url: str) -> RemoteDescriptor:
    """Determine the hosting provider, owner and project of a remote URL.

    Patterns must match the whole URL. Returns a ``Provider.UNKNOWN``
    descriptor when none does.
    """
    for provider, pattern, owner_group, project_group in _REMOTE_PATTERNS:
        match = pattern.fullmatch(remote_url)
        if match:
            return RemoteDescriptor(
                provider=provider,
                owner=match.group(owner_group),
                project=match.group(project_group),
            )

    return RemoteDescriptor(provider=Provider.UNKNOWN)
