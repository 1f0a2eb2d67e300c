"""Git repository state providers."""

from ._BaseRepository import BaseRepository
from .GitRepository import GitRepository
from .Remote import Remote

__all__ = ["BaseRepository", "GitRepository", "Remote"]
