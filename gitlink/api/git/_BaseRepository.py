"""Abstract repository state provider."""

from abc import ABC, abstractmethod
from pathlib import Path

from .Remote import Remote


class BaseRepository(ABC):
    """Read-only view of a single working copy."""

    @property
    @abstractmethod
    def root(self) -> Path:
        """Top-level directory of the working tree."""
        pass

    @abstractmethod
    def remotes(self) -> list[Remote] | None:
        """Configured remotes, in the order git reports them.

        None when the remotes could not be read at all.
        """
        pass

    @abstractmethod
    def head_commit(self) -> str | None:
        """Commit checked out at HEAD, or None if there is none yet."""
        pass

    @abstractmethod
    def working_tree_changes(self) -> list[str] | None:
        """Uncommitted changes relative to HEAD, one entry per path.

        None when the status could not be read.
        """
        pass

    def has_local_changes(self) -> bool:
        """True unless the working tree is known to be clean."""
        changes = self.working_tree_changes()
        return changes is None or bool(changes)

    def relative_path(self, path: Path) -> str | None:
        """Path relative to the root with "/" separators, or None if outside it."""
        try:
            relative = path.expanduser().resolve().relative_to(self.root.resolve())
        except ValueError:
            return None
        return relative.as_posix()
