"""Configured Git remote."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Remote:
    """A named remote with a fetch and/or push URL."""

    name: str
    fetch_url: str | None = None
    push_url: str | None = None

    @property
    def url(self) -> str:
        """Fetch URL, falling back to the push URL."""
        return self.fetch_url or self.push_url or ""
