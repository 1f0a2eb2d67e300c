"""Result of classifying a remote URL."""

from dataclasses import dataclass

from .Provider import Provider


@dataclass(frozen=True)
class RemoteDescriptor:
    """Hosting provider plus the owner/project parsed out of a remote URL."""

    provider: Provider
    owner: str = ""
    project: str = ""

    @property
    def is_known(self) -> bool:
        return self.provider is not Provider.UNKNOWN
