"""A permalink together with everything it was built from."""

from dataclasses import dataclass

from .LinkRequest import LinkRequest
from .RemoteDescriptor import RemoteDescriptor


@dataclass(frozen=True)
class ResolvedLink:
    link: str
    request: LinkRequest
    remote: RemoteDescriptor
    dirty: bool = False
