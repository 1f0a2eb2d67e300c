"""Complete input to link formatting."""

from dataclasses import dataclass

from .LineRange import LineRange


@dataclass(frozen=True)
class LinkRequest:
    remote_url: str
    commit: str
    path: str
    range: LineRange
