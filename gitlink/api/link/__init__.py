"""Link API domain.

Pure link construction lives here; ``resolve_link``, ``copy_remote_link`` and
the ``cmd_*`` modules gather their inputs from the git and editor domains.
"""

from .build_link import build_link
from .classify_remote import classify_remote
from .errors import LinkError, UnknownRemoteHostError
from .format_link import format_link
from .LineRange import LineRange
from .LinkRequest import LinkRequest
from .Position import Position
from .Provider import Provider
from .reduce_selections import reduce_selections
from .RemoteDescriptor import RemoteDescriptor
from .ResolvedLink import ResolvedLink
from .Selection import Selection
from .Severity import Severity

__all__ = [
    "LineRange",
    "LinkError",
    "LinkRequest",
    "Position",
    "Provider",
    "RemoteDescriptor",
    "ResolvedLink",
    "Selection",
    "Severity",
    "UnknownRemoteHostError",
    "build_link",
    "classify_remote",
    "format_link",
    "reduce_selections",
]
