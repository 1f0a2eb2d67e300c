"""Result of a gitlink command."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

ProgressCallback = Callable[["StageResult"], Iterator[tuple[float, str]]]


@dataclass
class StageResult:
    """What a ``cmd_*`` function hands back to its caller.

    The caller shows ``announce``, then drains ``progress_callback``, which
    yields ``(fraction, message)`` pairs and fills in ``result``, ``output``
    and ``success`` before it finishes. ``output`` must conform to the
    command's registered output schema.
    """

    announce: str
    progress_callback: ProgressCallback
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
