"""Editor state supplied on the command line."""

from collections.abc import Iterable
from pathlib import Path

from ..link.Selection import Selection
from ._BaseEditor import BaseEditor


class CommandLineEditor(BaseEditor):
    """A document path plus selections, as an editor integration passes them to the CLI.

    With no selections the cursor sits at the start of the document.
    """

    def __init__(self, document: Path | None, selections: Iterable[Selection] = ()):
        self._document = document
        self._selections = list(selections)

    def active_document(self) -> Path | None:
        return self._document

    def selections(self) -> list[Selection]:
        if not self._selections:
            return [Selection.at(0)]
        return list(self._selections)
