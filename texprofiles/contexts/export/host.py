"""
Export Host

Stands in for the host text-processing system: it owns the class table and the
before-export extension point. Pre-export steps never edit the document
themselves. Each returns an optional Insertion and the host composes them:

    steps run in registration order
    every START insertion goes above whatever is already at the start

so with steps [macros, assets, skeleton] the final order top to bottom is
skeleton body, macro contents, original document.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from texprofiles.contexts.export.document import Document
from texprofiles.contexts.export.logger import _log_debug, log_export_start
from texprofiles.contexts.profiles.class_registry import ClassRegistry


class InsertPosition(Enum):
    START = "start"


@dataclass(frozen=True)
class Insertion:
    """Text a pre-export step wants placed in the document."""

    text: str
    position: InsertPosition = InsertPosition.START


BeforeExportHook = Callable[[Document, str], Optional[Insertion]]


def apply_insertions(text: str, insertions: Iterable[Insertion]) -> str:
    """
    Compose insertions into text, in order.

    A START insertion is placed ahead of everything already at the start,
    including earlier insertions.
    """
    for insertion in insertions:
        text = insertion.text + text
    return text


class ExportHost:
    """
    Host adapter owning the class table and the before-export hooks.

    Hooks are keyed by name so attaching the same step twice keeps one entry
    at its original position.
    """

    def __init__(self, class_table: Optional[ClassRegistry] = None):
        self.class_table = class_table if class_table is not None else ClassRegistry()
        self._hooks: Dict[str, BeforeExportHook] = {}

    def add_before_export_hook(self, name: str, hook: BeforeExportHook) -> bool:
        """
        Attach a hook unless one with the same name is already attached.

        Returns:
            True if the hook was attached
        """
        if name in self._hooks:
            return False
        self._hooks[name] = hook
        return True

    @property
    def hook_names(self) -> List[str]:
        return list(self._hooks)

    def run_before_export(self, document: Document, backend: str = "latex") -> Document:
        """
        Run every hook once, in order, then apply their insertions to the document.

        The document is modified in place and returned.
        """
        log_export_start(document.name, backend, document.profile_name, len(self._hooks))

        insertions = []
        for name, hook in self._hooks.items():
            insertion = hook(document, backend)
            if insertion is None:
                _log_debug(f"  {name}: nothing to insert")
                continue
            _log_debug(f"  {name}: {len(insertion.text)} characters at {insertion.position.value}")
            insertions.append(insertion)

        document.text = apply_insertions(document.text, insertions)
        return document
