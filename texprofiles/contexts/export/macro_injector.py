"""
Macro Injector

Prepends the macro definitions file to documents that declare one of the
registered export profiles.
"""

from pathlib import Path
from typing import Optional

from texprofiles.config import DEFAULT_MACRO_FILE
from texprofiles.contexts.export.document import Document
from texprofiles.contexts.export.exceptions import MacroFileMissingError
from texprofiles.contexts.export.host import InsertPosition, Insertion
from texprofiles.contexts.export.logger import _log_debug, _log_info
from texprofiles.contexts.profiles.records import PROFILE_NAMES


def read_macros(macro_file: Path, profile_name: Optional[str] = None) -> str:
    """
    Read the macro file verbatim.

    Raises:
        MacroFileMissingError: If macro_file doesn't exist
    """
    if not macro_file.exists():
        raise MacroFileMissingError(macro_file, profile_name)

    # newline="" keeps line endings exactly as stored
    with open(macro_file, "r", encoding="utf-8", newline="") as f:
        return f.read()


def inject_macros(
    document: Document, backend: str, macro_file: Path = DEFAULT_MACRO_FILE
) -> Optional[Insertion]:
    """
    Build the macro insertion for a document.

    Args:
        document: Document being exported
        backend: Export backend identifier (all backends are treated alike)
        macro_file: Macro definitions to prepend

    Returns:
        Insertion of the macro contents plus a newline at the document start,
        or None if the document declares no registered profile

    Raises:
        MacroFileMissingError: If the profile matches but macro_file is absent
    """
    profile_name = document.profile_name
    if profile_name not in PROFILE_NAMES:
        _log_debug(f"No macros for {document.name}: profile {profile_name!r} is not registered")
        return None

    macros = read_macros(macro_file, profile_name)
    _log_info(f"Injecting macros from {macro_file.name} into {document.name} ({profile_name})")

    return Insertion(text=macros + "\n", position=InsertPosition.START)
