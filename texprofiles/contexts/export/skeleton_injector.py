"""
Skeleton Injector

Prepends the body of a profile's starter template to documents that declare
that profile. The template's own title, author, date, top-level heading and
comment delimiter lines are stripped first (see line_filters).
"""

from pathlib import Path
from typing import List, Mapping, Optional

from texprofiles.config import DEFAULT_SKELETON_FILES
from texprofiles.contexts.export.document import Document
from texprofiles.contexts.export.host import InsertPosition, Insertion
from texprofiles.contexts.export.line_filters import is_excluded
from texprofiles.contexts.export.logger import _log_debug, _log_info
from texprofiles.contexts.profiles.records import PROFILE_NAMES


def filter_skeleton(skeleton_text: str) -> List[str]:
    """
    Split skeleton text into non-empty lines and drop excluded ones.

    Blank lines disappear with the split; the remaining lines keep their order.
    """
    lines = [line for line in skeleton_text.split("\n") if line]
    return [line for line in lines if not is_excluded(line)]


def skeleton_body(skeleton_file: Path) -> str:
    """Filtered skeleton lines, each terminated by a newline."""
    kept = filter_skeleton(skeleton_file.read_text(encoding="utf-8"))
    return "".join(f"{line}\n" for line in kept)


def inject_skeleton(
    document: Document,
    backend: str,
    skeleton_files: Mapping[str, Path] = DEFAULT_SKELETON_FILES,
) -> Optional[Insertion]:
    """
    Build the skeleton insertion for a document.

    Args:
        document: Document being exported
        backend: Export backend identifier
        skeleton_files: Starter template per profile name

    Returns:
        Insertion of the filtered skeleton body at the document start, or None
        when the profile has no skeleton or its file is missing
    """
    profile_name = document.profile_name
    skeleton_file = skeleton_files.get(profile_name) if profile_name in PROFILE_NAMES else None

    if skeleton_file is None:
        _log_debug(f"No skeleton for {document.name}: profile {profile_name!r} has none")
        return None

    if not skeleton_file.exists():
        _log_debug(f"Skeleton {skeleton_file} not found, skipping")
        return None

    body = skeleton_body(skeleton_file)
    _log_info(f"Injecting skeleton {skeleton_file.name} into {document.name} ({profile_name})")

    return Insertion(text=body, position=InsertPosition.START)
