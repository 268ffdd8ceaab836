"""
Asset Synchronizer

Copies the bundled LaTeX style and class files next to the document being
exported. Existing files at the destination are never overwritten, even when
they differ from the bundled version.
"""

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from texprofiles.config import DEFAULT_TEMPLATE_DIR
from texprofiles.contexts.export.document import Document
from texprofiles.contexts.export.host import Insertion
from texprofiles.contexts.export.logger import _log_info, log_sync_result

ASSET_EXTENSIONS = (".sty", ".cls")


@dataclass
class SyncResult:
    """
    Result of an asset sync.

    Attributes:
        template_dir: Directory assets were taken from
        target_dir: Directory assets were copied into
        copied: Destination paths newly created
        skipped: Destination paths that already existed
        template_dir_found: False when template_dir was absent (nothing was done)
    """

    template_dir: Path
    target_dir: Path
    copied: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
    template_dir_found: bool = True


def list_assets(template_dir: Path) -> List[Path]:
    """Regular files in template_dir with an asset extension, sorted by name."""
    return sorted(
        path
        for path in template_dir.iterdir()
        if path.is_file() and path.name.endswith(ASSET_EXTENSIONS)
    )


def copy_missing_assets(template_dir: Path, target_dir: Path) -> SyncResult:
    """
    Copy every asset in template_dir that target_dir lacks.

    Args:
        template_dir: Bundled asset directory
        target_dir: Directory to populate

    Returns:
        SyncResult listing copied and already-present files
    """
    result = SyncResult(template_dir=template_dir, target_dir=target_dir)

    if not template_dir.is_dir():
        _log_info(f"Template directory {template_dir} not found, skipping asset sync")
        result.template_dir_found = False
        return result

    for source in list_assets(template_dir):
        destination = target_dir / source.name
        if destination.exists():
            result.skipped.append(destination)
            continue

        # shutil.copy keeps permission bits
        shutil.copy(source, destination)
        result.copied.append(destination)

    log_sync_result(result)
    return result


def sync_assets(
    document: Document, backend: str, template_dir: Path = DEFAULT_TEMPLATE_DIR
) -> Optional[Insertion]:
    """
    Pre-export step: make the bundled assets available beside the document.

    Runs for every document regardless of declared profile. Inserts nothing.
    """
    copy_missing_assets(template_dir, document.directory)
    return None
