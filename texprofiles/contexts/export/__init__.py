"""
Export Context

Responsibilities:
- Models the document being exported and the host's before-export pipeline
- Prepends macro definitions and skeleton bodies for report/book documents
- Copies bundled .sty/.cls assets beside the document

Owns: Pre-export steps, insertion composition, export logging
Never: Renders LaTeX or compiles PDFs
"""

from texprofiles.contexts.export.asset_sync import SyncResult, copy_missing_assets, sync_assets
from texprofiles.contexts.export.configurator import HOOK_ORDER, setup_export_profiles
from texprofiles.contexts.export.document import Document
from texprofiles.contexts.export.exceptions import MacroFileMissingError
from texprofiles.contexts.export.host import (
    ExportHost,
    InsertPosition,
    Insertion,
    apply_insertions,
)
from texprofiles.contexts.export.macro_injector import inject_macros
from texprofiles.contexts.export.skeleton_injector import filter_skeleton, inject_skeleton

__all__ = [
    # Entry point
    "setup_export_profiles",
    "HOOK_ORDER",
    # Host and document model
    "ExportHost",
    "Document",
    "Insertion",
    "InsertPosition",
    "apply_insertions",
    # Pre-export steps
    "inject_macros",
    "sync_assets",
    "copy_missing_assets",
    "SyncResult",
    "inject_skeleton",
    "filter_skeleton",
    # Errors
    "MacroFileMissingError",
]
