"""
texprofiles - LaTeX export profiles for Org-style documents

Registers "report" and "book" export profiles and prepares documents for
LaTeX export by injecting shared macros and a starter skeleton and by copying
the bundled class files beside the document.

Architecture:
- Profiles Context: Profile records and the host class table
- Export Context: Document model, before-export pipeline and its steps
"""

from texprofiles.config import ExportConfig, load_config
from texprofiles.contexts.export import Document, ExportHost, setup_export_profiles

__version__ = "0.1.0"

__all__ = ["Document", "ExportConfig", "ExportHost", "load_config", "setup_export_profiles"]
