"""Custom exceptions for the export context with file references."""

from pathlib import Path
from typing import Optional


class MacroFileMissingError(FileNotFoundError):
    """
    Exception raised when a document declares a profile but the macro file is absent.

    Attributes:
        message: Error description
        macro_file: Path the macro definitions were expected at
        profile_name: Profile declared by the document being exported
    """

    def __init__(self, macro_file: Path, profile_name: Optional[str] = None):
        self.macro_file = macro_file
        self.profile_name = profile_name
        self.message = f"Macro file not found at {macro_file}"

        parts = [self.message]
        if profile_name:
            parts.append(f"Required by profile: {profile_name}")
        parts.append("Set TEXPROFILES_MACRO_FILE or pass macro_file to load_config()")

        super().__init__("\n".join(parts))
