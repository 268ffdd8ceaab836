"""
Export Document

Minimal view of an Org-style plain-text document being exported. Only the
leading "#+KEYWORD: value" directives are read; the body is treated as opaque text.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

PROFILE_KEYWORD = "LATEX_CLASS"


@dataclass
class Document:
    """
    Document text plus the file it was loaded from.

    Attributes:
        text: Full document text, mutated in place by the export pipeline
        path: Source file (None for documents not yet saved)
    """

    text: str
    path: Optional[Path] = None

    @classmethod
    def from_file(cls, path: Path) -> "Document":
        path = Path(path)
        return cls(text=path.read_text(encoding="utf-8"), path=path)

    @property
    def name(self) -> str:
        return self.path.name if self.path else "<unsaved>"

    @property
    def directory(self) -> Path:
        """Directory the document lives in, or the working directory if unsaved."""
        if self.path is None:
            return Path.cwd()
        return self.path.resolve().parent

    def keyword(self, name: str) -> Optional[str]:
        """
        Return the value of the first "#+NAME:" directive, stripped.

        Keyword names match case-insensitively. Returns None if the directive
        is not declared.
        """
        pattern = re.compile(rf"^[ \t]*#\+{re.escape(name)}:[ \t]*(.*?)[ \t\r]*$", re.IGNORECASE | re.MULTILINE)
        match = pattern.search(self.text)
        if match is None:
            return None
        return match.group(1)

    @property
    def profile_name(self) -> Optional[str]:
        """Declared export profile (the first #+LATEX_CLASS value)."""
        return self.keyword(PROFILE_KEYWORD)

    def save(self, path: Optional[Path] = None) -> Path:
        """Write text to path (defaults to the source file)."""
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("Document has no path; pass one to save()")
        target.write_text(self.text, encoding="utf-8")
        return target
