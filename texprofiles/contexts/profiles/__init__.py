"""
Profiles Context

Responsibilities:
- Defines the report and book export profiles (document class + heading map)
- Provides the host class table and duplicate-safe registration

Owns: Profile records, class table
Never: Touches documents or the file system
"""

from texprofiles.contexts.profiles.class_registry import ClassRegistry, register_profiles
from texprofiles.contexts.profiles.exceptions import UnknownProfileError
from texprofiles.contexts.profiles.records import (
    BOOK_PROFILE,
    DEFAULT_PROFILES,
    PROFILE_NAMES,
    REPORT_PROFILE,
    ProfileRecord,
)

__all__ = [
    # Records
    "ProfileRecord",
    "REPORT_PROFILE",
    "BOOK_PROFILE",
    "DEFAULT_PROFILES",
    "PROFILE_NAMES",
    # Registry
    "ClassRegistry",
    "register_profiles",
    "UnknownProfileError",
]
