"""
Class Registry

Host-owned table of export profiles keyed by name. Registration is
insert-if-absent, so registering the same defaults repeatedly is safe.
"""

from typing import Dict, Iterable, Iterator, List

from loguru import logger

from texprofiles.contexts.profiles.exceptions import UnknownProfileError
from texprofiles.contexts.profiles.records import DEFAULT_PROFILES, ProfileRecord


class ClassRegistry:
    """
    Registry of export profiles available to a host.

    Profiles keep their registration order for listing and iteration.
    """

    def __init__(self):
        self._records: Dict[str, ProfileRecord] = {}

    def register(self, name: str, record: ProfileRecord) -> bool:
        """
        Add a profile under a name unless the name is already taken.

        Args:
            name: Key the profile is looked up by
            record: Profile to store

        Returns:
            True if the record was inserted, False if the name was already present
        """
        if name in self._records:
            return False

        self._records[name] = record
        return True

    def get(self, name: str) -> ProfileRecord:
        """
        Look up a profile by name.

        Raises:
            UnknownProfileError: If no profile is registered under name
        """
        try:
            return self._records[name]
        except KeyError:
            raise UnknownProfileError(name, self.names()) from None

    def names(self) -> List[str]:
        """Registered profile names in registration order."""
        return list(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ProfileRecord]:
        return iter(self._records.values())


def register_profiles(
    class_table: ClassRegistry, profiles: Iterable[ProfileRecord] = DEFAULT_PROFILES
) -> List[str]:
    """
    Register the export profiles with a host class table.

    Args:
        class_table: Host class table
        profiles: Records to register (defaults to the report and book profiles)

    Returns:
        Names that were newly inserted (empty when all were already present)
    """
    inserted = []
    for record in profiles:
        if class_table.register(record.name, record):
            inserted.append(record.name)
            logger.debug(f"[profiles] Registered profile '{record.name}' ({record.document_class})")
        else:
            logger.debug(f"[profiles] Profile '{record.name}' already registered, keeping existing entry")

    return inserted
