"""Custom exceptions for the profiles context."""

from typing import Iterable, Optional


class UnknownProfileError(KeyError):
    """
    Exception raised when a profile name is not present in a class table.

    Attributes:
        name: The profile name that was looked up
        available: Names registered at lookup time
    """

    def __init__(self, name: str, available: Optional[Iterable[str]] = None):
        self.name = name
        self.available = list(available or [])

        parts = [f"Profile '{name}' is not registered"]
        if self.available:
            parts.append(f"Available profiles: {', '.join(self.available)}")
        else:
            parts.append("No profiles are registered")

        self.message = ". ".join(parts)
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message
