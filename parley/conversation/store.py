"""StorageMedium abstract interface."""

from abc import ABC, abstractmethod


class StorageUnavailableError(Exception):
    """The persistence medium cannot be read or written."""

    pass


class StorageMedium(ABC):
    """Abstract interface for a tab-scoped string key/value surface.

    Absence of a key is a valid state and is reported as None. Any
    failure of the medium itself is raised as StorageUnavailableError.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Get the value stored under key."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass
