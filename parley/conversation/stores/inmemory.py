"""In-memory implementation of StorageMedium."""

from parley.conversation.store import StorageMedium, StorageUnavailableError


class InMemoryStorage(StorageMedium):
    """Dict-backed medium living as long as the hosting process.

    Plays the role of the browser's per-tab session storage: share one
    instance between engines to simulate a reload within the same tab.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})
        self.available = True

    def get(self, key: str) -> str | None:
        if not self.available:
            raise StorageUnavailableError(f"storage offline reading {key!r}")
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        if not self.available:
            raise StorageUnavailableError(f"storage offline writing {key!r}")
        self._items[key] = value

    def keys(self) -> list[str]:
        """Return the stored keys in insertion order."""
        return list(self._items)
