"""Storage media for session persistence."""

from parley.conversation.store import StorageMedium, StorageUnavailableError
from parley.conversation.stores.inmemory import InMemoryStorage

__all__ = [
    "StorageMedium",
    "StorageUnavailableError",
    "InMemoryStorage",
]
