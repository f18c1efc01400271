"""Steering CLI Module"""

# standard library
from abc import ABC, abstractmethod
from typing import Any


class KeyValueStoreABC(ABC):
    """Persistent key/value storage for JSON-serializable values."""

    @abstractmethod
    def read(self, key: str) -> Any | None:
        """Return the value for key or None if missing."""

    @abstractmethod
    def write(self, key: str, value: Any):
        """Write the value for key (last writer wins)."""

    @abstractmethod
    def delete(self, key: str):
        """Delete key. Deleting a missing key is not an error."""

    @abstractmethod
    def keys(self, prefix: str = '') -> list[str]:
        """Return the stored keys starting with prefix."""

    def close(self):  # noqa: B027
        """Release any held resources."""


class StoreError(Exception):
    """A store operation failed (I/O error, backend unavailable)."""
