"""
Base interface for the key-value store holding the notes.

Mirrors the minimal contract of a managed KV namespace: string keys,
string values, full enumeration and nothing else (no transactions,
no range queries).
"""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Abstract base class for key-value store implementations."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """
        Fetch the raw value stored under ``key``.

        Returns:
            The stored string, or None if the key is absent
        """

    @abstractmethod
    def put(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, overwriting any previous value."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key``. Deleting an absent key is a no-op."""

    @abstractmethod
    def list_keys(self) -> list[str]:
        """Return every stored key, in lexicographic order."""

    def ping(self) -> bool:
        """Liveness check used by /healthz."""
        return True
