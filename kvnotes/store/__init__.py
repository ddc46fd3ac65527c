"""Key-value store backends and the URL-based factory."""

from kvnotes.common.errors import ConfigurationError
from kvnotes.store.base import KeyValueStore
from kvnotes.store.memory import MemoryStore


def store_from_url(url: str, prefix: str = "note:") -> KeyValueStore:
    """
    Build a store from a URL.

    Args:
        url: ``memory://`` or ``redis://`` / ``rediss://``
        prefix: key prefix used by the redis backend

    Raises:
        ConfigurationError: If the scheme is not supported
    """
    if url.startswith("memory://"):
        return MemoryStore()
    if url.startswith(("redis://", "rediss://")):
        # import tardif : redis n'est requis que pour ce backend
        from kvnotes.store.redis import RedisStore
        return RedisStore.from_url(url, prefix=prefix)
    raise ConfigurationError(f"Unsupported note store URL: {url}")


__all__ = ["KeyValueStore", "MemoryStore", "store_from_url"]
