import redis

from kvnotes.store.base import KeyValueStore


class RedisStore(KeyValueStore):
    """
    Redis-backed store.

    Every note key is stored as ``<prefix><key>`` so the notes can share a
    database with other data (cache, queues). ``list_keys`` strips
    the prefix again.
    """

    def __init__(self, client: "redis.Redis", prefix: str = "note:") -> None:
        self.client = client
        self.prefix = prefix

    @classmethod
    def from_url(cls, url: str, prefix: str = "note:") -> "RedisStore":
        return cls(redis.from_url(url, decode_responses=True), prefix=prefix)

    def _k(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def get(self, key: str) -> str | None:
        value = self.client.get(self._k(key))
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    def put(self, key: str, value: str) -> None:
        self.client.set(self._k(key), value)

    def delete(self, key: str) -> None:
        self.client.delete(self._k(key))

    def list_keys(self) -> list[str]:
        keys = []
        for raw in self.client.scan_iter(match=f"{self.prefix}*"):
            if isinstance(raw, bytes):
                raw = raw.decode("utf-8")
            keys.append(raw[len(self.prefix):])
        return sorted(keys)

    def ping(self) -> bool:
        try:
            return bool(self.client.ping())
        except redis.RedisError:
            return False
