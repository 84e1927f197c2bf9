"""Redis-backed persistence adapter."""

from __future__ import annotations

import redis


def create_redis_connection(redis_url: str) -> redis.Redis:
    """Instantiate a Redis client for the given URL."""

    return redis.Redis.from_url(redis_url)


class RedisAdapter:
    """Keep snippet collections as plain Redis string values."""

    KEY_PREFIX = "snippetbox:"

    def __init__(self, redis_client: redis.Redis, *, ttl_seconds: int | None = None) -> None:
        self.redis = redis_client
        self.ttl_seconds = ttl_seconds

    @classmethod
    def from_url(cls, redis_url: str, *, ttl_seconds: int | None = None) -> "RedisAdapter":
        return cls(create_redis_connection(redis_url), ttl_seconds=ttl_seconds)

    def get(self, key: str) -> bytes | None:
        raw = self.redis.get(self._key(key))
        if raw is None:
            return None
        if isinstance(raw, str):
            return raw.encode("utf-8")
        return bytes(raw)

    def set(self, key: str, value: bytes) -> None:
        if self.ttl_seconds:
            self.redis.set(self._key(key), value, ex=self.ttl_seconds)
        else:
            self.redis.set(self._key(key), value)

    def _key(self, key: str) -> str:
        return f"{self.KEY_PREFIX}{key}"


__all__ = ["RedisAdapter", "create_redis_connection"]
