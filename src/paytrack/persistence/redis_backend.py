"""Redis cache backend implementing ICacheBackend."""

from __future__ import annotations

import redis

from paytrack.core.exceptions import CacheError


class RedisCacheBackend:
    """Production ICacheBackend backed by Redis.

    Keys are namespaced with ``prefix`` so several caches can share one db.
    """

    def __init__(self, host: str = "localhost", port: int = 6379, db: int = 0,
                 prefix: str = "paytrack:") -> None:
        self._prefix = prefix
        self._client = redis.Redis(
            host=host, port=port, db=db, decode_responses=True,
        )

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def get(self, key: str) -> str | None:
        try:
            return self._client.get(self._key(key))
        except (redis.RedisError, AttributeError) as exc:
            raise CacheError(f"Redis GET failed for key={key!r}: {exc}") from exc

    def set(self, key: str, value: str) -> None:
        try:
            self._client.set(self._key(key), value)
        except (redis.RedisError, AttributeError) as exc:
            raise CacheError(f"Redis SET failed for key={key!r}: {exc}") from exc

    def setex(self, key: str, ttl: int, value: str) -> None:
        try:
            self._client.setex(self._key(key), ttl, value)
        except (redis.RedisError, AttributeError) as exc:
            raise CacheError(f"Redis SETEX failed for key={key!r}: {exc}") from exc

    def delete(self, key: str) -> None:
        try:
            self._client.delete(self._key(key))
        except (redis.RedisError, AttributeError) as exc:
            raise CacheError(f"Redis DELETE failed for key={key!r}: {exc}") from exc
