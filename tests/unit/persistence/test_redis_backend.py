"""Unit tests for RedisCacheBackend using fakeredis."""

from __future__ import annotations

from unittest.mock import patch

import fakeredis
import redis
import pytest

from paytrack.core.exceptions import CacheError
from paytrack.persistence.redis_backend import RedisCacheBackend


@pytest.fixture
def fake_server():
    return fakeredis.FakeServer()


@pytest.fixture
def backend(fake_server):
    with patch("redis.Redis", return_value=fakeredis.FakeRedis(server=fake_server, decode_responses=True)):
        return RedisCacheBackend(host="localhost", port=6379, db=0)


class TestGetSet:
    def test_returns_none_on_miss(self, backend):
        assert backend.get("nonexistent") is None

    def test_set_without_expiry(self, backend, fake_server):
        backend.set("user-id:123", "uuid-abc")
        assert backend.get("user-id:123") == "uuid-abc"
        raw = fakeredis.FakeRedis(server=fake_server, decode_responses=True)
        assert raw.ttl("paytrack:user-id:123") == -1

    def test_keys_are_prefixed(self, backend, fake_server):
        backend.set("k", "v")
        raw = fakeredis.FakeRedis(server=fake_server, decode_responses=True)
        assert raw.get("paytrack:k") == "v"
        assert raw.get("k") is None


class TestSetex:
    def test_stores_value_with_ttl(self, backend, fake_server):
        backend.setex("role:level3", 60, '{"id": "level3"}')
        assert backend.get("role:level3") == '{"id": "level3"}'
        raw = fakeredis.FakeRedis(server=fake_server, decode_responses=True)
        assert 0 < raw.ttl("paytrack:role:level3") <= 60

    def test_overwrites_existing_value(self, backend):
        backend.setex("k", 60, "old")
        backend.setex("k", 60, "new")
        assert backend.get("k") == "new"


class TestDelete:
    def test_removes_existing_key(self, backend):
        backend.set("del_me", "val")
        backend.delete("del_me")
        assert backend.get("del_me") is None

    def test_noop_on_missing_key(self, backend):
        backend.delete("never_existed")  # should not raise


class TestErrorWrapping:
    def test_get_wraps_client_error(self):
        b = RedisCacheBackend.__new__(RedisCacheBackend)
        b._prefix = "paytrack:"
        b._client = None  # will cause AttributeError -> CacheError
        with pytest.raises(CacheError):
            b.get("k")

    def test_set_wraps_redis_error(self, backend):
        with patch.object(backend._client, "set", side_effect=redis.ConnectionError("down")):
            with pytest.raises(CacheError, match="SET failed"):
                backend.set("k", "v")
