"""Tests for external → internal user id translation."""

from __future__ import annotations

import pytest

from paytrack.persistence.memory_backend import MemoryCacheBackend, MemoryUserDirectory
from paytrack.services.identity import UserIdResolver


@pytest.fixture
def directory():
    return MemoryUserDirectory({"987": ["uuid-1", "uuid-2"]})


@pytest.fixture
def cache():
    return MemoryCacheBackend()


@pytest.fixture
def resolver(directory, cache):
    return UserIdResolver(directory=directory, cache=cache)


def test_resolves_first_match_and_caches(resolver, directory, cache):
    assert resolver.resolve("987") == "uuid-1"
    assert resolver.resolve("987") == "uuid-1"
    assert directory.calls == ["987"]
    assert cache.get("user-id:987") == "uuid-1"


def test_unknown_id_passes_through_uncached(resolver, directory, cache):
    assert resolver.resolve("555") == "555"
    assert resolver.resolve("555") == "555"
    assert directory.calls == ["555", "555"]
    assert cache.get("user-id:555") is None


def test_directory_failure_passes_through(resolver, directory):
    directory.fail = True
    assert resolver.resolve("987") == "987"


def test_separate_caches_are_independent(directory):
    first = UserIdResolver(directory=directory, cache=MemoryCacheBackend())
    second = UserIdResolver(directory=directory, cache=MemoryCacheBackend())
    first.resolve("987")
    second.resolve("987")
    assert directory.calls == ["987", "987"]
