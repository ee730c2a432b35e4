"""Integration tests for DynamoDBRoleStore against LocalStack and Redis."""

from __future__ import annotations

from decimal import Decimal

import pytest

from paytrack.models.roles import CareerLevel
from paytrack.persistence.dynamodb_backend import DynamoDBRoleStore
from paytrack.persistence.redis_backend import RedisCacheBackend


@pytest.fixture
def store(seeded_tables, localstack_ddb):
    return DynamoDBRoleStore(
        table_suffix=seeded_tables,
        region="us-east-1",
        endpoint_url=localstack_ddb.meta.client.meta.endpoint_url,
    )


def test_seeded_role_lookup(store):
    role = store.get_role("level3")
    assert role.base_salary == Decimal("3000")
    assert role.quarterly_promotion == Decimal("45000")


def test_unknown_role(store):
    assert store.get_role("intern") is None


def test_list_roles_in_tier_order(store):
    assert [r.id for r in store.list_roles()] == list(CareerLevel)


def test_read_through_redis_cache(seeded_tables, localstack_ddb, redis_host):
    cache = RedisCacheBackend(host=redis_host, prefix="paytrack-inttest:")
    cache.delete("role:level5")
    store = DynamoDBRoleStore(
        table_suffix=seeded_tables,
        endpoint_url=localstack_ddb.meta.client.meta.endpoint_url,
        cache=cache,
    )
    first = store.get_role("level5")
    assert cache.get("role:level5") is not None
    assert store.get_role("level5") == first
