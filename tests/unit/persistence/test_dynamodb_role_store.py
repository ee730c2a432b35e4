"""Unit tests for DynamoDBRoleStore using moto."""

from __future__ import annotations

from decimal import Decimal

import boto3
import pytest
from moto import mock_aws

from paytrack.catalog.roles import DEFAULT_ROLES
from paytrack.core.exceptions import RoleStoreError
from paytrack.models.roles import CareerLevel, RoleConfig
from paytrack.persistence.dynamodb_backend import DynamoDBRoleStore, role_to_item
from paytrack.persistence.memory_backend import MemoryCacheBackend

SUFFIX = "-test"


def _create_table(ddb) -> None:
    ddb.create_table(
        TableName=f"paytrack-roles{SUFFIX}",
        KeySchema=[
            {"AttributeName": "PK", "KeyType": "HASH"},
            {"AttributeName": "SK", "KeyType": "RANGE"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "PK", "AttributeType": "S"},
            {"AttributeName": "SK", "AttributeType": "S"},
        ],
        BillingMode="PAY_PER_REQUEST",
    )


@pytest.fixture
def ddb():
    with mock_aws():
        resource = boto3.resource("dynamodb", region_name="us-east-1")
        _create_table(resource)
        table = resource.Table(f"paytrack-roles{SUFFIX}")
        for role in DEFAULT_ROLES.values():
            table.put_item(Item=role_to_item(role))
        yield resource


@pytest.fixture
def cache():
    return MemoryCacheBackend()


@pytest.fixture
def store(ddb, cache):
    return DynamoDBRoleStore(table_suffix=SUFFIX, region="us-east-1", cache=cache)


class TestRoleToItem:
    def test_keys_and_omitted_optionals(self):
        item = role_to_item(DEFAULT_ROLES[CareerLevel.LEVEL4])
        assert item["PK"] == "ROLE#level4"
        assert item["SK"] == "CONFIG"
        assert item["id"] == "level4"
        assert item["path"] == "specialist"
        assert "demand_min" not in item
        assert item["quarterly_stay"] == Decimal("45000")


class TestGetRole:
    def test_round_trips_default_role(self, store):
        assert store.get_role("level3").model_dump() == DEFAULT_ROLES[CareerLevel.LEVEL3].model_dump()

    def test_missing_role_returns_none(self, store, cache):
        assert store.get_role("level9") is None
        assert cache.get("role:level9") is None

    def test_caches_after_first_read(self, store, cache, ddb):
        store.get_role("unit_manager")
        assert cache.get("role:unit_manager") is not None
        ddb.Table(f"paytrack-roles{SUFFIX}").delete_item(Key={"PK": "ROLE#unit_manager", "SK": "CONFIG"})
        assert store.get_role("unit_manager").base_salary == Decimal("10000")

    def test_without_cache(self, ddb):
        store = DynamoDBRoleStore(table_suffix=SUFFIX, region="us-east-1")
        assert store.get_role("level1").demand_max == Decimal("10000")

    def test_missing_table_raises_store_error(self, ddb):
        store = DynamoDBRoleStore(table_suffix="-absent", region="us-east-1")
        with pytest.raises(RoleStoreError):
            store.get_role("level1")


class TestListRoles:
    def test_lists_all_in_tier_order(self, store):
        roles = store.list_roles()
        assert [r.id for r in roles] == list(CareerLevel)


class TestPutRole:
    def test_put_invalidates_cache(self, store, cache):
        store.get_role("level2")
        updated = RoleConfig(
            id=CareerLevel.LEVEL2, name="Nível 2", base_salary=Decimal("2700"),
            variable_min=Decimal("10"), variable_max=Decimal("10"),
        )
        store.put_role(updated)
        assert cache.get("role:level2") is None
        assert store.get_role("level2").base_salary == Decimal("2700")
