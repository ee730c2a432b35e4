"""Tests for the DynamoDB seed script."""

from __future__ import annotations

import sys
from pathlib import Path

import boto3
import pytest
from moto import mock_aws

# Make scripts/ importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent / "scripts"))

from seed_dynamodb import create_tables, seed_roles  # noqa: E402

from paytrack.models.roles import CareerLevel  # noqa: E402
from paytrack.persistence.dynamodb_backend import DynamoDBRoleStore  # noqa: E402


@pytest.fixture
def ddb():
    with mock_aws():
        yield boto3.resource("dynamodb", region_name="us-east-1")


class TestCreateTables:
    def test_creates_role_and_user_tables(self, ddb):
        create_tables(ddb, suffix="-test")
        client = boto3.client("dynamodb", region_name="us-east-1")
        assert sorted(client.list_tables()["TableNames"]) == ["paytrack-roles-test", "paytrack-users-test"]

    def test_idempotent_skips_existing(self, ddb):
        create_tables(ddb, suffix="-test")
        create_tables(ddb, suffix="-test")  # should not raise
        client = boto3.client("dynamodb", region_name="us-east-1")
        assert len(client.list_tables()["TableNames"]) == 2


class TestSeedRoles:
    def test_seeds_every_tier(self, ddb):
        create_tables(ddb, suffix="-test")
        assert seed_roles(ddb, suffix="-test") == 9
        resp = ddb.Table("paytrack-roles-test").scan()
        assert resp["Count"] == 9
        assert {i["PK"] for i in resp["Items"]} == {f"ROLE#{level}" for level in CareerLevel}

    def test_reseeding_overwrites(self, ddb):
        create_tables(ddb, suffix="-test")
        seed_roles(ddb, suffix="-test")
        seed_roles(ddb, suffix="-test")
        assert ddb.Table("paytrack-roles-test").scan()["Count"] == 9

    def test_seeded_roles_load_through_store(self, ddb):
        create_tables(ddb, suffix="-test")
        seed_roles(ddb, suffix="-test")
        store = DynamoDBRoleStore(table_suffix="-test")
        assert [r.id for r in store.list_roles()] == list(CareerLevel)
