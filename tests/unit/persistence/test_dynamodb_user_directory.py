"""Unit tests for DynamoDBUserDirectory using moto."""

from __future__ import annotations

import boto3
import pytest
from moto import mock_aws

from paytrack.core.exceptions import DirectoryError
from paytrack.persistence.dynamodb_backend import DynamoDBUserDirectory
from paytrack.persistence.memory_backend import MemoryCacheBackend
from paytrack.services.identity import UserIdResolver

SUFFIX = "-test"


@pytest.fixture
def ddb():
    with mock_aws():
        resource = boto3.resource("dynamodb", region_name="us-east-1")
        resource.create_table(
            TableName=f"paytrack-users{SUFFIX}",
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
        yield resource


@pytest.fixture
def directory(ddb):
    return DynamoDBUserDirectory(table_suffix=SUFFIX)


def test_linked_ids_are_found(directory):
    directory.link("987", "uuid-1")
    assert directory.find_user_ids("987") == ["uuid-1"]


def test_unknown_external_id(directory):
    assert directory.find_user_ids("555") == []


def test_missing_table_raises_directory_error(ddb):
    with pytest.raises(DirectoryError):
        DynamoDBUserDirectory(table_suffix="-missing").find_user_ids("987")


def test_resolver_over_dynamodb(directory):
    directory.link("987", "uuid-1")
    cache = MemoryCacheBackend()
    resolver = UserIdResolver(directory=directory, cache=cache)
    assert resolver.resolve("987") == "uuid-1"
    assert cache.get("user-id:987") == "uuid-1"
    assert resolver.resolve("555") == "555"
