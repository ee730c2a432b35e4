"""Integration test fixtures — LocalStack DynamoDB and Redis."""

from __future__ import annotations

import os
import sys

import boto3
import pytest
import redis
from botocore.exceptions import BotoCoreError, ClientError

# Default LocalStack endpoint
LOCALSTACK_URL = os.environ.get("LOCALSTACK_URL", "http://localhost:4566")
REDIS_HOST = os.environ.get("PAYTRACK_REDIS_HOST", "localhost")
TABLE_SUFFIX = "-inttest"


def _localstack_available() -> bool:
    """Check if LocalStack is reachable."""
    try:
        client = boto3.client("dynamodb", region_name="us-east-1", endpoint_url=LOCALSTACK_URL)
        client.list_tables()
        return True
    except (BotoCoreError, ClientError):
        return False


def _redis_available() -> bool:
    try:
        return bool(redis.Redis(host=REDIS_HOST, socket_connect_timeout=1).ping())
    except redis.RedisError:
        return False


@pytest.fixture(scope="session")
def localstack_ddb():
    """DynamoDB resource pointing at LocalStack."""
    if not _localstack_available():
        pytest.skip("LocalStack not available")
    return boto3.resource("dynamodb", region_name="us-east-1", endpoint_url=LOCALSTACK_URL)


@pytest.fixture(scope="session")
def redis_host():
    if not _redis_available():
        pytest.skip("Redis not available")
    return REDIS_HOST


@pytest.fixture(scope="session")
def seeded_tables(localstack_ddb):
    """Create and seed the role table via the seed script."""
    sys.path.insert(0, str(os.path.join(os.path.dirname(__file__), "..", "..", "scripts")))
    from seed_dynamodb import create_tables, seed_roles

    create_tables(localstack_ddb, suffix=TABLE_SUFFIX)
    seed_roles(localstack_ddb, suffix=TABLE_SUFFIX)
    return TABLE_SUFFIX
