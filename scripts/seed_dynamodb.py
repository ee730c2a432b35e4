"""Create the Paytrack DynamoDB tables and seed the default career tiers.

Usage:
    python scripts/seed_dynamodb.py --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
from typing import Any

import boto3

from paytrack.catalog.roles import DEFAULT_ROLES
from paytrack.persistence.dynamodb_backend import ROLES_TABLE, USERS_TABLE, role_to_item


def create_tables(ddb: Any, suffix: str = "") -> None:
    """Create the role catalog and user directory tables. Skips existing ones."""
    client = ddb.meta.client
    existing = client.list_tables().get("TableNames", [])

    for base_name in (ROLES_TABLE, USERS_TABLE):
        table_name = f"{base_name}{suffix}"
        if table_name in existing:
            print(f"  Table {table_name} already exists, skipping")
            continue
        client.create_table(
            TableName=table_name,
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
        print(f"  Created table {table_name}")


def seed_roles(ddb: Any, suffix: str = "") -> int:
    """Write every default tier. Returns the number of items written."""
    tbl = ddb.Table(f"{ROLES_TABLE}{suffix}")
    with tbl.batch_writer() as batch:
        for role in DEFAULT_ROLES.values():
            batch.put_item(Item=role_to_item(role))
    print(f"  Seeded {len(DEFAULT_ROLES)} roles")
    return len(DEFAULT_ROLES)


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the Paytrack role catalog in DynamoDB")
    parser.add_argument("--endpoint-url", default=None, help="DynamoDB endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--table-suffix", default="", help="Table name suffix (e.g. -dev)")
    parser.add_argument("--region", default="us-east-1", help="AWS region")
    args = parser.parse_args()

    kwargs: dict[str, Any] = {"region_name": args.region}
    if args.endpoint_url:
        kwargs["endpoint_url"] = args.endpoint_url

    ddb = boto3.resource("dynamodb", **kwargs)

    print("Creating tables...")
    create_tables(ddb, suffix=args.table_suffix)

    print("Seeding data...")
    seed_roles(ddb, suffix=args.table_suffix)

    print("Done!")


if __name__ == "__main__":
    main()
