"""DynamoDB backends: the role store (IRoleSource with Redis caching) and the
user directory (IUserDirectory)."""

from __future__ import annotations

import logging
from typing import Any

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import BotoCoreError, ClientError

from paytrack.catalog.mapping import parse_role_record
from paytrack.core.exceptions import DirectoryError, RoleStoreError
from paytrack.core.protocols import ICacheBackend
from paytrack.models.roles import CareerLevel, RoleConfig

logger = logging.getLogger(__name__)

ROLES_TABLE = "paytrack-roles"
USERS_TABLE = "paytrack-users"
_TIER_ORDER = {level: i for i, level in enumerate(CareerLevel)}


def role_to_item(role: RoleConfig) -> dict[str, Any]:
    """DynamoDB item for ``role``. Unset optional fields are omitted."""
    item: dict[str, Any] = {"PK": f"ROLE#{role.id}", "SK": "CONFIG"}
    for key, value in role.model_dump(mode="python").items():
        if value is None:
            continue
        item[key] = str(value) if key in ("id", "path") else value
    return item


class DynamoDBRoleStore:
    """Production IRoleSource backed by DynamoDB + optional Redis cache."""

    CACHE_TTL = 300  # 5 minutes

    def __init__(self, table_suffix: str = "", region: str = "us-east-1",
                 endpoint_url: str | None = None, cache: ICacheBackend | None = None,
                 cache_ttl: int | None = None) -> None:
        self._table_name = f"{ROLES_TABLE}{table_suffix}"
        self._cache = cache
        self._cache_ttl = cache_ttl if cache_ttl is not None else self.CACHE_TTL
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._ddb = boto3.resource("dynamodb", **kwargs)

    def _table(self):
        return self._ddb.Table(self._table_name)

    # ---- IRoleSource methods ----

    def get_role(self, role_id: str) -> RoleConfig | None:
        cache_key = f"role:{role_id}"

        if self._cache is not None:
            cached = self._cache.get(cache_key)
            if cached is not None:
                return RoleConfig.model_validate_json(cached)

        try:
            resp = self._table().get_item(Key={"PK": f"ROLE#{role_id}", "SK": "CONFIG"})
        except (ClientError, BotoCoreError) as exc:
            raise RoleStoreError(f"DynamoDB get_item failed for role {role_id!r}: {exc}") from exc

        item = resp.get("Item")
        role = parse_role_record(item) if item else None
        if role is None:
            return None

        if self._cache is not None:
            self._cache.setex(cache_key, self._cache_ttl, role.model_dump_json())
        return role

    def list_roles(self) -> list[RoleConfig]:
        items: list[dict[str, Any]] = []
        kwargs: dict[str, Any] = {}
        try:
            while True:
                resp = self._table().scan(**kwargs)
                items.extend(resp.get("Items", []))
                if "LastEvaluatedKey" not in resp:
                    break
                kwargs["ExclusiveStartKey"] = resp["LastEvaluatedKey"]
        except (ClientError, BotoCoreError) as exc:
            raise RoleStoreError(f"DynamoDB scan failed on {self._table_name}: {exc}") from exc

        roles: list[RoleConfig] = []
        for item in items:
            role = parse_role_record(item)
            if role is None:
                logger.warning("Ignoring malformed role item PK=%s", item.get("PK"))
                continue
            roles.append(role)
        return sorted(roles, key=lambda r: _TIER_ORDER[r.id])

    def put_role(self, role: RoleConfig) -> None:
        try:
            self._table().put_item(Item=role_to_item(role))
        except (ClientError, BotoCoreError) as exc:
            raise RoleStoreError(f"DynamoDB put_item failed for role {role.id!r}: {exc}") from exc
        if self._cache is not None:
            self._cache.delete(f"role:{role.id}")


def user_link_item(external_id: str, user_id: str) -> dict[str, Any]:
    """Directory item linking an external CRM id to one internal user id."""
    return {"PK": f"EXTERNAL#{external_id}", "SK": f"USER#{user_id}", "user_id": user_id}


class DynamoDBUserDirectory:
    """IUserDirectory over the ``paytrack-users`` link table.

    One item per (external id, internal id) pair; a query on the external id
    returns every linked user.
    """

    def __init__(self, table_suffix: str = "", region: str = "us-east-1",
                 endpoint_url: str | None = None) -> None:
        self._table_name = f"{USERS_TABLE}{table_suffix}"
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._ddb = boto3.resource("dynamodb", **kwargs)

    def find_user_ids(self, external_id: str) -> list[str]:
        try:
            resp = self._ddb.Table(self._table_name).query(
                KeyConditionExpression=Key("PK").eq(f"EXTERNAL#{external_id}")
            )
        except (ClientError, BotoCoreError) as exc:
            raise DirectoryError(
                f"DynamoDB query failed for external id {external_id!r}: {exc}"
            ) from exc
        return [item["user_id"] for item in resp.get("Items", []) if item.get("user_id")]

    def link(self, external_id: str, user_id: str) -> None:
        try:
            self._ddb.Table(self._table_name).put_item(Item=user_link_item(external_id, user_id))
        except (ClientError, BotoCoreError) as exc:
            raise DirectoryError(f"DynamoDB put_item failed for {external_id!r}: {exc}") from exc
