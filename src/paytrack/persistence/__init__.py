"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from paytrack.catalog.roles import RoleCatalog
from paytrack.core.config import AppSettings
from paytrack.core.protocols import ICacheBackend, IRoleSource
from paytrack.persistence.dynamodb_backend import DynamoDBRoleStore, DynamoDBUserDirectory
from paytrack.persistence.redis_backend import RedisCacheBackend
from paytrack.services.identity import UserIdResolver


def create_persistence(settings: AppSettings | None = None):
    """Create wired-up persistence backends from application settings.

    Returns:
        Tuple of (role_source, cache). ``cache`` is None with the static
        role source, which needs none.
    """
    if settings is None:
        settings = AppSettings()

    if settings.role_source == "static":
        role_source: IRoleSource = RoleCatalog()
        return role_source, None

    cache = RedisCacheBackend(
        host=settings.redis.host,
        port=settings.redis.port,
        db=settings.redis.db,
    )

    role_source = DynamoDBRoleStore(
        table_suffix=settings.dynamodb.table_suffix,
        region=settings.dynamodb.region,
        endpoint_url=settings.dynamodb.endpoint_url,
        cache=cache,
        cache_ttl=settings.compensation.role_cache_ttl,
    )

    return role_source, cache


def create_user_resolver(settings: AppSettings | None, cache: ICacheBackend | None) -> UserIdResolver | None:
    """External-id resolver over the DynamoDB user directory.

    Returns None when no cache is wired (the static role source), since the
    directory lives alongside the DynamoDB role table.
    """
    if settings is None:
        settings = AppSettings()
    if cache is None or settings.role_source == "static":
        return None
    directory = DynamoDBUserDirectory(
        table_suffix=settings.dynamodb.table_suffix,
        region=settings.dynamodb.region,
        endpoint_url=settings.dynamodb.endpoint_url,
    )
    return UserIdResolver(directory=directory, cache=cache)
