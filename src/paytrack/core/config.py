"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Literal

from pydantic_settings import BaseSettings

if TYPE_CHECKING:
    from paytrack.engine.compensation import BonusRules


class DynamoDBConfig(BaseSettings):
    """DynamoDB role catalog configuration."""

    model_config = {"env_prefix": "PAYTRACK_DYNAMO_"}

    table_suffix: str = ""  # "-dev", "-uat", or "" for prod
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class RedisConfig(BaseSettings):
    """Redis cache configuration."""

    model_config = {"env_prefix": "PAYTRACK_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0


class CompensationConfig(BaseSettings):
    """Bonus amounts and assumptions fed into the compensation engine."""

    model_config = {"env_prefix": "PAYTRACK_COMP_"}

    team_bonus_floor: Decimal = Decimal("500")
    team_bonus_ceiling: Decimal = Decimal("900")
    promotion_per_member: Decimal = Decimal("300")
    # No per-member performance feed exists yet; this stands in for it.
    assumed_team_performance: Decimal = Decimal("80")
    role_cache_ttl: int = 300

    def to_rules(self) -> BonusRules:
        from paytrack.engine.compensation import BonusRules

        return BonusRules(
            team_bonus_floor=self.team_bonus_floor,
            team_bonus_ceiling=self.team_bonus_ceiling,
            promotion_per_member=self.promotion_per_member,
            assumed_team_performance=self.assumed_team_performance,
        )


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "PAYTRACK_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    role_source: Literal["static", "dynamodb"] = "static"

    dynamodb: DynamoDBConfig = DynamoDBConfig()
    redis: RedisConfig = RedisConfig()
    compensation: CompensationConfig = CompensationConfig()
