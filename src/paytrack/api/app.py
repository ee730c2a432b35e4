"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from paytrack.api.routes import compensation, discounts, health, payroll, roles, users
from paytrack.core.config import AppSettings
from paytrack.core.exceptions import RoleNotFoundError
from paytrack.core.logging import configure_logging
from paytrack.persistence import create_persistence, create_user_resolver

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and tear down application resources."""
    settings: AppSettings = getattr(app.state, "settings", None) or AppSettings()
    configure_logging(settings.log_level)
    role_source, cache = create_persistence(settings)
    app.state.settings = settings
    app.state.role_source = role_source
    app.state.cache = cache
    app.state.user_resolver = create_user_resolver(settings, cache)
    app.state.rules = settings.compensation.to_rules()
    logger.info(
        "Paytrack API started (environment=%s, role_source=%s)",
        settings.environment, settings.role_source,
    )
    yield


async def _role_not_found(request: Request, exc: RoleNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Paytrack Compensation API",
        version="0.1.0",
        lifespan=lifespan,
    )
    if settings is not None:
        app.state.settings = settings
    app.add_exception_handler(RoleNotFoundError, _role_not_found)
    app.include_router(health.router)
    app.include_router(roles.router)
    app.include_router(compensation.router)
    app.include_router(discounts.router, prefix="/discounts")
    app.include_router(payroll.router, prefix="/payroll")
    app.include_router(users.router, prefix="/users")
    return app
