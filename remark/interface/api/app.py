"""FastAPI application."""

from contextlib import asynccontextmanager

import logfire
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from remark.adapter.error import AdapterError
from remark.config import Settings
from remark.domain.error import DomainError
from remark.domain.service import NotificationDispatcher
from remark.interface.api.routes import (
    admin,
    comments,
    health,
    reactions,
    reports,
    settings as settings_routes,
)
from remark.interface.error import InterfaceError, http_status_for
from remark.util.di.container import create_container, setup_di
from remark.util.observability import instrument_fastapi, instrument_httpx

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Flush in-flight notifications and release resources on shutdown."""
    yield
    container = app.state.dishka_container
    dispatcher = await container.get(NotificationDispatcher)
    if dispatcher.pending:
        logfire.info("Draining notifications", pending=dispatcher.pending)
    await dispatcher.drain()
    await container.close()


async def handle_error(request: Request, exc: Exception) -> JSONResponse:
    """Translate domain, adapter and interface errors to JSON responses."""
    status_code = http_status_for(exc)
    if status_code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            error_type=type(exc).__name__,
            error=str(exc),
        )
    else:
        logfire.warn(
            "Request rejected",
            path=request.url.path,
            status_code=status_code,
            error_type=type(exc).__name__,
            error=str(exc),
        )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    instrument_httpx()

    app_instance = FastAPI(
        title="Remark Comment Service",
        description="Multi-tenant threaded comments with moderation, reactions and reports",
        version="0.1.0",
        lifespan=lifespan,
    )
    app_instance.state.default_tenant = settings.default_tenant

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Tenant-ID",
        ],
        max_age=600,
    )

    container = create_container()
    setup_di(app_instance, container)

    for error_type in (DomainError, AdapterError, InterfaceError):
        app_instance.add_exception_handler(error_type, handle_error)

    # Probes stay at the root for orchestrators
    app_instance.include_router(health.router)
    app_instance.include_router(comments.router, prefix=API_PREFIX)
    app_instance.include_router(reactions.router, prefix=API_PREFIX)
    app_instance.include_router(reports.router, prefix=API_PREFIX)
    app_instance.include_router(admin.router, prefix=API_PREFIX)
    app_instance.include_router(settings_routes.router, prefix=API_PREFIX)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
