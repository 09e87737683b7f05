"""FastAPI application."""

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from lounge.config import Settings
from lounge.interface.api.routes import admin, health, suggestions, users
from lounge.util.di.container import create_container, setup_di
from lounge.util.observability import instrument_fastapi


async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer storage failures without leaking driver details.

    Lost connections and pool exhaustion are transient (503). Any other
    driver error that reaches this point is a server fault (500).
    """
    transient = isinstance(exc, (OperationalError, InterfaceError, PoolTimeoutError))
    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        transient = True

    logfire.error(
        "Storage error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
        transient=transient,
    )

    if transient:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Storage temporarily unavailable, please retry"},
        )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed bodies and parameters with 400."""
    logfire.warn(
        "Request validation failed", path=request.url.path, errors=str(exc.errors())
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use. Defaults to the production container;
            tests pass one built with in-memory persistence.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Lounge Voting API",
        description="Daily content voting for the lounge media portal: guests suggest movies and series, vote on them, and admins approve or reject",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,  # Lounge portal
            "http://localhost:5000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=[
            "Content-Type",
            "Accept",
            "Origin",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    app_instance.add_exception_handler(DBAPIError, storage_error_handler)
    app_instance.add_exception_handler(PoolTimeoutError, storage_error_handler)
    app_instance.add_exception_handler(RequestValidationError, request_validation_handler)

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(suggestions.router)
    app_instance.include_router(users.router)
    app_instance.include_router(admin.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
