"""FastAPI application."""

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from whizlist.config import Settings
from whizlist.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from whizlist.interface.api.routes import (
    comments,
    folders,
    health,
    lists,
    products,
    search,
)
from whizlist.interface.error import AuthenticationError
from whizlist.util.di.container import create_container, setup_di
from whizlist.util.observability import instrument_fastapi, instrument_httpx

ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (BusinessRuleViolationError, status.HTTP_409_CONFLICT),
]


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error (500 when unmapped)."""
    for error_type, code in ERROR_STATUS:
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    code = status_for(exc)
    if code >= 500:
        logfire.error(
            "Unhandled domain error", path=request.url.path, error=str(exc)
        )
    else:
        logfire.warn(
            "Request rejected",
            path=request.url.path,
            status_code=code,
            error_type=type(exc).__name__,
            error=str(exc),
        )
    return JSONResponse(status_code=code, content={"detail": str(exc)})


async def handle_authentication_error(
    request: Request, exc: AuthenticationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": str(exc)},
        headers={"WWW-Authenticate": "Bearer"},
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        container: DI container to serve from (production container when omitted)

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    instrument_httpx()

    app_instance = FastAPI(
        title="Whizlist API",
        description="Backend API for Whizlist - save products into lists and folders, search them and discuss them",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.frontend_url,
            "http://localhost:3000",
            "http://localhost:5173",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.add_exception_handler(DomainError, handle_domain_error)
    app_instance.add_exception_handler(AuthenticationError, handle_authentication_error)

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(products.router)
    app_instance.include_router(lists.router)
    app_instance.include_router(folders.router)
    app_instance.include_router(search.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
