"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from infrastructure.database.dependencies import close_database_connections
from infrastructure.logging import configure_logging
from infrastructure.settings import get_settings
from infrastructure.version import __version__
from shared_kernel.authorization import MalformedCapabilityError
from tenancy.ports.exceptions import TenantNotFoundError
from tenancy.presentation import router as tenancy_router

logger = structlog.get_logger()


@asynccontextmanager
async def rentals_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - structlog configuration
    - Database engine lifecycle (created lazily, disposed on shutdown)
    """
    configure_logging(debug=get_settings().debug)

    yield

    await close_database_connections()


app = FastAPI(
    title=get_settings().app_name,
    description="Multi-tenant property management: landlords on their own subdomains",
    version=__version__,
    lifespan=rentals_lifespan,
)

app.include_router(tenancy_router)


@app.exception_handler(TenantNotFoundError)
async def tenant_not_found_handler(request: Request, exc: TenantNotFoundError):
    """A subdomain that names no enabled tenant ends the request with 404."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": "Tenant not found"},
    )


@app.exception_handler(TimeoutError)
async def lookup_timeout_handler(request: Request, exc: TimeoutError):
    """Tenant or membership lookups that exceed the timeout yield 504."""
    return JSONResponse(
        status_code=status.HTTP_504_GATEWAY_TIMEOUT,
        content={"detail": "Tenant lookup timed out"},
    )


@app.exception_handler(MalformedCapabilityError)
async def malformed_capability_handler(
    request: Request, exc: MalformedCapabilityError
):
    """A capability check with missing parameters is a server defect.

    Re-raised in debug mode so it fails loudly; a generic 500 otherwise.
    """
    logger.error(
        "malformed_capability_check",
        path=request.url.path,
        error=str(exc),
    )
    if get_settings().debug:
        raise exc
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}
