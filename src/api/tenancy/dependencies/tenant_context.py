"""Tenant context FastAPI dependency.

Resolves the request's Host header into a TenantContext.

Usage in FastAPI routes:
    @router.get("/example")
    async def example(
        context: Annotated[TenantContext, Depends(get_tenant_scoped_context)],
    ):
        # context.tenant_id is the resolved tenant
        ...

TenantNotFoundError and TimeoutError propagate to the application's
exception handlers (404 and 504).
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.dependencies import get_read_session
from infrastructure.settings import get_tenancy_settings
from shared_kernel.auth import SessionIdentity
from shared_kernel.middleware.observability import DefaultTenantContextProbe
from shared_kernel.middleware.tenant_context import TenantContext
from shared_kernel.observability_context import ObservationContext
from tenancy.application.tenant_context_builder import TenantContextBuilder
from tenancy.dependencies.session import get_session_identity
from tenancy.infrastructure.team_member_repository import TeamMemberRepository
from tenancy.infrastructure.tenant_repository import TenantRepository


def get_observation_context(request: Request) -> ObservationContext:
    """Collect request metadata bound into every probe for this request.

    Only the correlation id is bound; probes record user, tenant and host
    as event fields of their own.
    """
    return ObservationContext(request_id=request.headers.get("x-request-id"))


def get_tenant_context_builder(
    session: Annotated[AsyncSession, Depends(get_read_session)],
    observation: Annotated[ObservationContext, Depends(get_observation_context)],
) -> TenantContextBuilder:
    """Build a TenantContextBuilder backed by the read session."""
    settings = get_tenancy_settings()
    return TenantContextBuilder(
        tenant_repository=TenantRepository(session=session),
        team_member_repository=TeamMemberRepository(session=session),
        root_domain=settings.root_domain,
        reserved_subdomains=settings.reserved_subdomains,
        lookup_timeout_seconds=settings.lookup_timeout_seconds,
        probe=DefaultTenantContextProbe().with_context(observation),
    )


async def get_tenant_context(
    request: Request,
    identity: Annotated[SessionIdentity, Depends(get_session_identity)],
    builder: Annotated[TenantContextBuilder, Depends(get_tenant_context_builder)],
) -> TenantContext:
    """Resolve the TenantContext for the current request.

    The root domain and reserved subdomains yield a root context with no
    tenant.

    Raises:
        TenantNotFoundError: If the subdomain names no enabled tenant
        TimeoutError: If the lookups exceed the configured timeout
    """
    host = request.headers.get("host", "")
    return await builder.from_host(host, identity)


async def get_tenant_scoped_context(
    context: Annotated[TenantContext, Depends(get_tenant_context)],
) -> TenantContext:
    """Resolve the context for endpoints that only exist on a tenant subdomain.

    Raises:
        HTTPException 404: If the request was made on the root domain
    """
    if context.is_root:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No tenant for this host",
        )
    return context
