"""HTTP routes for platform administration.

These routes are not tenant-scoped: they work from any host, including
the root domain, and see disabled tenants.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.application.services import TenantService
from tenancy.dependencies.services import get_tenant_service
from tenancy.dependencies.tenant_context import get_tenant_context
from tenancy.domain.value_objects import TenantId
from tenancy.ports.exceptions import UnauthorizedError
from tenancy.presentation.errors import raise_for_denial
from tenancy.presentation.tenants.models import TenantAdminResponse

router = APIRouter(
    prefix="/super-admin",
    tags=["super-admin"],
)


@router.get("/tenants")
async def list_tenants(
    context: Annotated[TenantContext, Depends(get_tenant_context)],
    service: Annotated[TenantService, Depends(get_tenant_service)],
) -> list[TenantAdminResponse]:
    """List every tenant on the platform.

    Raises:
        HTTPException: 401 if not signed in
        HTTPException: 403 if the caller is not a super-admin
    """
    try:
        tenants = await service.list_all_tenants(context)
    except UnauthorizedError as e:
        raise_for_denial(e)

    return [TenantAdminResponse.from_domain(t) for t in tenants]


async def _set_disabled(
    tenant_id: str,
    disabled: bool,
    context: TenantContext,
    service: TenantService,
) -> TenantAdminResponse:
    try:
        tenant_id_obj = TenantId.from_string(tenant_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid tenant ID format: {e}",
        ) from e

    try:
        tenant = await service.set_tenant_disabled(context, tenant_id_obj, disabled)
    except UnauthorizedError as e:
        raise_for_denial(e)

    if tenant is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Tenant {tenant_id} not found",
        )
    return TenantAdminResponse.from_domain(tenant)


@router.post("/tenants/{tenant_id}/disable")
async def disable_tenant(
    tenant_id: str,
    context: Annotated[TenantContext, Depends(get_tenant_context)],
    service: Annotated[TenantService, Depends(get_tenant_service)],
) -> TenantAdminResponse:
    """Disable a tenant; its subdomain stops resolving."""
    return await _set_disabled(tenant_id, True, context, service)


@router.post("/tenants/{tenant_id}/enable")
async def enable_tenant(
    tenant_id: str,
    context: Annotated[TenantContext, Depends(get_tenant_context)],
    service: Annotated[TenantService, Depends(get_tenant_service)],
) -> TenantAdminResponse:
    """Re-enable a disabled tenant."""
    return await _set_disabled(tenant_id, False, context, service)
