"""HTTP routes for the current tenant and landlord onboarding."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.application.services import TenantService
from tenancy.dependencies.services import get_tenant_service
from tenancy.dependencies.tenant_context import get_tenant_context
from tenancy.ports.exceptions import DuplicateTenantSlugError, UnauthorizedError
from tenancy.presentation.errors import raise_for_denial
from tenancy.presentation.tenants.models import OnboardTenantRequest, TenantResponse

router = APIRouter(tags=["tenants"])


@router.get("/tenant")
async def get_current_tenant(
    context: Annotated[TenantContext, Depends(get_tenant_context)],
    service: Annotated[TenantService, Depends(get_tenant_service)],
) -> TenantResponse:
    """Get the landlord served on the request's host.

    Public endpoint used by tenant sites to render the landlord's branding.

    Raises:
        HTTPException: 404 if the host is the root domain or names no tenant
    """
    tenant = await service.get_current_tenant(context)
    if tenant is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No tenant for this host",
        )
    return TenantResponse.from_domain(tenant)


@router.post(
    "/tenants",
    status_code=status.HTTP_201_CREATED,
)
async def onboard_tenant(
    request: OnboardTenantRequest,
    context: Annotated[TenantContext, Depends(get_tenant_context)],
    service: Annotated[TenantService, Depends(get_tenant_service)],
) -> TenantResponse:
    """Onboard a new landlord.

    The signed-in caller becomes the owner of the new tenant.

    Raises:
        HTTPException: 400 if the slug is invalid or reserved
        HTTPException: 401 if not signed in
        HTTPException: 409 if the slug is already taken
    """
    try:
        tenant = await service.onboard_tenant(
            context, slug=request.slug, name=request.name
        )
    except UnauthorizedError as e:
        raise_for_denial(e)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except DuplicateTenantSlugError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="This subdomain is already taken",
        ) from e

    return TenantResponse.from_domain(tenant)
