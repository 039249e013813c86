"""HTTP routes for the tenant's properties."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.application.services import PropertyService
from tenancy.dependencies.services import get_property_service
from tenancy.dependencies.tenant_context import get_tenant_scoped_context
from tenancy.ports.exceptions import UnauthorizedError
from tenancy.presentation.errors import raise_for_denial
from tenancy.presentation.properties.models import PropertyResponse

router = APIRouter(
    prefix="/properties",
    tags=["properties"],
)


@router.get("")
async def list_properties(
    context: Annotated[TenantContext, Depends(get_tenant_scoped_context)],
    service: Annotated[PropertyService, Depends(get_property_service)],
) -> list[PropertyResponse]:
    """List the properties of the request's tenant.

    Raises:
        HTTPException: 401 if not signed in
        HTTPException: 403 if the caller is not on the tenant's team
    """
    try:
        properties = await service.list_properties(context)
    except UnauthorizedError as e:
        raise_for_denial(e)

    return [PropertyResponse.from_domain(p) for p in properties]


@router.get("/{slug}")
async def get_property(
    slug: str,
    context: Annotated[TenantContext, Depends(get_tenant_scoped_context)],
    service: Annotated[PropertyService, Depends(get_property_service)],
) -> PropertyResponse:
    """Get one of the tenant's properties.

    A property of another tenant, or any denial other than a missing
    session, reads as not found.

    Raises:
        HTTPException: 401 if not signed in
        HTTPException: 404 if not found or not accessible
    """
    try:
        prop = await service.get_property(context, slug)
    except UnauthorizedError as e:
        raise_for_denial(e, conceal=True, not_found_detail="Property not found")

    if prop is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Property not found",
        )
    return PropertyResponse.from_domain(prop)
