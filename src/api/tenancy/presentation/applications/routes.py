"""HTTP routes for a renter's own rental applications."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.application.services import RentalApplicationService
from tenancy.dependencies.services import get_rental_application_service
from tenancy.dependencies.tenant_context import get_tenant_scoped_context
from tenancy.ports.exceptions import UnauthorizedError
from tenancy.presentation.applications.models import RentalApplicationResponse
from tenancy.presentation.errors import raise_for_denial

router = APIRouter(
    prefix="/applications",
    tags=["applications"],
)


@router.get("/{application_id}")
async def get_application(
    application_id: str,
    context: Annotated[TenantContext, Depends(get_tenant_scoped_context)],
    service: Annotated[
        RentalApplicationService, Depends(get_rental_application_service)
    ],
) -> RentalApplicationResponse:
    """Get an application submitted by the caller.

    Another applicant's application reads as not found.

    Raises:
        HTTPException: 401 if not signed in
        HTTPException: 404 if not found or not the caller's
    """
    try:
        application = await service.get_application(context, application_id)
    except UnauthorizedError as e:
        raise_for_denial(e, conceal=True, not_found_detail="Application not found")

    if application is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Application not found",
        )
    return RentalApplicationResponse.from_domain(application)
