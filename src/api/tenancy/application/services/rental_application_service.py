"""Rental application service.

Lets a renter read the applications they submitted on a landlord's
subdomain.
"""

from __future__ import annotations

from shared_kernel.authorization import AuthenticatedOnly, ResourceOwner
from shared_kernel.authorization.observability import AuthorizationProbe
from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.application.authorization import require
from tenancy.application.observability import DefaultScopedReadProbe, ScopedReadProbe
from tenancy.domain.aggregates import RentalApplication
from tenancy.domain.value_objects import TenantId
from tenancy.ports.repositories import IRentalApplicationRepository


class RentalApplicationService:
    """Application service for renter self-service reads."""

    def __init__(
        self,
        application_repository: IRentalApplicationRepository,
        probe: ScopedReadProbe | None = None,
        authz_probe: AuthorizationProbe | None = None,
    ):
        self._application_repository = application_repository
        self._probe = probe or DefaultScopedReadProbe()
        self._authz_probe = authz_probe

    async def get_application(
        self, context: TenantContext, application_id: str
    ) -> RentalApplication | None:
        """Retrieve an application submitted by the caller.

        The caller must be signed in before any lookup happens. The lookup is
        scoped to the request's tenant, then the caller must be the
        applicant.

        Returns:
            The application, or None if it does not exist in this tenant

        Raises:
            UnauthorizedError: If the caller is anonymous or not the applicant
        """
        require(context, AuthenticatedOnly(), self._authz_probe)
        if context.tenant_id is None:
            return None
        tenant_id = TenantId.from_string(context.tenant_id)

        application = await self._application_repository.get_by_id(
            tenant_id, application_id
        )
        if application is None:
            self._probe.resource_not_found(
                resource="rental_application",
                tenant_id=tenant_id.value,
                key=application_id,
            )
            return None

        require(
            context,
            ResourceOwner(application.applicant_id.value),
            self._authz_probe,
        )

        self._probe.resource_retrieved(
            resource="rental_application",
            tenant_id=tenant_id.value,
            key=application_id,
        )
        return application
