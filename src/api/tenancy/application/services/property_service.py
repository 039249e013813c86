"""Property application service.

Read access to a tenant's property listings for the landlord's team.
"""

from __future__ import annotations

from shared_kernel.authorization import TenantMember
from shared_kernel.authorization.observability import AuthorizationProbe
from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.application.authorization import require
from tenancy.application.observability import DefaultScopedReadProbe, ScopedReadProbe
from tenancy.domain.aggregates import Property
from tenancy.domain.value_objects import TenantId
from tenancy.ports.repositories import IPropertyRepository


class PropertyService:
    """Application service for tenant-scoped property reads."""

    def __init__(
        self,
        property_repository: IPropertyRepository,
        probe: ScopedReadProbe | None = None,
        authz_probe: AuthorizationProbe | None = None,
    ):
        self._property_repository = property_repository
        self._probe = probe or DefaultScopedReadProbe()
        self._authz_probe = authz_probe

    async def list_properties(self, context: TenantContext) -> list[Property]:
        """List the properties of the request's tenant.

        Raises:
            UnauthorizedError: If the caller is not on the tenant's team
        """
        tenant_id = self._require_member(context)

        properties = await self._property_repository.list_for_tenant(tenant_id)
        self._probe.resources_listed(
            resource="property", tenant_id=tenant_id.value, count=len(properties)
        )
        return properties

    async def get_property(self, context: TenantContext, slug: str) -> Property | None:
        """Retrieve one of the tenant's properties by slug.

        Returns None when no property with this slug exists in the request's
        tenant, including when it exists in another tenant.

        Raises:
            UnauthorizedError: If the caller is not on the tenant's team
        """
        tenant_id = self._require_member(context)

        found = await self._property_repository.get_by_slug(tenant_id, slug)
        if found is None:
            self._probe.resource_not_found(
                resource="property", tenant_id=tenant_id.value, key=slug
            )
            return None

        self._probe.resource_retrieved(
            resource="property", tenant_id=tenant_id.value, key=slug
        )
        return found

    def _require_member(self, context: TenantContext) -> TenantId:
        require(context, TenantMember(context.tenant_id), self._authz_probe)
        assert context.tenant_id is not None  # For mypy
        return TenantId.from_string(context.tenant_id)
