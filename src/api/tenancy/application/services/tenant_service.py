"""Tenant application service for the tenancy bounded context.

Handles landlord onboarding, the public tenant profile served on each
subdomain, and the super-admin tenant administration surface.
"""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from shared_kernel.authorization import AuthenticatedOnly, SuperAdminOnly
from shared_kernel.authorization.observability import AuthorizationProbe
from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.application.authorization import require
from tenancy.application.host_resolver import is_reserved
from tenancy.application.observability import (
    DefaultTenantServiceProbe,
    TenantServiceProbe,
)
from tenancy.domain.aggregates import TeamMember, Tenant
from tenancy.domain.value_objects import TenantId, TenantSlug, UserId
from tenancy.ports.exceptions import DuplicateTenantSlugError
from tenancy.ports.repositories import ITeamMemberRepository, ITenantRepository


class TenantService:
    """Application service for tenant management.

    Onboarding creates the tenant and its owner membership in one
    transaction. Super-admin operations bypass tenant scoping but still go
    through the authorization guard.
    """

    def __init__(
        self,
        tenant_repository: ITenantRepository,
        team_member_repository: ITeamMemberRepository,
        session: AsyncSession,
        reserved_subdomains: Iterable[str] = ("www",),
        probe: TenantServiceProbe | None = None,
        authz_probe: AuthorizationProbe | None = None,
    ):
        """Initialize TenantService with dependencies.

        Args:
            tenant_repository: Repository for tenant persistence
            team_member_repository: Repository for the owner membership
            session: Database session for transaction management
            reserved_subdomains: Subdomains that can never be claimed
            probe: Optional domain probe for observability
            authz_probe: Optional probe for guard decisions
        """
        self._tenant_repository = tenant_repository
        self._team_member_repository = team_member_repository
        self._session = session
        self._reserved = tuple(reserved_subdomains)
        self._probe = probe or DefaultTenantServiceProbe()
        self._authz_probe = authz_probe

    async def onboard_tenant(
        self, context: TenantContext, slug: str, name: str
    ) -> Tenant:
        """Onboard a new landlord; the caller becomes the owner.

        Args:
            context: Request context; must carry an authenticated identity
            slug: Requested subdomain
            name: Display name of the landlord

        Returns:
            The created Tenant aggregate

        Raises:
            UnauthorizedError: If the caller is not signed in
            ValueError: If the slug is invalid or reserved, or the name blank
            DuplicateTenantSlugError: If the slug is already taken
        """
        require(context, AuthenticatedOnly(), self._authz_probe)
        assert context.user_id is not None  # For mypy

        tenant_slug = TenantSlug.from_string(slug)
        if is_reserved(tenant_slug.value, self._reserved):
            raise ValueError(f"Subdomain '{tenant_slug.value}' is reserved")

        owner_id = UserId(context.user_id)

        async with self._session.begin():
            try:
                tenant = Tenant.create(slug=tenant_slug, name=name, owner_user_id=owner_id)
                await self._tenant_repository.save(tenant)
                await self._team_member_repository.save(
                    TeamMember.create_owner(tenant_id=tenant.id, user_id=owner_id)
                )
            except DuplicateTenantSlugError:
                self._probe.duplicate_tenant_slug(slug=tenant_slug.value)
                raise

        self._probe.tenant_onboarded(
            tenant_id=tenant.id.value,
            slug=tenant_slug.value,
            owner_user_id=owner_id.value,
        )
        return tenant

    async def get_current_tenant(self, context: TenantContext) -> Tenant | None:
        """Return the tenant the request's host resolved to.

        This is the public landlord profile; no capability is required.
        Returns None on the root domain.
        """
        if context.tenant_id is None:
            return None

        tenant = await self._tenant_repository.get_by_id(
            TenantId.from_string(context.tenant_id)
        )
        if tenant is None:
            self._probe.tenant_not_found(tenant_id=context.tenant_id)
            return None

        self._probe.tenant_retrieved(tenant_id=tenant.id.value)
        return tenant

    async def list_all_tenants(self, context: TenantContext) -> list[Tenant]:
        """List every tenant on the platform, disabled ones included.

        Raises:
            UnauthorizedError: If the caller is not a super-admin
        """
        require(context, SuperAdminOnly(), self._authz_probe)

        tenants = await self._tenant_repository.list_all()
        self._probe.tenants_listed(count=len(tenants))
        return tenants

    async def set_tenant_disabled(
        self, context: TenantContext, tenant_id: TenantId, disabled: bool
    ) -> Tenant | None:
        """Disable or re-enable a tenant.

        Args:
            context: Request context; must carry a super-admin identity
            tenant_id: Tenant to update
            disabled: True to disable, False to enable

        Returns:
            The updated Tenant, or None if it does not exist

        Raises:
            UnauthorizedError: If the caller is not a super-admin
        """
        require(context, SuperAdminOnly(), self._authz_probe)

        async with self._session.begin():
            tenant = await self._tenant_repository.get_by_id(tenant_id)
            if tenant is None:
                self._probe.tenant_not_found(tenant_id=tenant_id.value)
                return None

            if disabled:
                tenant.disable()
            else:
                tenant.enable()
            await self._tenant_repository.save(tenant)

        if disabled:
            self._probe.tenant_disabled(tenant_id=tenant_id.value)
        else:
            self._probe.tenant_enabled(tenant_id=tenant_id.value)
        return tenant
