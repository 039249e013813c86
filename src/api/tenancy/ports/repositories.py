"""Repository protocols (ports) for the tenancy bounded context.

Repository protocols define the interface for persisting and retrieving
aggregates. Every tenant-owned read takes the tenant id explicitly so no
implementation can return another tenant's rows.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from tenancy.domain.aggregates import Property, RentalApplication, TeamMember, Tenant
from tenancy.domain.value_objects import TeamMemberId, TenantId, TenantSlug, UserId


@runtime_checkable
class ITenantRepository(Protocol):
    """Repository for Tenant aggregate persistence."""

    async def save(self, tenant: Tenant) -> None:
        """Persist a tenant aggregate.

        Creates a new tenant or updates an existing one.

        Raises:
            DuplicateTenantSlugError: If the slug is already taken
        """
        ...

    async def get_by_id(self, tenant_id: TenantId) -> Tenant | None:
        """Retrieve a tenant by its ID."""
        ...

    async def find_by_slug(self, slug: str) -> Tenant | None:
        """Retrieve a tenant by subdomain slug.

        The lookup is case-insensitive. Slugs that could never have been
        onboarded (multi-label, too long) simply return None.

        Args:
            slug: Raw slug produced by the host resolver

        Returns:
            The Tenant aggregate, or None if no tenant has this slug
        """
        ...

    async def is_owner(self, tenant_id: TenantId, user_id: UserId) -> bool:
        """Check whether the user owns the tenant."""
        ...

    async def list_all(self) -> list[Tenant]:
        """List all tenants, including disabled ones."""
        ...


@runtime_checkable
class ITeamMemberRepository(Protocol):
    """Repository for TeamMember aggregate persistence."""

    async def save(self, member: TeamMember) -> None:
        """Persist a team membership.

        Raises:
            DuplicateMembershipError: If the user already belongs to the tenant
        """
        ...

    async def get_by_id(
        self, tenant_id: TenantId, member_id: TeamMemberId
    ) -> TeamMember | None:
        """Retrieve a membership by ID, scoped to the tenant."""
        ...

    async def find_membership(
        self, tenant_id: TenantId, user_id: UserId
    ) -> TeamMember | None:
        """Retrieve the user's active membership in the tenant.

        Pending invitations are never returned.
        """
        ...

    async def find_by_invite_token(self, token: str) -> TeamMember | None:
        """Retrieve a membership by its invite token."""
        ...

    async def list_by_tenant(self, tenant_id: TenantId) -> list[TeamMember]:
        """List all memberships of a tenant, pending and active."""
        ...

    async def delete(self, member: TeamMember) -> bool:
        """Delete a membership.

        Returns:
            True if a row was deleted, False if it did not exist
        """
        ...


@runtime_checkable
class IPropertyRepository(Protocol):
    """Read repository for tenant-owned properties."""

    async def list_for_tenant(self, tenant_id: TenantId) -> list[Property]:
        """List the tenant's properties."""
        ...

    async def get_by_slug(self, tenant_id: TenantId, slug: str) -> Property | None:
        """Retrieve one of the tenant's properties by slug.

        Returns None when the slug belongs to a different tenant.
        """
        ...


@runtime_checkable
class IRentalApplicationRepository(Protocol):
    """Read repository for rental applications."""

    async def get_by_id(
        self, tenant_id: TenantId, application_id: str
    ) -> RentalApplication | None:
        """Retrieve an application by ID, scoped to the tenant."""
        ...
