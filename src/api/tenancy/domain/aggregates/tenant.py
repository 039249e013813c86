"""Tenant aggregate for the tenancy context."""

from __future__ import annotations

from dataclasses import dataclass

from tenancy.domain.value_objects import TenantId, TenantSlug, UserId


@dataclass
class Tenant:
    """Tenant aggregate representing a landlord on the platform.

    Each tenant is served on its own subdomain and owns properties, units,
    leases, documents and a team.

    Business rules:
    - Slugs are globally unique, case-insensitive and never change
    - Tenants are never deleted while they own data; they are disabled instead
    - The owner is the user who onboarded the tenant
    """

    id: TenantId
    slug: TenantSlug
    name: str
    owner_user_id: UserId
    is_disabled: bool = False

    @classmethod
    def create(cls, slug: TenantSlug, name: str, owner_user_id: UserId) -> Tenant:
        """Factory method for onboarding a new tenant.

        Args:
            slug: Validated subdomain for the tenant
            name: Display name of the landlord
            owner_user_id: User who onboards and owns the tenant

        Returns:
            A new, enabled Tenant aggregate

        Raises:
            ValueError: If the name is blank
        """
        name = name.strip()
        if not name:
            raise ValueError("Tenant name must not be empty")

        return cls(
            id=TenantId.generate(),
            slug=slug,
            name=name,
            owner_user_id=owner_user_id,
        )

    def is_owned_by(self, user_id: str | None) -> bool:
        """Check whether the given user owns this tenant."""
        return user_id is not None and self.owner_user_id.value == user_id

    def disable(self) -> None:
        """Soft-disable the tenant. Its subdomain stops resolving."""
        self.is_disabled = True

    def enable(self) -> None:
        """Re-enable a previously disabled tenant."""
        self.is_disabled = False
