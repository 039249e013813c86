"""Pydantic models for tenant API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tenancy.domain.aggregates import Tenant


class OnboardTenantRequest(BaseModel):
    """Request model for landlord onboarding."""

    slug: str = Field(
        ...,
        description="Subdomain to serve the landlord on",
        min_length=3,
        max_length=63,
    )
    name: str = Field(..., description="Landlord name", min_length=1, max_length=255)


class TenantResponse(BaseModel):
    """Public profile of a tenant."""

    id: str = Field(..., description="Tenant ID (ULID format)")
    slug: str = Field(..., description="Subdomain")
    name: str = Field(..., description="Landlord name")

    @classmethod
    def from_domain(cls, tenant: Tenant) -> TenantResponse:
        """Convert domain Tenant aggregate to API response."""
        return cls(
            id=tenant.id.value,
            slug=tenant.slug.value,
            name=tenant.name,
        )


class TenantAdminResponse(TenantResponse):
    """Tenant as seen by platform administrators."""

    owner_user_id: str = Field(..., description="User who owns the tenant")
    is_disabled: bool = Field(..., description="Whether the tenant is disabled")

    @classmethod
    def from_domain(cls, tenant: Tenant) -> TenantAdminResponse:
        """Convert domain Tenant aggregate to API response."""
        return cls(
            id=tenant.id.value,
            slug=tenant.slug.value,
            name=tenant.name,
            owner_user_id=tenant.owner_user_id.value,
            is_disabled=tenant.is_disabled,
        )
