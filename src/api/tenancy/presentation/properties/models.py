"""Pydantic models for property API responses."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tenancy.domain.aggregates import Property


class PropertyResponse(BaseModel):
    """Response model for a property."""

    id: str = Field(..., description="Property ID")
    slug: str = Field(..., description="Property slug, unique within the tenant")
    name: str = Field(..., description="Property name")
    address: str = Field(..., description="Street address")

    @classmethod
    def from_domain(cls, prop: Property) -> PropertyResponse:
        """Convert domain Property to API response."""
        return cls(
            id=prop.id,
            slug=prop.slug,
            name=prop.name,
            address=prop.address,
        )
