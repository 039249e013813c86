"""Pydantic models for rental application API responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from tenancy.domain.aggregates import RentalApplication


class RentalApplicationResponse(BaseModel):
    """Response model for a rental application."""

    id: str = Field(..., description="Application ID")
    property_slug: str = Field(..., description="Property applied for")
    full_name: str = Field(..., description="Applicant name")
    email: str = Field(..., description="Applicant email")
    status: str = Field(..., description="Review status")
    applicant_id: str = Field(..., description="Applicant user ID")
    created_at: datetime = Field(..., description="Submission time")

    @classmethod
    def from_domain(cls, application: RentalApplication) -> RentalApplicationResponse:
        """Convert domain RentalApplication to API response."""
        return cls(
            id=application.id,
            property_slug=application.property_slug,
            full_name=application.full_name,
            email=application.email,
            status=application.status.value,
            applicant_id=application.applicant_id.value,
            created_at=application.created_at,
        )
