"""RentalApplication entity for the tenancy context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from tenancy.domain.value_objects import ApplicationStatus, TenantId, UserId


@dataclass
class RentalApplication:
    """An application submitted by a renter for one of a tenant's properties.

    The applicant owns the application; only they may read it through the
    renter-facing surface.
    """

    id: str
    tenant_id: TenantId
    applicant_id: UserId
    property_slug: str
    full_name: str
    email: str
    status: ApplicationStatus
    created_at: datetime
