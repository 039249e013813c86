"""Application services for the tenancy bounded context.

Application services orchestrate domain aggregates, repositories, and the
authorization guard to fulfill use cases. They are the "front door" to the
tenancy context.
"""

from tenancy.application.services.property_service import PropertyService
from tenancy.application.services.rental_application_service import (
    RentalApplicationService,
)
from tenancy.application.services.team_service import TeamService
from tenancy.application.services.tenant_service import TenantService

__all__ = [
    "PropertyService",
    "RentalApplicationService",
    "TeamService",
    "TenantService",
]
