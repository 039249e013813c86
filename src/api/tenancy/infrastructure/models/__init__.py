"""SQLAlchemy ORM models for the tenancy bounded context.

These models map to database tables and are used by repository implementations.
Every tenant-owned table carries a tenant_id foreign key to tenants.id.
"""

from tenancy.infrastructure.models.property import PropertyModel
from tenancy.infrastructure.models.rental_application import RentalApplicationModel
from tenancy.infrastructure.models.team_member import TeamMemberModel
from tenancy.infrastructure.models.tenant import TenantModel

__all__ = [
    "PropertyModel",
    "RentalApplicationModel",
    "TeamMemberModel",
    "TenantModel",
]
