"""Domain aggregates for the tenancy context.

Aggregates are the core business objects containing state and business logic.
They enforce invariants and business rules without depending on infrastructure.
"""

from tenancy.domain.aggregates.property import Property
from tenancy.domain.aggregates.rental_application import RentalApplication
from tenancy.domain.aggregates.team_member import INVITATION_TTL, TeamMember
from tenancy.domain.aggregates.tenant import Tenant

__all__ = [
    "INVITATION_TTL",
    "Property",
    "RentalApplication",
    "TeamMember",
    "Tenant",
]
