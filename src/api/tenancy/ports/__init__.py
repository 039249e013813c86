"""Ports (interfaces) for the tenancy bounded context.

Ports define the contracts for repositories without specifying
implementation details. This allows for dependency inversion and makes the
domain layer independent of infrastructure.
"""

from tenancy.ports.exceptions import TenantNotFoundError, UnauthorizedError
from tenancy.ports.repositories import (
    IPropertyRepository,
    IRentalApplicationRepository,
    ITeamMemberRepository,
    ITenantRepository,
)

__all__ = [
    "IPropertyRepository",
    "IRentalApplicationRepository",
    "ITeamMemberRepository",
    "ITenantRepository",
    "TenantNotFoundError",
    "UnauthorizedError",
]
