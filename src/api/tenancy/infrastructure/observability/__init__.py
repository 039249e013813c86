"""Domain-Oriented Observability for tenancy infrastructure."""

from tenancy.infrastructure.observability.repository_probe import (
    DefaultTeamMemberRepositoryProbe,
    DefaultTenantRepositoryProbe,
    TeamMemberRepositoryProbe,
    TenantRepositoryProbe,
)

__all__ = [
    "DefaultTeamMemberRepositoryProbe",
    "DefaultTenantRepositoryProbe",
    "TeamMemberRepositoryProbe",
    "TenantRepositoryProbe",
]
