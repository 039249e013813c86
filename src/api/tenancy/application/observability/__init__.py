"""Domain-Oriented Observability for the tenancy application layer.

Probes for application service operations following Domain-Oriented Observability patterns.
"""

from tenancy.application.observability.scoped_read_probe import (
    DefaultScopedReadProbe,
    ScopedReadProbe,
)
from tenancy.application.observability.team_service_probe import (
    DefaultTeamServiceProbe,
    TeamServiceProbe,
)
from tenancy.application.observability.tenant_service_probe import (
    DefaultTenantServiceProbe,
    TenantServiceProbe,
)

__all__ = [
    "DefaultScopedReadProbe",
    "DefaultTeamServiceProbe",
    "DefaultTenantServiceProbe",
    "ScopedReadProbe",
    "TeamServiceProbe",
    "TenantServiceProbe",
]
