"""FastAPI dependencies for tenancy application services."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.dependencies import get_read_session, get_write_session
from infrastructure.settings import get_tenancy_settings
from shared_kernel.authorization.observability import (
    AuthorizationProbe,
    DefaultAuthorizationProbe,
)
from shared_kernel.observability_context import ObservationContext
from tenancy.application.observability import (
    DefaultScopedReadProbe,
    DefaultTeamServiceProbe,
    DefaultTenantServiceProbe,
)
from tenancy.application.services import (
    PropertyService,
    RentalApplicationService,
    TeamService,
    TenantService,
)
from tenancy.dependencies.tenant_context import get_observation_context
from tenancy.infrastructure.property_repository import (
    PropertyRepository,
    RentalApplicationRepository,
)
from tenancy.infrastructure.team_member_repository import TeamMemberRepository
from tenancy.infrastructure.tenant_repository import TenantRepository


def get_authorization_probe(
    observation: Annotated[ObservationContext, Depends(get_observation_context)],
) -> AuthorizationProbe:
    """Get an AuthorizationProbe bound to the request's observation context."""
    return DefaultAuthorizationProbe().with_context(observation)


def get_tenant_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    authz_probe: Annotated[AuthorizationProbe, Depends(get_authorization_probe)],
) -> TenantService:
    """Get TenantService instance."""
    return TenantService(
        tenant_repository=TenantRepository(session=session),
        team_member_repository=TeamMemberRepository(session=session),
        session=session,
        reserved_subdomains=get_tenancy_settings().reserved_subdomains,
        probe=DefaultTenantServiceProbe(),
        authz_probe=authz_probe,
    )


def get_team_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    authz_probe: Annotated[AuthorizationProbe, Depends(get_authorization_probe)],
) -> TeamService:
    """Get TeamService instance."""
    return TeamService(
        team_member_repository=TeamMemberRepository(session=session),
        session=session,
        probe=DefaultTeamServiceProbe(),
        authz_probe=authz_probe,
    )


def get_property_service(
    session: Annotated[AsyncSession, Depends(get_read_session)],
    authz_probe: Annotated[AuthorizationProbe, Depends(get_authorization_probe)],
) -> PropertyService:
    """Get PropertyService instance."""
    return PropertyService(
        property_repository=PropertyRepository(session=session),
        probe=DefaultScopedReadProbe(),
        authz_probe=authz_probe,
    )


def get_rental_application_service(
    session: Annotated[AsyncSession, Depends(get_read_session)],
    authz_probe: Annotated[AuthorizationProbe, Depends(get_authorization_probe)],
) -> RentalApplicationService:
    """Get RentalApplicationService instance."""
    return RentalApplicationService(
        application_repository=RentalApplicationRepository(session=session),
        probe=DefaultScopedReadProbe(),
        authz_probe=authz_probe,
    )
