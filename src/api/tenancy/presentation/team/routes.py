"""HTTP routes for landlord team management."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.application.services import TeamService
from tenancy.dependencies.services import get_team_service
from tenancy.dependencies.tenant_context import get_tenant_scoped_context
from tenancy.domain.exceptions import (
    InvalidTeamRoleError,
    InvitationAlreadyUsedError,
    InvitationExpiredError,
    OwnerMembershipImmutableError,
)
from tenancy.domain.value_objects import TeamMemberId
from tenancy.ports.exceptions import (
    DuplicateMembershipError,
    InvitationNotFoundError,
    TeamMemberNotFoundError,
    UnauthorizedError,
)
from tenancy.presentation.errors import raise_for_denial
from tenancy.presentation.team.models import (
    InvitationResponse,
    InviteMemberRequest,
    TeamMemberResponse,
    UpdateMemberRoleRequest,
)

router = APIRouter(
    prefix="/team",
    tags=["team"],
)


def _parse_member_id(member_id: str) -> TeamMemberId:
    try:
        return TeamMemberId.from_string(member_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Team member not found",
        ) from e


@router.get("/members")
async def list_members(
    context: Annotated[TenantContext, Depends(get_tenant_scoped_context)],
    service: Annotated[TeamService, Depends(get_team_service)],
) -> list[TeamMemberResponse]:
    """List the team of the request's tenant, pending invitations included.

    Raises:
        HTTPException: 401 if not signed in
        HTTPException: 403 if the caller is not a tenant admin
    """
    try:
        members = await service.list_members(context)
    except UnauthorizedError as e:
        raise_for_denial(e)

    return [TeamMemberResponse.from_domain(m) for m in members]


@router.post(
    "/invitations",
    status_code=status.HTTP_201_CREATED,
)
async def invite_member(
    request: InviteMemberRequest,
    context: Annotated[TenantContext, Depends(get_tenant_scoped_context)],
    service: Annotated[TeamService, Depends(get_team_service)],
) -> InvitationResponse:
    """Invite a new team member by email.

    Raises:
        HTTPException: 400 if the email is blank
        HTTPException: 401 if not signed in
        HTTPException: 403 if the caller is not a tenant admin
    """
    try:
        member = await service.invite_member(
            context, email=request.email, role=request.to_domain_role()
        )
    except UnauthorizedError as e:
        raise_for_denial(e)
    except (InvalidTeamRoleError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return InvitationResponse.from_domain(member)


@router.post("/invitations/{token}/accept")
async def accept_invitation(
    token: str,
    context: Annotated[TenantContext, Depends(get_tenant_scoped_context)],
    service: Annotated[TeamService, Depends(get_team_service)],
) -> TeamMemberResponse:
    """Accept an invitation as the signed-in user.

    Raises:
        HTTPException: 401 if not signed in
        HTTPException: 404 if the invitation does not exist on this tenant
        HTTPException: 409 if already used or the user is already a member
        HTTPException: 410 if the invitation has expired
    """
    try:
        member = await service.accept_invitation(context, token)
    except UnauthorizedError as e:
        raise_for_denial(e)
    except InvitationNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Invitation not found",
        ) from e
    except InvitationExpiredError as e:
        raise HTTPException(
            status_code=status.HTTP_410_GONE,
            detail="Invitation has expired",
        ) from e
    except (InvitationAlreadyUsedError, DuplicateMembershipError) as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        ) from e

    return TeamMemberResponse.from_domain(member)


@router.patch("/members/{member_id}")
async def update_member_role(
    member_id: str,
    request: UpdateMemberRoleRequest,
    context: Annotated[TenantContext, Depends(get_tenant_scoped_context)],
    service: Annotated[TeamService, Depends(get_team_service)],
) -> TeamMemberResponse:
    """Change a team member's role.

    Raises:
        HTTPException: 400 if the member is the owner
        HTTPException: 401 if not signed in
        HTTPException: 403 if the caller is not a tenant admin
        HTTPException: 404 if the member is not in this tenant
    """
    member_id_obj = _parse_member_id(member_id)

    try:
        member = await service.change_role(
            context, member_id_obj, request.to_domain_role()
        )
    except UnauthorizedError as e:
        raise_for_denial(e)
    except TeamMemberNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Team member not found",
        ) from e
    except (OwnerMembershipImmutableError, InvalidTeamRoleError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return TeamMemberResponse.from_domain(member)


@router.delete(
    "/members/{member_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def remove_member(
    member_id: str,
    context: Annotated[TenantContext, Depends(get_tenant_scoped_context)],
    service: Annotated[TeamService, Depends(get_team_service)],
) -> None:
    """Remove a team member or revoke a pending invitation.

    Raises:
        HTTPException: 400 if the member is the owner
        HTTPException: 401 if not signed in
        HTTPException: 403 if the caller is not a tenant admin
        HTTPException: 404 if the member is not in this tenant
    """
    member_id_obj = _parse_member_id(member_id)

    try:
        await service.remove_member(context, member_id_obj)
    except UnauthorizedError as e:
        raise_for_denial(e)
    except TeamMemberNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Team member not found",
        ) from e
    except OwnerMembershipImmutableError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
