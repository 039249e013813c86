"""Team application service for the tenancy bounded context.

Handles the landlord's team: listing members, inviting staff by email,
accepting invitations, changing roles and removing members.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from shared_kernel.authorization import AuthenticatedOnly, TenantAdmin
from shared_kernel.authorization.observability import AuthorizationProbe
from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.application.authorization import require
from tenancy.application.observability import (
    DefaultTeamServiceProbe,
    TeamServiceProbe,
)
from tenancy.domain.aggregates import TeamMember
from tenancy.domain.exceptions import (
    InvitationAlreadyUsedError,
    InvitationExpiredError,
    OwnerMembershipImmutableError,
)
from tenancy.domain.value_objects import TeamMemberId, TeamRole, TenantId, UserId
from tenancy.ports.exceptions import (
    DuplicateMembershipError,
    InvitationNotFoundError,
    TeamMemberNotFoundError,
)
from tenancy.ports.repositories import ITeamMemberRepository


class TeamService:
    """Application service for team membership management.

    Every operation except accepting an invitation requires TenantAdmin on
    the request's tenant. Memberships are always looked up within that
    tenant, so a member id from another tenant reads as not found.
    """

    def __init__(
        self,
        team_member_repository: ITeamMemberRepository,
        session: AsyncSession,
        probe: TeamServiceProbe | None = None,
        authz_probe: AuthorizationProbe | None = None,
    ):
        self._team_member_repository = team_member_repository
        self._session = session
        self._probe = probe or DefaultTeamServiceProbe()
        self._authz_probe = authz_probe

    async def list_members(self, context: TenantContext) -> list[TeamMember]:
        """List the tenant's memberships, pending invitations included."""
        tenant_id = self._require_admin(context)

        members = await self._team_member_repository.list_by_tenant(tenant_id)
        self._probe.members_listed(tenant_id=tenant_id.value, count=len(members))
        return members

    async def invite_member(
        self, context: TenantContext, email: str, role: TeamRole
    ) -> TeamMember:
        """Invite a new member by email.

        Returns:
            The pending membership, carrying the invite token

        Raises:
            UnauthorizedError: If the caller is not a tenant admin
            InvalidTeamRoleError: If the role is not admin or member
        """
        tenant_id = self._require_admin(context)
        assert context.user_id is not None  # For mypy

        member = TeamMember.invite(
            tenant_id=tenant_id,
            email=email,
            role=role,
            invited_by=UserId(context.user_id),
        )
        async with self._session.begin():
            await self._team_member_repository.save(member)

        self._probe.member_invited(
            tenant_id=tenant_id.value, member_id=member.id.value, role=role
        )
        return member

    async def accept_invitation(self, context: TenantContext, token: str) -> TeamMember:
        """Accept an invitation on behalf of the signed-in user.

        The invitation must belong to the tenant the request was made on.

        Raises:
            UnauthorizedError: If the caller is not signed in
            InvitationNotFoundError: If the token is unknown in this tenant
            InvitationExpiredError: If the invitation has expired
            InvitationAlreadyUsedError: If it was already accepted
            DuplicateMembershipError: If the user already belongs to the team
        """
        require(context, AuthenticatedOnly(), self._authz_probe)
        assert context.user_id is not None  # For mypy

        async with self._session.begin():
            member = await self._team_member_repository.find_by_invite_token(token)
            if member is None or member.tenant_id.value != context.tenant_id:
                self._probe.invitation_rejected(
                    tenant_id=context.tenant_id, reason="not_found"
                )
                raise InvitationNotFoundError("Invitation not found")

            try:
                member.accept(UserId(context.user_id))
                await self._team_member_repository.save(member)
            except (
                InvitationExpiredError,
                InvitationAlreadyUsedError,
                DuplicateMembershipError,
            ) as e:
                self._probe.invitation_rejected(
                    tenant_id=context.tenant_id, reason=type(e).__name__
                )
                raise

        self._probe.invitation_accepted(
            tenant_id=member.tenant_id.value,
            member_id=member.id.value,
            user_id=context.user_id,
        )
        return member

    async def change_role(
        self, context: TenantContext, member_id: TeamMemberId, role: TeamRole
    ) -> TeamMember:
        """Change a member's role.

        Raises:
            UnauthorizedError: If the caller is not a tenant admin
            TeamMemberNotFoundError: If the member is not in this tenant
            OwnerMembershipImmutableError: If the member is the owner
            InvalidTeamRoleError: If the role is not admin or member
        """
        tenant_id = self._require_admin(context)

        async with self._session.begin():
            member = await self._get_member(tenant_id, member_id)
            try:
                member.change_role(role)
            except OwnerMembershipImmutableError:
                self._probe.owner_modification_blocked(
                    tenant_id=tenant_id.value, member_id=member_id.value
                )
                raise
            await self._team_member_repository.save(member)

        self._probe.member_role_changed(
            tenant_id=tenant_id.value, member_id=member_id.value, role=role
        )
        return member

    async def remove_member(self, context: TenantContext, member_id: TeamMemberId) -> None:
        """Remove a member or revoke a pending invitation.

        Raises:
            UnauthorizedError: If the caller is not a tenant admin
            TeamMemberNotFoundError: If the member is not in this tenant
            OwnerMembershipImmutableError: If the member is the owner
        """
        tenant_id = self._require_admin(context)

        async with self._session.begin():
            member = await self._get_member(tenant_id, member_id)
            try:
                member.ensure_removable()
            except OwnerMembershipImmutableError:
                self._probe.owner_modification_blocked(
                    tenant_id=tenant_id.value, member_id=member_id.value
                )
                raise
            await self._team_member_repository.delete(member)

        self._probe.member_removed(tenant_id=tenant_id.value, member_id=member_id.value)

    def _require_admin(self, context: TenantContext) -> TenantId:
        require(context, TenantAdmin(context.tenant_id), self._authz_probe)
        assert context.tenant_id is not None  # For mypy
        return TenantId.from_string(context.tenant_id)

    async def _get_member(self, tenant_id: TenantId, member_id: TeamMemberId) -> TeamMember:
        member = await self._team_member_repository.get_by_id(tenant_id, member_id)
        if member is None:
            raise TeamMemberNotFoundError(f"Team member {member_id.value} not found")
        return member
