"""PostgreSQL implementation of ITeamMemberRepository."""

from __future__ import annotations

from typing import NoReturn

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tenancy.domain.aggregates import TeamMember
from tenancy.domain.value_objects import (
    DEFAULT_PERMISSIONS,
    TeamMemberId,
    TeamMemberStatus,
    TeamRole,
    TenantId,
    UserId,
)
from tenancy.infrastructure.models import TeamMemberModel
from tenancy.infrastructure.observability import (
    DefaultTeamMemberRepositoryProbe,
    TeamMemberRepositoryProbe,
)
from tenancy.ports.exceptions import DuplicateMembershipError
from tenancy.ports.repositories import ITeamMemberRepository


class TeamMemberRepository(ITeamMemberRepository):
    """Repository managing PostgreSQL storage for TeamMember aggregates.

    All lookups except by invite token are filtered by tenant_id.
    """

    def __init__(
        self,
        session: AsyncSession,
        probe: TeamMemberRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultTeamMemberRepositoryProbe()

    async def save(self, member: TeamMember) -> None:
        """Persist a membership.

        Raises:
            DuplicateMembershipError: If the user already belongs to the tenant
        """
        if member.user_id is not None:
            stmt = select(TeamMemberModel.id).where(
                TeamMemberModel.tenant_id == member.tenant_id.value,
                TeamMemberModel.user_id == member.user_id.value,
                TeamMemberModel.id != member.id.value,
            )
            result = await self._session.execute(stmt)
            if result.scalar_one_or_none() is not None:
                self._raise_duplicate(member)

        try:
            stmt = select(TeamMemberModel).where(TeamMemberModel.id == member.id.value)
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

            if model is None:
                model = TeamMemberModel(
                    id=member.id.value, tenant_id=member.tenant_id.value
                )
                self._session.add(model)

            model.user_id = member.user_id.value if member.user_id else None
            model.role = member.role.value
            model.status = member.status.value
            model.invited_email = member.invited_email
            model.invite_token = member.invite_token
            model.invite_expires_at = member.invite_expires_at
            model.invited_by = member.invited_by.value if member.invited_by else None
            model.joined_at = member.joined_at

            await self._session.flush()
            self._probe.member_saved(member.id.value, member.tenant_id.value)

        except IntegrityError as e:
            if "uq_team_members_tenant_user" in str(e):
                self._raise_duplicate(member, cause=e)
            raise

    async def get_by_id(
        self, tenant_id: TenantId, member_id: TeamMemberId
    ) -> TeamMember | None:
        stmt = select(TeamMemberModel).where(
            TeamMemberModel.tenant_id == tenant_id.value,
            TeamMemberModel.id == member_id.value,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def find_membership(
        self, tenant_id: TenantId, user_id: UserId
    ) -> TeamMember | None:
        stmt = select(TeamMemberModel).where(
            TeamMemberModel.tenant_id == tenant_id.value,
            TeamMemberModel.user_id == user_id.value,
            TeamMemberModel.status == TeamMemberStatus.ACTIVE.value,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def find_by_invite_token(self, token: str) -> TeamMember | None:
        stmt = select(TeamMemberModel).where(TeamMemberModel.invite_token == token)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_by_tenant(self, tenant_id: TenantId) -> list[TeamMember]:
        stmt = (
            select(TeamMemberModel)
            .where(TeamMemberModel.tenant_id == tenant_id.value)
            .order_by(TeamMemberModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def delete(self, member: TeamMember) -> bool:
        stmt = select(TeamMemberModel).where(
            TeamMemberModel.tenant_id == member.tenant_id.value,
            TeamMemberModel.id == member.id.value,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()

        self._probe.member_deleted(member.id.value, member.tenant_id.value)
        return True

    def _raise_duplicate(
        self, member: TeamMember, cause: Exception | None = None
    ) -> NoReturn:
        user_id = member.user_id.value if member.user_id else None
        self._probe.duplicate_membership(member.tenant_id.value, user_id)
        raise DuplicateMembershipError(
            f"User {user_id} is already a member of tenant {member.tenant_id.value}"
        ) from cause

    @staticmethod
    def _to_domain(model: TeamMemberModel) -> TeamMember:
        role = TeamRole(model.role)
        return TeamMember(
            id=TeamMemberId(value=model.id),
            tenant_id=TenantId(value=model.tenant_id),
            role=role,
            status=TeamMemberStatus(model.status),
            user_id=UserId(value=model.user_id) if model.user_id else None,
            invited_email=model.invited_email,
            invite_token=model.invite_token,
            invite_expires_at=model.invite_expires_at,
            invited_by=UserId(value=model.invited_by) if model.invited_by else None,
            joined_at=model.joined_at,
            permissions=DEFAULT_PERMISSIONS[role],
        )
