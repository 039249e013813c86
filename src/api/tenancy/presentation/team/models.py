"""Pydantic models for team API requests and responses."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field

from tenancy.domain.aggregates import TeamMember
from tenancy.domain.value_objects import TeamRole


class GrantableRoleEnum(StrEnum):
    """API-level enum for roles team management may grant.

    The owner role is never grantable.
    """

    ADMIN = "admin"
    MEMBER = "member"


class InviteMemberRequest(BaseModel):
    """Request model for inviting a team member."""

    email: str = Field(..., description="Invitee email", min_length=3, max_length=255)
    role: GrantableRoleEnum = Field(
        default=GrantableRoleEnum.MEMBER, description="Role granted on acceptance"
    )

    def to_domain_role(self) -> TeamRole:
        """Convert API role to domain TeamRole."""
        return TeamRole(self.role.value)


class UpdateMemberRoleRequest(BaseModel):
    """Request model for changing a member's role."""

    role: GrantableRoleEnum = Field(..., description="New role (admin or member)")

    def to_domain_role(self) -> TeamRole:
        """Convert API role to domain TeamRole."""
        return TeamRole(self.role.value)


class TeamMemberResponse(BaseModel):
    """Response model for a team membership."""

    id: str = Field(..., description="Membership ID (ULID format)")
    user_id: str | None = Field(None, description="Member's user ID once accepted")
    email: str | None = Field(None, description="Invited email")
    role: str = Field(..., description="Role within the team")
    status: str = Field(..., description="pending or active")
    permissions: list[str] = Field(..., description="Permissions derived from role")
    joined_at: datetime | None = Field(None, description="When the member joined")

    @classmethod
    def from_domain(cls, member: TeamMember) -> TeamMemberResponse:
        """Convert domain TeamMember aggregate to API response."""
        return cls(
            id=member.id.value,
            user_id=member.user_id.value if member.user_id else None,
            email=member.invited_email,
            role=member.role.value,
            status=member.status.value,
            permissions=[p.value for p in member.permissions],
            joined_at=member.joined_at,
        )


class InvitationResponse(TeamMemberResponse):
    """Response model for a freshly issued invitation.

    The token is only ever returned to the admin who issued it.
    """

    invite_token: str = Field(..., description="Single-use invitation token")
    expires_at: datetime = Field(..., description="Invitation expiry")

    @classmethod
    def from_domain(cls, member: TeamMember) -> InvitationResponse:
        """Convert a pending TeamMember to an invitation response."""
        assert member.invite_token is not None  # For mypy
        assert member.invite_expires_at is not None  # For mypy
        return cls(
            **TeamMemberResponse.from_domain(member).model_dump(),
            invite_token=member.invite_token,
            expires_at=member.invite_expires_at,
        )
