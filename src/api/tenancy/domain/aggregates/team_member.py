"""TeamMember aggregate for the tenancy context."""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from tenancy.domain.exceptions import (
    InvalidTeamRoleError,
    InvitationAlreadyUsedError,
    InvitationExpiredError,
    OwnerMembershipImmutableError,
)
from tenancy.domain.value_objects import (
    DEFAULT_PERMISSIONS,
    TeamMemberId,
    TeamMemberStatus,
    TeamPermission,
    TeamRole,
    TenantId,
    UserId,
)

INVITATION_TTL = timedelta(days=7)

_GRANTABLE_ROLES = frozenset({TeamRole.ADMIN, TeamRole.MEMBER})


@dataclass
class TeamMember:
    """Membership of a user in a tenant's team.

    A membership starts either as the owner membership created at onboarding
    or as a pending invitation addressed to an email. Accepting the
    invitation binds it to a user and activates it.

    Business rules:
    - A user holds at most one membership per tenant
    - Only active memberships grant access
    - The owner membership cannot be re-roled or removed
    - Invitations expire seven days after they are issued
    """

    id: TeamMemberId
    tenant_id: TenantId
    role: TeamRole
    status: TeamMemberStatus
    user_id: UserId | None = None
    invited_email: str | None = None
    invite_token: str | None = None
    invite_expires_at: datetime | None = None
    invited_by: UserId | None = None
    joined_at: datetime | None = None
    permissions: tuple[TeamPermission, ...] = field(default_factory=tuple)

    @classmethod
    def create_owner(cls, tenant_id: TenantId, user_id: UserId) -> TeamMember:
        """Create the active owner membership for a newly onboarded tenant."""
        return cls(
            id=TeamMemberId.generate(),
            tenant_id=tenant_id,
            role=TeamRole.OWNER,
            status=TeamMemberStatus.ACTIVE,
            user_id=user_id,
            joined_at=datetime.now(UTC),
            permissions=DEFAULT_PERMISSIONS[TeamRole.OWNER],
        )

    @classmethod
    def invite(
        cls,
        tenant_id: TenantId,
        email: str,
        role: TeamRole,
        invited_by: UserId,
        now: datetime | None = None,
    ) -> TeamMember:
        """Create a pending invitation.

        Args:
            tenant_id: Tenant the invitee will join
            email: Address the invitation is sent to
            role: Role granted on acceptance (admin or member)
            invited_by: User issuing the invitation
            now: Issue time, defaults to the current UTC time

        Returns:
            A pending TeamMember carrying a fresh invite token

        Raises:
            InvalidTeamRoleError: If the role is not grantable
            ValueError: If the email is blank
        """
        _ensure_grantable(role)
        email = email.strip().lower()
        if not email:
            raise ValueError("Invitation email must not be empty")

        issued_at = now or datetime.now(UTC)
        return cls(
            id=TeamMemberId.generate(),
            tenant_id=tenant_id,
            role=role,
            status=TeamMemberStatus.PENDING,
            invited_email=email,
            invite_token=secrets.token_urlsafe(32),
            invite_expires_at=issued_at + INVITATION_TTL,
            invited_by=invited_by,
            permissions=DEFAULT_PERMISSIONS[role],
        )

    @property
    def is_active(self) -> bool:
        return self.status == TeamMemberStatus.ACTIVE

    @property
    def is_owner(self) -> bool:
        return self.role == TeamRole.OWNER

    def accept(self, user_id: UserId, now: datetime | None = None) -> None:
        """Accept a pending invitation on behalf of a user.

        The invite token is consumed so the link cannot be reused.

        Raises:
            InvitationAlreadyUsedError: If the membership is not pending
            InvitationExpiredError: If the invitation has expired
        """
        if self.status != TeamMemberStatus.PENDING:
            raise InvitationAlreadyUsedError(
                f"Invitation {self.id.value} has already been accepted"
            )

        current = now or datetime.now(UTC)
        if self.invite_expires_at is not None and current >= self.invite_expires_at:
            raise InvitationExpiredError(f"Invitation {self.id.value} has expired")

        self.user_id = user_id
        self.status = TeamMemberStatus.ACTIVE
        self.joined_at = current
        self.invite_token = None
        self.invite_expires_at = None

    def change_role(self, role: TeamRole) -> None:
        """Change the member's role and reset permissions to the role defaults.

        Raises:
            OwnerMembershipImmutableError: If this is the owner membership
            InvalidTeamRoleError: If the new role is not grantable
        """
        if self.is_owner:
            raise OwnerMembershipImmutableError("Cannot change the owner role")
        _ensure_grantable(role)

        self.role = role
        self.permissions = DEFAULT_PERMISSIONS[role]

    def ensure_removable(self) -> None:
        """Raise if this membership may not be removed from the team."""
        if self.is_owner:
            raise OwnerMembershipImmutableError("Cannot remove the owner")


def _ensure_grantable(role: TeamRole) -> None:
    if role not in _GRANTABLE_ROLES:
        raise InvalidTeamRoleError(
            f"Role '{role}' cannot be granted; use 'admin' or 'member'"
        )
