"""Session identity value objects.

The session provider is an external collaborator; the rest of the system
only ever sees the ``{user_id, role}`` pair carried by ``SessionIdentity``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class SessionRole(StrEnum):
    """Closed set of platform-level roles carried by a session.

    Tenant-level privileges (owner, admin, member of a specific landlord)
    are not expressed here; they are resolved per tenant when the tenant
    context is assembled.
    """

    TENANT = "tenant"
    LANDLORD_OWNER = "landlord-owner"
    TEAM_ADMIN = "team-admin"
    TEAM_MEMBER = "team-member"
    SUPER_ADMIN = "super-admin"
    ANONYMOUS = "anonymous"

    @classmethod
    def from_claim(cls, value: str) -> SessionRole:
        """Parse a role claim, accepting legacy role names.

        Args:
            value: Raw role claim from the session token

        Returns:
            The matching SessionRole

        Raises:
            ValueError: If the value is neither a known role nor a legacy alias
        """
        normalized = value.strip().lower()
        if normalized in _LEGACY_ROLE_ALIASES:
            return _LEGACY_ROLE_ALIASES[normalized]
        return cls(normalized)


# Keys are lower-cased; claims are matched case-insensitively.
_LEGACY_ROLE_ALIASES: dict[str, SessionRole] = {
    "landlord": SessionRole.LANDLORD_OWNER,
    "property_manager": SessionRole.TEAM_MEMBER,
    "admin": SessionRole.TEAM_ADMIN,
    "superadmin": SessionRole.SUPER_ADMIN,
    "user": SessionRole.TENANT,
}


@dataclass(frozen=True)
class SessionIdentity:
    """The identity behind the current request.

    Attributes:
        user_id: Identifier issued by the session provider, or None when
            the request carries no valid session.
        role: Platform-level role tag.
    """

    user_id: str | None
    role: SessionRole

    @classmethod
    def anonymous(cls) -> SessionIdentity:
        """Identity used when no session is present."""
        return cls(user_id=None, role=SessionRole.ANONYMOUS)

    @property
    def is_authenticated(self) -> bool:
        """Whether the identity carries a user id."""
        return self.user_id is not None

    @property
    def is_super_admin(self) -> bool:
        """Whether the identity holds the platform super-admin role."""
        return self.role == SessionRole.SUPER_ADMIN
