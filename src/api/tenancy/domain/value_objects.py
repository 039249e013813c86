"""Value objects for the tenancy domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers and domain concepts.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from ulid import ULID

from shared_kernel.authorization.types import MembershipRole

# Team roles are the membership roles the authorization guard understands.
TeamRole = MembershipRole

_SLUG_PATTERN = re.compile(r"^[a-z0-9](?:[a-z0-9-]{1,61}[a-z0-9])$")


@dataclass(frozen=True)
class TenantId:
    """Identifier for a Tenant (landlord) aggregate.

    Uses ULID for sortability and distribution-friendly generation.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> TenantId:
        """Generate a new TenantId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> TenantId:
        """Create TenantId from string value.

        Accepts lower-case input and returns the canonical upper-case form.

        Args:
            value: ULID string

        Returns:
            TenantId instance

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            parsed = ULID.from_str(value.upper())
        except ValueError as e:
            raise ValueError(f"Invalid TenantId: {value}") from e

        return cls(value=str(parsed))


@dataclass(frozen=True)
class TeamMemberId:
    """Identifier for a TeamMember aggregate."""

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> TeamMemberId:
        """Generate a new TeamMemberId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> TeamMemberId:
        """Create TeamMemberId from string value.

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            parsed = ULID.from_str(value.upper())
        except ValueError as e:
            raise ValueError(f"Invalid TeamMemberId: {value}") from e

        return cls(value=str(parsed))


@dataclass(frozen=True)
class UserId:
    """Identifier of a user issued by the external session provider.

    The provider's identifiers are opaque, so no format is enforced beyond
    being non-empty.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("UserId must not be empty")

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


@dataclass(frozen=True)
class TenantSlug:
    """Subdomain label identifying a tenant.

    Slugs are case-insensitive and stored lower-cased. Only single DNS
    labels are accepted when onboarding a tenant; the host resolver itself
    returns raw, unvalidated slugs.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def from_string(cls, value: str) -> TenantSlug:
        """Normalize and validate a slug chosen at onboarding.

        Args:
            value: Requested subdomain

        Returns:
            TenantSlug with the lower-cased value

        Raises:
            ValueError: If the value is not a valid DNS label of 3-63 characters
        """
        normalized = value.strip().lower()
        if not _SLUG_PATTERN.match(normalized):
            raise ValueError(
                f"Invalid subdomain '{value}': use 3-63 lower-case letters, "
                "digits or hyphens, not starting or ending with a hyphen"
            )
        return cls(value=normalized)


class TeamMemberStatus(StrEnum):
    """Lifecycle state of a team membership."""

    PENDING = "pending"
    ACTIVE = "active"


class TeamPermission(StrEnum):
    """Coarse permissions granted to team members by role."""

    VIEW_PROPERTIES = "view_properties"
    MANAGE_TENANTS = "manage_tenants"
    MANAGE_MAINTENANCE = "manage_maintenance"
    MANAGE_FINANCES = "manage_finances"
    MANAGE_TEAM = "manage_team"


DEFAULT_PERMISSIONS: dict[TeamRole, tuple[TeamPermission, ...]] = {
    TeamRole.OWNER: (
        TeamPermission.VIEW_PROPERTIES,
        TeamPermission.MANAGE_TENANTS,
        TeamPermission.MANAGE_MAINTENANCE,
        TeamPermission.MANAGE_FINANCES,
        TeamPermission.MANAGE_TEAM,
    ),
    TeamRole.ADMIN: (
        TeamPermission.VIEW_PROPERTIES,
        TeamPermission.MANAGE_TENANTS,
        TeamPermission.MANAGE_MAINTENANCE,
        TeamPermission.MANAGE_FINANCES,
    ),
    TeamRole.MEMBER: (
        TeamPermission.VIEW_PROPERTIES,
        TeamPermission.MANAGE_MAINTENANCE,
    ),
}


class ApplicationStatus(StrEnum):
    """Review state of a rental application."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"
