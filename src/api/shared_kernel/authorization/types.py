"""Authorization type definitions.

Defines the capabilities a caller can require, the reason codes attached to
denials, and the decision value returned by the guard. These types are
plain data so that every bounded context can share them without pulling in
a framework.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class MembershipRole(StrEnum):
    """Role of a user within a single tenant's team.

    The owner is the landlord who onboarded the tenant and holds every
    privilege an admin holds.
    """

    OWNER = "owner"
    ADMIN = "admin"
    MEMBER = "member"


class ReasonCode(StrEnum):
    """Reason attached to a denied (or malformed) authorization request.

    Each value maps to a distinct outcome at the HTTP boundary.
    """

    UNAUTHENTICATED = "Unauthenticated"
    NOT_TENANT_MEMBER = "NotTenantMember"
    FORBIDDEN = "Forbidden"
    TENANT_NOT_FOUND = "TenantNotFound"
    MALFORMED_REQUEST = "MalformedRequest"


@dataclass(frozen=True)
class SuperAdminOnly:
    """Requires the platform super-admin role. Tenant scope is irrelevant."""


@dataclass(frozen=True)
class AuthenticatedOnly:
    """Requires any signed-in user."""


@dataclass(frozen=True)
class TenantAdmin:
    """Requires ownership of, or an admin membership on, the given tenant."""

    tenant_id: str | None


@dataclass(frozen=True)
class TenantMember:
    """Requires ownership of, or any membership on, the given tenant."""

    tenant_id: str | None


@dataclass(frozen=True)
class ResourceOwner:
    """Requires the caller to be the user that owns a resource.

    Used for tenant-user self-service resources such as a rental
    application submitted by the caller.
    """

    resource_owner_id: str | None


Capability = SuperAdminOnly | AuthenticatedOnly | TenantAdmin | TenantMember | ResourceOwner


@dataclass(frozen=True)
class AuthorizationDecision:
    """Outcome of an authorization check.

    Attributes:
        allowed: Whether the request may proceed.
        reason_code: Why the request was denied; None when allowed.
    """

    allowed: bool
    reason_code: ReasonCode | None = None

    @classmethod
    def allow(cls) -> AuthorizationDecision:
        """Create an allowing decision."""
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason_code: ReasonCode) -> AuthorizationDecision:
        """Create a denying decision with the given reason."""
        return cls(allowed=False, reason_code=reason_code)
