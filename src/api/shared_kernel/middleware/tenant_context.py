"""Tenant context value object for the current request.

This module contains the pure value object that represents the resolved
tenant and identity of a request. It is framework-agnostic and contains no
business logic, making it safe for the shared kernel.

The resolution logic (host parsing, tenant lookup by slug, owner and
membership lookups) lives in the tenancy bounded context.
"""

from __future__ import annotations

from dataclasses import dataclass

from shared_kernel.auth.identity import SessionIdentity
from shared_kernel.authorization.types import MembershipRole


@dataclass(frozen=True)
class TenantContext:
    """Resolved tenant context for the current request.

    Constructed once per request and discarded at the end of it. Every
    authorization decision is a pure function of this value.

    Attributes:
        tenant_id: The resolved tenant identifier, or None for the root
            application domain.
        identity: The session identity (anonymous when no session).
        is_owner: Whether the identity owns the resolved tenant.
        membership_role: The identity's active team membership role on the
            resolved tenant, if any.
    """

    tenant_id: str | None
    identity: SessionIdentity
    is_owner: bool = False
    membership_role: MembershipRole | None = None

    @classmethod
    def root(cls, identity: SessionIdentity | None = None) -> TenantContext:
        """Create a context for the root application domain."""
        return cls(tenant_id=None, identity=identity or SessionIdentity.anonymous())

    @property
    def is_root(self) -> bool:
        """Whether the request is not scoped to any tenant."""
        return self.tenant_id is None

    @property
    def user_id(self) -> str | None:
        """Shortcut for the identity's user id."""
        return self.identity.user_id
