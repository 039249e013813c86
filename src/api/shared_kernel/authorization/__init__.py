"""Authorization primitives for tenant-scoped access control.

This module provides the shared capability and decision types and the pure
authorization guard used by every bounded context.
"""

from shared_kernel.authorization.guard import MalformedCapabilityError, check
from shared_kernel.authorization.types import (
    AuthenticatedOnly,
    AuthorizationDecision,
    Capability,
    MembershipRole,
    ReasonCode,
    ResourceOwner,
    SuperAdminOnly,
    TenantAdmin,
    TenantMember,
)

__all__ = [
    "AuthenticatedOnly",
    "AuthorizationDecision",
    "Capability",
    "MalformedCapabilityError",
    "MembershipRole",
    "ReasonCode",
    "ResourceOwner",
    "SuperAdminOnly",
    "TenantAdmin",
    "TenantMember",
    "check",
]
