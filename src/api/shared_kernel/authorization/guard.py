"""Authorization guard.

A single pure decision function that every boundary handler calls instead of
re-deriving role checks. The guard performs no I/O: owner and membership
lookups happen while the tenant context is assembled, so a decision depends
only on the context and the requested capability.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

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

if TYPE_CHECKING:
    from shared_kernel.middleware.tenant_context import TenantContext

_ADMIN_ROLES = frozenset({MembershipRole.OWNER, MembershipRole.ADMIN})


class MalformedCapabilityError(Exception):
    """Raised when a capability check is requested with missing parameters.

    This is a caller defect (for example, asking for ``TenantAdmin`` on a
    request that resolved no tenant), not an authorization denial. It must
    never be swallowed.
    """

    reason_code = ReasonCode.MALFORMED_REQUEST

    def __init__(self, capability: Capability, message: str) -> None:
        super().__init__(f"{type(capability).__name__}: {message}")
        self.capability = capability


def check(context: TenantContext, capability: Capability) -> AuthorizationDecision:
    """Decide whether the request described by ``context`` holds ``capability``.

    Args:
        context: The immutable tenant context of the request
        capability: The capability required by the handler

    Returns:
        AuthorizationDecision with a reason code on denial

    Raises:
        MalformedCapabilityError: If the capability lacks a required id, or a
            tenant capability is evaluated without a resolved tenant
    """
    identity = context.identity

    match capability:
        case SuperAdminOnly():
            if identity.is_super_admin:
                return AuthorizationDecision.allow()
            if not identity.is_authenticated:
                return AuthorizationDecision.deny(ReasonCode.UNAUTHENTICATED)
            return AuthorizationDecision.deny(ReasonCode.FORBIDDEN)

        case AuthenticatedOnly():
            if identity.is_authenticated:
                return AuthorizationDecision.allow()
            return AuthorizationDecision.deny(ReasonCode.UNAUTHENTICATED)

        case TenantAdmin(tenant_id=tenant_id):
            _require_tenant_scope(context, capability, tenant_id)
            if not identity.is_authenticated:
                return AuthorizationDecision.deny(ReasonCode.UNAUTHENTICATED)
            if _applies_to(context, tenant_id) and (
                context.is_owner or context.membership_role in _ADMIN_ROLES
            ):
                return AuthorizationDecision.allow()
            return AuthorizationDecision.deny(ReasonCode.NOT_TENANT_MEMBER)

        case TenantMember(tenant_id=tenant_id):
            _require_tenant_scope(context, capability, tenant_id)
            if not identity.is_authenticated:
                return AuthorizationDecision.deny(ReasonCode.UNAUTHENTICATED)
            if _applies_to(context, tenant_id) and (
                context.is_owner or context.membership_role is not None
            ):
                return AuthorizationDecision.allow()
            return AuthorizationDecision.deny(ReasonCode.NOT_TENANT_MEMBER)

        case ResourceOwner(resource_owner_id=resource_owner_id):
            if resource_owner_id is None:
                raise MalformedCapabilityError(
                    capability, "a resource owner id is required"
                )
            if not identity.is_authenticated:
                return AuthorizationDecision.deny(ReasonCode.UNAUTHENTICATED)
            if identity.user_id == resource_owner_id:
                return AuthorizationDecision.allow()
            return AuthorizationDecision.deny(ReasonCode.FORBIDDEN)

    return AuthorizationDecision.deny(ReasonCode.FORBIDDEN)


def _require_tenant_scope(
    context: TenantContext,
    capability: Capability,
    tenant_id: str | None,
) -> None:
    """Fail fast when a tenant capability cannot be evaluated."""
    if tenant_id is None:
        raise MalformedCapabilityError(capability, "a tenant id is required")
    if context.tenant_id is None:
        raise MalformedCapabilityError(
            capability, "no tenant was resolved for this request"
        )


def _applies_to(context: TenantContext, tenant_id: str | None) -> bool:
    """Owner and membership facts only describe the context's own tenant."""
    return context.tenant_id == tenant_id
