"""Guard enforcement for application services.

Services call ``require`` before touching any repository. Denials become
``UnauthorizedError`` carrying the guard's decision; malformed capability
checks are logged and propagated unchanged.
"""

from __future__ import annotations

from shared_kernel.authorization import Capability, MalformedCapabilityError, check
from shared_kernel.authorization.observability import (
    AuthorizationProbe,
    DefaultAuthorizationProbe,
)
from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.ports.exceptions import UnauthorizedError


def require(
    context: TenantContext,
    capability: Capability,
    probe: AuthorizationProbe | None = None,
) -> None:
    """Enforce a capability for the current request.

    Args:
        context: The request's tenant context
        capability: The capability the operation needs
        probe: Optional authorization probe

    Raises:
        UnauthorizedError: If the guard denies the capability
        MalformedCapabilityError: If the capability cannot be evaluated
    """
    probe = probe or DefaultAuthorizationProbe()
    capability_name = type(capability).__name__

    try:
        decision = check(context, capability)
    except MalformedCapabilityError as e:
        probe.malformed_capability(
            capability=capability_name,
            tenant_id=context.tenant_id,
            error=e,
        )
        raise

    if not decision.allowed:
        probe.access_denied(
            capability=capability_name,
            tenant_id=context.tenant_id,
            user_id=context.user_id,
            reason_code=str(decision.reason_code),
        )
        raise UnauthorizedError(decision)

    probe.access_granted(
        capability=capability_name,
        tenant_id=context.tenant_id,
        user_id=context.user_id,
    )
