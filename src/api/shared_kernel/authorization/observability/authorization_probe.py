"""Domain probe for authorization decisions.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to guard evaluations at the request
boundary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class AuthorizationProbe(Protocol):
    """Domain probe for authorization decisions."""

    def access_granted(
        self,
        capability: str,
        tenant_id: str | None,
        user_id: str | None,
    ) -> None:
        """Record that a capability check was allowed."""
        ...

    def access_denied(
        self,
        capability: str,
        tenant_id: str | None,
        user_id: str | None,
        reason_code: str,
    ) -> None:
        """Record that a capability check was denied."""
        ...

    def malformed_capability(
        self,
        capability: str,
        tenant_id: str | None,
        error: Exception,
    ) -> None:
        """Record that a capability check was requested with missing parameters."""
        ...

    def with_context(self, context: ObservationContext) -> AuthorizationProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAuthorizationProbe:
    """Default implementation of AuthorizationProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultAuthorizationProbe:
        """Create a new probe with observation context bound."""
        return DefaultAuthorizationProbe(logger=self._logger, context=context)

    def access_granted(
        self,
        capability: str,
        tenant_id: str | None,
        user_id: str | None,
    ) -> None:
        """Record that a capability check was allowed."""
        self._logger.debug(
            "authorization_access_granted",
            capability=capability,
            tenant_id=tenant_id,
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def access_denied(
        self,
        capability: str,
        tenant_id: str | None,
        user_id: str | None,
        reason_code: str,
    ) -> None:
        """Record that a capability check was denied."""
        self._logger.warning(
            "authorization_access_denied",
            capability=capability,
            tenant_id=tenant_id,
            user_id=user_id,
            reason_code=reason_code,
            **self._get_context_kwargs(),
        )

    def malformed_capability(
        self,
        capability: str,
        tenant_id: str | None,
        error: Exception,
    ) -> None:
        """Record that a capability check was requested with missing parameters."""
        self._logger.error(
            "authorization_malformed_capability",
            capability=capability,
            tenant_id=tenant_id,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
