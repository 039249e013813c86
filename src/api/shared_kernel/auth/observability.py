"""Domain probe for session validation operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to session token validation.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class SessionValidatorProbe(Protocol):
    """Domain probe for session validation operations."""

    def session_validated(self, user_id: str, role: str) -> None:
        """Record that a session token was successfully validated."""
        ...

    def session_validation_failed(self, reason: str) -> None:
        """Record that session validation failed."""
        ...

    def session_missing(self) -> None:
        """Record that the request carried no session token."""
        ...

    def with_context(self, context: ObservationContext) -> SessionValidatorProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultSessionValidatorProbe:
    """Default implementation of SessionValidatorProbe using structlog."""

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

    def with_context(
        self, context: ObservationContext
    ) -> DefaultSessionValidatorProbe:
        """Create a new probe with observation context bound."""
        return DefaultSessionValidatorProbe(logger=self._logger, context=context)

    def session_validated(self, user_id: str, role: str) -> None:
        """Record that a session token was successfully validated."""
        self._logger.debug(
            "session_validated",
            user_id=user_id,
            role=role,
            **self._get_context_kwargs(),
        )

    def session_validation_failed(self, reason: str) -> None:
        """Record that session validation failed."""
        self._logger.warning(
            "session_validation_failed",
            reason=reason,
            **self._get_context_kwargs(),
        )

    def session_missing(self) -> None:
        """Record that the request carried no session token."""
        self._logger.debug(
            "session_missing",
            **self._get_context_kwargs(),
        )
