"""Protocol for team application service observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TeamServiceProbe(Protocol):
    """Domain probe for team management operations."""

    def members_listed(self, tenant_id: str, count: int) -> None:
        """Record that a tenant's team was listed."""
        ...

    def member_invited(self, tenant_id: str, member_id: str, role: str) -> None:
        """Record that an invitation was issued."""
        ...

    def invitation_accepted(self, tenant_id: str, member_id: str, user_id: str) -> None:
        """Record that an invitation was accepted."""
        ...

    def invitation_rejected(self, tenant_id: str | None, reason: str) -> None:
        """Record that an invitation could not be accepted."""
        ...

    def member_role_changed(self, tenant_id: str, member_id: str, role: str) -> None:
        """Record that a member's role was changed."""
        ...

    def member_removed(self, tenant_id: str, member_id: str) -> None:
        """Record that a member was removed from the team."""
        ...

    def owner_modification_blocked(self, tenant_id: str, member_id: str) -> None:
        """Record an attempt to demote or remove the owner membership."""
        ...

    def with_context(self, context: ObservationContext) -> TeamServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTeamServiceProbe:
    """Default implementation of TeamServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultTeamServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultTeamServiceProbe(logger=self._logger, context=context)

    def members_listed(self, tenant_id: str, count: int) -> None:
        self._logger.debug(
            "team_members_listed",
            tenant_id=tenant_id,
            count=count,
            **self._get_context_kwargs(),
        )

    def member_invited(self, tenant_id: str, member_id: str, role: str) -> None:
        self._logger.info(
            "team_member_invited",
            tenant_id=tenant_id,
            member_id=member_id,
            role=role,
            **self._get_context_kwargs(),
        )

    def invitation_accepted(self, tenant_id: str, member_id: str, user_id: str) -> None:
        self._logger.info(
            "team_invitation_accepted",
            tenant_id=tenant_id,
            member_id=member_id,
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def invitation_rejected(self, tenant_id: str | None, reason: str) -> None:
        self._logger.warning(
            "team_invitation_rejected",
            tenant_id=tenant_id,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def member_role_changed(self, tenant_id: str, member_id: str, role: str) -> None:
        self._logger.info(
            "team_member_role_changed",
            tenant_id=tenant_id,
            member_id=member_id,
            role=role,
            **self._get_context_kwargs(),
        )

    def member_removed(self, tenant_id: str, member_id: str) -> None:
        self._logger.info(
            "team_member_removed",
            tenant_id=tenant_id,
            member_id=member_id,
            **self._get_context_kwargs(),
        )

    def owner_modification_blocked(self, tenant_id: str, member_id: str) -> None:
        self._logger.warning(
            "team_owner_modification_blocked",
            tenant_id=tenant_id,
            member_id=member_id,
            **self._get_context_kwargs(),
        )
