"""Domain probes for tenancy repository operations.

Following Domain-Oriented Observability patterns, these probes capture
domain-significant events related to tenant and team member persistence.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenantRepositoryProbe(Protocol):
    """Domain probe for tenant repository operations."""

    def tenant_saved(self, tenant_id: str, slug: str) -> None:
        """Record that a tenant was successfully saved."""
        ...

    def tenant_not_found(self, slug: str) -> None:
        """Record that no tenant matches a slug."""
        ...

    def duplicate_tenant_slug(self, slug: str) -> None:
        """Record that a duplicate slug was detected."""
        ...

    def with_context(self, context: ObservationContext) -> TenantRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class TeamMemberRepositoryProbe(Protocol):
    """Domain probe for team member repository operations."""

    def member_saved(self, member_id: str, tenant_id: str) -> None:
        """Record that a membership was successfully saved."""
        ...

    def member_deleted(self, member_id: str, tenant_id: str) -> None:
        """Record that a membership was deleted."""
        ...

    def duplicate_membership(self, tenant_id: str, user_id: str | None) -> None:
        """Record that a user already belongs to the tenant."""
        ...

    def with_context(self, context: ObservationContext) -> TeamMemberRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantRepositoryProbe:
    """Default implementation of TenantRepositoryProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultTenantRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultTenantRepositoryProbe(logger=self._logger, context=context)

    def tenant_saved(self, tenant_id: str, slug: str) -> None:
        """Record that a tenant was successfully saved."""
        self._logger.info(
            "tenant_saved",
            tenant_id=tenant_id,
            slug=slug,
            **self._get_context_kwargs(),
        )

    def tenant_not_found(self, slug: str) -> None:
        """Record that no tenant matches a slug."""
        self._logger.debug(
            "tenant_slug_not_found",
            slug=slug,
            **self._get_context_kwargs(),
        )

    def duplicate_tenant_slug(self, slug: str) -> None:
        """Record that a duplicate slug was detected."""
        self._logger.warning(
            "duplicate_tenant_slug",
            slug=slug,
            **self._get_context_kwargs(),
        )


class DefaultTeamMemberRepositoryProbe:
    """Default implementation of TeamMemberRepositoryProbe using structlog."""

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
    ) -> DefaultTeamMemberRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultTeamMemberRepositoryProbe(logger=self._logger, context=context)

    def member_saved(self, member_id: str, tenant_id: str) -> None:
        """Record that a membership was successfully saved."""
        self._logger.info(
            "team_member_saved",
            member_id=member_id,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def member_deleted(self, member_id: str, tenant_id: str) -> None:
        """Record that a membership was deleted."""
        self._logger.info(
            "team_member_deleted",
            member_id=member_id,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def duplicate_membership(self, tenant_id: str, user_id: str | None) -> None:
        """Record that a user already belongs to the tenant."""
        self._logger.warning(
            "duplicate_team_membership",
            tenant_id=tenant_id,
            user_id=user_id,
            **self._get_context_kwargs(),
        )
