"""Domain probe for tenant context resolution.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to resolving a request's host into a
tenant context.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenantContextProbe(Protocol):
    """Domain probe for tenant context resolution operations."""

    def root_context_resolved(self, host: str) -> None:
        """Record that the host resolved to the root application context."""
        ...

    def reserved_subdomain_ignored(self, host: str, slug: str) -> None:
        """Record that a reserved subdomain was treated as the root context."""
        ...

    def tenant_resolved(
        self,
        slug: str,
        tenant_id: str,
        user_id: str | None,
        is_owner: bool,
        membership_role: str | None,
    ) -> None:
        """Record that a tenant context was assembled for a subdomain."""
        ...

    def tenant_not_found(self, slug: str) -> None:
        """Record that no tenant matches the requested subdomain."""
        ...

    def tenant_disabled(self, slug: str, tenant_id: str) -> None:
        """Record that the requested tenant exists but is disabled."""
        ...

    def tenant_lookup_timed_out(self, slug: str, timeout_seconds: float) -> None:
        """Record that tenant or membership lookups exceeded the timeout."""
        ...

    def with_context(self, context: ObservationContext) -> TenantContextProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantContextProbe:
    """Default implementation of TenantContextProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultTenantContextProbe:
        """Create a new probe with observation context bound."""
        return DefaultTenantContextProbe(logger=self._logger, context=context)

    def root_context_resolved(self, host: str) -> None:
        """Record that the host resolved to the root application context."""
        self._logger.debug(
            "tenant_context_root_resolved",
            host=host,
            **self._get_context_kwargs(),
        )

    def reserved_subdomain_ignored(self, host: str, slug: str) -> None:
        """Record that a reserved subdomain was treated as the root context."""
        self._logger.debug(
            "tenant_context_reserved_subdomain",
            host=host,
            slug=slug,
            **self._get_context_kwargs(),
        )

    def tenant_resolved(
        self,
        slug: str,
        tenant_id: str,
        user_id: str | None,
        is_owner: bool,
        membership_role: str | None,
    ) -> None:
        """Record that a tenant context was assembled for a subdomain."""
        self._logger.debug(
            "tenant_context_resolved",
            slug=slug,
            tenant_id=tenant_id,
            user_id=user_id,
            is_owner=is_owner,
            membership_role=membership_role,
            **self._get_context_kwargs(),
        )

    def tenant_not_found(self, slug: str) -> None:
        """Record that no tenant matches the requested subdomain."""
        self._logger.warning(
            "tenant_context_tenant_not_found",
            slug=slug,
            **self._get_context_kwargs(),
        )

    def tenant_disabled(self, slug: str, tenant_id: str) -> None:
        """Record that the requested tenant exists but is disabled."""
        self._logger.warning(
            "tenant_context_tenant_disabled",
            slug=slug,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def tenant_lookup_timed_out(self, slug: str, timeout_seconds: float) -> None:
        """Record that tenant or membership lookups exceeded the timeout."""
        self._logger.error(
            "tenant_context_lookup_timed_out",
            slug=slug,
            timeout_seconds=timeout_seconds,
            **self._get_context_kwargs(),
        )
