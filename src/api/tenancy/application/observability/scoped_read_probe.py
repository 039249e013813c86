"""Protocol for observability of tenant-scoped reads.

Covers the property and rental application services, whose reads are
always filtered by the resolved tenant.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ScopedReadProbe(Protocol):
    """Domain probe for tenant-scoped read operations."""

    def resources_listed(self, resource: str, tenant_id: str, count: int) -> None:
        """Record that a tenant's resources were listed."""
        ...

    def resource_retrieved(self, resource: str, tenant_id: str, key: str) -> None:
        """Record that a single resource was retrieved."""
        ...

    def resource_not_found(self, resource: str, tenant_id: str, key: str) -> None:
        """Record that a resource does not exist within the tenant."""
        ...

    def with_context(self, context: ObservationContext) -> ScopedReadProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultScopedReadProbe:
    """Default implementation of ScopedReadProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultScopedReadProbe:
        """Create a new probe with observation context bound."""
        return DefaultScopedReadProbe(logger=self._logger, context=context)

    def resources_listed(self, resource: str, tenant_id: str, count: int) -> None:
        self._logger.debug(
            "scoped_resources_listed",
            resource=resource,
            tenant_id=tenant_id,
            count=count,
            **self._get_context_kwargs(),
        )

    def resource_retrieved(self, resource: str, tenant_id: str, key: str) -> None:
        self._logger.debug(
            "scoped_resource_retrieved",
            resource=resource,
            tenant_id=tenant_id,
            key=key,
            **self._get_context_kwargs(),
        )

    def resource_not_found(self, resource: str, tenant_id: str, key: str) -> None:
        self._logger.debug(
            "scoped_resource_not_found",
            resource=resource,
            tenant_id=tenant_id,
            key=key,
            **self._get_context_kwargs(),
        )
