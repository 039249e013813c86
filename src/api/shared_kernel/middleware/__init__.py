"""Shared request-scoped values for cross-cutting concerns.

This module contains the tenant context value object shared across bounded
contexts. Resolution of the context from the Host header and session lives
in the tenancy bounded context.
"""

from shared_kernel.middleware.tenant_context import TenantContext

__all__ = ["TenantContext"]
