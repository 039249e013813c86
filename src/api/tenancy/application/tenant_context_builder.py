"""Tenant context assembly.

Combines the slug resolved from the Host header with the session identity
into an immutable TenantContext. All data-layer lookups the authorization
guard depends on (tenant by slug, ownership, membership) happen here, so
the guard itself stays free of I/O.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable

from shared_kernel.auth.identity import SessionIdentity
from shared_kernel.middleware.observability import (
    DefaultTenantContextProbe,
    TenantContextProbe,
)
from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.application.host_resolver import is_reserved, resolve
from tenancy.domain.aggregates import Tenant
from tenancy.domain.value_objects import UserId
from tenancy.ports.exceptions import TenantNotFoundError
from tenancy.ports.repositories import ITeamMemberRepository, ITenantRepository


class TenantContextBuilder:
    """Builds the per-request TenantContext.

    A slug that matches no enabled tenant is terminal: the builder raises
    TenantNotFoundError and never falls back to the root context.
    """

    def __init__(
        self,
        tenant_repository: ITenantRepository,
        team_member_repository: ITeamMemberRepository,
        root_domain: str,
        reserved_subdomains: Iterable[str] = ("www",),
        lookup_timeout_seconds: float | None = None,
        probe: TenantContextProbe | None = None,
    ):
        """Initialize the builder.

        Args:
            tenant_repository: Lookup of tenants by slug and ownership
            team_member_repository: Lookup of active memberships
            root_domain: Root application domain used to resolve hosts
            reserved_subdomains: Subdomains served as the root application
            lookup_timeout_seconds: Upper bound for all lookups of one
                request, or None for no bound
            probe: Optional domain probe for observability
        """
        self._tenant_repository = tenant_repository
        self._team_member_repository = team_member_repository
        self._root_domain = root_domain
        self._reserved = tuple(reserved_subdomains)
        self._timeout = lookup_timeout_seconds
        self._probe = probe or DefaultTenantContextProbe()

    async def from_host(self, host: str, identity: SessionIdentity) -> TenantContext:
        """Resolve the Host header and assemble the request's context.

        Raises:
            TenantNotFoundError: If the subdomain names no enabled tenant
            TimeoutError: If the lookups exceed the configured timeout
        """
        slug = resolve(host, self._root_domain)
        if slug is None:
            self._probe.root_context_resolved(host=host)
            return TenantContext.root(identity)

        if is_reserved(slug, self._reserved):
            self._probe.reserved_subdomain_ignored(host=host, slug=slug)
            return TenantContext.root(identity)

        return await self.build(slug, identity)

    async def build(self, slug: str, identity: SessionIdentity) -> TenantContext:
        """Assemble the context for a tenant slug.

        Args:
            slug: Slug produced by the host resolver
            identity: Session identity of the request

        Returns:
            TenantContext with ownership and membership resolved

        Raises:
            TenantNotFoundError: If no enabled tenant has this slug
            TimeoutError: If the lookups exceed the configured timeout
        """
        try:
            async with asyncio.timeout(self._timeout):
                tenant = await self._find_enabled_tenant(slug)
                context = await self._assemble(tenant, identity)
        except TimeoutError:
            self._probe.tenant_lookup_timed_out(
                slug=slug, timeout_seconds=self._timeout or 0.0
            )
            raise

        self._probe.tenant_resolved(
            slug=slug,
            tenant_id=tenant.id.value,
            user_id=identity.user_id,
            is_owner=context.is_owner,
            membership_role=context.membership_role,
        )
        return context

    async def _find_enabled_tenant(self, slug: str) -> Tenant:
        tenant = await self._tenant_repository.find_by_slug(slug)
        if tenant is None:
            self._probe.tenant_not_found(slug=slug)
            raise TenantNotFoundError(slug)

        if tenant.is_disabled:
            self._probe.tenant_disabled(slug=slug, tenant_id=tenant.id.value)
            raise TenantNotFoundError(slug)

        return tenant

    async def _assemble(self, tenant: Tenant, identity: SessionIdentity) -> TenantContext:
        if identity.user_id is None:
            return TenantContext(tenant_id=tenant.id.value, identity=identity)

        user_id = UserId(identity.user_id)
        is_owner = await self._tenant_repository.is_owner(tenant.id, user_id)
        membership = await self._team_member_repository.find_membership(
            tenant.id, user_id
        )

        return TenantContext(
            tenant_id=tenant.id.value,
            identity=identity,
            is_owner=is_owner,
            membership_role=membership.role if membership is not None else None,
        )
