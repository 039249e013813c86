"""Property entity for the tenancy context."""

from __future__ import annotations

from dataclasses import dataclass

from tenancy.domain.value_objects import TenantId


@dataclass
class Property:
    """A rental property listed by a tenant.

    Properties are tenant-owned: every read is scoped by the owning
    tenant's id, and a property is never visible from another subdomain.
    """

    id: str
    tenant_id: TenantId
    slug: str
    name: str
    address: str
