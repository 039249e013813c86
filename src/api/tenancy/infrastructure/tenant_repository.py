"""PostgreSQL implementation of ITenantRepository.

Tenants are looked up by slug on every tenant-scoped request, so slugs are
stored lower-cased and matched against a lower-cased query value.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tenancy.domain.aggregates import Tenant
from tenancy.domain.value_objects import TenantId, TenantSlug, UserId
from tenancy.infrastructure.models import TenantModel
from tenancy.infrastructure.observability import (
    DefaultTenantRepositoryProbe,
    TenantRepositoryProbe,
)
from tenancy.ports.exceptions import DuplicateTenantSlugError
from tenancy.ports.repositories import ITenantRepository


class TenantRepository(ITenantRepository):
    """Repository managing PostgreSQL storage for Tenant aggregates."""

    def __init__(
        self,
        session: AsyncSession,
        probe: TenantRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultTenantRepositoryProbe()

    async def save(self, tenant: Tenant) -> None:
        """Persist tenant metadata to PostgreSQL.

        Raises:
            DuplicateTenantSlugError: If the slug already belongs to another tenant
        """
        stmt = select(TenantModel.id).where(
            TenantModel.slug == tenant.slug.value,
            TenantModel.id != tenant.id.value,
        )
        result = await self._session.execute(stmt)
        if result.scalar_one_or_none() is not None:
            self._probe.duplicate_tenant_slug(tenant.slug.value)
            raise DuplicateTenantSlugError(
                f"Subdomain '{tenant.slug.value}' is already taken"
            )

        try:
            stmt = select(TenantModel).where(TenantModel.id == tenant.id.value)
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

            if model:
                # Slug and owner never change after onboarding
                model.name = tenant.name
                model.is_disabled = tenant.is_disabled
            else:
                model = TenantModel(
                    id=tenant.id.value,
                    slug=tenant.slug.value,
                    name=tenant.name,
                    owner_user_id=tenant.owner_user_id.value,
                    is_disabled=tenant.is_disabled,
                )
                self._session.add(model)

            await self._session.flush()
            self._probe.tenant_saved(tenant.id.value, tenant.slug.value)

        except IntegrityError as e:
            if "uq_tenants_slug" in str(e):
                self._probe.duplicate_tenant_slug(tenant.slug.value)
                raise DuplicateTenantSlugError(
                    f"Subdomain '{tenant.slug.value}' is already taken"
                ) from e
            raise

    async def get_by_id(self, tenant_id: TenantId) -> Tenant | None:
        """Fetch a tenant by ID."""
        stmt = select(TenantModel).where(TenantModel.id == tenant_id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None
        return self._to_domain(model)

    async def find_by_slug(self, slug: str) -> Tenant | None:
        """Fetch a tenant by subdomain slug, case-insensitively."""
        stmt = select(TenantModel).where(TenantModel.slug == slug.lower())
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.tenant_not_found(slug)
            return None
        return self._to_domain(model)

    async def is_owner(self, tenant_id: TenantId, user_id: UserId) -> bool:
        """Check whether the user owns the tenant."""
        stmt = select(TenantModel.id).where(
            TenantModel.id == tenant_id.value,
            TenantModel.owner_user_id == user_id.value,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def list_all(self) -> list[Tenant]:
        """Fetch all tenants ordered by slug."""
        stmt = select(TenantModel).order_by(TenantModel.slug)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _to_domain(model: TenantModel) -> Tenant:
        return Tenant(
            id=TenantId(value=model.id),
            slug=TenantSlug(value=model.slug),
            name=model.name,
            owner_user_id=UserId(value=model.owner_user_id),
            is_disabled=model.is_disabled,
        )
