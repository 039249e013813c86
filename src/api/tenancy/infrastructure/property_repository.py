"""PostgreSQL implementations of the tenant-scoped read repositories.

Both repositories take the tenant id as a mandatory filter; there is no
unscoped read path.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tenancy.domain.aggregates import Property, RentalApplication
from tenancy.domain.value_objects import ApplicationStatus, TenantId, UserId
from tenancy.infrastructure.models import PropertyModel, RentalApplicationModel
from tenancy.ports.repositories import (
    IPropertyRepository,
    IRentalApplicationRepository,
)


class PropertyRepository(IPropertyRepository):
    """Repository reading a tenant's properties from PostgreSQL."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_for_tenant(self, tenant_id: TenantId) -> list[Property]:
        stmt = (
            select(PropertyModel)
            .where(PropertyModel.tenant_id == tenant_id.value)
            .order_by(PropertyModel.name)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def get_by_slug(self, tenant_id: TenantId, slug: str) -> Property | None:
        stmt = select(PropertyModel).where(
            PropertyModel.tenant_id == tenant_id.value,
            PropertyModel.slug == slug,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    @staticmethod
    def _to_domain(model: PropertyModel) -> Property:
        return Property(
            id=model.id,
            tenant_id=TenantId(value=model.tenant_id),
            slug=model.slug,
            name=model.name,
            address=model.address,
        )


class RentalApplicationRepository(IRentalApplicationRepository):
    """Repository reading rental applications from PostgreSQL."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(
        self, tenant_id: TenantId, application_id: str
    ) -> RentalApplication | None:
        stmt = select(RentalApplicationModel).where(
            RentalApplicationModel.tenant_id == tenant_id.value,
            RentalApplicationModel.id == application_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return RentalApplication(
            id=model.id,
            tenant_id=TenantId(value=model.tenant_id),
            applicant_id=UserId(value=model.applicant_id),
            property_slug=model.property_slug,
            full_name=model.full_name,
            email=model.email,
            status=ApplicationStatus(model.status),
            created_at=model.created_at,
        )
