"""Unit tests for the property and rental application repositories."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from tenancy.domain.value_objects import ApplicationStatus, TenantId, UserId
from tenancy.infrastructure.models import PropertyModel, RentalApplicationModel
from tenancy.infrastructure.property_repository import (
    PropertyRepository,
    RentalApplicationRepository,
)
from tenancy.ports.repositories import (
    IPropertyRepository,
    IRentalApplicationRepository,
)

TENANT_ID = TenantId.from_string("01HZX3Q5Y8N6K2M4P7R9T1V3W5")


@pytest.fixture
def mock_session():
    """Create mock async session."""
    return AsyncMock()


def _result(value):
    result = MagicMock()
    result.scalar_one_or_none.return_value = value
    return result


class TestPropertyRepository:
    """Tests for PropertyRepository."""

    def test_implements_protocol(self, mock_session):
        """Repository should implement IPropertyRepository protocol."""
        assert isinstance(PropertyRepository(mock_session), IPropertyRepository)

    @pytest.mark.asyncio
    async def test_list_for_tenant(self, mock_session):
        """Should map every row of the tenant to a Property."""
        model = PropertyModel(
            id="01HZX3Q5Y8N6K2M4P7R9T1V3X0",
            tenant_id=TENANT_ID.value,
            slug="maple-court",
            name="Maple Court",
            address="1 Maple Court",
        )
        result = MagicMock()
        result.scalars.return_value.all.return_value = [model]
        mock_session.execute.return_value = result

        properties = await PropertyRepository(mock_session).list_for_tenant(TENANT_ID)

        assert len(properties) == 1
        assert properties[0].tenant_id == TENANT_ID
        assert properties[0].slug == "maple-court"

    @pytest.mark.asyncio
    async def test_get_by_slug_missing(self, mock_session):
        """Should return None when the slug is unknown in the tenant."""
        mock_session.execute.return_value = _result(None)

        assert await PropertyRepository(mock_session).get_by_slug(TENANT_ID, "x") is None


class TestRentalApplicationRepository:
    """Tests for RentalApplicationRepository."""

    def test_implements_protocol(self, mock_session):
        """Repository should implement IRentalApplicationRepository protocol."""
        repository = RentalApplicationRepository(mock_session)
        assert isinstance(repository, IRentalApplicationRepository)

    @pytest.mark.asyncio
    async def test_get_by_id_maps_model(self, mock_session):
        """Should map the stored row to a RentalApplication."""
        created = datetime(2026, 3, 1, tzinfo=UTC)
        model = RentalApplicationModel(
            id="01HZX3Q5Y8N6K2M4P7R9T1V3X1",
            tenant_id=TENANT_ID.value,
            applicant_id="renter-1",
            property_slug="maple-court",
            full_name="Robin Renter",
            email="robin@example.com",
            status="approved",
            created_at=created,
        )
        mock_session.execute.return_value = _result(model)

        application = await RentalApplicationRepository(mock_session).get_by_id(
            TENANT_ID, model.id
        )

        assert application is not None
        assert application.applicant_id == UserId("renter-1")
        assert application.status == ApplicationStatus.APPROVED
        assert application.created_at == created

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, mock_session):
        """Should return None when the id is unknown in the tenant."""
        mock_session.execute.return_value = _result(None)

        result = await RentalApplicationRepository(mock_session).get_by_id(
            TENANT_ID, "01HZX3Q5Y8N6K2M4P7R9T1V3X1"
        )

        assert result is None
