"""Fixtures for tenancy route tests.

Routes are exercised through a bare FastAPI app that includes the tenancy
router, with the tenant context and application services overridden.
"""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.application.services import (
    PropertyService,
    RentalApplicationService,
    TeamService,
    TenantService,
)


@pytest.fixture
def mock_tenant_service() -> AsyncMock:
    """Mock TenantService for testing."""
    return AsyncMock(spec=TenantService)


@pytest.fixture
def mock_team_service() -> AsyncMock:
    """Mock TeamService for testing."""
    return AsyncMock(spec=TeamService)


@pytest.fixture
def mock_property_service() -> AsyncMock:
    """Mock PropertyService for testing."""
    return AsyncMock(spec=PropertyService)


@pytest.fixture
def mock_application_service() -> AsyncMock:
    """Mock RentalApplicationService for testing."""
    return AsyncMock(spec=RentalApplicationService)


@pytest.fixture
def make_client(
    mock_tenant_service: AsyncMock,
    mock_team_service: AsyncMock,
    mock_property_service: AsyncMock,
    mock_application_service: AsyncMock,
) -> Callable[[TenantContext], TestClient]:
    """Create a TestClient whose requests resolve to the given context."""
    from tenancy.dependencies.services import (
        get_property_service,
        get_rental_application_service,
        get_team_service,
        get_tenant_service,
    )
    from tenancy.dependencies.tenant_context import get_tenant_context
    from tenancy.presentation import router

    def _make(context: TenantContext) -> TestClient:
        app = FastAPI()

        app.dependency_overrides[get_tenant_context] = lambda: context
        app.dependency_overrides[get_tenant_service] = lambda: mock_tenant_service
        app.dependency_overrides[get_team_service] = lambda: mock_team_service
        app.dependency_overrides[get_property_service] = lambda: mock_property_service
        app.dependency_overrides[get_rental_application_service] = (
            lambda: mock_application_service
        )

        app.include_router(router)
        return TestClient(app)

    return _make
