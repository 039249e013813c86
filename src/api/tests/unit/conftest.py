"""Unit test fixtures with mocked dependencies."""

from unittest.mock import AsyncMock, Mock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from shared_kernel.auth.identity import SessionIdentity, SessionRole
from shared_kernel.authorization.types import MembershipRole
from shared_kernel.middleware.tenant_context import TenantContext

TENANT_ID = "01HZX3Q5Y8N6K2M4P7R9T1V3W5"
OTHER_TENANT_ID = "01HZX3Q5Y8N6K2M4P7R9T1V3W6"


@pytest.fixture
def mock_db_settings():
    """Provide test database settings."""
    from infrastructure.settings import DatabaseSettings

    return DatabaseSettings(
        host="testhost",
        port=5432,
        database="testdb",
        username="testuser",
        password="testpass",
    )


@pytest.fixture
def mock_session():
    """Mock AsyncSession whose begin() works as an async context manager."""
    session = Mock(spec=AsyncSession)

    ctx_manager = AsyncMock()
    ctx_manager.__aenter__ = AsyncMock(return_value=None)
    ctx_manager.__aexit__ = AsyncMock(return_value=None)

    session.begin = Mock(return_value=ctx_manager)
    return session


@pytest.fixture
def anonymous_root_context():
    """Root-domain context without a session."""
    return TenantContext.root()


@pytest.fixture
def owner_context():
    """Context of the tenant's owner on the tenant's subdomain."""
    return TenantContext(
        tenant_id=TENANT_ID,
        identity=SessionIdentity(user_id="owner-1", role=SessionRole.LANDLORD_OWNER),
        is_owner=True,
        membership_role=MembershipRole.OWNER,
    )


@pytest.fixture
def admin_context():
    """Context of a team admin on the tenant's subdomain."""
    return TenantContext(
        tenant_id=TENANT_ID,
        identity=SessionIdentity(user_id="admin-1", role=SessionRole.TEAM_ADMIN),
        membership_role=MembershipRole.ADMIN,
    )


@pytest.fixture
def member_context():
    """Context of a plain team member on the tenant's subdomain."""
    return TenantContext(
        tenant_id=TENANT_ID,
        identity=SessionIdentity(user_id="member-1", role=SessionRole.TEAM_MEMBER),
        membership_role=MembershipRole.MEMBER,
    )


@pytest.fixture
def renter_context():
    """Context of a signed-in renter with no team membership."""
    return TenantContext(
        tenant_id=TENANT_ID,
        identity=SessionIdentity(user_id="renter-1", role=SessionRole.TENANT),
    )


@pytest.fixture
def anonymous_tenant_context():
    """Tenant subdomain request without a session."""
    return TenantContext(tenant_id=TENANT_ID, identity=SessionIdentity.anonymous())


@pytest.fixture
def super_admin_context():
    """Root-domain context of a platform super-admin."""
    return TenantContext.root(
        SessionIdentity(user_id="root-1", role=SessionRole.SUPER_ADMIN)
    )
