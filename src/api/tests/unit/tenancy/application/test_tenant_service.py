"""Unit tests for TenantService."""

from unittest.mock import AsyncMock, Mock

import pytest

from shared_kernel.authorization import ReasonCode
from tenancy.application.observability import TenantServiceProbe
from tenancy.application.services import TenantService
from tenancy.domain.aggregates import Tenant
from tenancy.domain.value_objects import TeamRole, TenantId, TenantSlug, UserId
from tenancy.ports.exceptions import DuplicateTenantSlugError, UnauthorizedError
from tenancy.ports.repositories import ITeamMemberRepository, ITenantRepository


@pytest.fixture
def mock_tenant_repo():
    """Mock TenantRepository."""
    return Mock(spec=ITenantRepository)


@pytest.fixture
def mock_member_repo():
    """Mock TeamMemberRepository."""
    return Mock(spec=ITeamMemberRepository)


@pytest.fixture
def mock_probe():
    """Mock tenant service probe."""
    return Mock(spec=TenantServiceProbe)


@pytest.fixture
def tenant_service(mock_tenant_repo, mock_member_repo, mock_session, mock_probe):
    """Create TenantService with mocked dependencies."""
    return TenantService(
        tenant_repository=mock_tenant_repo,
        team_member_repository=mock_member_repo,
        session=mock_session,
        reserved_subdomains=["www", "api"],
        probe=mock_probe,
    )


def _tenant(slug: str = "acme") -> Tenant:
    return Tenant.create(
        slug=TenantSlug.from_string(slug),
        name="Acme Homes",
        owner_user_id=UserId("owner-1"),
    )


class TestOnboardTenant:
    """Tests for TenantService.onboard_tenant()."""

    @pytest.mark.asyncio
    async def test_creates_tenant_and_owner_membership(
        self, tenant_service, mock_tenant_repo, mock_member_repo, mock_session, renter_context
    ):
        """Test that onboarding saves the tenant and an owner membership."""
        tenant = await tenant_service.onboard_tenant(
            renter_context, slug="Acme", name="Acme Homes"
        )

        assert tenant.slug.value == "acme"
        assert tenant.owner_user_id == UserId("renter-1")
        mock_tenant_repo.save.assert_called_once_with(tenant)

        owner = mock_member_repo.save.call_args[0][0]
        assert owner.tenant_id == tenant.id
        assert owner.user_id == UserId("renter-1")
        assert owner.role == TeamRole.OWNER
        mock_session.begin.assert_called_once()

    @pytest.mark.asyncio
    async def test_anonymous_caller_is_rejected(
        self, tenant_service, mock_tenant_repo, anonymous_root_context
    ):
        """Test that onboarding requires a session."""
        with pytest.raises(UnauthorizedError) as exc_info:
            await tenant_service.onboard_tenant(
                anonymous_root_context, slug="acme", name="Acme"
            )

        assert exc_info.value.reason_code == ReasonCode.UNAUTHENTICATED
        mock_tenant_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_reserved_slug_is_rejected(
        self, tenant_service, mock_tenant_repo, renter_context
    ):
        """Test that reserved subdomains cannot be claimed."""
        with pytest.raises(ValueError, match="reserved"):
            await tenant_service.onboard_tenant(renter_context, slug="WWW", name="Web")

        mock_tenant_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_slug_is_rejected(self, tenant_service, renter_context):
        """Test that slugs must be valid DNS labels."""
        with pytest.raises(ValueError):
            await tenant_service.onboard_tenant(renter_context, slug="a.b", name="AB")

    @pytest.mark.asyncio
    async def test_duplicate_slug_propagates(
        self, tenant_service, mock_tenant_repo, mock_member_repo, mock_probe, renter_context
    ):
        """Test that a taken slug is reported and no membership is created."""
        mock_tenant_repo.save = AsyncMock(side_effect=DuplicateTenantSlugError("acme"))

        with pytest.raises(DuplicateTenantSlugError):
            await tenant_service.onboard_tenant(renter_context, slug="acme", name="Acme")

        mock_member_repo.save.assert_not_called()
        mock_probe.duplicate_tenant_slug.assert_called_once_with(slug="acme")
        mock_probe.tenant_onboarded.assert_not_called()


class TestGetCurrentTenant:
    """Tests for TenantService.get_current_tenant()."""

    @pytest.mark.asyncio
    async def test_returns_none_on_root(
        self, tenant_service, mock_tenant_repo, anonymous_root_context
    ):
        """Test that the root domain has no current tenant."""
        result = await tenant_service.get_current_tenant(anonymous_root_context)

        assert result is None
        mock_tenant_repo.get_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_returns_tenant_for_anonymous_visitor(
        self, tenant_service, mock_tenant_repo, anonymous_tenant_context
    ):
        """Test that the public profile needs no session."""
        tenant = _tenant()
        mock_tenant_repo.get_by_id = AsyncMock(return_value=tenant)

        result = await tenant_service.get_current_tenant(anonymous_tenant_context)

        assert result is tenant
        mock_tenant_repo.get_by_id.assert_called_once_with(
            TenantId.from_string(anonymous_tenant_context.tenant_id)
        )


class TestListAllTenants:
    """Tests for TenantService.list_all_tenants()."""

    @pytest.mark.asyncio
    async def test_super_admin_lists_tenants(
        self, tenant_service, mock_tenant_repo, mock_probe, super_admin_context
    ):
        """Test that super-admins see every tenant."""
        tenants = [_tenant("acme"), _tenant("bolt")]
        mock_tenant_repo.list_all = AsyncMock(return_value=tenants)

        result = await tenant_service.list_all_tenants(super_admin_context)

        assert result == tenants
        mock_probe.tenants_listed.assert_called_once_with(count=2)

    @pytest.mark.asyncio
    async def test_owner_is_forbidden(self, tenant_service, mock_tenant_repo, owner_context):
        """Test that tenant owners cannot list the platform's tenants."""
        with pytest.raises(UnauthorizedError) as exc_info:
            await tenant_service.list_all_tenants(owner_context)

        assert exc_info.value.reason_code == ReasonCode.FORBIDDEN
        mock_tenant_repo.list_all.assert_not_called()


class TestSetTenantDisabled:
    """Tests for TenantService.set_tenant_disabled()."""

    @pytest.mark.asyncio
    async def test_disables_tenant(
        self, tenant_service, mock_tenant_repo, mock_probe, super_admin_context
    ):
        """Test that a super-admin can disable a tenant."""
        tenant = _tenant()
        mock_tenant_repo.get_by_id = AsyncMock(return_value=tenant)

        result = await tenant_service.set_tenant_disabled(
            super_admin_context, tenant.id, disabled=True
        )

        assert result is tenant
        assert tenant.is_disabled is True
        mock_tenant_repo.save.assert_called_once_with(tenant)
        mock_probe.tenant_disabled.assert_called_once_with(tenant_id=tenant.id.value)

    @pytest.mark.asyncio
    async def test_enables_tenant(
        self, tenant_service, mock_tenant_repo, mock_probe, super_admin_context
    ):
        """Test that a disabled tenant can be re-enabled."""
        tenant = _tenant()
        tenant.disable()
        mock_tenant_repo.get_by_id = AsyncMock(return_value=tenant)

        await tenant_service.set_tenant_disabled(
            super_admin_context, tenant.id, disabled=False
        )

        assert tenant.is_disabled is False
        mock_probe.tenant_enabled.assert_called_once()

    @pytest.mark.asyncio
    async def test_missing_tenant_returns_none(
        self, tenant_service, mock_tenant_repo, super_admin_context
    ):
        """Test that an unknown tenant id yields None."""
        mock_tenant_repo.get_by_id = AsyncMock(return_value=None)

        result = await tenant_service.set_tenant_disabled(
            super_admin_context, TenantId.generate(), disabled=True
        )

        assert result is None
        mock_tenant_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_requires_super_admin(
        self, tenant_service, mock_tenant_repo, admin_context
    ):
        """Test that tenant admins cannot disable tenants."""
        with pytest.raises(UnauthorizedError):
            await tenant_service.set_tenant_disabled(
                admin_context, TenantId.generate(), disabled=True
            )

        mock_tenant_repo.get_by_id.assert_not_called()
