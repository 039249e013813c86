"""Unit tests for TenantContextBuilder."""

import asyncio
from unittest.mock import AsyncMock, Mock

import pytest

from shared_kernel.auth.identity import SessionIdentity, SessionRole
from shared_kernel.authorization.types import MembershipRole
from shared_kernel.middleware.observability import TenantContextProbe
from tenancy.application.tenant_context_builder import TenantContextBuilder
from tenancy.domain.aggregates import TeamMember, Tenant
from tenancy.domain.value_objects import TenantSlug, UserId
from tenancy.ports.exceptions import TenantNotFoundError
from tenancy.ports.repositories import ITeamMemberRepository, ITenantRepository

ROOT = "rentals.app"


@pytest.fixture
def tenant():
    """An enabled tenant on the 'acme' subdomain."""
    return Tenant.create(
        slug=TenantSlug.from_string("acme"),
        name="Acme Homes",
        owner_user_id=UserId("owner-1"),
    )


@pytest.fixture
def mock_tenant_repo(tenant):
    """Tenant repository returning the acme tenant."""
    repo = Mock(spec=ITenantRepository)
    repo.find_by_slug = AsyncMock(return_value=tenant)
    repo.is_owner = AsyncMock(return_value=False)
    return repo


@pytest.fixture
def mock_member_repo():
    """Team member repository with no memberships."""
    repo = Mock(spec=ITeamMemberRepository)
    repo.find_membership = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def mock_probe():
    """Mock tenant context probe."""
    return Mock(spec=TenantContextProbe)


@pytest.fixture
def builder(mock_tenant_repo, mock_member_repo, mock_probe):
    """Builder for the rentals.app root domain."""
    return TenantContextBuilder(
        tenant_repository=mock_tenant_repo,
        team_member_repository=mock_member_repo,
        root_domain=ROOT,
        reserved_subdomains=["www"],
        lookup_timeout_seconds=1.0,
        probe=mock_probe,
    )


def _user(user_id: str = "u-1", role: SessionRole = SessionRole.TENANT):
    return SessionIdentity(user_id=user_id, role=role)


class TestRootContext:
    """Tests for hosts that resolve to no tenant."""

    @pytest.mark.asyncio
    async def test_root_domain_yields_root_context(
        self, builder, mock_tenant_repo, mock_probe
    ):
        """Test that the root domain never touches the repository."""
        identity = _user()

        context = await builder.from_host("rentals.app", identity)

        assert context.is_root is True
        assert context.identity == identity
        mock_tenant_repo.find_by_slug.assert_not_called()
        mock_probe.root_context_resolved.assert_called_once_with(host="rentals.app")

    @pytest.mark.asyncio
    async def test_reserved_subdomain_yields_root_context(
        self, builder, mock_tenant_repo, mock_probe
    ):
        """Test that www is served as the root application."""
        context = await builder.from_host("www.rentals.app", SessionIdentity.anonymous())

        assert context.is_root is True
        mock_tenant_repo.find_by_slug.assert_not_called()
        mock_probe.reserved_subdomain_ignored.assert_called_once_with(
            host="www.rentals.app", slug="www"
        )

    @pytest.mark.asyncio
    async def test_foreign_host_yields_root_context(self, builder, mock_tenant_repo):
        """Test that hosts outside the root domain are not tenants."""
        context = await builder.from_host("example.com", _user())

        assert context.is_root is True
        mock_tenant_repo.find_by_slug.assert_not_called()


class TestTenantContext:
    """Tests for hosts that resolve to a tenant."""

    @pytest.mark.asyncio
    async def test_anonymous_visitor_gets_tenant_without_lookups(
        self, builder, tenant, mock_tenant_repo, mock_member_repo
    ):
        """Test that anonymous requests skip owner and membership lookups."""
        context = await builder.from_host("acme.rentals.app", SessionIdentity.anonymous())

        assert context.tenant_id == tenant.id.value
        assert context.is_owner is False
        assert context.membership_role is None
        mock_tenant_repo.is_owner.assert_not_called()
        mock_member_repo.find_membership.assert_not_called()

    @pytest.mark.asyncio
    async def test_owner_is_flagged(self, builder, tenant, mock_tenant_repo, mock_member_repo):
        """Test that ownership and the owner membership are both resolved."""
        mock_tenant_repo.is_owner = AsyncMock(return_value=True)
        mock_member_repo.find_membership = AsyncMock(
            return_value=TeamMember.create_owner(tenant.id, UserId("owner-1"))
        )

        context = await builder.from_host(
            "acme.rentals.app", _user("owner-1", SessionRole.LANDLORD_OWNER)
        )

        assert context.is_owner is True
        assert context.membership_role == MembershipRole.OWNER
        mock_tenant_repo.is_owner.assert_called_once_with(tenant.id, UserId("owner-1"))

    @pytest.mark.asyncio
    async def test_membership_role_is_resolved(
        self, builder, tenant, mock_member_repo, mock_probe
    ):
        """Test that an active membership's role lands in the context."""
        admin = TeamMember.invite(
            tenant_id=tenant.id,
            email="admin@example.com",
            role=MembershipRole.ADMIN,
            invited_by=UserId("owner-1"),
        )
        admin.accept(UserId("admin-1"))
        mock_member_repo.find_membership = AsyncMock(return_value=admin)

        context = await builder.from_host("acme.rentals.app", _user("admin-1"))

        assert context.is_owner is False
        assert context.membership_role == MembershipRole.ADMIN
        mock_probe.tenant_resolved.assert_called_once()

    @pytest.mark.asyncio
    async def test_slug_is_looked_up_lower_cased(self, builder, mock_tenant_repo):
        """Test that the slug passed to the repository is normalized."""
        await builder.from_host("ACME.rentals.app:443", _user())

        mock_tenant_repo.find_by_slug.assert_called_once_with("acme")


class TestTenantNotFound:
    """Tests for subdomains that name no enabled tenant."""

    @pytest.mark.asyncio
    async def test_unknown_slug_raises(self, builder, mock_tenant_repo, mock_probe):
        """Test that an unknown subdomain is terminal."""
        mock_tenant_repo.find_by_slug = AsyncMock(return_value=None)

        with pytest.raises(TenantNotFoundError) as exc_info:
            await builder.from_host("ghost.rentals.app", _user())

        assert exc_info.value.slug == "ghost"
        mock_probe.tenant_not_found.assert_called_once_with(slug="ghost")

    @pytest.mark.asyncio
    async def test_disabled_tenant_raises(self, builder, tenant, mock_probe):
        """Test that a disabled tenant is indistinguishable from a missing one."""
        tenant.disable()

        with pytest.raises(TenantNotFoundError):
            await builder.from_host("acme.rentals.app", _user())

        mock_probe.tenant_disabled.assert_called_once_with(
            slug="acme", tenant_id=tenant.id.value
        )

    @pytest.mark.asyncio
    async def test_disabled_tenant_raises_for_super_admin(self, builder, tenant):
        """Test that even super-admins cannot resolve a disabled tenant."""
        tenant.disable()

        with pytest.raises(TenantNotFoundError):
            await builder.from_host(
                "acme.rentals.app", _user("root-1", SessionRole.SUPER_ADMIN)
            )


class TestLookupTimeout:
    """Tests for the lookup timeout."""

    @pytest.mark.asyncio
    async def test_slow_lookup_times_out(
        self, mock_tenant_repo, mock_member_repo, mock_probe
    ):
        """Test that slow lookups raise TimeoutError and are recorded."""

        async def slow_lookup(slug):
            await asyncio.sleep(1)

        mock_tenant_repo.find_by_slug = AsyncMock(side_effect=slow_lookup)
        builder = TenantContextBuilder(
            tenant_repository=mock_tenant_repo,
            team_member_repository=mock_member_repo,
            root_domain=ROOT,
            lookup_timeout_seconds=0.01,
            probe=mock_probe,
        )

        with pytest.raises(TimeoutError):
            await builder.from_host("acme.rentals.app", _user())

        mock_probe.tenant_lookup_timed_out.assert_called_once_with(
            slug="acme", timeout_seconds=0.01
        )
        mock_probe.tenant_resolved.assert_not_called()

    @pytest.mark.asyncio
    async def test_no_timeout_configured(
        self, tenant, mock_tenant_repo, mock_member_repo, mock_probe
    ):
        """Test that a None timeout leaves lookups unbounded."""
        builder = TenantContextBuilder(
            tenant_repository=mock_tenant_repo,
            team_member_repository=mock_member_repo,
            root_domain=ROOT,
            lookup_timeout_seconds=None,
            probe=mock_probe,
        )

        context = await builder.from_host("acme.rentals.app", _user())

        assert context.tenant_id == tenant.id.value
