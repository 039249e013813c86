"""End-to-end decisions from Host header to guard outcome.

Each test resolves a host through TenantContextBuilder.from_host with
mocked repositories, then evaluates a capability with the guard.
"""

from unittest.mock import AsyncMock, Mock

import pytest

from shared_kernel.auth.identity import SessionIdentity, SessionRole
from shared_kernel.authorization import (
    AuthorizationDecision,
    MalformedCapabilityError,
    ReasonCode,
    TenantAdmin,
    TenantMember,
    check,
)
from shared_kernel.middleware.observability import TenantContextProbe
from tenancy.application.tenant_context_builder import TenantContextBuilder
from tenancy.domain.aggregates import Tenant
from tenancy.domain.value_objects import TenantSlug, UserId
from tenancy.ports.exceptions import TenantNotFoundError
from tenancy.ports.repositories import ITeamMemberRepository, ITenantRepository

ROOT = "rentals.app"


@pytest.fixture
def acme():
    """The acme tenant, owned by u2."""
    return Tenant.create(
        slug=TenantSlug.from_string("acme"),
        name="Acme Homes",
        owner_user_id=UserId("u2"),
    )


@pytest.fixture
def mock_tenant_repo(acme):
    """Knows only the acme tenant; u2 is its owner."""

    async def find_by_slug(slug):
        return acme if slug == "acme" else None

    async def is_owner(tenant_id, user_id):
        return tenant_id == acme.id and user_id.value == "u2"

    repo = Mock(spec=ITenantRepository)
    repo.find_by_slug = AsyncMock(side_effect=find_by_slug)
    repo.is_owner = AsyncMock(side_effect=is_owner)
    return repo


@pytest.fixture
def mock_member_repo():
    """Nobody holds a team membership."""
    repo = Mock(spec=ITeamMemberRepository)
    repo.find_membership = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def builder(mock_tenant_repo, mock_member_repo):
    return TenantContextBuilder(
        tenant_repository=mock_tenant_repo,
        team_member_repository=mock_member_repo,
        root_domain=ROOT,
        probe=Mock(spec=TenantContextProbe),
    )


class TestHostToDecision:
    """Tests for the resolve, assemble and check pipeline."""

    @pytest.mark.asyncio
    async def test_renter_without_membership_is_not_a_member(self, builder, acme):
        """A renter on acme's subdomain is denied TenantMember as NotTenantMember."""
        renter = SessionIdentity(user_id="u1", role=SessionRole.TENANT)

        context = await builder.from_host("acme.rentals.app", renter)
        decision = check(context, TenantMember(acme.id.value))

        assert context.tenant_id == acme.id.value
        assert decision == AuthorizationDecision(
            allowed=False, reason_code=ReasonCode.NOT_TENANT_MEMBER
        )

    @pytest.mark.asyncio
    async def test_owner_holds_tenant_admin(self, builder, acme):
        """The tenant's owner is allowed TenantAdmin on its subdomain."""
        owner = SessionIdentity(user_id="u2", role=SessionRole.LANDLORD_OWNER)

        context = await builder.from_host("acme.rentals.app", owner)
        decision = check(context, TenantAdmin(acme.id.value))

        assert context.is_owner is True
        assert decision.allowed is True
        assert decision.reason_code is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("capability_type", [TenantMember, TenantAdmin])
    async def test_bare_root_fails_fast(self, builder, mock_tenant_repo, capability_type):
        """On the root domain there is no tenant id, so tenant checks are malformed."""
        owner = SessionIdentity(user_id="u2", role=SessionRole.LANDLORD_OWNER)

        context = await builder.from_host("rentals.app", owner)

        assert context.tenant_id is None
        mock_tenant_repo.find_by_slug.assert_not_called()
        with pytest.raises(MalformedCapabilityError) as exc_info:
            check(context, capability_type(context.tenant_id))
        assert exc_info.value.reason_code is ReasonCode.MALFORMED_REQUEST

    @pytest.mark.asyncio
    async def test_unknown_slug_stops_before_the_guard(
        self, builder, mock_tenant_repo, mock_member_repo
    ):
        """An unknown subdomain is TenantNotFound and no decision is made."""
        guard = Mock(wraps=check)
        owner = SessionIdentity(user_id="u2", role=SessionRole.LANDLORD_OWNER)

        with pytest.raises(TenantNotFoundError) as exc_info:
            context = await builder.from_host("unknown.rentals.app", owner)
            guard(context, TenantMember(context.tenant_id))

        assert exc_info.value.slug == "unknown"
        mock_tenant_repo.find_by_slug.assert_awaited_once_with("unknown")
        mock_tenant_repo.is_owner.assert_not_called()
        mock_member_repo.find_membership.assert_not_called()
        guard.assert_not_called()
