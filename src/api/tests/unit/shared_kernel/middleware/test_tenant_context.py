"""Unit tests for the TenantContext value object."""

import pytest

from shared_kernel.auth.identity import SessionIdentity, SessionRole
from shared_kernel.authorization.types import MembershipRole
from shared_kernel.middleware.tenant_context import TenantContext


class TestTenantContext:
    """Tests for TenantContext."""

    def test_root_context_defaults_to_anonymous(self):
        """Test that a bare root context carries the anonymous identity."""
        context = TenantContext.root()

        assert context.tenant_id is None
        assert context.is_root is True
        assert context.identity == SessionIdentity.anonymous()
        assert context.is_owner is False
        assert context.membership_role is None

    def test_root_context_keeps_identity(self):
        """Test that a root context can carry a signed-in identity."""
        identity = SessionIdentity(user_id="u-1", role=SessionRole.SUPER_ADMIN)

        context = TenantContext.root(identity)

        assert context.user_id == "u-1"
        assert context.is_root is True

    def test_tenant_context_is_not_root(self):
        """Test that a resolved tenant produces a scoped context."""
        context = TenantContext(
            tenant_id="01HZX3Q5Y8N6K2M4P7R9T1V3W5",
            identity=SessionIdentity(user_id="u-1", role=SessionRole.TEAM_ADMIN),
            membership_role=MembershipRole.ADMIN,
        )

        assert context.is_root is False
        assert context.user_id == "u-1"
        assert context.membership_role == MembershipRole.ADMIN

    def test_context_is_immutable(self):
        """Test that the context cannot be changed after construction."""
        context = TenantContext.root()

        with pytest.raises(AttributeError):
            context.tenant_id = "01HZX3Q5Y8N6K2M4P7R9T1V3W5"  # type: ignore[misc]
