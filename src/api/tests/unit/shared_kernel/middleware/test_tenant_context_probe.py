"""Unit tests for the tenant context probe."""

from unittest.mock import Mock

from shared_kernel.authorization.types import MembershipRole
from shared_kernel.middleware.observability import DefaultTenantContextProbe
from shared_kernel.observability_context import ObservationContext


class TestDefaultTenantContextProbe:
    """Tests for DefaultTenantContextProbe."""

    def test_tenant_resolved_logs_membership(self):
        """Test that resolved contexts are logged with owner and role."""
        mock_logger = Mock()
        probe = DefaultTenantContextProbe(logger=mock_logger)

        probe.tenant_resolved(
            slug="acme",
            tenant_id="t-1",
            user_id="u-1",
            is_owner=False,
            membership_role=MembershipRole.ADMIN,
        )

        mock_logger.debug.assert_called_once()
        call_args = mock_logger.debug.call_args
        assert call_args[0][0] == "tenant_context_resolved"
        assert call_args[1]["slug"] == "acme"
        assert call_args[1]["is_owner"] is False

    def test_tenant_not_found_logs_warning(self):
        """Test that unknown subdomains are logged as warnings."""
        mock_logger = Mock()
        probe = DefaultTenantContextProbe(logger=mock_logger)

        probe.tenant_not_found(slug="ghost")

        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args[0][0] == "tenant_context_tenant_not_found"
        assert mock_logger.warning.call_args[1]["slug"] == "ghost"

    def test_lookup_timeout_logs_error(self):
        """Test that lookup timeouts are logged as errors."""
        mock_logger = Mock()
        probe = DefaultTenantContextProbe(logger=mock_logger)

        probe.tenant_lookup_timed_out(slug="acme", timeout_seconds=5.0)

        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args[1]["timeout_seconds"] == 5.0

    def test_bound_context_is_included(self):
        """Test that host and request metadata are not lost when bound."""
        mock_logger = Mock()
        probe = DefaultTenantContextProbe(logger=mock_logger).with_context(
            ObservationContext(request_id="req-1")
        )

        probe.root_context_resolved(host="rentals.app")

        call_args = mock_logger.debug.call_args
        assert call_args[1]["request_id"] == "req-1"
        assert call_args[1]["host"] == "rentals.app"
