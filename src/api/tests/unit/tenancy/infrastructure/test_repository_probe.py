"""Unit tests for tenancy repository probes."""

from unittest.mock import Mock

from tenancy.infrastructure.observability import (
    DefaultTeamMemberRepositoryProbe,
    DefaultTenantRepositoryProbe,
)


class TestDefaultTenantRepositoryProbe:
    """Tests for DefaultTenantRepositoryProbe."""

    def test_duplicate_slug_is_a_warning(self):
        """Test that slug conflicts are logged as warnings."""
        mock_logger = Mock()
        probe = DefaultTenantRepositoryProbe(logger=mock_logger)

        probe.duplicate_tenant_slug("acme")

        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args[1]["slug"] == "acme"

    def test_tenant_saved(self):
        """Test that saves are logged with id and slug."""
        mock_logger = Mock()
        probe = DefaultTenantRepositoryProbe(logger=mock_logger)

        probe.tenant_saved("t-1", "acme")

        call_kwargs = mock_logger.info.call_args[1]
        assert call_kwargs["tenant_id"] == "t-1"
        assert call_kwargs["slug"] == "acme"


class TestDefaultTeamMemberRepositoryProbe:
    """Tests for DefaultTeamMemberRepositoryProbe."""

    def test_duplicate_membership(self):
        """Test that duplicate memberships are logged with tenant and user."""
        mock_logger = Mock()
        probe = DefaultTeamMemberRepositoryProbe(logger=mock_logger)

        probe.duplicate_membership("t-1", "u-1")

        call_kwargs = mock_logger.warning.call_args[1]
        assert call_kwargs["tenant_id"] == "t-1"
        assert call_kwargs["user_id"] == "u-1"
