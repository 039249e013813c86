"""Unit tests for authorization domain probe."""

from unittest.mock import Mock

from shared_kernel.authorization.observability import (
    DefaultAuthorizationProbe,
)
from shared_kernel.observability_context import ObservationContext


class TestDefaultAuthorizationProbe:
    """Tests for DefaultAuthorizationProbe."""

    def test_creates_with_default_logger(self):
        """Test that probe can be created without providing a logger."""
        probe = DefaultAuthorizationProbe()
        assert probe._logger is not None

    def test_accepts_custom_logger(self):
        """Test that probe accepts a custom logger."""
        custom_logger = Mock()
        probe = DefaultAuthorizationProbe(logger=custom_logger)
        assert probe._logger is custom_logger

    def test_with_context_returns_new_probe(self):
        """Test that binding a context leaves the original probe untouched."""
        mock_logger = Mock()
        probe = DefaultAuthorizationProbe(logger=mock_logger)

        bound = probe.with_context(ObservationContext(request_id="req-1"))

        assert bound is not probe
        assert bound._logger is mock_logger
        assert probe._context is None


class TestAccessGranted:
    """Tests for access_granted probe method."""

    def test_logs_at_debug(self):
        """Test that allowed checks are logged at debug level."""
        mock_logger = Mock()
        probe = DefaultAuthorizationProbe(logger=mock_logger)

        probe.access_granted(capability="TenantAdmin", tenant_id="t-1", user_id="u-1")

        mock_logger.debug.assert_called_once()
        call_args = mock_logger.debug.call_args
        assert call_args[0][0] == "authorization_access_granted"
        assert call_args[1]["capability"] == "TenantAdmin"
        assert call_args[1]["tenant_id"] == "t-1"
        assert call_args[1]["user_id"] == "u-1"


class TestAccessDenied:
    """Tests for access_denied probe method."""

    def test_logs_warning_with_reason(self):
        """Test that denials are logged with the reason code."""
        mock_logger = Mock()
        probe = DefaultAuthorizationProbe(logger=mock_logger)

        probe.access_denied(
            capability="TenantMember",
            tenant_id="t-1",
            user_id=None,
            reason_code="Unauthenticated",
        )

        mock_logger.warning.assert_called_once()
        call_args = mock_logger.warning.call_args
        assert call_args[0][0] == "authorization_access_denied"
        assert call_args[1]["reason_code"] == "Unauthenticated"
        assert call_args[1]["user_id"] is None

    def test_includes_request_id_from_context(self):
        """Test that the bound request id is added to the event."""
        mock_logger = Mock()
        probe = DefaultAuthorizationProbe(logger=mock_logger).with_context(
            ObservationContext(request_id="req-42")
        )

        probe.access_denied(
            capability="SuperAdminOnly",
            tenant_id=None,
            user_id="u-1",
            reason_code="Forbidden",
        )

        call_args = mock_logger.warning.call_args
        assert call_args[1]["request_id"] == "req-42"


class TestMalformedCapability:
    """Tests for malformed_capability probe method."""

    def test_logs_error_with_details(self):
        """Test that malformed checks are logged as errors with the cause."""
        mock_logger = Mock()
        probe = DefaultAuthorizationProbe(logger=mock_logger)
        error = ValueError("a tenant id is required")

        probe.malformed_capability(capability="TenantAdmin", tenant_id=None, error=error)

        mock_logger.error.assert_called_once()
        call_args = mock_logger.error.call_args
        assert call_args[0][0] == "authorization_malformed_capability"
        assert call_args[1]["error"] == "a tenant id is required"
        assert call_args[1]["error_type"] == "ValueError"
