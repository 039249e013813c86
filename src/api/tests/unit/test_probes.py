"""Unit tests for infrastructure domain probes."""

from unittest.mock import MagicMock

import structlog

from infrastructure.observability import DefaultDatabaseEngineProbe, ObservationContext


class TestDatabaseEngineProbe:
    """Tests for the database engine lifecycle probe."""

    def test_default_probe_creates_with_default_logger(self):
        """Default probe should work without explicit logger."""
        probe = DefaultDatabaseEngineProbe()
        assert probe._logger is not None

    def test_engine_created_logs_info(self):
        """engine_created should log the password-free URL and pool size."""
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultDatabaseEngineProbe(logger=mock_logger)

        probe.engine_created(
            connection_string="postgresql://rentals@localhost:5432/rentals",
            pool_size=10,
        )

        mock_logger.info.assert_called_once_with(
            "database_engine_created",
            connection_string="postgresql://rentals@localhost:5432/rentals",
            pool_size=10,
        )

    def test_engine_disposed_logs_info(self):
        """engine_disposed should log at info level."""
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultDatabaseEngineProbe(logger=mock_logger)

        probe.engine_disposed()

        mock_logger.info.assert_called_once_with("database_engine_disposed")

    def test_with_context_includes_request_id(self):
        """A bound observation context adds its fields to every event."""
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultDatabaseEngineProbe(logger=mock_logger).with_context(
            ObservationContext(request_id="req-42")
        )

        probe.engine_disposed()

        kwargs = mock_logger.info.call_args.kwargs
        assert kwargs["request_id"] == "req-42"
