"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, bind)
- Exception flattening for warning(error=...), including unprintable errors
- Level and renderer configuration

Architecture:
- Unit tests with mocked structlog
- NO real logging output
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import ConsoleAdapter, describe_error
from tests.conftest import UnprintableError


@pytest.fixture
def mock_structlog():
    with patch("src.infrastructure.logging.console_adapter.structlog") as mocked:
        mocked.get_logger.return_value = MagicMock()
        yield mocked


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_level_methods_forward_message_and_context(self, mock_structlog, level):
        adapter = ConsoleAdapter()

        getattr(adapter, level)("subscription_added", event_type="email", handler_count=1)

        getattr(mock_structlog.get_logger.return_value, level).assert_called_once_with(
            "subscription_added",
            event_type="email",
            handler_count=1,
        )

    def test_warning_without_exception(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.warning("subscription_handler_failed", event_type="sms")

        mock_structlog.get_logger.return_value.warning.assert_called_once_with(
            "subscription_handler_failed", event_type="sms"
        )

    def test_warning_flattens_exception(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.warning(
            "subscription_handler_failed",
            error=ValueError("bad payload"),
            event_type="sms",
        )

        mock_structlog.get_logger.return_value.warning.assert_called_once_with(
            "subscription_handler_failed",
            event_type="sms",
            error_type="ValueError",
            error_message="bad payload",
        )

    def test_warning_with_unprintable_exception_does_not_raise(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.warning("subscription_handler_failed", error=UnprintableError())

        mock_structlog.get_logger.return_value.warning.assert_called_once_with(
            "subscription_handler_failed",
            error_type="UnprintableError",
            error_message="<unprintable UnprintableError>",
        )

    def test_logs_with_no_context(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.info("Simple message")

        mock_structlog.get_logger.return_value.info.assert_called_once_with(
            "Simple message"
        )


@pytest.mark.unit
class TestConsoleAdapterContextBinding:
    """Test ConsoleAdapter context binding methods."""

    def test_bind_returns_new_adapter_with_bound_context(self, mock_structlog):
        mock_logger = mock_structlog.get_logger.return_value
        mock_bound_logger = MagicMock()
        mock_logger.bind.return_value = mock_bound_logger

        adapter = ConsoleAdapter()
        bound_adapter = adapter.bind(handler="audit", channel="email")

        mock_logger.bind.assert_called_once_with(handler="audit", channel="email")
        assert bound_adapter is not adapter
        assert bound_adapter._logger is mock_bound_logger

    def test_bind_does_not_reconfigure_structlog(self, mock_structlog):
        adapter = ConsoleAdapter()
        mock_structlog.configure.reset_mock()

        adapter.bind(handler="audit")

        mock_structlog.configure.assert_not_called()

    def test_bound_context_persists_across_logs(self, mock_structlog):
        mock_bound_logger = MagicMock()
        mock_structlog.get_logger.return_value.bind.return_value = mock_bound_logger

        bound_adapter = ConsoleAdapter().bind(handler="audit")
        bound_adapter.info("notification_received", payload="'a'")
        bound_adapter.info("notification_received", payload="'b'")

        assert mock_bound_logger.info.call_count == 2


@pytest.mark.unit
class TestConsoleAdapterInitialization:
    """Test ConsoleAdapter structlog configuration."""

    def test_default_level_is_info(self, mock_structlog):
        ConsoleAdapter()

        mock_structlog.make_filtering_bound_logger.assert_called_once_with(logging.INFO)

    def test_level_name_is_case_insensitive(self, mock_structlog):
        ConsoleAdapter(level="debug")

        mock_structlog.make_filtering_bound_logger.assert_called_once_with(
            logging.DEBUG
        )

    def test_json_mode_uses_json_renderer(self, mock_structlog):
        ConsoleAdapter(use_json=True)

        mock_structlog.processors.JSONRenderer.assert_called_once()
        mock_structlog.dev.ConsoleRenderer.assert_not_called()

    def test_console_mode_uses_console_renderer(self, mock_structlog):
        ConsoleAdapter(use_json=False)

        mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)
        mock_structlog.processors.JSONRenderer.assert_not_called()


@pytest.mark.unit
class TestDescribeError:
    """Test exception flattening helper."""

    def test_describes_type_and_message(self):
        assert describe_error(KeyError("missing")) == {
            "error_type": "KeyError",
            "error_message": "'missing'",
        }

    def test_empty_message(self):
        assert describe_error(RuntimeError()) == {
            "error_type": "RuntimeError",
            "error_message": "",
        }

    def test_unprintable_exception_falls_back_to_type_name(self):
        assert describe_error(UnprintableError()) == {
            "error_type": "UnprintableError",
            "error_message": "<unprintable UnprintableError>",
        }
