"""Unit tests for logging configuration and CloudWatch Logs shipping."""

import logging
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from aws_service_clients.config import Settings
from aws_service_clients.utils.logging_config import (
    CloudWatchLogsHandler,
    configure_logging,
    default_log_stream,
)


def _record(name="aws_service_clients.test", msg="Test message"):
    return logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture
def package_logger():
    """Restore the package logger's handlers and level after each test."""
    logger = logging.getLogger("aws_service_clients")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


class TestCloudWatchLogsHandler:
    """Tests for CloudWatchLogsHandler class."""

    @patch("aws_service_clients.utils.logging_config.boto3.client")
    def test_handler_initialization(self, mock_boto_client):
        """Test CloudWatchLogsHandler initialization."""
        mock_boto_client.return_value = MagicMock()

        handler = CloudWatchLogsHandler(
            log_group="/test/group",
            log_stream="test-stream",
            region="eu-west-1",
        )

        assert handler.log_group == "/test/group"
        assert handler.log_stream == "test-stream"
        assert handler.region == "eu-west-1"
        mock_boto_client.assert_called_once_with("logs", region_name="eu-west-1")

    @patch("aws_service_clients.utils.logging_config.boto3.client")
    def test_handler_creates_log_group_and_stream(self, mock_boto_client):
        mock_client = MagicMock()
        mock_boto_client.return_value = mock_client

        CloudWatchLogsHandler(log_group="/test/group", log_stream="test-stream")

        mock_client.create_log_group.assert_called_once_with(logGroupName="/test/group")
        mock_client.create_log_stream.assert_called_once_with(
            logGroupName="/test/group",
            logStreamName="test-stream",
        )

    @patch("aws_service_clients.utils.logging_config.boto3.client")
    def test_handler_handles_existing_log_group(self, mock_boto_client):
        """Test that handler tolerates an existing log group."""
        mock_client = MagicMock()
        mock_boto_client.return_value = mock_client
        error_response = {"Error": {"Code": "ResourceAlreadyExistsException"}}
        mock_client.create_log_group.side_effect = ClientError(error_response, "CreateLogGroup")

        CloudWatchLogsHandler(log_group="/test/group", log_stream="test-stream")

        mock_client.create_log_stream.assert_called_once()

    @patch("aws_service_clients.utils.logging_config.boto3.client")
    def test_handler_reports_setup_failure(self, mock_boto_client, capsys):
        mock_client = MagicMock()
        mock_boto_client.return_value = mock_client
        error_response = {"Error": {"Code": "AccessDeniedException"}}
        mock_client.create_log_group.side_effect = ClientError(error_response, "CreateLogGroup")

        CloudWatchLogsHandler(log_group="/test/group", log_stream="test-stream")

        assert "Failed to setup CloudWatch logging" in capsys.readouterr().err
        mock_client.create_log_stream.assert_not_called()

    @patch("aws_service_clients.utils.logging_config.boto3.client")
    def test_handler_emits_log_record(self, mock_boto_client):
        mock_client = MagicMock()
        mock_boto_client.return_value = mock_client
        handler = CloudWatchLogsHandler(log_group="/test/group", log_stream="test-stream")

        handler.emit(_record())

        mock_client.put_log_events.assert_called_once()
        call_args = mock_client.put_log_events.call_args
        assert call_args[1]["logGroupName"] == "/test/group"
        assert call_args[1]["logStreamName"] == "test-stream"
        assert len(call_args[1]["logEvents"]) == 1
        assert "Test message" in call_args[1]["logEvents"][0]["message"]

    @patch("aws_service_clients.utils.logging_config.boto3.client")
    def test_handler_skips_sdk_records(self, mock_boto_client):
        mock_client = MagicMock()
        mock_boto_client.return_value = mock_client
        handler = CloudWatchLogsHandler(log_group="/test/group", log_stream="test-stream")

        handler.emit(_record(name="botocore.endpoint"))
        handler.emit(_record(name="urllib3.connectionpool"))

        mock_client.put_log_events.assert_not_called()

    @patch("aws_service_clients.utils.logging_config.boto3.client")
    def test_handler_handles_emit_errors(self, mock_boto_client):
        """Test that handler never raises from emit."""
        mock_client = MagicMock()
        mock_boto_client.return_value = mock_client
        mock_client.put_log_events.side_effect = Exception("CloudWatch error")
        handler = CloudWatchLogsHandler(log_group="/test/group", log_stream="test-stream")

        handler.emit(_record())


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_sets_package_level(self, package_logger):
        logger = configure_logging(Settings(log_level="debug"))

        assert logger is package_logger
        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, package_logger):
        configure_logging(Settings(log_level="chatty"))

        assert package_logger.level == logging.INFO

    @patch("aws_service_clients.utils.logging_config.CloudWatchLogsHandler")
    def test_cloudwatch_disabled_by_default(self, mock_handler_class, package_logger):
        configure_logging(Settings())

        mock_handler_class.assert_not_called()

    @patch("aws_service_clients.utils.logging_config.CloudWatchLogsHandler")
    def test_cloudwatch_enabled(self, mock_handler_class, package_logger):
        mock_handler = MagicMock()
        mock_handler.level = logging.NOTSET
        mock_handler_class.return_value = mock_handler

        configure_logging(Settings(
            cloudwatch_logging_enabled=True,
            cloudwatch_log_group="/custom/group",
            cloudwatch_log_stream="custom-stream",
            aws_region="eu-west-1",
        ))

        mock_handler_class.assert_called_once_with(
            log_group="/custom/group",
            log_stream="custom-stream",
            region="eu-west-1",
        )
        assert mock_handler in package_logger.handlers

    @patch("aws_service_clients.utils.logging_config.CloudWatchLogsHandler")
    def test_cloudwatch_enabled_via_environment(self, mock_handler_class, package_logger, monkeypatch):
        mock_handler = MagicMock()
        mock_handler.level = logging.NOTSET
        mock_handler_class.return_value = mock_handler
        monkeypatch.setenv("CLOUDWATCH_ENABLED", "true")
        monkeypatch.setenv("CLOUDWATCH_LOG_GROUP", "/env/group")

        configure_logging()

        _, kwargs = mock_handler_class.call_args
        assert kwargs["log_group"] == "/env/group"
        assert kwargs["log_stream"] == default_log_stream()

    @patch("aws_service_clients.utils.logging_config.CloudWatchLogsHandler")
    def test_handler_initialization_errors_are_contained(self, mock_handler_class, package_logger):
        mock_handler_class.side_effect = Exception("CloudWatch setup failed")

        configure_logging(Settings(cloudwatch_logging_enabled=True))


def test_default_log_stream_format():
    stream = default_log_stream()

    assert stream.startswith("clients-")
    assert len(stream) == len("clients-YYYY-MM-DD")
