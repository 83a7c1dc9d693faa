"""Logging configuration and CloudWatch Logs shipping."""

import logging
import sys
from datetime import datetime, timezone
from typing import Optional

import boto3
from botocore.exceptions import ClientError

from ..config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class CloudWatchLogsHandler(logging.Handler):
    """Logging handler that sends records to AWS CloudWatch Logs."""

    def __init__(
        self,
        log_group: str,
        log_stream: str,
        region: str = "us-east-1",
    ):
        """
        Initialize CloudWatch Logs handler.

        Args:
            log_group: CloudWatch log group name
            log_stream: CloudWatch log stream name
            region: AWS region for CloudWatch Logs
        """
        super().__init__()
        self.log_group = log_group
        self.log_stream = log_stream
        self.region = region
        self.client = boto3.client("logs", region_name=region)
        self._ensure_log_group_and_stream()

    def _ensure_log_group_and_stream(self) -> None:
        """Create log group and stream if they don't exist."""
        try:
            try:
                self.client.create_log_group(logGroupName=self.log_group)
            except ClientError as e:
                if e.response["Error"]["Code"] != "ResourceAlreadyExistsException":
                    raise

            try:
                self.client.create_log_stream(
                    logGroupName=self.log_group,
                    logStreamName=self.log_stream,
                )
            except ClientError as e:
                if e.response["Error"]["Code"] != "ResourceAlreadyExistsException":
                    raise
        except Exception as e:
            print(f"Failed to setup CloudWatch logging: {e}", file=sys.stderr)

    def emit(self, record: logging.LogRecord) -> None:
        """
        Emit a log record to CloudWatch Logs.

        Args:
            record: The log record to emit
        """
        # Records produced by the logs client itself would recurse
        if record.name.startswith(("botocore", "boto3", "urllib3")):
            return
        try:
            self.client.put_log_events(
                logGroupName=self.log_group,
                logStreamName=self.log_stream,
                logEvents=[
                    {
                        "message": self.format(record),
                        "timestamp": int(record.created * 1000),
                    }
                ],
            )
        except Exception as e:
            # Never raise from a logging handler
            print(f"Failed to send log to CloudWatch: {e}", file=sys.stderr)


def default_log_stream() -> str:
    """Log stream name used when none is configured."""
    return "clients-" + datetime.now(timezone.utc).strftime("%Y-%m-%d")


def configure_logging(config: Optional[Settings] = None) -> logging.Logger:
    """
    Configure logging for the service clients.

    Sets the package logger level, adds a console handler when the root
    logger has none, and attaches a CloudWatch Logs handler when enabled.

    Args:
        config: Settings to read from (defaults to a fresh Settings())

    Returns:
        The configured package logger
    """
    config = config or Settings()
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    package_logger = logging.getLogger("aws_service_clients")
    package_logger.setLevel(level)

    if not logging.getLogger().handlers and not package_logger.handlers:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(console)

    if config.cloudwatch_logging_enabled:
        log_stream = config.cloudwatch_log_stream or default_log_stream()
        try:
            handler = CloudWatchLogsHandler(
                log_group=config.cloudwatch_log_group,
                log_stream=log_stream,
                region=config.aws_region,
            )
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            package_logger.addHandler(handler)
            package_logger.info(
                f"CloudWatch logging configured: group={config.cloudwatch_log_group}, stream={log_stream}"
            )
        except Exception as e:
            print(f"Failed to configure CloudWatch logging: {e}", file=sys.stderr)

    return package_logger
