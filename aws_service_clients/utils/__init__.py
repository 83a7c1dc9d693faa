"""Utility modules for the AWS service clients."""

from .logging_config import CloudWatchLogsHandler, configure_logging
from .redaction import redact_headers, redact_sensitive

__all__ = [
    "CloudWatchLogsHandler",
    "configure_logging",
    "redact_headers",
    "redact_sensitive",
]
