# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Redaction of credentials and signatures from logged text.

Signed requests carry access key IDs, signatures and session tokens in
their headers and query strings. Anything the clients log about a request
or a transport failure passes through this module first.
"""

import logging
import re
from typing import Any, Mapping

logger = logging.getLogger(__name__)

# Patterns for detecting credential material in headers, URLs and messages
SENSITIVE_PATTERNS = {
    "access_key": [
        r"(?:AKIA|ASIA)[0-9A-Z]{16}",
    ],
    "signature": [
        r"(?i)(Signature=)[0-9a-f]{64}",
        r"(?i)(X-Amz-Signature=)[0-9a-f]{64}",
    ],
    "credential_scope": [
        r"(?i)(Credential=)[^,\s&]+",
        r"(?i)(X-Amz-Credential=)[^&\s]+",
    ],
    "security_token": [
        r"(?i)(X-Amz-Security-Token=)[^&\s]+",
        r"(?i)(aws_session_token['\"]?\s*[:=]\s*['\"]?)[^\s'\"]+",
    ],
    "secret_key": [
        r"(?i)(aws_secret_access_key['\"]?\s*[:=]\s*['\"]?)[A-Za-z0-9/+=]{40}",
    ],
}

# Compile patterns for performance
COMPILED_PATTERNS = {
    category: [re.compile(pattern) for pattern in patterns]
    for category, patterns in SENSITIVE_PATTERNS.items()
}

# Header values that are masked entirely
SENSITIVE_HEADERS = frozenset({
    "authorization",
    "x-amz-security-token",
})


def detect_sensitive_info(text: str) -> list[str]:
    """
    Detect which categories of credential material appear in text.

    Args:
        text: Text to scan

    Returns:
        Sorted list of matching category names
    """
    if not text:
        return []

    return sorted(
        category
        for category, patterns in COMPILED_PATTERNS.items()
        if any(pattern.search(text) for pattern in patterns)
    )


def redact_sensitive(text: str, replacement: str = "[REDACTED]") -> str:
    """
    Redact credential material from text.

    For key=value patterns the key is kept and only the value is replaced.

    Args:
        text: Text to redact
        replacement: String to use for redacted content

    Returns:
        Text with credential material redacted
    """
    if not text:
        return text

    result = text
    for patterns in COMPILED_PATTERNS.values():
        for pattern in patterns:
            if pattern.groups:
                result = pattern.sub(lambda m: m.group(1) + replacement, result)
            else:
                result = pattern.sub(replacement, result)

    return result


def redact_headers(headers: Mapping[str, Any], replacement: str = "[REDACTED]") -> dict[str, str]:
    """
    Produce a log-safe copy of request or response headers.

    Args:
        headers: Header mapping
        replacement: String to use for redacted values

    Returns:
        New dict with sensitive headers masked and remaining values redacted
    """
    safe = {}
    for name, value in headers.items():
        if isinstance(value, bytes):
            value = value.decode("utf-8", errors="replace")
        if name.lower() in SENSITIVE_HEADERS:
            safe[name] = replacement
        else:
            safe[name] = redact_sensitive(str(value), replacement)
    return safe
