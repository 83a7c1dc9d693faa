# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Invocation ID generation and context management for request tracing.

Every operation call gets a unique invocation ID. It is sent to the
service in the ``amz-sdk-invocation-id`` header and attached to log
records so all attempts of one call can be correlated.
"""

import contextvars
import logging
import uuid

logger = logging.getLogger(__name__)

INVOCATION_ID_HEADER = "amz-sdk-invocation-id"

# Context variable to store the invocation ID of the running operation
_invocation_id_context: contextvars.ContextVar[str] = contextvars.ContextVar(
    "invocation_id", default=""
)


def generate_invocation_id() -> str:
    """
    Generate a unique invocation ID using UUID4.

    Returns:
        A unique invocation ID string in UUID4 format
    """
    return str(uuid.uuid4())


def set_invocation_id(invocation_id: str) -> contextvars.Token:
    """
    Set the invocation ID in the current context.

    Args:
        invocation_id: The invocation ID to set

    Returns:
        Token that restores the previous value via reset_invocation_id()
    """
    return _invocation_id_context.set(invocation_id)


def reset_invocation_id(token: contextvars.Token) -> None:
    """Restore the invocation ID that was current before set_invocation_id()."""
    _invocation_id_context.reset(token)


def get_invocation_id() -> str:
    """
    Get the invocation ID from the current context.

    Returns:
        The invocation ID if set, or an empty string if not set
    """
    return _invocation_id_context.get()


def get_invocation_id_for_logging() -> dict:
    """
    Get the invocation ID as a dictionary for logging extra fields.

    Returns:
        Dictionary with invocation_id key, or empty dict if not set
    """
    invocation_id = get_invocation_id()
    if invocation_id:
        return {"invocation_id": invocation_id}
    return {}
