"""Tests for invocation ID generation and context management."""

import contextvars

from aws_service_clients.utils.correlation import (
    generate_invocation_id,
    get_invocation_id,
    get_invocation_id_for_logging,
    reset_invocation_id,
    set_invocation_id,
)


class TestGenerateInvocationId:
    """Test invocation ID generation."""

    def test_generate_invocation_id_is_uuid4_format(self):
        """Test that generated ID is in UUID4 format."""
        invocation_id = generate_invocation_id()
        # UUID4 format: 8-4-4-4-12 hex digits
        parts = invocation_id.split("-")
        assert [len(part) for part in parts] == [8, 4, 4, 4, 12]
        assert parts[2].startswith("4")

    def test_generate_invocation_id_uniqueness(self):
        assert generate_invocation_id() != generate_invocation_id()


class TestInvocationIdContext:
    """Test invocation ID context management."""

    def test_set_get_and_reset(self):
        token = set_invocation_id("inv-1")
        try:
            assert get_invocation_id() == "inv-1"
            assert get_invocation_id_for_logging() == {"invocation_id": "inv-1"}
        finally:
            reset_invocation_id(token)

    def test_default_empty(self):
        """Test that a fresh context has no invocation ID."""
        ctx = contextvars.Context()

        assert ctx.run(get_invocation_id) == ""
        assert ctx.run(get_invocation_id_for_logging) == {}

    def test_nested_reset_restores_outer_value(self):
        outer = set_invocation_id("outer")
        inner = set_invocation_id("inner")

        reset_invocation_id(inner)
        assert get_invocation_id() == "outer"

        reset_invocation_id(outer)
