"""
Module: test_message.py
Description: Unit tests for the Message model.

Tests field defaults, non-negative constraints, immutability and the
push request wire shape.
"""

import pytest
from pydantic import ValidationError

from ironqueue.models.message import Message, new_message


class TestMessageModel:
    """Test cases for Message validation and behavior."""

    def test_defaults(self):
        """Test a body-only message gets an empty id and zero durations."""
        message = Message(body="hello")

        assert message.id == ""
        assert message.body == "hello"
        assert message.timeout == 0
        assert message.delay == 0
        assert message.expires_in == 0

    def test_body_required(self):
        """Test body is required."""
        with pytest.raises(ValidationError):
            Message()

    def test_negative_durations_rejected(self):
        """Test timeout, delay and expires_in must be non-negative."""
        for field in ("timeout", "delay", "expires_in"):
            with pytest.raises(ValidationError):
                Message(body="x", **{field: -1})

    def test_frozen(self, sample_message):
        """Test messages cannot be mutated after construction."""
        with pytest.raises(ValidationError):
            sample_message.body = "changed"

    def test_unknown_service_fields_ignored(self):
        """Test extra fields sent by the service do not break decoding."""
        message = Message.model_validate(
            {"id": "1", "body": "b", "reserved_count": 2, "push_status": {}}
        )

        assert message.id == "1"
        assert not hasattr(message, "reserved_count")

    def test_to_wire_excludes_id(self, sample_message):
        """Test the push request shape never carries the id."""
        assert sample_message.to_wire() == {
            "body": "hello",
            "timeout": 60,
            "delay": 0,
            "expires_in": 0,
        }


class TestNewMessage:
    """Test cases for the new_message() constructor."""

    def test_zero_defaults(self):
        """Test new_message() matches a fully specified zero-default Message."""
        assert new_message("a") == Message(body="a", timeout=0, delay=0, expires_in=0)

    def test_all_fields(self):
        """Test new_message() passes every duration through."""
        message = new_message("a", timeout=30, delay=5, expires_in=3600)

        assert (message.timeout, message.delay, message.expires_in) == (30, 5, 3600)
        assert message.id == ""
