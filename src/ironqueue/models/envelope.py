"""
Module: envelope.py
Description: Wire envelopes for batched queue payloads.

Push requests and get responses carry messages inside a
{"messages": [...]} wrapper; push responses carry {"ids": [...]}.
These models adapt between that wire shape and plain Python lists.

Key Components:
- MessageBatch: {"messages": [...]} envelope
- IdList: {"ids": [...]} envelope returned by a push
- decode_messages(): Response body -> list of Message, absent -> []
- decode_ids(): Response body -> list of ids

Dependencies: pydantic, json, typing
"""

import json
from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from ironqueue.errors import DecodeError
from ironqueue.models.message import Message


class MessageBatch(BaseModel):
    """Ordered messages wrapped for the wire."""

    messages: List[Message] = Field(
        default_factory=list,
        description="Ordered messages"
    )

    @field_validator('messages', mode='before')
    @classmethod
    def null_messages_as_empty(cls, v: Any) -> Any:
        """A null message list decodes to an empty list."""
        if v is None:
            return []
        return v

    def to_wire(self) -> str:
        """Serialize as a push request body."""
        return self.model_dump_json(
            include={"messages": {"__all__": {"body", "timeout", "delay", "expires_in"}}}
        )


class IdList(BaseModel):
    """Ids assigned to pushed messages, aligned with the request order."""

    ids: List[str] = Field(
        ...,
        description="Ordered message ids"
    )


def _load(body: Optional[str]) -> Any:
    if body is None or not body.strip():
        return None

    try:
        return json.loads(body)
    except ValueError as e:
        raise DecodeError(f"Response is not valid JSON: {e}", body=body) from e


def decode_messages(body: Optional[str]) -> List[Message]:
    """
    Decode a get response into messages.

    An empty body, a null document or a missing/null message list all
    decode to an empty list.

    Args:
        body: Raw response body

    Returns:
        Messages in the order the service returned them

    Raises:
        DecodeError: If the body is not JSON or not a message envelope
    """
    document = _load(body)
    if document is None:
        return []

    try:
        return MessageBatch.model_validate(document).messages
    except ValidationError as e:
        raise DecodeError(f"Response is not a message batch: {e}", body=body) from e


def decode_ids(body: Optional[str], expected: int) -> List[str]:
    """
    Decode a push response into the assigned ids.

    Args:
        body: Raw response body
        expected: Number of messages in the push request

    Returns:
        Ids positionally aligned with the pushed messages

    Raises:
        DecodeError: If the body is not an id list of the expected length
    """
    document = _load(body)

    try:
        ids = IdList.model_validate(document).ids
    except ValidationError as e:
        raise DecodeError(f"Response is not an id list: {e}", body=body) from e

    if len(ids) != expected:
        raise DecodeError(
            f"Expected {expected} ids in push response, got {len(ids)}",
            body=body
        )
    return ids
