"""
Module: message.py
Description: Message record for a single queue item.

Defines the immutable Message model exchanged with the queue service
and a convenience constructor for the common single-body case.

Key Components:
- Message: id, body, timeout, delay and expiration of one queue item
- new_message(): Build a Message from a body with zero defaults

Dependencies: pydantic, typing
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """
    One queue item.

    The id is assigned by the service and stays empty on messages built
    by the caller for a push. Instances are never mutated by the client.

    Attributes:
        id: Service assigned message identifier
        body: Message payload
        timeout: Seconds the message stays reserved after a get
        delay: Seconds before the message becomes available
        expires_in: Seconds before the service discards the message
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore"
    )

    id: str = Field(
        default="",
        description="Service assigned message identifier"
    )
    body: str = Field(
        ...,
        description="Message payload"
    )
    timeout: int = Field(
        default=0,
        ge=0,
        description="Reservation timeout in seconds"
    )
    delay: int = Field(
        default=0,
        ge=0,
        description="Delivery delay in seconds"
    )
    expires_in: int = Field(
        default=0,
        ge=0,
        description="Expiration offset in seconds"
    )

    def to_wire(self) -> Dict[str, Any]:
        """Return the push request shape of this message (the id is never sent)."""
        return self.model_dump(include={"body", "timeout", "delay", "expires_in"})


def new_message(body: str, timeout: int = 0, delay: int = 0, expires_in: int = 0) -> Message:
    """
    Build a Message for pushing from a body string.

    Args:
        body: Message payload
        timeout: Reservation timeout in seconds
        delay: Delivery delay in seconds
        expires_in: Expiration offset in seconds

    Returns:
        Message with an empty id
    """
    return Message(body=body, timeout=timeout, delay=delay, expires_in=expires_in)
