"""
Module: errors.py
Description: Exception hierarchy raised by the ironqueue client.

Key Components:
- IronQueueError: Base class for every client error
- HTTPError: The service answered with a non-success status
- TransportError: The request never produced an HTTP response
- DecodeError: The response body did not match the expected shape

Empty results (no messages available) are never raised; argument
validation failures use the built-in ValueError.
"""

import json
from typing import Optional


class IronQueueError(Exception):
    """Base class for all ironqueue errors."""

    def __str__(self) -> str:
        if not self.args:
            return self.__class__.__name__
        return self.__class__.__name__ + ": " + str(self.args[0])


class HTTPError(IronQueueError):
    """
    Non-success HTTP status returned by the queue service.

    Attributes:
        status_code: HTTP status code of the response
        body: Raw response body
        message: Error message from the service's {"msg": ...} document,
            or the raw body when none is present
    """

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        self.message = _extract_message(body)
        super().__init__(f"HTTP {status_code}: {self.message}")


class TransportError(IronQueueError):
    """Network level failure (connection, timeout) below the HTTP layer."""


class DecodeError(IronQueueError):
    """
    Response body does not match the expected wire shape.

    Signals a client/server protocol mismatch rather than a queue failure.

    Attributes:
        body: Raw response body that failed to decode
    """

    def __init__(self, message: str, body: Optional[str] = None):
        self.body = body
        super().__init__(message)


def _extract_message(body: str) -> str:
    if not body:
        return "no response body"

    try:
        document = json.loads(body)
    except ValueError:
        return body

    if isinstance(document, dict) and isinstance(document.get("msg"), str):
        return document["msg"]
    return body
