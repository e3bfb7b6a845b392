"""
Module: models
Description: Package initialization for Pydantic data models.

This package contains the wire models used by the queue client:
- Message: One queue item
- MessageBatch: {"messages": [...]} envelope
- IdList: {"ids": [...]} envelope returned by a push
"""

from .envelope import IdList, MessageBatch
from .message import Message, new_message

__all__ = [
    "IdList",
    "Message",
    "MessageBatch",
    "new_message",
]
