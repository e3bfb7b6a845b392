"""
Package: ironqueue
Description: Typed client for a hosted HTTP message queue service.

Exposes queue scoped push, get, delete and clear operations backed by
signed HTTP requests, decoding responses into Message objects.
"""

from .client import Client
from .config.clouds import (
    IRON_AWS_EU_WEST,
    IRON_AWS_US_EAST,
    IRON_RACKSPACE_LON,
    IRON_RACKSPACE_ORD,
    Cloud,
)
from .errors import DecodeError, HTTPError, IronQueueError, TransportError
from .models.message import Message, new_message
from .queues.queue import DEFAULT_MAX_PER_GET, Queue
from .version import __version__

__all__ = [
    "Client",
    "Cloud",
    "DecodeError",
    "DEFAULT_MAX_PER_GET",
    "HTTPError",
    "IRON_AWS_EU_WEST",
    "IRON_AWS_US_EAST",
    "IRON_RACKSPACE_LON",
    "IRON_RACKSPACE_ORD",
    "IronQueueError",
    "Message",
    "new_message",
    "Queue",
    "TransportError",
    "__version__",
]
