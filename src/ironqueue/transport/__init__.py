"""
Package: transport
Description: HTTP transport used by queue operations.

Queue handles depend only on the Transport protocol; HttpTransport is
the httpx implementation talking to the hosted service.
"""

from .http import HttpTransport
from .protocols import Transport

__all__ = [
    "HttpTransport",
    "Transport",
]
