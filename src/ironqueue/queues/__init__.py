"""
Package: queues
Description: Queue operation layer.
"""

from .queue import DEFAULT_MAX_PER_GET, Queue

__all__ = [
    "DEFAULT_MAX_PER_GET",
    "Queue",
]
