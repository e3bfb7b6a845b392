"""
Package: config
Description: Endpoint presets and environment driven settings.
"""

from .clouds import CLOUDS, Cloud, get_cloud
from .settings import Settings, get_settings

__all__ = [
    "CLOUDS",
    "Cloud",
    "get_cloud",
    "get_settings",
    "Settings",
]
