"""
Runtime configuration.
"""

from .settings import CodecSettings, load_settings

__all__ = [
    "CodecSettings",
    "load_settings",
]
