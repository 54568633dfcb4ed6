"""
Configuration Module

Application configuration loaded from environment variables.

Usage:
======
    from acrossmedia.config import get_settings

    settings = get_settings()
    backend_url = settings.BACKEND_URL
"""

from acrossmedia.config.settings import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
