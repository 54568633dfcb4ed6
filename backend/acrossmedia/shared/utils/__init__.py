"""
Utilities Package

Contents:
=========
- security: Password hashing, JWT management, approval tokens
- formatting: Video duration and view-count display rules

Usage:
======
    from acrossmedia.shared.utils import SecurityUtils, format_views
"""

from acrossmedia.shared.utils.security import SecurityUtils
from acrossmedia.shared.utils.formatting import format_duration, format_views

__all__ = [
    "SecurityUtils",
    "format_duration",
    "format_views",
]
