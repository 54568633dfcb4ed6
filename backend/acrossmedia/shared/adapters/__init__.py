"""
Adapters Package

External service integrations.

Contents:
=========
- youtube_adapter: YouTube Data API client (video metadata)
- email_adapter: SMTP email transport

Note: Database access is handled by shared/db/session.py using async SQLAlchemy.

Usage:
======
    from acrossmedia.shared.adapters.youtube_adapter import YouTubeAdapter
    from acrossmedia.shared.adapters.email_adapter import SMTPEmailAdapter
"""
