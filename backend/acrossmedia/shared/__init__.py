"""
Shared Module

Everything below the HTTP layer:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions
- Adapters: YouTube and SMTP integrations

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── adapters/       ← External services
    ├── migrations/     ← Alembic migrations
    └── utils/          ← Security and formatting helpers

Usage:
======
    from acrossmedia.shared.models import Account, Project, Video
    from acrossmedia.shared.repositories import AccountRepository
    from acrossmedia.shared.services import ApprovalWorkflow, GalleryService
    from acrossmedia.shared.core import logger, AcrossMediaException
"""
