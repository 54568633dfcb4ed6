"""
AcrossMedia Backend

Marketing site and admin portal API.

Package Structure:
==================
    acrossmedia/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    uvicorn acrossmedia.api.main:app --reload
"""
