"""
Macha FastAPI Application.

- main: FastAPI application entry point and configuration
- routes/: API endpoint definitions, one module per resource
- models: Pydantic response envelopes
- middleware: Open CORS handling
- dependencies: FastAPI dependency injection providers

API Structure:
- /health/live - Liveness probe
- /api/campaigns - Campaign list
- /api/mentions - Mentions, optionally filtered by campaignId
- /api/seeding - Campaign participants, optionally filtered by campaignId
- /api/content - Static dashboard content

Example:
    from macha.api.main import app

    # Run with: uvicorn macha.api.main:app --reload
"""

from macha.api.main import app, create_app

__all__ = ["app", "create_app"]
