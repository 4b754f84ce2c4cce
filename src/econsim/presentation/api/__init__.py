"""REST API presentation layer for the economy simulator.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Domain exception -> HTTP mapping
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from econsim.presentation.api.app import create_app

__all__ = ["create_app"]
