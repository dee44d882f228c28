"""
Noteful Backend — Application Package Initializer
==================================================

What: Marks the `noteful` directory as a Python package.
Why:  Enables module imports like `from noteful.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend is a small layered CRUD service:

    ┌─────────────────────────────────────┐
    │      Routes (Resource Handlers)     │  ← validation, status codes, headers
    ├─────────────────────────────────────┤
    │     Services (Persistence Gateway)  │  ← select / insert / update / delete
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async engine + session factory
    └─────────────────────────────────────┘

    There is no business logic beyond required-field checks, so the gateway
    stays a passthrough and the route handlers own all HTTP decisions.
"""

__version__ = "1.0.0"
