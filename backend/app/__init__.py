"""
Client Records Backend: Application Package Initializer
==========================================================

What: Marks the `app` directory as a Python package.
Why:  Enables module imports like `from app.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    A deliberately small REST service over one table, split into the usual layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← GET/POST/PUT/DELETE /test
    ├─────────────────────────────────────┤
    │         Services (Statements)       │  ← One parameterized statement per call
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async engine + connection pool
    └─────────────────────────────────────┘

    Routes never touch SQL; services never touch HTTP.
"""

__version__ = "1.0.0"
