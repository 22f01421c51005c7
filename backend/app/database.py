"""
Client Records Backend: Database Session Management
======================================================

What:  Async SQLAlchemy engine (the connection pool), session factory, and FastAPI dependency.
Why:   Centralizes all database connection logic in one place.
How:   Creates an async engine with connection pooling, provides a session
       dependency that commits on success and rolls back on error.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created at module import; sessions are created per-request.

Connection Pooling:
    pool_size:        Persistent connections for normal load
    max_overflow:     Temporary connections for traffic spikes
    pool_pre_ping:    Validates connections before use
    pool_recycle=3600: Recycles connections every hour

    SQLite URLs (test suite) skip the sizing options; the in-memory variant
    runs on a StaticPool which rejects them.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


def engine_options(url: URL) -> Dict[str, Any]:
    """Keyword arguments for create_async_engine() appropriate to the URL's backend."""
    options: Dict[str, Any] = {
        "pool_pre_ping": settings.db_pool_pre_ping,
        # Echo SQL statements in DEBUG mode for development visibility
        "echo": settings.log_level == "DEBUG",
    }
    if url.get_backend_name() != "sqlite":
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=3600,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
# The engine owns the pool; every session borrows a connection from it
engine = create_async_engine(
    settings.sqlalchemy_url,
    **engine_options(settings.sqlalchemy_url),
)

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: rows returned by a statement stay readable after
# the dependency commits, while the response is being serialized
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, which Alembic reads for migrations and
    the test suite uses for create_all().
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler (the service runs and commits)
        3. On error: rolls back the transaction and re-raises
        4. Always: closes the session (returns connection to pool)

    Nothing is committed here. Teardown of a yield dependency may run after
    the response has gone out, so a commit failure at this point could not
    change the status code.

    Example usage in a route:
        @router.get("/test")
        async def list_records(db: AsyncSession = Depends(get_db_session)):
            return await client_record_service.list_records(db)
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
