"""Schema Bootstrap — create missing tables for the registered models.

Invariants:
    - Tables are created from Base.metadata only when asked (create_schema)
    - Used by the app lifespan and by test fixtures

Design Decisions:
    - create_schema is metadata.create_all, not a migration tool: it never alters
      an existing table
"""

from sqlalchemy.ext.asyncio import AsyncEngine

from classroom.db.base import Base


async def create_schema(engine: AsyncEngine) -> None:
    """Create any missing tables for the registered models."""
    import classroom.models  # noqa: F401  (populates Base.metadata)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
