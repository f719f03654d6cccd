#!/usr/bin/env python3
"""
Create the database schema for development.

On PostgreSQL this also installs the consistency triggers.
"""
import asyncio

from flashdeck.data import Base
from flashdeck.infra.config.database import build_engine
from flashdeck.infra.config.logging_config import get_logger, setup_logging
from flashdeck.infra.config.settings import get_settings


async def init_db():
    """Create all database tables."""
    settings = get_settings()
    setup_logging()
    engine = build_engine(settings.database_url, echo=settings.debug_sql)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    await engine.dispose()
    get_logger("init_db").info("database.initialized", dialect=engine.dialect.name)


if __name__ == "__main__":
    asyncio.run(init_db())
