import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import settings
from .exceptions import ConfigurationError, StoreError

logger = logging.getLogger(__name__)

# Created by init_engine() during application startup
engine: Optional[AsyncEngine] = None
AsyncSessionLocal: Optional[sessionmaker] = None

# Base class for models
Base = declarative_base()


def init_engine(database_url: Optional[str] = None, echo: Optional[bool] = None) -> AsyncEngine:
    """Create the async engine and session maker.

    Falls back to ``settings.DATABASE_URL``; raises ConfigurationError when no
    address is configured at all.
    """
    global engine, AsyncSessionLocal

    url = database_url or settings.DATABASE_URL
    if not url:
        raise ConfigurationError("The DATABASE_URL environment variable is not defined.")

    engine = create_async_engine(url, echo=settings.SQL_ECHO if echo is None else echo)
    AsyncSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        class_=AsyncSession
    )
    logger.info(f"Database engine created for dialect '{engine.dialect.name}'")
    return engine


# Dependency to get DB session
async def get_db():
    if AsyncSessionLocal is None:
        raise StoreError("Database is not initialised")
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


# Create all tables
async def create_tables():
    if engine is None:
        raise StoreError("Database is not initialised")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine():
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
    engine = None
    AsyncSessionLocal = None
