from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import class_tracker.models  # noqa: F401  (registers tables on Base.metadata)
from class_tracker.api.deps import get_today
from class_tracker.core.database import Base, get_db
from class_tracker.main import app

# Wednesday; its week starts Monday 2026-10-12
TODAY = date(2026, 10, 14)
CURRENT_WEEK_ID = "2026-10-12"
PREVIOUS_WEEK_ID = "2026-10-05"
NEXT_WEEK_ID = "2026-10-19"

MONDAY_ROW = [
    "Monday", "BDA-Lab", "BDA-Lab", "Tea Break", "OE", "DL", "Lunch Break",
    "Project Phase-II", "Project Phase-II", "", "",
]
HEADERS = [
    "Day", "8:45-9:40", "9:40-10:35", "10:35-10:50", "10:50-11:45", "11:45-12:40",
    "12:40-1:40", "1:40-2:35", "2:35-3:30", "3:30-4:25", "4:25-5:20",
]


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, class_=AsyncSession, autoflush=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: TODAY
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
