import os
import sys

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# --- In-memory test database ---
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Settings are read at import time of app.db.session
os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)

from app.api.limiter import limiter  # noqa: E402
from app.core.word_lists import get_word_matcher  # noqa: E402
from app.db.base import Base  # noqa: E402
from app.db.session import get_db  # noqa: E402
from app.main import app as fastapi_app  # noqa: E402
from app.models import event as _event_models  # noqa: E402,F401
from app.services.word_matcher import WordMatcher  # noqa: E402


@pytest.fixture
async def test_engine():
    """Create test database engine with in-memory SQLite"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_session(test_engine):
    """Create test database session"""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def word_matcher():
    """Small word lists: forbidden {"spam"}, unnecessary {"test"}"""
    return WordMatcher(forbidden_words={"spam"}, unnecessary_words={"test"})


@pytest.fixture(autouse=True)
def reset_rate_limits():
    limiter.reset()
    yield


@pytest.fixture
async def client(test_engine, word_matcher):
    """HTTP client bound to the app with test database and word lists"""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db():
        async with async_session() as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    fastapi_app.dependency_overrides[get_word_matcher] = lambda: word_matcher

    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    fastapi_app.dependency_overrides.clear()


# --- Sample data fixtures ---
@pytest.fixture
def sample_user_data():
    """Sample user creation data"""
    return {
        "name": "Ivan",
        "last_name": "Petrov",
        "login": "ipetrov",
        "email": "ivan@example.com",
        "city": "Moscow",
        "age": 30,
        "about_user": "Java developer",
    }


@pytest.fixture
async def author(client, sample_user_data):
    response = await client.post("/private/account/user/", json=sample_user_data)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
async def event_type(client):
    response = await client.post("/api/public/event-type", json={"type": "Conference"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def event_payload(author, event_type):
    """Factory for event request bodies"""
    def make(**overrides):
        payload = {
            "event_name": "Joker 2021",
            "description_event": "Java conference",
            "place_event": "Online",
            "time_event": "2099-11-28T20:00:00",
            "event_type_id": event_type["id"],
            "author_id": author["id"],
            "interest_ids": [],
        }
        payload.update(overrides)
        return payload
    return make
