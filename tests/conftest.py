"""Shared fixtures: a throwaway SQLite database per test, an in-memory Redis
stand-in, local file storage under tmp_path and an HTTP client bound to the app."""

import fnmatch
import os
import tempfile

# Settings are read at import time, so the environment comes first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["COOKIE_SECURE"] = "false"
os.environ["STORAGE_BACKEND"] = "local"
os.environ["STORAGE_LOCAL_DIR"] = tempfile.mkdtemp(prefix="tripplanner-uploads-")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

import tripplanner.models  # noqa: F401
from tripplanner.core.cache import RedisCache
from tripplanner.core.database import Base, get_db
from tripplanner.core.redis_lifecycle import get_cache, get_redis_client
from tripplanner.core.security import create_access_token
from tripplanner.main import app
from tripplanner.models.user.user import User
from tripplanner.utils import currency
from tripplanner.utils.storage import LocalFileStorage, get_storage


class FakeRedis:
    """Just enough of redis.asyncio.Redis (decode_responses=True) for the app."""

    def __init__(self):
        self.values = {}
        self.hashes = {}
        self.zsets = {}
        self.ttls = {}

    async def ping(self):
        return True

    async def get(self, key):
        return self.values.get(key)

    async def set(self, key, value, ex=None):
        self.values[key] = value
        if ex:
            self.ttls[key] = ex
        return True

    async def setex(self, key, seconds, value):
        return await self.set(key, value, ex=seconds)

    async def hset(self, key, mapping=None, **kwargs):
        self.hashes.setdefault(key, {}).update(mapping or {}, **kwargs)
        return len(mapping or {})

    async def expire(self, key, seconds):
        self.ttls[key] = seconds
        return True

    async def exists(self, *keys):
        return sum(1 for key in keys if key in self.values or key in self.hashes or key in self.zsets)

    async def delete(self, *keys):
        removed = 0
        for key in keys:
            for store in (self.values, self.hashes, self.zsets):
                if key in store:
                    del store[key]
                    removed += 1
        return removed

    async def zadd(self, key, mapping):
        self.zsets.setdefault(key, {}).update(mapping)
        return len(mapping)

    async def zcard(self, key):
        return len(self.zsets.get(key, {}))

    async def zrange(self, key, start, end):
        members = [m for m, _ in sorted(self.zsets.get(key, {}).items(), key=lambda item: item[1])]
        end = len(members) - 1 if end == -1 else end
        return members[start:end + 1]

    async def zrem(self, key, *members):
        zset = self.zsets.get(key, {})
        return sum(1 for member in members if zset.pop(member, None) is not None)

    async def scan(self, cursor=0, match="*", count=100):
        keys = [k for k in list(self.values) + list(self.hashes) + list(self.zsets) if fnmatch.fnmatch(k, match)]
        return 0, keys

    async def aclose(self):
        return None


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def storage(tmp_path):
    return LocalFileStorage(tmp_path / "uploads")


@pytest.fixture(autouse=True)
def offline_rates(monkeypatch):
    """Never reach the exchange-rate API from tests."""
    async def no_live_rates(base):
        return None

    monkeypatch.setattr(currency, "fetch_live_rates", no_live_rates)


@pytest_asyncio.fixture
async def client(session_factory, fake_redis, storage):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    async def override_get_redis_client():
        yield fake_redis

    async def override_get_cache():
        yield RedisCache(fake_redis)

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_redis_client] = override_get_redis_client
    app.dependency_overrides[get_cache] = override_get_cache
    app.dependency_overrides[get_storage] = lambda: storage

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session_factory):
    counter = {"n": 0}

    async def _make_user(name=None, email=None, **fields):
        counter["n"] += 1
        n = counter["n"]
        user = User(
            email=email or f"user{n}@example.com",
            name=name or f"User {n}",
            auth_type="local",
            **fields,
        )
        async with session_factory() as session:
            session.add(user)
            await session.commit()
            await session.refresh(user)
        return user

    return _make_user


def _auth_headers(user) -> dict:
    return {"Authorization": f"Bearer {create_access_token({'sub': str(user.id)})}"}


@pytest_asyncio.fixture
async def owner(make_user):
    return await make_user(name="Dana Owner", email="dana@example.com")


@pytest.fixture
def owner_headers(owner):
    return _auth_headers(owner)


@pytest_asyncio.fixture
async def trip(client, owner_headers):
    resp = await client.post("/trips", json={
        "name": "Slovakia Road Trip",
        "destination": "Slovakia",
        "start_date": "2025-07-01",
        "end_date": "2025-07-10",
    }, headers=owner_headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest_asyncio.fixture
async def share_with(client, owner_headers, trip, make_user):
    """Add a new collaborator with the given permission; returns its headers."""
    async def _share(permission="can_edit", name=None):
        user = await make_user(name=name)
        resp = await client.post(
            f"/trips/{trip['id']}/collaborators",
            json={"user_id": user.id, "permission": permission},
            headers=owner_headers,
        )
        assert resp.status_code == 201, resp.text
        return _auth_headers(user)

    return _share


@pytest.fixture
def headers_for():
    return _auth_headers
