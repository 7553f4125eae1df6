import os
import tempfile

# the suite always runs against a throwaway sqlite file, never the configured database
_DB_DIR = tempfile.mkdtemp(prefix="closet-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR}/test.db"

import httpx
import pytest
from asgi_lifespan import LifespanManager

from closet.auth import deps as auth_deps
from closet.core.db import Base, SessionLocal, engine
from closet.main import app
from closet.models import models  # noqa: F401

TEST_USER = "test-user"
API_BASE = "http://test"


@pytest.fixture(autouse=True)
def override_auth():
    app.dependency_overrides[auth_deps.get_current_user_id] = lambda: TEST_USER
    yield
    app.dependency_overrides.pop(auth_deps.get_current_user_id, None)


@pytest.fixture
async def db():
    """Fresh schema per test."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    await engine.dispose()


@pytest.fixture
async def session(db):
    async with SessionLocal() as s:
        yield s


@pytest.fixture
async def client(db):
    async with LifespanManager(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url=API_BASE) as ac:
            yield ac
