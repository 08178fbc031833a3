import httpx
import pytest
from fastapi.testclient import TestClient

from goodfriends.web.providers import FriendsApiClient

API_BASE = "http://api.test/"


def page(items, total=None, page_size=0, page_nr=0):
    """Response-page envelope as the backend sends it."""
    return {
        "pageItems": items,
        "pageNr": page_nr,
        "pageSize": page_size,
        "totalCount": len(items) if total is None else total,
    }


class FakeApi:
    """MockTransport handler routing (method, path) to canned responses; records every request."""

    def __init__(self):
        self.routes = {}
        self.requests: list[httpx.Request] = []

    def on(self, method: str, path: str, respond) -> "FakeApi":
        self.routes[(method, path)] = respond
        return self

    def calls(self, path: str, method: str = "GET") -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path and r.method == method]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        respond = self.routes.get((request.method, request.url.path))
        if respond is None:
            return httpx.Response(404, text=f"no route for {request.method} {request.url.path}")
        result = respond(request)
        if isinstance(result, httpx.Response):
            return result
        return httpx.Response(200, json=result)


def client_for(fake: FakeApi) -> FriendsApiClient:
    return FriendsApiClient(httpx.AsyncClient(transport=httpx.MockTransport(fake), base_url=API_BASE))


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def api(fake_api) -> FriendsApiClient:
    return client_for(fake_api)


@pytest.fixture
def web_client(fake_api):
    from goodfriends.web.dependencies import get_api
    from goodfriends.web.main import app

    app.dependency_overrides[get_api] = lambda: client_for(fake_api)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def backend_client():
    """Backend app with the database dependency stubbed out (validation paths only)."""
    from goodfriends.api.dependencies import get_db
    from goodfriends.api.main import app

    async def no_db():
        yield None

    app.dependency_overrides[get_db] = no_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
async def db_session():
    """Fresh in-memory SQLite schema per test, with foreign keys enforced for the ON DELETE rules."""
    from sqlalchemy import event
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from goodfriends.api.db import models  # noqa: F401
    from goodfriends.api.db.session import Base

    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)

    @event.listens_for(engine.sync_engine, "connect")
    def _foreign_keys(dbapi_connection, _record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with session_factory() as session:
        yield session
    await engine.dispose()
