import os

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from account_service.core import db as db_module
from account_service.main import create_app
from account_service.stores import InMemoryUserStore, TortoiseUserStore


TEST_DB_URL = "sqlite://:memory:"
os.environ["DATABASE_URL"] = TEST_DB_URL
db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()


@pytest_asyncio.fixture
async def tortoise_db():
    """
    Fresh database for tests that talk to the Tortoise store directly.
    """
    await _init_test_db()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture(params=["tortoise", "memory"])
async def client(request):
    """
    Provide an HTTPX AsyncClient bound to a freshly built app.
    Runs every route test once per user store backend.
    """
    if request.param == "tortoise":
        await _init_test_db()
        store = TortoiseUserStore()
    else:
        store = InMemoryUserStore()

    app = create_app(store=store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client

    if request.param == "tortoise":
        await Tortoise.close_connections()


@pytest_asyncio.fixture
async def register_user(client):
    """
    Factory fixture registering a user through the public endpoint.
    Returns the response so callers can assert on it.
    """

    async def _register(
        username: str = "alice",
        email: str = "a@x.com",
        password: str = "secret",
    ):
        return await client.post(
            "/register",
            json={"username": username, "email": email, "password": password},
        )

    return _register
