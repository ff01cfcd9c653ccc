from typing import AsyncIterator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager

from tictactoe.main import create_app
from tictactoe.store import GameStore


@pytest.fixture()
def store() -> GameStore:
    return GameStore()


@pytest.fixture()
def app(store: GameStore):
    return create_app(store=store)


@pytest_asyncio.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
            yield ac
