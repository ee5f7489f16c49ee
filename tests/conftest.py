"""Test fixtures: in-memory MongoDB + FastAPI test client.

Every test gets its own mongomock-backed connector, injected through the
get_db dependency, so nothing here needs a running MongoDB.
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

# Never reach for a real server from tests
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")

from app.database import MongoConnector, get_db  # noqa: E402
from app.main import app  # noqa: E402

ANSWERS = ["Lower taxes", "More parks", "Fix the roads", "Longer recess"]


@pytest.fixture
def mongo():
    return MongoConnector(AsyncMongoMockClient(), "voting_test")


@pytest.fixture
async def client(mongo):
    """FastAPI test client with the database dependency overridden."""
    app.dependency_overrides[get_db] = lambda: mongo

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def add_candidate(client):
    """POST a candidate and return the response."""
    async def _add(name="Alice", answers=None, branch="senate"):
        body = {"name": name, "answers": list(ANSWERS) if answers is None else answers}
        return await client.post(f"/api/{branch}/candidates", json=body)

    return _add
