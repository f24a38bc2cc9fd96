"""Shared test fixtures: in-memory MongoDB + FastAPI test client.

Every test gets a fresh mongomock-motor client injected into the Database
handle, so no real MongoDB is needed.
"""

import os

os.environ.setdefault("MONGO_URL", "mongodb://localhost/drinks_test")

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from core.config import Settings
from db.database import Database
from main import create_app


@pytest.fixture
async def database():
    db = Database("mongodb://localhost/drinks_test", client=AsyncMongoMockClient())
    await db.connect()
    return db


@pytest.fixture
def app_settings():
    s = Settings()
    s.strict_not_found = False
    return s


@pytest.fixture
async def client(database, app_settings):
    """Test client over the app; unhandled errors come back as 500 responses."""
    app = create_app(app_settings, database)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def catalog(database):
    """Insert two ingredients and one drink referencing them by _id."""
    vodka = await database.ingredients.insert_one(
        {"id": "vodka", "name": "Vodka", "imageUrl": "https://img.example/vodka.png"}
    )
    curacau = await database.ingredients.insert_one(
        {"id": "blue-curacau", "name": "Blue Curaçau"}
    )
    await database.drinks.insert_one({
        "id": "blue-kamikaze",
        "name": "Blue Kamikaze",
        "tags": ["shot"],
        "ingredients": [
            {"ingredient": curacau.inserted_id, "amount": 1, "amountUnit": "part"},
            {"ingredient": vodka.inserted_id, "amount": 2, "amountUnit": "part"},
        ],
    })
    return {"vodka": vodka.inserted_id, "blue-curacau": curacau.inserted_id}
