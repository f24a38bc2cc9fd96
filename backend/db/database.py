import logging
from typing import Optional
from urllib.parse import urlsplit

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_NAME = "drinks"

INGREDIENTS_COLLECTION = "ingredients"
DRINKS_COLLECTION = "drinks"


def database_name_from_url(url: str, default: str = DEFAULT_DATABASE_NAME) -> str:
    """Return the database named in the URL path, e.g. mongodb://host/drinks -> drinks"""
    name = urlsplit(url).path.lstrip("/")
    return name or default


class Database:
    """Owns the MongoDB client for one app instance.

    The handle is created by the app factory, connected in the lifespan and
    handed to repositories through FastAPI dependencies. A pre-built client
    can be passed in (tests use an in-memory one).
    """

    def __init__(self, url: str, client: Optional[AsyncIOMotorClient] = None):
        self.url = url
        self.name = database_name_from_url(url)
        self._client = client
        self._db: Optional[AsyncIOMotorDatabase] = None

    @property
    def is_connected(self) -> bool:
        return self._db is not None

    async def connect(self) -> None:
        if self._db is not None:
            return
        if self._client is None:
            self._client = AsyncIOMotorClient(self.url)
        self._db = self._client[self.name]
        logger.info(f"Connected to MongoDB database '{self.name}'")
        await self.ensure_indexes()

    async def ensure_indexes(self) -> None:
        # Slug lookups go through the indexed `id` field, not `_id`
        for collection in (INGREDIENTS_COLLECTION, DRINKS_COLLECTION):
            await self.db[collection].create_index("id")
            logger.debug("Ensured id index", extra={"collection": collection})

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB client closed")
        self._client = None
        self._db = None

    @property
    def db(self) -> AsyncIOMotorDatabase:
        if self._db is None:
            raise RuntimeError("Database is not connected. Call connect() on startup.")
        return self._db

    @property
    def ingredients(self) -> AsyncIOMotorCollection:
        return self.db[INGREDIENTS_COLLECTION]

    @property
    def drinks(self) -> AsyncIOMotorCollection:
        return self.db[DRINKS_COLLECTION]


def get_database(request: Request) -> Database:
    return request.app.state.db
