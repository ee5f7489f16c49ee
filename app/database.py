import logging

import motor.motor_asyncio
from fastapi import Request

from app.config import BRANCHES, DEFAULT_DB_NAME

logger = logging.getLogger(__name__)


class MongoConnector:
    """Holds the one MongoDB client shared by every request in the process."""

    def __init__(self, client, db_name: str = DEFAULT_DB_NAME):
        self.client = client
        self.db = client[db_name]

    @classmethod
    def from_uri(cls, uri: str, db_name: str = DEFAULT_DB_NAME) -> "MongoConnector":
        client = motor.motor_asyncio.AsyncIOMotorClient(uri)
        return cls(client, db_name)

    async def ping(self):
        """Fail fast if the server can't be reached."""
        try:
            await self.client.admin.command("ping")
            logger.info(f"Connected to MongoDB, database: {self.db.name}")
        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise

    def collection(self, branch: str):
        """Each branch keeps its candidates in a collection of the same name."""
        if branch not in BRANCHES:
            raise KeyError(branch)
        return self.db[branch]

    def close(self):
        self.client.close()
        logger.info("MongoDB connection closed")


def get_db(request: Request) -> MongoConnector:
    return request.app.state.mongo
