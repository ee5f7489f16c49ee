# app/config.py
# Central place for constants and environment settings

import os
import logging

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel

logger = logging.getLogger(__name__)

# Every candidate answers the same fixed set of questions
QUESTION_COUNT = 4

# Max characters per answer (tweet length)
ANSWER_MAX_LENGTH = 280

# Each branch is its own collection
BRANCHES = ("senate", "treasury")

DEFAULT_DB_NAME = "voting"
DEFAULT_CLIENT_BUILD_DIR = "./client/build"
DEFAULT_PORT = 3456
DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173"


class Settings(BaseModel):
    mongodb_uri: str
    mongo_db: str = DEFAULT_DB_NAME


def load_settings() -> Settings:
    """
    Read database settings from the environment (and a .env file if there is one).
    Raises ValueError when MONGODB_URI is missing; startup treats that as fatal.
    """
    if not load_dotenv(find_dotenv(usecwd=True)):
        logger.info("No .env file found")

    uri = os.getenv("MONGODB_URI")
    if not uri:
        raise ValueError(
            "❌ MONGODB_URI not found. Set it in the environment or in a .env file."
        )
    return Settings(mongodb_uri=uri, mongo_db=os.getenv("MONGO_DB", DEFAULT_DB_NAME))
