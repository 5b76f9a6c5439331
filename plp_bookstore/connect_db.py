# connect_db.py - MongoDB connection settings and client lifecycle
import os
from contextlib import contextmanager
from typing import Iterator, Optional

from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.database import Database

from .logger import get_logger

load_dotenv()

DEFAULT_MONGO_URI = "mongodb://127.0.0.1:27017/plp_bookstore"
DEFAULT_DB_NAME = "plp_bookstore"

MONGO_URI = os.getenv("MONGO_URI", DEFAULT_MONGO_URI)
DB_NAME = os.getenv("DB_NAME", DEFAULT_DB_NAME)
BOOKS_COLLECTION = os.getenv("BOOKS_COLLECTION", "books")
MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

logger = get_logger(__name__)


def get_client(uri: Optional[str] = None, timeout_ms: Optional[int] = None) -> MongoClient:
    """Create a client and make sure the server answers.

    pymongo connects lazily, so the ping is what turns an unreachable
    server into an error here instead of on the first query.
    """
    client = MongoClient(
        uri or MONGO_URI,
        serverSelectionTimeoutMS=timeout_ms if timeout_ms is not None else MONGO_TIMEOUT_MS,
    )
    try:
        client.admin.command("ping")
    except Exception:
        client.close()
        raise
    return client


def get_database(client: MongoClient, name: Optional[str] = None) -> Database:
    # An explicit name wins, then the database in the URI path, then DB_NAME.
    if name:
        return client[name]
    return client.get_default_database(default=DB_NAME)


@contextmanager
def connection(uri: Optional[str] = None, timeout_ms: Optional[int] = None) -> Iterator[MongoClient]:
    client = get_client(uri, timeout_ms)
    logger.info("✅ Connected to MongoDB")
    try:
        yield client
    finally:
        client.close()
        logger.info("🔌 Disconnected")
