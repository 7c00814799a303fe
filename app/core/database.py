"""
MongoDB connection lifecycle.

One MongoClient is opened and verified at startup, stored on the application
state, and handed to endpoints through the get_collection dependency. The
client is thread-safe and pools its own connections.
"""

import logging
from typing import Optional
from fastapi import Request
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from app.core.config import Settings, settings as default_settings
from app.core.errors import DatabaseConfigurationError, DatabaseConnectionError

logger = logging.getLogger(__name__)


def connect_db(settings: Optional[Settings] = None) -> MongoClient:
    """
    Open a MongoDB client and verify it with a ping.

    Raises:
        DatabaseConfigurationError: MONGODB_URI is not set
        DatabaseConnectionError: The server did not answer the ping
    """
    settings = settings or default_settings

    if not settings.MONGODB_URI:
        logger.critical("MONGODB_URI is not set")
        raise DatabaseConfigurationError(
            "You must set the 'MONGODB_URI' environment variable (or add it to .env). "
            "See https://www.mongodb.com/docs/manual/reference/connection-string/"
        )

    timeout = settings.MONGODB_TIMEOUT_MS
    client = MongoClient(
        settings.MONGODB_URI,
        tz_aware=True,
        serverSelectionTimeoutMS=timeout,
        connectTimeoutMS=timeout,
        socketTimeoutMS=timeout,
    )

    try:
        client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        logger.critical(f"Could not reach MongoDB: {e}")
        raise DatabaseConnectionError(f"Could not connect to MongoDB: {e}") from e

    logger.info("Connected to MongoDB")
    return client


def close_db(client: Optional[MongoClient]) -> None:
    """Release the client's connection pool."""
    if client is None:
        return
    client.close()
    logger.info("MongoDB connection closed")


def get_jobs_collection(client: MongoClient, settings: Optional[Settings] = None) -> Collection:
    settings = settings or default_settings
    return client[settings.MONGODB_DB][settings.MONGODB_COLLECTION]


def get_collection(request: Request) -> Collection:
    """
    Dependency function to get the jobs collection.
    Used in FastAPI endpoints with Depends(get_collection)
    """
    return get_jobs_collection(request.app.state.mongo_client)
