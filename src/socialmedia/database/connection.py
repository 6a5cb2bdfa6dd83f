"""
Document store connection management
"""

from dataclasses import dataclass

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo.errors import PyMongoError

from ..config import Settings, get_mongo_url, settings
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SocialMediaStore:
    """Connection handle shared by every request.

    Created once at process start and handed to resolvers through the
    GraphQL context. The underlying Motor client is pooled and safe for
    concurrent use.
    """

    client: AsyncIOMotorClient
    database: AsyncIOMotorDatabase
    users: AsyncIOMotorCollection
    posts: AsyncIOMotorCollection
    comments: AsyncIOMotorCollection


def create_store(client: AsyncIOMotorClient, config: Settings | None = None) -> SocialMediaStore:
    """Bind the configured database and collections of ``client``."""
    config = config or settings
    database = client[config.database_name]
    return SocialMediaStore(
        client=client,
        database=database,
        users=database[config.users_collection],
        posts=database[config.posts_collection],
        comments=database[config.comments_collection],
    )


def connect_store(url: str | None = None, config: Settings | None = None) -> SocialMediaStore:
    """Create a Motor client for the configured endpoint and wrap it in a store.

    Raises:
        ConfigurationMissingError: If no URL is given and none is configured.
    """
    config = config or settings
    url = url or get_mongo_url(config)
    client = AsyncIOMotorClient(url)
    logger.info("Document store client created", database=config.database_name)
    return create_store(client, config)


async def ping_store(store: SocialMediaStore) -> tuple[bool, str | None]:
    """
    Check that the store answers a ping.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    try:
        await store.client.admin.command("ping")
        return True, None
    except PyMongoError as e:
        error_str = str(e)
        if "Authentication failed" in error_str:
            return False, (
                f"Document store authentication failed: {error_str}\n"
                f"Please check the credentials in the connection string."
            )
        if "timed out" in error_str or "Connection refused" in error_str:
            return False, (
                f"Cannot reach document store: {error_str}\n"
                f"The server appears to be down or unreachable."
            )
        return False, f"Document store error ({type(e).__name__}): {error_str}"


def close_store(store: SocialMediaStore) -> None:
    store.client.close()
    logger.info("Document store client closed")
