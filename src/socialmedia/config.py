"""
Configuration management for the SocialMedia API
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from .errors import ConfigurationMissingError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Document store
    mongo_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("socialmedia_mongo_url", "url"),
    )
    database_name: str = "SocialMedia"
    users_collection: str = "User"
    posts_collection: str = "Post"
    comments_collection: str = "Comment"

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["*"]
    graphiql: bool = True

    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "SOCIALMEDIA_"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"


# Global settings instance
settings = Settings()


def get_mongo_url(config: Settings | None = None) -> str:
    """Return the configured MongoDB connection string.

    Raises:
        ConfigurationMissingError: If no connection string is configured.
    """
    config = config or settings
    if not config.mongo_url:
        raise ConfigurationMissingError(
            "MongoDB connection string is not configured "
            "(set SOCIALMEDIA_MONGO_URL or URL)"
        )
    return config.mongo_url
