"""
Error types raised by the SocialMedia API
"""


class SocialMediaError(Exception):
    """Base class for application errors."""


class NotFoundError(SocialMediaError):
    """A lookup or update target does not exist.

    The message names the entity type (e.g. ``"User not found"``) and is
    surfaced verbatim in the GraphQL ``errors`` array.
    """

    def __init__(self, entity: str, entity_id: str | None = None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")


class ConfigurationMissingError(SocialMediaError):
    """A required configuration value is absent at startup."""
