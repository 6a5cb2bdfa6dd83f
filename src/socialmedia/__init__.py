"""
SocialMedia GraphQL API
Users, posts and comments served over GraphQL from a MongoDB document store
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
