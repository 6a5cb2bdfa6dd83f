"""
Document store access for the SocialMedia API
"""

from .connection import SocialMediaStore, close_store, connect_store, create_store, ping_store

__all__ = ["SocialMediaStore", "close_store", "connect_store", "create_store", "ping_store"]
