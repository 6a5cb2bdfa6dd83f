"""
Per-request GraphQL context
"""

from typing import Any

import strawberry
from fastapi import Request

from ..database.connection import SocialMediaStore


def build_context(request: Request | None, store: SocialMediaStore) -> dict[str, Any]:
    """Context dict handed to every resolver of one operation."""
    return {"request": request, "store": store}


async def get_context(request: Request) -> dict[str, Any]:
    """FastAPI context getter: injects the store created at application startup."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Document store is not initialised on the application")
    return build_context(request, store)


def get_store_from_info(info: strawberry.Info) -> SocialMediaStore:
    """Return the document store carried by the GraphQL request context."""
    context = info.context
    store = context.get("store") if isinstance(context, dict) else getattr(context, "store", None)
    if store is None:
        raise RuntimeError("GraphQL context has no document store")
    return store
