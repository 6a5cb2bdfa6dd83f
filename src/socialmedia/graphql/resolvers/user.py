from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...database.documents import new_user_document, to_object_id
from ...errors import NotFoundError
from ...logging import get_logger
from ..context import get_store_from_info
from .lookups import delete_by_id, find_all, find_by_id, find_by_ids, update_fields

if TYPE_CHECKING:
    from ..types.comment import Comment
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)


# Query resolvers
async def resolve_users(info: strawberry.Info) -> list[User]:
    """Resolve every user in the collection."""
    from ..types.user import User as UserType

    store = get_store_from_info(info)
    return [UserType.from_document(doc) for doc in await find_all(store.users)]


async def resolve_user_by_id(info: strawberry.Info, id: str) -> User:
    """
    Resolve a user by its ID.

    Raises NotFoundError when no user has that id.
    """
    from ..types.user import User as UserType

    store = get_store_from_info(info)
    doc = await find_by_id(store.users, to_object_id(id))
    if not doc:
        logger.info("User not found", user_id=id)
        raise NotFoundError("User", id)
    return UserType.from_document(doc)


# Field resolvers
async def resolve_user_posts(user: User, info: strawberry.Info) -> list[Post]:
    from ..types.post import Post as PostType

    store = get_store_from_info(info)
    docs = await find_by_ids(store.posts, user.post_ids)
    return [PostType.from_document(doc) for doc in docs]


async def resolve_user_comments(user: User, info: strawberry.Info) -> list[Comment]:
    from ..types.comment import Comment as CommentType

    store = get_store_from_info(info)
    docs = await find_by_ids(store.comments, user.comment_ids)
    return [CommentType.from_document(doc) for doc in docs]


async def resolve_user_liked_posts(user: User, info: strawberry.Info) -> list[Post]:
    from ..types.post import Post as PostType

    store = get_store_from_info(info)
    docs = await find_by_ids(store.posts, user.liked_post_ids)
    return [PostType.from_document(doc) for doc in docs]


# Mutation resolvers
async def create_user(info: strawberry.Info, name: str, password: str, email: str) -> User:
    """Insert a user with empty reference lists and return the stored record."""
    from ..types.user import User as UserType

    store = get_store_from_info(info)
    result = await store.users.insert_one(new_user_document(name, password, email))

    doc = await find_by_id(store.users, result.inserted_id)
    if not doc:
        raise NotFoundError("User", str(result.inserted_id))

    logger.info("User created", user_id=str(result.inserted_id))
    return UserType.from_document(doc)


async def update_user(
    info: strawberry.Info,
    id: str,
    name: str | None = None,
    password: str | None = None,
    email: str | None = None,
) -> User:
    """Merge the supplied fields into an existing user."""
    from ..types.user import User as UserType

    store = get_store_from_info(info)
    doc = await update_fields(
        store.users,
        to_object_id(id),
        {"name": name, "password": password, "email": email},
    )
    if not doc:
        logger.info("User not found for update", user_id=id)
        raise NotFoundError("User", id)

    logger.info("User updated", user_id=id)
    return UserType.from_document(doc)


async def delete_user(info: strawberry.Info, id: str) -> bool:
    """Delete a user. References held by posts and comments are left in place."""
    store = get_store_from_info(info)
    deleted = await delete_by_id(store.users, to_object_id(id))
    logger.info("User delete", user_id=id, deleted=deleted)
    return deleted
