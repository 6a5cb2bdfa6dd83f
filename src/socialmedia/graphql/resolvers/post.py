from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...database.documents import new_post_document, to_object_id
from ...errors import NotFoundError
from ...logging import get_logger
from ..context import get_store_from_info
from .lookups import apply_update, delete_by_id, find_all, find_by_id, find_by_ids, update_fields

if TYPE_CHECKING:
    from ..types.comment import Comment
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)


# Query resolvers
async def resolve_posts(info: strawberry.Info) -> list[Post]:
    """Resolve every post in the collection."""
    from ..types.post import Post as PostType

    store = get_store_from_info(info)
    return [PostType.from_document(doc) for doc in await find_all(store.posts)]


async def resolve_post_by_id(info: strawberry.Info, id: str) -> Post:
    """Resolve a post by its ID, raising NotFoundError when absent."""
    from ..types.post import Post as PostType

    store = get_store_from_info(info)
    doc = await find_by_id(store.posts, to_object_id(id))
    if not doc:
        logger.info("Post not found", post_id=id)
        raise NotFoundError("Post", id)
    return PostType.from_document(doc)


# Field resolvers
async def resolve_post_author(post: Post, info: strawberry.Info) -> User | None:
    """Resolve the post author; a dangling reference resolves to None."""
    from ..types.user import User as UserType

    store = get_store_from_info(info)
    doc = await find_by_id(store.users, post.author_id)
    if not doc:
        logger.debug("Post author missing", post_id=post.id, author_id=str(post.author_id))
        return None
    return UserType.from_document(doc)


async def resolve_post_comments(post: Post, info: strawberry.Info) -> list[Comment]:
    from ..types.comment import Comment as CommentType

    store = get_store_from_info(info)
    docs = await find_by_ids(store.comments, post.comment_ids)
    return [CommentType.from_document(doc) for doc in docs]


async def resolve_post_likes(post: Post, info: strawberry.Info) -> list[User]:
    from ..types.user import User as UserType

    store = get_store_from_info(info)
    docs = await find_by_ids(store.users, post.like_ids)
    return [UserType.from_document(doc) for doc in docs]


# Mutation resolvers
async def create_post(info: strawberry.Info, content: str, author: str) -> Post:
    """Insert a post referencing ``author`` with no comments or likes.

    The author id is stored as given; its existence is not checked and the
    author's own ``posts`` list is not touched.
    """
    from ..types.post import Post as PostType

    store = get_store_from_info(info)
    result = await store.posts.insert_one(new_post_document(content, author))

    doc = await find_by_id(store.posts, result.inserted_id)
    if not doc:
        raise NotFoundError("Post", str(result.inserted_id))

    logger.info("Post created", post_id=str(result.inserted_id), author_id=author)
    return PostType.from_document(doc)


async def update_post(info: strawberry.Info, id: str, content: str | None = None) -> Post:
    from ..types.post import Post as PostType

    store = get_store_from_info(info)
    doc = await update_fields(store.posts, to_object_id(id), {"content": content})
    if not doc:
        logger.info("Post not found for update", post_id=id)
        raise NotFoundError("Post", id)

    logger.info("Post updated", post_id=id)
    return PostType.from_document(doc)


async def delete_post(info: strawberry.Info, id: str) -> bool:
    store = get_store_from_info(info)
    deleted = await delete_by_id(store.posts, to_object_id(id))
    logger.info("Post delete", post_id=id, deleted=deleted)
    return deleted


async def add_like_to_post(info: strawberry.Info, post_id: str, user_id: str) -> Post:
    """Append ``user_id`` to the post's likes. Repeated likes are kept."""
    from ..types.post import Post as PostType

    store = get_store_from_info(info)
    doc = await apply_update(
        store.posts,
        to_object_id(post_id),
        {"$push": {"likes": to_object_id(user_id)}},
    )
    if not doc:
        logger.info("Post not found for like", post_id=post_id)
        raise NotFoundError("Post", post_id)

    logger.info("Post liked", post_id=post_id, user_id=user_id)
    return PostType.from_document(doc)


async def remove_like_from_post(info: strawberry.Info, post_id: str, user_id: str) -> Post:
    """Remove every occurrence of ``user_id`` from the post's likes."""
    from ..types.post import Post as PostType

    store = get_store_from_info(info)
    doc = await apply_update(
        store.posts,
        to_object_id(post_id),
        {"$pull": {"likes": to_object_id(user_id)}},
    )
    if not doc:
        logger.info("Post not found for unlike", post_id=post_id)
        raise NotFoundError("Post", post_id)

    logger.info("Post unliked", post_id=post_id, user_id=user_id)
    return PostType.from_document(doc)
