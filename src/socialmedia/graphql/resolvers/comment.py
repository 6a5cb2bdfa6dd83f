from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...database.documents import new_comment_document, to_object_id
from ...errors import NotFoundError
from ...logging import get_logger
from ..context import get_store_from_info
from .lookups import delete_by_id, find_all, find_by_id, update_fields

if TYPE_CHECKING:
    from ..types.comment import Comment
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)


# Query resolvers
async def resolve_comments(info: strawberry.Info) -> list[Comment]:
    from ..types.comment import Comment as CommentType

    store = get_store_from_info(info)
    return [CommentType.from_document(doc) for doc in await find_all(store.comments)]


async def resolve_comment_by_id(info: strawberry.Info, id: str) -> Comment:
    from ..types.comment import Comment as CommentType

    store = get_store_from_info(info)
    doc = await find_by_id(store.comments, to_object_id(id))
    if not doc:
        logger.info("Comment not found", comment_id=id)
        raise NotFoundError("Comment", id)
    return CommentType.from_document(doc)


# Field resolvers
async def resolve_comment_author(comment: Comment, info: strawberry.Info) -> User | None:
    from ..types.user import User as UserType

    store = get_store_from_info(info)
    doc = await find_by_id(store.users, comment.author_id)
    return UserType.from_document(doc) if doc else None


async def resolve_comment_post(comment: Comment, info: strawberry.Info) -> Post | None:
    from ..types.post import Post as PostType

    store = get_store_from_info(info)
    doc = await find_by_id(store.posts, comment.post_id)
    return PostType.from_document(doc) if doc else None


# Mutation resolvers
async def create_comment(info: strawberry.Info, text: str, author: str, post: str) -> Comment:
    """
    Insert a comment and return it built from the arguments and the new id.

    The stored document is not read back, and neither the post's nor the
    author's ``comments`` list is updated.
    """
    from ..types.comment import Comment as CommentType

    store = get_store_from_info(info)
    doc = new_comment_document(text, author, post)
    result = await store.comments.insert_one(dict(doc))

    logger.info("Comment created", comment_id=str(result.inserted_id), post_id=post)
    return CommentType.from_document({**doc, "_id": result.inserted_id})


async def update_comment(info: strawberry.Info, id: str, text: str | None = None) -> Comment:
    from ..types.comment import Comment as CommentType

    store = get_store_from_info(info)
    doc = await update_fields(store.comments, to_object_id(id), {"text": text})
    if not doc:
        logger.info("Comment not found for update", comment_id=id)
        raise NotFoundError("Comment", id)

    logger.info("Comment updated", comment_id=id)
    return CommentType.from_document(doc)


async def delete_comment(info: strawberry.Info, id: str) -> bool:
    store = get_store_from_info(info)
    deleted = await delete_by_id(store.comments, to_object_id(id))
    logger.info("Comment delete", comment_id=id, deleted=deleted)
    return deleted
