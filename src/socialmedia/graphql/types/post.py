"""
Post GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated, Any

import strawberry
from bson import ObjectId

if TYPE_CHECKING:
    from .comment import Comment
    from .user import User


@strawberry.type
class Post:
    """Post type for GraphQL API."""

    id: strawberry.ID
    content: str

    author_id: strawberry.Private[ObjectId | None]
    comment_ids: strawberry.Private[list[ObjectId]]
    like_ids: strawberry.Private[list[ObjectId]]

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Post":
        return cls(
            id=strawberry.ID(str(doc["_id"])),
            content=doc.get("content", ""),
            author_id=doc.get("author"),
            comment_ids=list(doc.get("comments") or []),
            like_ids=list(doc.get("likes") or []),
        )

    @strawberry.field
    async def author(
        self, info: strawberry.Info
    ) -> Annotated["User", strawberry.lazy(".user")] | None:
        """Get the author of this post, or null if the user no longer exists."""
        from ..resolvers.post import resolve_post_author

        return await resolve_post_author(self, info)

    @strawberry.field
    async def comments(
        self, info: strawberry.Info
    ) -> list[Annotated["Comment", strawberry.lazy(".comment")]]:
        """Get the comments referenced by this post."""
        from ..resolvers.post import resolve_post_comments

        return await resolve_post_comments(self, info)

    @strawberry.field
    async def likes(
        self, info: strawberry.Info
    ) -> list[Annotated["User", strawberry.lazy(".user")]]:
        """Get the users who liked this post."""
        from ..resolvers.post import resolve_post_likes

        return await resolve_post_likes(self, info)
