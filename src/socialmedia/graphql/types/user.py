"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated, Any

import strawberry
from bson import ObjectId

if TYPE_CHECKING:
    from .comment import Comment
    from .post import Post


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: strawberry.ID
    name: str
    password: str
    email: str

    post_ids: strawberry.Private[list[ObjectId]]
    comment_ids: strawberry.Private[list[ObjectId]]
    liked_post_ids: strawberry.Private[list[ObjectId]]

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "User":
        return cls(
            id=strawberry.ID(str(doc["_id"])),
            name=doc.get("name", ""),
            password=doc.get("password", ""),
            email=doc.get("email", ""),
            post_ids=list(doc.get("posts") or []),
            comment_ids=list(doc.get("comments") or []),
            liked_post_ids=list(doc.get("likedPosts") or []),
        )

    @strawberry.field
    async def posts(
        self, info: strawberry.Info
    ) -> list[Annotated["Post", strawberry.lazy(".post")]]:
        """Posts authored by this user."""
        from ..resolvers.user import resolve_user_posts

        return await resolve_user_posts(self, info)

    @strawberry.field
    async def comments(
        self, info: strawberry.Info
    ) -> list[Annotated["Comment", strawberry.lazy(".comment")]]:
        """Comments written by this user."""
        from ..resolvers.user import resolve_user_comments

        return await resolve_user_comments(self, info)

    @strawberry.field
    async def liked_posts(
        self, info: strawberry.Info
    ) -> list[Annotated["Post", strawberry.lazy(".post")]]:
        """Posts this user has liked."""
        from ..resolvers.user import resolve_user_liked_posts

        return await resolve_user_liked_posts(self, info)
