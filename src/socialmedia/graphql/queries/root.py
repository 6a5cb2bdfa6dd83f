"""
Root GraphQL query definitions
"""

import strawberry

from ..types.comment import Comment
from ..types.post import Post
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def users(self, info: strawberry.Info) -> list[User]:
        """Get every user."""
        from ..resolvers.user import resolve_users

        return await resolve_users(info)

    @strawberry.field
    async def user(self, info: strawberry.Info, id: strawberry.ID) -> User:
        """Get a user by ID."""
        from ..resolvers.user import resolve_user_by_id

        return await resolve_user_by_id(info, str(id))

    @strawberry.field
    async def posts(self, info: strawberry.Info) -> list[Post]:
        """Get every post."""
        from ..resolvers.post import resolve_posts

        return await resolve_posts(info)

    @strawberry.field
    async def post(self, info: strawberry.Info, id: strawberry.ID) -> Post:
        """Get a post by ID."""
        from ..resolvers.post import resolve_post_by_id

        return await resolve_post_by_id(info, str(id))

    @strawberry.field
    async def comments(self, info: strawberry.Info) -> list[Comment]:
        """Get every comment."""
        from ..resolvers.comment import resolve_comments

        return await resolve_comments(info)

    @strawberry.field
    async def comment(self, info: strawberry.Info, id: strawberry.ID) -> Comment:
        """Get a comment by ID."""
        from ..resolvers.comment import resolve_comment_by_id

        return await resolve_comment_by_id(info, str(id))
