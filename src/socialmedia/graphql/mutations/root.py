"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.comment import Comment
from ..types.post import Post
from ..types.user import User


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # User mutations
    @strawberry.mutation(name="createUser")
    async def create_user(
        self, info: strawberry.Info, name: str, password: str, email: str
    ) -> User:
        """Create a new user."""
        from ..resolvers.user import create_user

        return await create_user(info, name, password, email)

    @strawberry.mutation(name="updateUser")
    async def update_user(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        name: str | None = None,
        password: str | None = None,
        email: str | None = None,
    ) -> User:
        """Update the supplied fields of a user."""
        from ..resolvers.user import update_user

        return await update_user(info, str(id), name=name, password=password, email=email)

    @strawberry.mutation(name="deleteUser")
    async def delete_user(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a user."""
        from ..resolvers.user import delete_user

        return await delete_user(info, str(id))

    # Post mutations
    @strawberry.mutation(name="createPost")
    async def create_post(
        self, info: strawberry.Info, content: str, author: strawberry.ID
    ) -> Post:
        """Create a new post."""
        from ..resolvers.post import create_post

        return await create_post(info, content, str(author))

    @strawberry.mutation(name="updatePost")
    async def update_post(
        self, info: strawberry.Info, id: strawberry.ID, content: str | None = None
    ) -> Post:
        """Update the content of a post."""
        from ..resolvers.post import update_post

        return await update_post(info, str(id), content=content)

    @strawberry.mutation(name="deletePost")
    async def delete_post(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a post."""
        from ..resolvers.post import delete_post

        return await delete_post(info, str(id))

    @strawberry.mutation(name="addLikeToPost")
    async def add_like_to_post(
        self, info: strawberry.Info, post_id: strawberry.ID, user_id: strawberry.ID
    ) -> Post:
        """Record that a user likes a post."""
        from ..resolvers.post import add_like_to_post

        return await add_like_to_post(info, str(post_id), str(user_id))

    @strawberry.mutation(name="removeLikeFromPost")
    async def remove_like_from_post(
        self, info: strawberry.Info, post_id: strawberry.ID, user_id: strawberry.ID
    ) -> Post:
        """Remove a user's likes from a post."""
        from ..resolvers.post import remove_like_from_post

        return await remove_like_from_post(info, str(post_id), str(user_id))

    # Comment mutations
    @strawberry.mutation(name="createComment")
    async def create_comment(
        self, info: strawberry.Info, text: str, author: strawberry.ID, post: strawberry.ID
    ) -> Comment:
        """Create a new comment on a post."""
        from ..resolvers.comment import create_comment

        return await create_comment(info, text, str(author), str(post))

    @strawberry.mutation(name="updateComment")
    async def update_comment(
        self, info: strawberry.Info, id: strawberry.ID, text: str | None = None
    ) -> Comment:
        """Update the text of a comment."""
        from ..resolvers.comment import update_comment

        return await update_comment(info, str(id), text=text)

    @strawberry.mutation(name="deleteComment")
    async def delete_comment(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a comment."""
        from ..resolvers.comment import delete_comment

        return await delete_comment(info, str(id))
