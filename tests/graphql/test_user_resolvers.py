"""
Unit tests for user query, mutation and field resolvers
"""

import pytest
from bson import ObjectId

from socialmedia.errors import NotFoundError
from socialmedia.graphql.resolvers.user import (
    create_user,
    delete_user,
    resolve_user_by_id,
    resolve_user_comments,
    resolve_user_liked_posts,
    resolve_user_posts,
    resolve_users,
    update_user,
)


class TestCreateUser:
    @pytest.mark.asyncio
    async def test_create_user_starts_with_empty_references(self, mock_info, store):
        user = await create_user(mock_info, "Ana", "secret", "ana@example.com")

        assert user.name == "Ana"
        assert user.password == "secret"
        assert user.email == "ana@example.com"
        assert user.post_ids == []
        assert user.comment_ids == []
        assert user.liked_post_ids == []

        stored = await store.users.find_one({"_id": ObjectId(user.id)})
        assert stored["posts"] == []
        assert stored["comments"] == []
        assert stored["likedPosts"] == []

    @pytest.mark.asyncio
    async def test_created_user_is_retrievable_by_id(self, mock_info):
        created = await create_user(mock_info, "Ana", "secret", "ana@example.com")

        fetched = await resolve_user_by_id(mock_info, created.id)

        assert fetched.id == created.id
        assert fetched.name == "Ana"
        assert fetched.email == "ana@example.com"


class TestQueryUsers:
    @pytest.mark.asyncio
    async def test_users_returns_every_record(self, mock_info):
        await create_user(mock_info, "Ana", "a", "ana@example.com")
        await create_user(mock_info, "Ben", "b", "ben@example.com")

        users = await resolve_users(mock_info)

        assert sorted(u.name for u in users) == ["Ana", "Ben"]

    @pytest.mark.asyncio
    async def test_users_empty_collection(self, mock_info):
        assert await resolve_users(mock_info) == []

    @pytest.mark.asyncio
    async def test_user_by_unknown_id_raises_not_found(self, mock_info):
        with pytest.raises(NotFoundError, match="User not found"):
            await resolve_user_by_id(mock_info, str(ObjectId()))


class TestUpdateUser:
    @pytest.mark.asyncio
    async def test_update_merges_only_supplied_fields(self, mock_info):
        created = await create_user(mock_info, "Ana", "secret", "ana@example.com")

        updated = await update_user(mock_info, created.id, name="Ana Maria")

        assert updated.name == "Ana Maria"
        assert updated.password == "secret"
        assert updated.email == "ana@example.com"

    @pytest.mark.asyncio
    async def test_update_does_not_write_identifier(self, mock_info, store):
        created = await create_user(mock_info, "Ana", "secret", "ana@example.com")

        await update_user(mock_info, created.id, email="new@example.com")

        stored = await store.users.find_one({"_id": ObjectId(created.id)})
        assert "id" not in stored
        assert stored["email"] == "new@example.com"

    @pytest.mark.asyncio
    async def test_update_without_fields_returns_current_record(self, mock_info):
        created = await create_user(mock_info, "Ana", "secret", "ana@example.com")

        updated = await update_user(mock_info, created.id)

        assert updated.name == "Ana"

    @pytest.mark.asyncio
    async def test_update_unknown_user_raises_not_found(self, mock_info):
        with pytest.raises(NotFoundError, match="User not found"):
            await update_user(mock_info, str(ObjectId()), name="nobody")

    @pytest.mark.asyncio
    async def test_update_without_fields_unknown_user_raises_not_found(self, mock_info):
        with pytest.raises(NotFoundError):
            await update_user(mock_info, str(ObjectId()))


class TestDeleteUser:
    @pytest.mark.asyncio
    async def test_delete_unknown_user_returns_false(self, mock_info):
        assert await delete_user(mock_info, str(ObjectId())) is False

    @pytest.mark.asyncio
    async def test_delete_existing_user_then_lookup_fails(self, mock_info):
        created = await create_user(mock_info, "Ana", "secret", "ana@example.com")

        assert await delete_user(mock_info, created.id) is True
        with pytest.raises(NotFoundError):
            await resolve_user_by_id(mock_info, created.id)


class TestUserFieldResolvers:
    @pytest.mark.asyncio
    async def test_posts_comments_and_liked_posts(self, mock_info, store):
        post_a = (await store.posts.insert_one({"content": "a"})).inserted_id
        post_b = (await store.posts.insert_one({"content": "b"})).inserted_id
        comment = (await store.comments.insert_one({"text": "c"})).inserted_id
        user_id = (
            await store.users.insert_one(
                {
                    "name": "Ana",
                    "password": "x",
                    "email": "ana@example.com",
                    "posts": [post_a],
                    "comments": [comment],
                    "likedPosts": [post_a, post_b],
                }
            )
        ).inserted_id
        user = await resolve_user_by_id(mock_info, str(user_id))

        posts = await resolve_user_posts(user, mock_info)
        comments = await resolve_user_comments(user, mock_info)
        liked = await resolve_user_liked_posts(user, mock_info)

        assert [p.content for p in posts] == ["a"]
        assert [c.text for c in comments] == ["c"]
        assert sorted(p.content for p in liked) == ["a", "b"]

    @pytest.mark.asyncio
    async def test_missing_reference_lists_resolve_empty(self, mock_info, store):
        user_id = (
            await store.users.insert_one({"name": "Old", "password": "x", "email": "o@x"})
        ).inserted_id
        user = await resolve_user_by_id(mock_info, str(user_id))

        assert await resolve_user_posts(user, mock_info) == []
        assert await resolve_user_comments(user, mock_info) == []
        assert await resolve_user_liked_posts(user, mock_info) == []
