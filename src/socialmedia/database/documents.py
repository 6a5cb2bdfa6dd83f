"""
Stored document shapes and identifier helpers
"""

from typing import TypedDict

from bson import ObjectId


class UserDocument(TypedDict, total=False):
    _id: ObjectId
    name: str
    password: str
    email: str
    posts: list[ObjectId]
    comments: list[ObjectId]
    likedPosts: list[ObjectId]


class PostDocument(TypedDict, total=False):
    _id: ObjectId
    content: str
    author: ObjectId
    comments: list[ObjectId]
    likes: list[ObjectId]


class CommentDocument(TypedDict, total=False):
    _id: ObjectId
    text: str
    author: ObjectId
    post: ObjectId


def to_object_id(value: str | ObjectId) -> ObjectId:
    """Convert a GraphQL ID to the store's native identifier.

    Malformed strings raise ``bson.errors.InvalidId``; there is no
    pre-validation layer.
    """
    if isinstance(value, ObjectId):
        return value
    return ObjectId(str(value))


def new_user_document(name: str, password: str, email: str) -> UserDocument:
    return UserDocument(
        name=name,
        password=password,
        email=email,
        posts=[],
        comments=[],
        likedPosts=[],
    )


def new_post_document(content: str, author: str | ObjectId) -> PostDocument:
    return PostDocument(
        content=content,
        author=to_object_id(author),
        comments=[],
        likes=[],
    )


def new_comment_document(
    text: str, author: str | ObjectId, post: str | ObjectId
) -> CommentDocument:
    return CommentDocument(
        text=text,
        author=to_object_id(author),
        post=to_object_id(post),
    )
