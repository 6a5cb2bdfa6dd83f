"""
Tests for stored document builders and identifier conversion
"""

import pytest
from bson import ObjectId
from bson.errors import InvalidId

from socialmedia.database.documents import (
    new_comment_document,
    new_post_document,
    new_user_document,
    to_object_id,
)


def test_to_object_id_converts_strings():
    oid = ObjectId()

    assert to_object_id(str(oid)) == oid
    assert to_object_id(oid) is oid


def test_to_object_id_rejects_malformed_ids():
    with pytest.raises(InvalidId):
        to_object_id("abc")


def test_new_user_document_has_empty_reference_lists():
    assert new_user_document("Ana", "pw", "ana@example.com") == {
        "name": "Ana",
        "password": "pw",
        "email": "ana@example.com",
        "posts": [],
        "comments": [],
        "likedPosts": [],
    }


def test_new_post_and_comment_store_native_ids():
    author, post = ObjectId(), ObjectId()

    assert new_post_document("hi", str(author)) == {
        "content": "hi",
        "author": author,
        "comments": [],
        "likes": [],
    }
    assert new_comment_document("nice", str(author), str(post)) == {
        "text": "nice",
        "author": author,
        "post": post,
    }
