"""
Document store calls shared by the entity resolvers
"""

from collections.abc import Mapping, Sequence
from typing import Any

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument


async def find_all(collection: AsyncIOMotorCollection) -> list[dict[str, Any]]:
    return await collection.find().to_list(length=None)


async def find_by_id(
    collection: AsyncIOMotorCollection, id: ObjectId | None
) -> dict[str, Any] | None:
    if id is None:
        return None
    return await collection.find_one({"_id": id})


async def find_by_ids(
    collection: AsyncIOMotorCollection, ids: Sequence[ObjectId]
) -> list[dict[str, Any]]:
    """Fetch every document whose id is in ``ids``.

    Results come back in the store's natural order; ids without a matching
    document are skipped.
    """
    if not ids:
        return []
    return await collection.find({"_id": {"$in": list(ids)}}).to_list(length=None)


async def update_fields(
    collection: AsyncIOMotorCollection, id: ObjectId, fields: Mapping[str, Any]
) -> dict[str, Any] | None:
    """Shallow-merge the supplied (non-null) fields and return the updated document."""
    patch = {key: value for key, value in fields.items() if value is not None}
    if not patch:
        return await collection.find_one({"_id": id})
    return await collection.find_one_and_update(
        {"_id": id},
        {"$set": patch},
        return_document=ReturnDocument.AFTER,
    )


async def apply_update(
    collection: AsyncIOMotorCollection, id: ObjectId, update: Mapping[str, Any]
) -> dict[str, Any] | None:
    """Apply a raw update document atomically and return the result."""
    return await collection.find_one_and_update(
        {"_id": id},
        dict(update),
        return_document=ReturnDocument.AFTER,
    )


async def delete_by_id(collection: AsyncIOMotorCollection, id: ObjectId) -> bool:
    result = await collection.delete_one({"_id": id})
    return result.deleted_count > 0
