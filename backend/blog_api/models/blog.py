"""
Blog API Backend: Blog Post Document Model
=============================================

What:  Shape of a blog post as stored in the `blogs` MongoDB collection, and
       the mapping between stored documents and API payloads.
How:   Documents hold an ObjectId `_id` plus any subset of the three text
       fields. The API exposes `_id` as a hex string under `id`.
Who:   Used by BlogService on every insert, find and delete.

Document layout:
    {
        "_id": ObjectId("665f1c..."),   # store-assigned, immutable
        "author": "A",                 # optional text
        "articleHeading": "H",         # optional text
        "content": "C"                 # optional text
    }

    Fields missing at creation stay missing. The collection is
    schemaless; type enforcement happens in BlogCreate before insertion.
"""

from typing import Any, Dict, Mapping, Tuple

from bson import ObjectId

# Stored field names, in their on-the-wire (camelCase) spelling
BLOG_FIELDS: Tuple[str, ...] = ("author", "articleHeading", "content")


def to_document(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Build an insertable document from validated fields, dropping anything unknown."""
    return {name: fields[name] for name in BLOG_FIELDS if name in fields}


def from_document(document: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Convert a stored document into an API payload.

    `_id` becomes `id` (hex string); the three text fields are copied when
    present; any other stored keys are not exposed.
    """
    payload: Dict[str, Any] = {"id": str(document["_id"])}
    for name in BLOG_FIELDS:
        if name in document:
            payload[name] = document[name]
    return payload


def parse_object_id(blog_id: str) -> ObjectId:
    """
    Cast a path parameter to an ObjectId.

    Raises:
        bson.errors.InvalidId: not a 24-character hex string (or 12-byte input).
    """
    return ObjectId(blog_id)
