"""
Blog API Backend: Blog Service
=================================

What:  The three blog operations (create, list, delete), each a single store call.
How:   Takes the BlogStore handle per call, runs the driver operation, and
       translates driver failures into application exceptions that carry the
       driver's message verbatim.
Who:   Called by route handlers in routes/blogs.py.

Operation → store call → failure mapping:
    create_blog  insert_one({...})                ValidationError / DatabaseError → 400
    list_blogs   find({}).to_list()               DatabaseError → 500
    delete_blog  find_one_and_delete({"_id": …})  None → NotFoundError (404)
                                                  InvalidId / driver error → 500

Why a malformed id answers 500, not 400:
    The id is cast to ObjectId as part of the store call, and any failure of
    that call is a store error. Only a well-formed id that matches nothing is
    a 404.

No sorting, pagination, retries or transactions. BlogService keeps no state;
the store handle is passed in on every call.
"""

import logging
from typing import Any, List, Optional

from bson.errors import InvalidId
from pydantic import ValidationError as PydanticValidationError
from pymongo.errors import PyMongoError

from blog_api.database import BlogStore
from blog_api.exceptions import DatabaseError, NotFoundError, ValidationError
from blog_api.models.blog import from_document, parse_object_id, to_document
from blog_api.schemas.blog import BlogCreate, BlogPost, DeleteResponse

logger = logging.getLogger(__name__)


def _format_validation_error(exc: PydanticValidationError) -> str:
    """Render pydantic errors as one line: 'Blog validation failed: author: ...'."""
    parts = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        parts.append(f"{location}: {err['msg']}" if location else err["msg"])
    return "Blog validation failed: " + "; ".join(parts)


def _first_error_field(exc: PydanticValidationError) -> Optional[str]:
    errors = exc.errors()
    if not errors or not errors[0].get("loc"):
        return None
    return str(errors[0]["loc"][0])


class BlogService:
    """
    Store pass-through for blog posts.

    Error Handling Strategy:
        Driver exceptions are caught once, at the call site, and re-raised as
        DatabaseError with str(exc) as the message. The service does not
        interpret them.
    """

    async def create_blog(self, store: BlogStore, body: Any) -> BlogPost:
        """
        Insert a new post built from exactly the fields present in `body`.

        Args:
            store: Store handle (injected by FastAPI)
            body:  Parsed JSON body; None (empty body) creates an empty post

        Returns:
            BlogPost with the assigned id and the stored fields

        Raises:
            ValidationError: body is not an object, or a field has the wrong type (→ 400)
            DatabaseError:   the insert failed (→ 400)
        """
        if body is None:
            body = {}
        if not isinstance(body, dict):
            raise ValidationError(
                message="Blog validation failed: request body must be a JSON object",
                context={"body_type": type(body).__name__},
            )

        try:
            fields = BlogCreate.model_validate(body)
        except PydanticValidationError as e:
            raise ValidationError(
                message=_format_validation_error(e),
                field=_first_error_field(e),
            ) from e

        document = to_document(fields.model_dump(by_alias=True, exclude_unset=True))

        try:
            result = await store.blogs.insert_one(document)
        except DatabaseError as e:
            raise DatabaseError(message=e.message, status_code=400, context=e.context) from e
        except PyMongoError as e:
            logger.error("Insert into blogs failed: %s", str(e))
            raise DatabaseError(
                message=str(e),
                status_code=400,
                context={"error_type": type(e).__name__},
            ) from e

        stored = {**document, "_id": result.inserted_id}
        logger.info("Blog created: %s", result.inserted_id)
        return BlogPost.model_validate(from_document(stored))

    async def list_blogs(self, store: BlogStore) -> List[BlogPost]:
        """
        Return every post in store-native order.

        Raises:
            DatabaseError: the query failed (→ 500)
        """
        try:
            documents = await store.blogs.find({}).to_list()
        except PyMongoError as e:
            logger.error("Listing blogs failed: %s", str(e))
            raise DatabaseError(
                message=str(e),
                context={"error_type": type(e).__name__},
            ) from e

        return [BlogPost.model_validate(from_document(doc)) for doc in documents]

    async def delete_blog(self, store: BlogStore, blog_id: str) -> DeleteResponse:
        """
        Remove the post whose id is `blog_id` and return it.

        Raises:
            NotFoundError: no post has that id (→ 404)
            DatabaseError: malformed id or driver failure (→ 500)
        """
        try:
            object_id = parse_object_id(blog_id)
            document = await store.blogs.find_one_and_delete({"_id": object_id})
        except (InvalidId, PyMongoError) as e:
            logger.error("Deleting blog %s failed: %s", blog_id, str(e))
            raise DatabaseError(
                message=str(e),
                context={"blog_id": blog_id, "error_type": type(e).__name__},
            ) from e

        if document is None:
            raise NotFoundError(resource="blog", resource_id=blog_id)

        logger.info("Blog deleted: %s", blog_id)
        return DeleteResponse(
            message="Blog deleted successfully",
            deleted=BlogPost.model_validate(from_document(document)),
        )


# ── Singleton Instance ────────────────────────────────────────────────────
blog_service = BlogService()
