"""
Blog API Backend: Pydantic Request/Response Schemas
======================================================

What:  Pydantic models defining the API contract for blog posts.
How:   BlogCreate enforces field types on incoming bodies; BlogPost and
       DeleteResponse describe what the routes return (serialized with
       `response_model_exclude_unset` so absent fields stay absent).
Who:   Used by BlogService to validate/serialize and by routes for OpenAPI docs.

JSON keys are camelCase (`articleHeading`); Python attributes are snake_case.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class BlogCreate(BaseModel):
    """
    What:  Body of POST /blogs.

    Every field is optional and free text. Numbers are coerced to their
    string form; any other value, null included, fails validation. Keys are
    matched by their JSON name only, so `article_heading` is an unknown key
    like any other: ignored, never reaching the store.

    Why str with a None default (not Optional[str]):
        Defaults are not validated, so an absent field stays absent, while an
        explicit null is validated against `str` and rejected.
    """
    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    author: str = Field(default=None, description="Post author")
    article_heading: str = Field(
        default=None,
        alias="articleHeading",
        description="Post heading",
    )
    content: str = Field(default=None, description="Post body text")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class BlogPost(BaseModel):
    """
    What:  A stored blog post.
    Who:   Returned by POST /blogs (201), as items of GET /blogs, and inside
           DELETE /blogs/{id} responses.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="Store-assigned identifier (ObjectId hex string)")
    author: Optional[str] = Field(default=None, description="Post author")
    article_heading: Optional[str] = Field(
        default=None,
        alias="articleHeading",
        description="Post heading",
    )
    content: Optional[str] = Field(default=None, description="Post body text")


class DeleteResponse(BaseModel):
    """
    What:  Confirmation returned by DELETE /blogs/{id} on success.

    Example:
        {"message": "Blog deleted successfully", "deleted": {"id": "...", "author": "A"}}
    """
    message: str = Field(description="Human-readable confirmation")
    deleted: BlogPost = Field(description="The record that was removed")


class ErrorResponse(BaseModel):
    """
    What:  Error body shared by every failing endpoint.

    The message is the raw store/driver text, or "Not found" for a delete
    of an unknown id.
    """
    error: str = Field(description="Error message")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and store status.
    Who:   Returned by GET /health.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
