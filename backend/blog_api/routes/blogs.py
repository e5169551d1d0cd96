"""
Blog API Backend: Blog Route Handlers
========================================

What:  Handles POST /blogs, GET /blogs and DELETE /blogs/{blog_id}.
How:   Extracts the body or path parameter, delegates to BlogService with the
       store handle from `get_blog_store`, returns the result.
Who:   Called by any HTTP client; the presentation shell does not use these.

Status codes:
    POST   /blogs          201 created | 400 {error}
    GET    /blogs          200 [posts] | 500 {error}
    DELETE /blogs/{id}     200 {message, deleted} | 404 {error: "Not found"} | 500 {error}

Error bodies are produced by the global exception handlers in main.py.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends

from blog_api.database import BlogStore, get_blog_store
from blog_api.schemas.blog import BlogPost, DeleteResponse, ErrorResponse
from blog_api.services.blog_service import blog_service

router = APIRouter(prefix="/blogs", tags=["Blogs"])


@router.post(
    "",
    status_code=201,
    response_model=BlogPost,
    response_model_exclude_unset=True,
    responses={
        201: {"description": "Post created", "model": BlogPost},
        400: {"description": "Body rejected or insert failed", "model": ErrorResponse},
    },
    summary="Create a blog post",
    description=(
        "Stores a post built from whichever of author, articleHeading and content "
        "are present in the body. No field is required."
    ),
)
async def create_blog(
    body: Any = Body(default=None, examples=[{"author": "A", "articleHeading": "H", "content": "C"}]),
    store: BlogStore = Depends(get_blog_store),
) -> BlogPost:
    """Create a post; the store assigns its id."""
    return await blog_service.create_blog(store=store, body=body)


@router.get(
    "",
    response_model=List[BlogPost],
    response_model_exclude_unset=True,
    responses={
        200: {"description": "Every stored post"},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="List all blog posts",
    description="Returns every post in the order the store yields them.",
)
async def list_blogs(store: BlogStore = Depends(get_blog_store)) -> List[BlogPost]:
    return await blog_service.list_blogs(store=store)


@router.delete(
    "/{blog_id}",
    response_model=DeleteResponse,
    response_model_exclude_unset=True,
    responses={
        200: {"description": "Post deleted", "model": DeleteResponse},
        404: {"description": "No post with this id", "model": ErrorResponse},
        500: {"description": "Malformed id or store error", "model": ErrorResponse},
    },
    summary="Delete a blog post by id",
)
async def delete_blog(
    blog_id: str,
    store: BlogStore = Depends(get_blog_store),
) -> DeleteResponse:
    """
    Delete one post.

    `blog_id` is taken as a plain string; casting it to an ObjectId happens
    in the service so a malformed id surfaces as a store error (500), not as
    FastAPI's 422.
    """
    return await blog_service.delete_blog(store=store, blog_id=blog_id)
