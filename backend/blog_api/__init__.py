"""
Blog API Backend: Application Package Initializer
====================================================

What: Marks the `blog_api` directory as a Python package.
Who:  Imported by uvicorn (`blog_api.main:app`), pytest, and the `blog-api` console script.

Architecture Note:
    The backend is a thin layered service:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Blog Logic)       │  ← Store calls + error translation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Document mapping + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async MongoDB client handle
    └─────────────────────────────────────┘

    The presentation shell (routes/shell.py + templates/) sits beside the
    API layer and never calls into the blog service.
"""

__version__ = "1.0.0"
