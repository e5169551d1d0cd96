# Middleware package init
"""
Blog API Backend: Middleware Package
=======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [CORS] → [Request ID] → [Logging] → Route Handler

    - CORS: FastAPI's CORSMiddleware, every origin/method/header allowed
    - Request ID: correlation id in a ContextVar and the X-Request-ID header
    - Logging: method, path, status and duration of each request
"""
