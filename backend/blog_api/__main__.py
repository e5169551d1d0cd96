"""
Blog API Backend: Server Entry Point
=======================================

What:  Runs the application under uvicorn on the configured host/port (default 0.0.0.0:5000).
Who:   `python -m blog_api` or the `blog-api` console script.
"""

import uvicorn

from blog_api.config import settings


def main() -> None:
    uvicorn.run(
        "blog_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
