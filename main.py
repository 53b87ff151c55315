"""
Backend entry point.

Architecture:
- One Python process serving the FastAPI app
- Lesson content is read from disk once, in the lifespan handler, into one
  ContentRepository per collection (course, library) stored on app.state
- Route handlers read those repositories; POST /api/content/refresh swaps
  them for freshly loaded ones

Run with: python main.py [--port PORT]
"""

import logging
import os
import sys
from contextlib import asynccontextmanager
from pathlib import Path

project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

# Load .env.local first (if exists), then .env as fallback
# .env.local is gitignored and used for local dev overrides
load_dotenv(project_root / ".env.local")
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import check_content_dirs, get_allowed_origins, get_api_port
from core.content import load_collections
from web_api.routes.content import router as content_router
from web_api.routes.course import router as course_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    Loads every content collection before the first request is served.
    """
    ok, warnings = check_content_dirs()
    if not ok:
        for warning in warnings:
            logger.warning(warning)

    app.state.repositories = load_collections()

    yield

    app.state.repositories = None


app = FastAPI(
    title="Trading Course Platform API",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Content routes first so /api/content/* is never read as a collection path
app.include_router(content_router)
app.include_router(course_router)


@app.get("/health")
async def health():
    """Health check endpoint with loaded lesson counts."""
    repositories = getattr(app.state, "repositories", None) or {}
    return {
        "status": "healthy",
        "lessons": {name: len(repository) for name, repository in repositories.items()},
    }


if __name__ == "__main__":
    import argparse
    import uvicorn

    from core.config import get_log_level

    parser = argparse.ArgumentParser(description="Trading Course Platform Server")
    parser.add_argument(
        "--port",
        type=int,
        default=get_api_port(),
        help="Port to run the server on (default: API_PORT or 8000)",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run in development mode",
    )
    args = parser.parse_args()

    if args.dev:
        os.environ["DEV_MODE"] = "true"

    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Pass app object directly (not string) to avoid module reimport issues
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=args.port,
    )
