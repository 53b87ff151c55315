"""
Content management API routes.

Endpoints:
- GET /api/content/status - Loaded collections, lesson counts, load times
- POST /api/content/refresh - Reload every collection from disk
"""

import logging

from fastapi import APIRouter, HTTPException, Request

from core.content import ContentError, RepositoryNotLoadedError, load_collections
from web_api.dependencies import get_repositories

router = APIRouter(prefix="/api/content", tags=["content"])

logger = logging.getLogger(__name__)


@router.get("/status")
async def content_status(request: Request):
    """
    Get current content status for debugging.

    Returns module and lesson counts plus the load time of each collection.
    """
    try:
        repositories = get_repositories(request)
    except RepositoryNotLoadedError:
        return {"status": "not_initialized", "message": "Content not yet loaded"}

    return {
        "status": "ok",
        "collections": {
            name: {
                "baseDir": str(repository.base_dir) if repository.base_dir else None,
                "modules": len(repository.module_slugs()),
                "lessons": len(repository),
                "loadedAt": repository.loaded_at.isoformat(),
            }
            for name, repository in repositories.items()
        },
    }


@router.post("/refresh")
async def refresh_content(request: Request):
    """
    Reload all collections from disk.

    The previous repositories stay in place if loading fails.
    TODO: Add admin authentication
    """
    logger.info("Content refresh requested...")

    try:
        repositories = load_collections()
    except ContentError as e:
        logger.error(f"Content refresh failed: {e}")
        raise HTTPException(status_code=500, detail=f"Content refresh failed: {e}")

    request.app.state.repositories = repositories
    logger.info("Content refreshed successfully")
    return {
        "status": "ok",
        "lessons": {name: len(repository) for name, repository in repositories.items()},
    }
