# web_api/dependencies.py
"""Access to the content repositories loaded at startup."""

from enum import Enum

from fastapi import HTTPException, Request

from core.content import ContentRepository, RepositoryNotLoadedError


class Collection(str, Enum):
    course = "course"
    library = "library"


def get_repositories(request: Request) -> dict[str, ContentRepository]:
    """Get all loaded repositories from app state.

    Raises:
        RepositoryNotLoadedError: If the app lifespan has not loaded content
    """
    repositories = getattr(request.app.state, "repositories", None)
    if repositories is None:
        raise RepositoryNotLoadedError("Content repositories not loaded yet")
    return repositories


def get_repository(request: Request, collection: Collection) -> ContentRepository:
    """FastAPI dependency resolving the repository for a path's collection."""
    try:
        repositories = get_repositories(request)
    except RepositoryNotLoadedError as e:
        raise HTTPException(status_code=503, detail=str(e))

    repository = repositories.get(collection.value)
    if repository is None:
        raise HTTPException(
            status_code=503, detail=f"Collection not loaded: {collection.value}"
        )
    return repository
