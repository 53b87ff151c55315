# core/content/catalog.py
"""The two content collections served by the platform."""

from pathlib import Path

from core.config import get_content_dir, get_library_dir

from .repository import ContentRepository

COURSE = "course"
LIBRARY = "library"
COLLECTIONS = (COURSE, LIBRARY)


def get_collection_dirs() -> dict[str, Path]:
    """Map each collection name to its configured content root."""
    return {COURSE: get_content_dir(), LIBRARY: get_library_dir()}


def load_collections(
    dirs: dict[str, Path] | None = None,
) -> dict[str, ContentRepository]:
    """Load a fresh repository for every collection.

    Raises:
        FrontmatterError: If any lesson in any collection is malformed
    """
    dirs = dirs or get_collection_dirs()
    return {
        name: ContentRepository.from_directory(dirs[name], collection=name)
        for name in COLLECTIONS
    }
