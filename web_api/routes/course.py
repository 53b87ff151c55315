"""
Course and library lesson API routes.

Endpoints ({collection} is "course" or "library"):
- GET /api/{collection}/modules - Modules with lessons in display order
- GET /api/{collection}/{module_slug}/{lesson_slug} - Lesson metadata and headings
- GET /api/{collection}/{module_slug}/{lesson_slug}/html - Rendered lesson body
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from core.content import (
    ContentParseError,
    ContentRepository,
    get_lesson_component,
    get_modules,
    get_next_item,
    load_lesson_content,
)
from web_api.dependencies import Collection, get_repository

router = APIRouter(prefix="/api", tags=["course"])

logger = logging.getLogger(__name__)


@router.get("/{collection}/modules")
async def list_modules(
    collection: Collection,
    repository: ContentRepository = Depends(get_repository),
):
    """List modules with their lessons, for the sidebar and overview pages."""
    modules = get_modules(repository)
    return {"modules": [module.to_dict() for module in modules]}


@router.get("/{collection}/{module_slug}/{lesson_slug}")
async def get_lesson(
    collection: Collection,
    module_slug: str,
    lesson_slug: str,
    repository: ContentRepository = Depends(get_repository),
):
    """Get a lesson's front-matter, headings and the next lesson to link to.

    The rendered body is served separately by the /html endpoint.
    """
    try:
        lesson = load_lesson_content(repository, module_slug, lesson_slug)
    except ContentParseError as e:
        logger.warning(f"Malformed lesson {module_slug}/{lesson_slug}: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    if lesson is None:
        raise HTTPException(
            status_code=404, detail=f"Lesson not found: {module_slug}/{lesson_slug}"
        )

    next_item = get_next_item(get_modules(repository), module_slug, lesson_slug)
    return {
        "frontmatter": lesson.frontmatter.to_dict(),
        "headings": [heading.to_dict() for heading in lesson.headings],
        "moduleSlug": module_slug,
        "lessonSlug": lesson_slug,
        "nextItem": next_item.to_dict() if next_item else None,
    }


@router.get("/{collection}/{module_slug}/{lesson_slug}/html", response_class=HTMLResponse)
async def get_lesson_html(
    collection: Collection,
    module_slug: str,
    lesson_slug: str,
    repository: ContentRepository = Depends(get_repository),
):
    """Render a lesson body to HTML."""
    component = get_lesson_component(repository, module_slug, lesson_slug)
    if component is None:
        raise HTTPException(
            status_code=404, detail=f"Lesson not found: {module_slug}/{lesson_slug}"
        )

    try:
        return HTMLResponse(component.render())
    except ContentParseError as e:
        raise HTTPException(status_code=422, detail=str(e))
