# core/content/loader.py
"""Load lessons and module navigation from a content repository."""

from .components import LessonComponent
from .headings import extract_headings
from .indexer import build_modules
from .repository import ContentRepository
from .types import LessonContent, Module, NextItem


def get_modules(repository: ContentRepository) -> list[Module]:
    """Get every module of the repository with lessons in display order."""
    return build_modules(repository.documents)


def load_lesson_content(
    repository: ContentRepository, module_slug: str, lesson_slug: str
) -> LessonContent | None:
    """
    Load a lesson's front-matter, raw text and headings.

    Args:
        repository: The collection to read from
        module_slug: Module directory name
        lesson_slug: Lesson file name without extension

    Returns:
        LessonContent, or None if no such lesson exists

    Raises:
        HeadingExtractionError: If the lesson body cannot be parsed
    """
    document = repository.get(module_slug, lesson_slug)
    if document is None:
        return None

    return LessonContent(
        frontmatter=document.frontmatter,
        content=document.raw_body,
        headings=extract_headings(document.raw_body),
    )


def get_lesson_component(
    repository: ContentRepository, module_slug: str, lesson_slug: str
) -> LessonComponent | None:
    """Get the renderable handle for a lesson without computing headings."""
    return repository.components.lookup(module_slug, lesson_slug)


def get_next_item(
    modules: list[Module], module_slug: str, lesson_slug: str
) -> NextItem | None:
    """Get what comes after the current lesson.

    Returns:
        - NextItem(type="lesson") for the next lesson in the same module
        - NextItem(type="module") for the first lesson of the next module
          that has lessons
        - None at the end of the collection or if the lesson is unknown
    """
    module_index = next(
        (i for i, module in enumerate(modules) if module.module_slug == module_slug),
        None,
    )
    if module_index is None:
        return None

    slugs = modules[module_index].lesson_slugs()
    if lesson_slug not in slugs:
        return None

    lesson_index = slugs.index(lesson_slug)
    if lesson_index + 1 < len(slugs):
        return NextItem(
            type="lesson", module_slug=module_slug, lesson_slug=slugs[lesson_index + 1]
        )

    for module in modules[module_index + 1 :]:
        if module.lessons:
            return NextItem(
                type="module",
                module_slug=module.module_slug,
                lesson_slug=module.lessons[0].slug,
            )
    return None
