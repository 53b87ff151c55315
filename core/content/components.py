# core/content/components.py
"""Registry of renderable lesson handles, keyed by (module, lesson)."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from markdown_it import MarkdownIt

from .frontmatter import split_frontmatter

# Same block rules as heading extraction
_renderer = MarkdownIt("commonmark").disable("code")


@dataclass(frozen=True)
class LessonComponent:
    """Opaque handle the presentation layer renders a lesson through.

    Rendering is lazy and independent of heading extraction.
    """

    module_slug: str
    lesson_slug: str
    source: str = field(repr=False)

    def render(self) -> str:
        """Render the lesson body (without front-matter) to HTML."""
        _, body = split_frontmatter(self.source)
        return _renderer.render(body)


class ComponentRegistry(Mapping):
    """Read-only mapping of (module_slug, lesson_slug) -> LessonComponent."""

    def __init__(self, components: dict[tuple[str, str], LessonComponent] | None = None):
        self._components = dict(components or {})

    def __getitem__(self, key: tuple[str, str]) -> LessonComponent:
        return self._components[key]

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def lookup(self, module_slug: str, lesson_slug: str) -> LessonComponent | None:
        return self._components.get((module_slug, lesson_slug))
