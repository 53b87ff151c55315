# core/content/types.py
"""
Type definitions for lesson documents, modules and headings.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from .slugs import format_module_slug


@dataclass(frozen=True)
class Frontmatter:
    """Metadata parsed from the YAML block at the top of a lesson file."""

    title: str | None = None
    order: int | float | None = None  # Only meaningful among siblings
    parent: str | None = None  # lessonSlug of the parent, None for roots
    module_badge: str | None = None
    module_description: str | None = None
    module_image: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Serialize using the author-facing camelCase keys."""
        data = dict(self.extra)
        data.update(
            {
                "title": self.title,
                "order": self.order,
                "parent": self.parent,
                "moduleBadge": self.module_badge,
                "moduleDescription": self.module_description,
                "moduleImage": self.module_image,
            }
        )
        return data


@dataclass(frozen=True)
class Document:
    """One lesson file: its location, parsed front-matter and raw text."""

    module_slug: str  # Directory name
    lesson_slug: str  # File name without .mdx
    frontmatter: Frontmatter
    raw_body: str  # Full file text, front-matter included
    source_path: Path | None = None

    @property
    def key(self) -> tuple[str, str]:
        return (self.module_slug, self.lesson_slug)

    @property
    def title(self) -> str | None:
        return self.frontmatter.title

    @property
    def order(self) -> int | float | None:
        return self.frontmatter.order

    @property
    def parent(self) -> str | None:
        return self.frontmatter.parent


@dataclass(frozen=True)
class Lesson:
    """A document in its role as a module member (navigation view)."""

    slug: str
    title: str | None
    order: int | float | None
    parent: str | None
    module_badge: str | None = None
    module_description: str | None = None
    module_image: str | None = None

    @classmethod
    def from_document(cls, document: Document) -> "Lesson":
        fm = document.frontmatter
        return cls(
            slug=document.lesson_slug,
            title=fm.title,
            order=fm.order,
            parent=fm.parent,
            module_badge=fm.module_badge,
            module_description=fm.module_description,
            module_image=fm.module_image,
        )

    def to_dict(self) -> dict:
        return {
            "slug": self.slug,
            "title": self.title,
            "order": self.order,
            "parent": self.parent,
            "moduleBadge": self.module_badge,
            "moduleDescription": self.module_description,
            "moduleImage": self.module_image,
        }


@dataclass(frozen=True)
class Module:
    """A course chapter: a module slug and its lessons in display order.

    Module-level display metadata (badge, description, image) is read from
    the first lesson, which is conventionally the module's introduction.
    """

    module_slug: str
    lessons: list[Lesson] = field(default_factory=list)

    @property
    def title(self) -> str:
        return format_module_slug(self.module_slug)

    @property
    def badge(self) -> str | None:
        return self.lessons[0].module_badge if self.lessons else None

    @property
    def description(self) -> str | None:
        return self.lessons[0].module_description if self.lessons else None

    @property
    def image(self) -> str | None:
        return self.lessons[0].module_image if self.lessons else None

    def lesson_slugs(self) -> list[str]:
        return [lesson.slug for lesson in self.lessons]

    def to_dict(self) -> dict:
        return {
            "moduleSlug": self.module_slug,
            "title": self.title,
            "moduleBadge": self.badge,
            "moduleDescription": self.description,
            "moduleImage": self.image,
            "lessons": [lesson.to_dict() for lesson in self.lessons],
        }


@dataclass(frozen=True)
class Heading:
    """A table-of-contents entry. `id` may repeat within a document."""

    depth: int
    text: str
    id: str

    def to_dict(self) -> dict:
        return {"depth": self.depth, "text": self.text, "id": self.id}


@dataclass(frozen=True)
class LessonContent:
    """Everything the lesson page needs except the renderable component."""

    frontmatter: Frontmatter
    content: str  # Raw file text
    headings: list[Heading]


@dataclass(frozen=True)
class NextItem:
    """Where the "next" button on a lesson page points."""

    type: Literal["lesson", "module"]
    module_slug: str
    lesson_slug: str

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "moduleSlug": self.module_slug,
            "lessonSlug": self.lesson_slug,
        }
