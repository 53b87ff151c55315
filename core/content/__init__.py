"""Lesson content: discovery, module ordering, headings and lesson loading."""

from .errors import (
    ContentError,
    ContentParseError,
    DocumentReadError,
    FrontmatterError,
    HeadingExtractionError,
    DuplicateDocumentError,
    RepositoryNotLoadedError,
)
from .types import (
    Frontmatter,
    Document,
    Lesson,
    Module,
    Heading,
    LessonContent,
    NextItem,
)
from .frontmatter import parse_frontmatter, split_frontmatter
from .slugs import (
    slugify,
    format_module_slug,
    parse_module_slug,
    parse_lesson_slug,
    ParsedModuleSlug,
    ParsedLessonSlug,
)
from .headings import extract_headings
from .indexer import build_modules, order_module_documents
from .components import ComponentRegistry, LessonComponent
from .repository import ContentRepository, load_document
from .loader import (
    get_modules,
    load_lesson_content,
    get_lesson_component,
    get_next_item,
)
from .catalog import COLLECTIONS, load_collections

__all__ = [
    "ContentError",
    "ContentParseError",
    "DocumentReadError",
    "FrontmatterError",
    "HeadingExtractionError",
    "DuplicateDocumentError",
    "RepositoryNotLoadedError",
    "Frontmatter",
    "Document",
    "Lesson",
    "Module",
    "Heading",
    "LessonContent",
    "NextItem",
    "parse_frontmatter",
    "split_frontmatter",
    "slugify",
    "format_module_slug",
    "parse_module_slug",
    "parse_lesson_slug",
    "ParsedModuleSlug",
    "ParsedLessonSlug",
    "extract_headings",
    "build_modules",
    "order_module_documents",
    "ComponentRegistry",
    "LessonComponent",
    "ContentRepository",
    "load_document",
    "get_modules",
    "load_lesson_content",
    "get_lesson_component",
    "get_next_item",
    "COLLECTIONS",
    "load_collections",
]
