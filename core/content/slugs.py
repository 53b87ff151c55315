# core/content/slugs.py
"""Slug helpers shared by headings and navigation."""

import re
from dataclasses import dataclass

_WHITESPACE = re.compile(r"\s+")
_NON_WORD = re.compile(r"[^\w\-]+", re.ASCII)
_HYPHEN_RUN = re.compile(r"-{2,}")

_MODULE_PREFIX = re.compile(r"^\d{2}-")
_MODULE_SLUG = re.compile(r"(\d+)-(.+)")
# "03-01.1-head-and-shoulder" or "03-01-head-and-shoulder"
_LESSON_SLUG = re.compile(r"(\d+)-(\d+(?:\.\d+)?)-(.+)")


def slugify(text: str | None) -> str:
    """Turn free text into a URL-safe anchor id.

    Examples:
        "Risk Management 101!" -> "risk-management-101"
        "  Multiple   Spaces " -> "multiple-spaces"
    """
    if not text:
        return ""
    slug = _WHITESPACE.sub("-", str(text).lower())
    slug = _NON_WORD.sub("", slug)
    slug = _HYPHEN_RUN.sub("-", slug)
    return slug.strip("-")


def format_module_slug(slug: str) -> str:
    """Human-readable module title: "01-risk-management" -> "Risk Management"."""
    name = _MODULE_PREFIX.sub("", slug, count=1)
    return " ".join(word[:1].upper() + word[1:].lower() for word in name.split("-"))


@dataclass(frozen=True)
class ParsedModuleSlug:
    chapter: int
    module_name: str


@dataclass(frozen=True)
class ParsedLessonSlug:
    chapter: int
    lesson_number: str
    sublesson_number: str | None
    lesson_title: str


def parse_module_slug(module_slug: str) -> ParsedModuleSlug:
    """Split "03-price-action" into chapter 3 and name "price action"."""
    if not module_slug:
        return ParsedModuleSlug(chapter=0, module_name="")

    match = _MODULE_SLUG.fullmatch(module_slug)
    if not match:
        return ParsedModuleSlug(chapter=0, module_name=module_slug)

    chapter, name = match.groups()
    return ParsedModuleSlug(chapter=int(chapter), module_name=name.replace("-", " "))


def parse_lesson_slug(lesson_slug: str) -> ParsedLessonSlug:
    """Split a lesson slug into chapter, lesson/sub-lesson numbers and title."""
    if not lesson_slug:
        return ParsedLessonSlug(
            chapter=0, lesson_number="", sublesson_number=None, lesson_title=""
        )

    match = _LESSON_SLUG.fullmatch(lesson_slug)
    if not match:
        return ParsedLessonSlug(
            chapter=0,
            lesson_number="",
            sublesson_number=None,
            lesson_title=lesson_slug,
        )

    chapter, lesson_part, title = match.groups()
    sublesson_number = None
    if "." in lesson_part:
        lesson_number, sublesson_number = lesson_part.split(".", 1)
    else:
        lesson_number = lesson_part

    return ParsedLessonSlug(
        chapter=int(chapter),
        lesson_number=lesson_number,
        sublesson_number=sublesson_number,
        lesson_title=title.replace("-", " "),
    )
