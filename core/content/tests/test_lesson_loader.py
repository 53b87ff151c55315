"""Tests for lesson loading and navigation."""

import pytest

from core.content.catalog import load_collections
from core.content.errors import HeadingExtractionError
from core.content.loader import (
    get_lesson_component,
    get_modules,
    get_next_item,
    load_lesson_content,
)
from core.content.repository import ContentRepository
from core.content.types import Heading, NextItem

from .helpers import lesson_text, make_document


@pytest.fixture
def risk_repository(tmp_path, write_lesson):
    """Course content with a nested 'risk' module and a second module."""
    write_lesson(
        "risk",
        "intro",
        lesson_text(
            "Risk",
            order=1,
            moduleBadge="Module 1",
            body="# Risk\n## Position Sizing\n## Position Sizing",
        ),
    )
    write_lesson("risk", "sizing", lesson_text("Sizing", order=1, parent="intro"))
    write_lesson("risk", "stops", lesson_text("Stops", order=2, parent="intro"))
    write_lesson("risk", "advanced", lesson_text("Advanced", order=2))
    write_lesson("setups", "gap-and-go", lesson_text("Gap and Go", order=1))
    return ContentRepository.from_directory(tmp_path / "content")


class TestLoadLessonContent:
    def test_returns_frontmatter_content_and_headings(self, risk_repository):
        lesson = load_lesson_content(risk_repository, "risk", "intro")

        assert lesson is not None
        assert lesson.frontmatter.title == "Risk"
        assert lesson.frontmatter.module_badge == "Module 1"
        assert lesson.content == risk_repository.get("risk", "intro").raw_body
        assert lesson.headings == [
            Heading(depth=1, text="Risk", id="risk"),
            Heading(depth=2, text="Position Sizing", id="position-sizing"),
            Heading(depth=2, text="Position Sizing", id="position-sizing"),
        ]

    def test_missing_lesson_returns_none(self, risk_repository):
        """Should return None, not raise, for an unknown pair."""
        assert load_lesson_content(risk_repository, "risk", "missing-lesson") is None
        assert load_lesson_content(risk_repository, "no-module", "intro") is None

    def test_repeated_calls_are_equal(self, risk_repository):
        first = load_lesson_content(risk_repository, "risk", "intro")
        second = load_lesson_content(risk_repository, "risk", "intro")

        assert first == second

    def test_malformed_body_propagates(self):
        """Should surface parse failures to the caller."""
        repository = ContentRepository(
            [make_document("broken", body="---\ntitle: Broken\n# Heading\n")]
        )

        with pytest.raises(HeadingExtractionError):
            load_lesson_content(repository, "risk", "broken")


class TestGetLessonComponent:
    def test_returns_handle_for_lesson(self, risk_repository):
        component = get_lesson_component(risk_repository, "risk", "stops")

        assert component is not None
        assert (component.module_slug, component.lesson_slug) == ("risk", "stops")

    def test_missing_lesson_returns_none(self, risk_repository):
        assert get_lesson_component(risk_repository, "risk", "nope") is None


class TestGetModules:
    def test_modules_in_display_order(self, risk_repository):
        modules = get_modules(risk_repository)

        assert [m.module_slug for m in modules] == ["risk", "setups"]
        assert modules[0].lesson_slugs() == ["intro", "sizing", "stops", "advanced"]
        assert modules[0].badge == "Module 1"

    def test_orphan_appended_after_nested_lessons(self, tmp_path, write_lesson):
        write_lesson("risk", "intro", lesson_text("Intro", order=1))
        write_lesson("risk", "lost", lesson_text("Lost", order=1, parent="nonexistent"))
        write_lesson("risk", "sizing", lesson_text("Sizing", order=1, parent="intro"))

        modules = get_modules(ContentRepository.from_directory(tmp_path / "content"))

        assert modules[0].lesson_slugs() == ["intro", "sizing", "lost"]


class TestGetNextItem:
    def test_next_lesson_in_same_module(self, risk_repository):
        modules = get_modules(risk_repository)

        assert get_next_item(modules, "risk", "sizing") == NextItem(
            type="lesson", module_slug="risk", lesson_slug="stops"
        )

    def test_next_module_after_last_lesson(self, risk_repository):
        modules = get_modules(risk_repository)

        assert get_next_item(modules, "risk", "advanced") == NextItem(
            type="module", module_slug="setups", lesson_slug="gap-and-go"
        )

    def test_end_of_collection(self, risk_repository):
        modules = get_modules(risk_repository)

        assert get_next_item(modules, "setups", "gap-and-go") is None

    def test_unknown_lesson_or_module(self, risk_repository):
        modules = get_modules(risk_repository)

        assert get_next_item(modules, "risk", "nope") is None
        assert get_next_item(modules, "nope", "intro") is None


def test_load_collections_reads_both_roots(tmp_path, write_lesson):
    write_lesson("risk", "intro", lesson_text("Intro", order=1))
    write_lesson("glossary", "terms", lesson_text("Terms", order=1), root="library")

    repositories = load_collections(
        {"course": tmp_path / "content", "library": tmp_path / "library"}
    )

    assert set(repositories) == {"course", "library"}
    assert repositories["course"].get("risk", "intro") is not None
    assert repositories["library"].get("glossary", "terms") is not None
    assert repositories["library"].collection == "library"
