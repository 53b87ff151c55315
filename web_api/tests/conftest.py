"""Pytest fixtures for web API tests.

Writes a small course and library to a temporary directory and points the
app at it, so API tests run without the real lesson content.
"""

import pytest
from fastapi.testclient import TestClient

COURSE_LESSONS = {
    ("00-introduction", "01-welcome"): (
        "---\n"
        "title: Welcome\n"
        "order: 1\n"
        "moduleBadge: Start here\n"
        "moduleDescription: How the course works\n"
        "moduleImage: /images/intro.png\n"
        "---\n"
        "# Welcome\n\n## How to use this course\n\n<ProgressButton />\n"
    ),
    ("01-risk-management", "intro"): (
        "---\ntitle: Risk\norder: 1\nmoduleBadge: Module 1\n---\n"
        "# Risk\n## Position Sizing\n## Position Sizing\n"
    ),
    ("01-risk-management", "sizing"): (
        "---\ntitle: Sizing\norder: 1\nparent: intro\n---\n# Sizing\n"
    ),
    ("01-risk-management", "stops"): (
        "---\ntitle: Stops\norder: 2\nparent: intro\n---\n# Stops\n"
    ),
    ("01-risk-management", "advanced"): (
        "---\ntitle: Advanced\norder: 2\n---\n# Advanced\n"
    ),
    ("01-risk-management", "orphan"): (
        "---\ntitle: Orphan\norder: 1\nparent: nonexistent\n---\nNo headings.\n"
    ),
}

LIBRARY_LESSONS = {
    ("glossary", "terms"): "---\ntitle: Terms\norder: 1\n---\n# Float\n# VWAP\n",
}


def write_tree(root, lessons: dict) -> None:
    for (module_slug, lesson_slug), text in lessons.items():
        path = root / module_slug / f"{lesson_slug}.mdx"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")


@pytest.fixture
def content_dirs(tmp_path, monkeypatch):
    """Create course/library trees and point the config at them."""
    content_dir = tmp_path / "content"
    library_dir = tmp_path / "library"
    write_tree(content_dir, COURSE_LESSONS)
    write_tree(library_dir, LIBRARY_LESSONS)
    monkeypatch.setenv("CONTENT_DIR", str(content_dir))
    monkeypatch.setenv("LIBRARY_DIR", str(library_dir))
    return {"course": content_dir, "library": library_dir}


@pytest.fixture
def client(content_dirs):
    """Test client with the lifespan run, so content is loaded."""
    from main import app

    with TestClient(app) as test_client:
        yield test_client
