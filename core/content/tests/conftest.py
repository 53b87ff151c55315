"""Pytest fixtures for lesson content tests."""

from pathlib import Path

import pytest


@pytest.fixture
def write_lesson(tmp_path: Path):
    """Write <tmp>/<root>/<module>/<lesson>.mdx and return its path."""

    def _write(
        module_slug: str,
        lesson_slug: str,
        text: str,
        root: str = "content",
    ) -> Path:
        path = tmp_path / root / module_slug / f"{lesson_slug}.mdx"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
