"""Builders for lesson documents and lesson files used across tests."""

from core.content.types import Document, Frontmatter


def make_document(
    lesson_slug: str,
    order=None,
    parent: str | None = None,
    module_slug: str = "risk",
    title: str | None = None,
    body: str = "",
    **frontmatter_fields,
) -> Document:
    """Build a Document without touching the filesystem."""
    return Document(
        module_slug=module_slug,
        lesson_slug=lesson_slug,
        frontmatter=Frontmatter(
            title=title or lesson_slug.replace("-", " ").title(),
            order=order,
            parent=parent,
            **frontmatter_fields,
        ),
        raw_body=body,
    )


def lesson_text(title: str, order=None, parent: str | None = None, body: str = "", **extra) -> str:
    """Render a lesson file with YAML front-matter."""
    lines = ["---", f"title: {title}"]
    if order is not None:
        lines.append(f"order: {order}")
    if parent is not None:
        lines.append(f"parent: {parent}")
    for key, value in extra.items():
        lines.append(f"{key}: {value}")
    lines.append("---")
    return "\n".join(lines) + "\n" + body
