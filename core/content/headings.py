# core/content/headings.py
"""Extract table-of-contents headings from lesson bodies."""

from markdown_it import MarkdownIt
from markdown_it.token import Token

from .errors import ContentParseError, HeadingExtractionError
from .frontmatter import split_frontmatter
from .slugs import slugify
from .types import Heading

# CommonMark without indented code blocks, as in MDX, so headings indented
# inside JSX widgets are still headings. Raw HTML stays enabled.
_parser = MarkdownIt("commonmark").disable("code")

_TEXT_TOKENS = {"text", "text_special", "code_inline"}
_BREAK_TOKENS = {"softbreak", "hardbreak"}


def _inline_text(children: list[Token] | None) -> str:
    """Concatenate the text content of inline tokens, skipping HTML/JSX."""
    parts = []
    for child in children or []:
        if child.type in _TEXT_TOKENS:
            parts.append(child.content)
        elif child.type in _BREAK_TOKENS:
            parts.append("\n")
        elif child.type == "image":
            parts.append(_inline_text(child.children))
    return "".join(parts)


def extract_headings(raw: str) -> list[Heading]:
    """
    Return every heading of a lesson, in document order.

    A leading front-matter block is stripped first. Heading depth is the
    source level (1 for "#", 2 for "##" or a "---" setext underline, ...).
    Ids come from slugify() and are not de-duplicated.

    Raises:
        HeadingExtractionError: If the text cannot be parsed
    """
    if not isinstance(raw, str):
        raise HeadingExtractionError(
            f"expected lesson text as str, got {type(raw).__name__}"
        )

    try:
        _, body = split_frontmatter(raw)
    except ContentParseError as e:
        raise HeadingExtractionError(str(e)) from e

    try:
        tokens = _parser.parse(body)
    except Exception as e:
        raise HeadingExtractionError(f"failed to parse lesson body: {e}") from e

    headings = []
    for index, token in enumerate(tokens):
        if token.type != "heading_open":
            continue
        inline = tokens[index + 1]
        text = _inline_text(inline.children)
        headings.append(Heading(depth=int(token.tag[1:]), text=text, id=slugify(text)))
    return headings
