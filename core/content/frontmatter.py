# core/content/frontmatter.py
"""Split lesson files into YAML front-matter and body."""

import logging
import math

import yaml

from .errors import FrontmatterError
from .types import Frontmatter

logger = logging.getLogger(__name__)

DELIMITER = "---"

# Author-facing key -> Frontmatter field
_FIELD_MAPPING = {
    "title": "title",
    "order": "order",
    "parent": "parent",
    "moduleBadge": "module_badge",
    "moduleDescription": "module_description",
    "moduleImage": "module_image",
}


def split_frontmatter(text: str) -> tuple[str | None, str]:
    """
    Separate a leading front-matter block from the body.

    The block must start on the very first line with a line containing only
    "---" and ends at the next such line.

    Args:
        text: Full file text

    Returns:
        Tuple of (yaml_text or None if there is no block, body)

    Raises:
        FrontmatterError: If the opening delimiter is never closed
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != DELIMITER:
        return None, text

    for index in range(1, len(lines)):
        if lines[index].rstrip() == DELIMITER:
            return "".join(lines[1:index]), "".join(lines[index + 1 :])

    raise FrontmatterError("front-matter block opened with '---' is never closed")


def _coerce_order(value, path: str | None) -> int | float | None:
    if value is None:
        return None
    if isinstance(value, bool):
        logger.warning(f"Ignoring boolean 'order' in {path or '<text>'}")
        return None
    if isinstance(value, (int, float)):
        number = value
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            number = None
    # NaN and infinities cannot be ordered against siblings
    if number is None or (isinstance(number, float) and not math.isfinite(number)):
        logger.warning(f"Ignoring non-numeric 'order' {value!r} in {path or '<text>'}")
        return None
    if isinstance(value, (int, float)):
        return value
    return int(number) if number.is_integer() else number


def _coerce_text(value) -> str | None:
    if value is None:
        return None
    return str(value)


def parse_frontmatter(text: str, path: str | None = None) -> tuple[Frontmatter, str]:
    """
    Parse the YAML front-matter of a lesson file.

    Args:
        text: Full file text, possibly with front-matter
        path: Source path, used in error and log messages

    Returns:
        Tuple of (Frontmatter, body without the front-matter block)

    Raises:
        FrontmatterError: If the block is unterminated, is not valid YAML,
            or is not a mapping
    """
    try:
        yaml_text, body = split_frontmatter(text)
    except FrontmatterError as e:
        raise FrontmatterError(str(e), path=path) from e

    if yaml_text is None:
        return Frontmatter(), body

    try:
        data = yaml.safe_load(yaml_text)
    except yaml.YAMLError as e:
        raise FrontmatterError(f"invalid YAML front-matter: {e}", path=path) from e

    if data is None:
        return Frontmatter(), body
    if not isinstance(data, dict):
        raise FrontmatterError(
            f"front-matter must be a mapping, got {type(data).__name__}", path=path
        )

    fields = {}
    extra = {}
    for key, value in data.items():
        field_name = _FIELD_MAPPING.get(key)
        if field_name is None:
            extra[str(key)] = value
        elif field_name == "order":
            fields["order"] = _coerce_order(value, path)
        elif field_name == "parent":
            # Empty parent means top-level
            fields["parent"] = str(value) if value else None
        else:
            fields[field_name] = _coerce_text(value)

    return Frontmatter(**fields, extra=extra), body
