# core/content/repository.py
"""In-memory snapshot of one content collection.

A repository is built once (usually at app startup) from a directory laid
out as <base_dir>/<module_slug>/<lesson_slug>.mdx, then handed to whatever
needs to read lessons. Reloading means building a new repository.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

from .components import ComponentRegistry, LessonComponent
from .errors import DocumentReadError, DuplicateDocumentError
from .frontmatter import parse_frontmatter
from .types import Document

logger = logging.getLogger(__name__)

LESSON_SUFFIX = ".mdx"


class ContentRepository:
    """Keyed, read-only access to the documents of one collection."""

    def __init__(
        self,
        documents: Iterable[Document],
        collection: str = "course",
        base_dir: Path | None = None,
    ):
        self.collection = collection
        self.base_dir = base_dir
        self.loaded_at = datetime.now(timezone.utc)

        self._documents: dict[tuple[str, str], Document] = {}
        for document in documents:
            if document.key in self._documents:
                raise DuplicateDocumentError(
                    f"Duplicate lesson in {collection}: "
                    f"{document.module_slug}/{document.lesson_slug}"
                )
            self._documents[document.key] = document

        self.components = ComponentRegistry(
            {
                key: LessonComponent(
                    module_slug=document.module_slug,
                    lesson_slug=document.lesson_slug,
                    source=document.raw_body,
                )
                for key, document in self._documents.items()
            }
        )

    @classmethod
    def from_directory(cls, base_dir: Path | str, collection: str = "course") -> "ContentRepository":
        """
        Eagerly load every lesson file under base_dir.

        Files are read in sorted path order so the encounter order (used as
        the tie-breaker when lessons share an `order`) is stable.

        Raises:
            DocumentReadError: If any lesson file is unreadable or not UTF-8
            FrontmatterError: If any lesson has malformed front-matter
        """
        base_dir = Path(base_dir)
        if not base_dir.is_dir():
            logger.warning(f"Content directory for {collection} not found: {base_dir}")
            return cls([], collection=collection, base_dir=base_dir)

        paths = sorted(base_dir.glob(f"*/*{LESSON_SUFFIX}"))
        ignored = sorted(set(base_dir.rglob(f"*{LESSON_SUFFIX}")) - set(paths))
        for path in ignored:
            logger.warning(f"Ignoring lesson outside <module>/<lesson> layout: {path}")

        documents = [load_document(path) for path in paths if path.is_file()]
        repository = cls(documents, collection=collection, base_dir=base_dir)
        logger.info(
            f"Loaded {len(repository)} {collection} lessons "
            f"in {len(repository.module_slugs())} modules from {base_dir}"
        )
        return repository

    @property
    def documents(self) -> tuple[Document, ...]:
        """All documents in load order."""
        return tuple(self._documents.values())

    def get(self, module_slug: str, lesson_slug: str) -> Document | None:
        return self._documents.get((module_slug, lesson_slug))

    def module_slugs(self) -> list[str]:
        return sorted({module_slug for module_slug, _ in self._documents})

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, key: object) -> bool:
        return key in self._documents

    def __repr__(self) -> str:
        return f"ContentRepository(collection={self.collection!r}, lessons={len(self)})"


def load_document(path: Path) -> Document:
    """Read and parse one lesson file. The module slug is its directory name.

    Raises:
        DocumentReadError: If the file cannot be read or is not valid UTF-8
        FrontmatterError: If the front-matter is malformed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DocumentReadError(f"not valid UTF-8: {e}", path=str(path)) from e
    except OSError as e:
        raise DocumentReadError(f"cannot read lesson file: {e}", path=str(path)) from e
    frontmatter, _ = parse_frontmatter(text, path=str(path))
    return Document(
        module_slug=path.parent.name,
        lesson_slug=path.name[: -len(LESSON_SUFFIX)],
        frontmatter=frontmatter,
        raw_body=text,
        source_path=path,
    )
