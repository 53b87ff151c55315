# core/content/errors.py
"""Exceptions raised by the lesson content pipeline.

A missing lesson is not an error: lookups return None. Only content that
cannot be parsed, or a repository that cannot be built, raises.
"""


class ContentError(Exception):
    """Base class for content pipeline errors."""

    pass


class ContentParseError(ContentError):
    """Raised when a document's front-matter or body cannot be parsed."""

    pass


class FrontmatterError(ContentParseError):
    """Raised when a front-matter block is malformed."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


class DocumentReadError(ContentParseError):
    """Raised when a lesson file cannot be read as UTF-8 text."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


class HeadingExtractionError(ContentParseError):
    """Raised when headings cannot be extracted from a lesson body."""

    pass


class DuplicateDocumentError(ContentError):
    """Raised when two documents share the same (module, lesson) key."""

    pass


class RepositoryNotLoadedError(ContentError):
    """Raised when a content collection is requested before it was loaded."""

    pass
