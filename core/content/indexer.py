# core/content/indexer.py
"""Order lesson documents into modules.

Within a module, lessons form a forest through their `parent` front-matter
field. The display sequence is a depth-first pre-order walk of that forest,
with siblings sorted by `order`. Documents the walk cannot reach (dangling
parent, self reference, parent cycle) are appended at the end, sorted by
`order`, so nothing is ever dropped.
"""

import math
from collections import defaultdict
from typing import Iterable

from .types import Document, Lesson, Module


def _order_key(document: Document) -> float:
    """Sort key for siblings. Missing order sorts last."""
    order = document.order
    return math.inf if order is None else order


def _sort_by_order(documents: list[Document]) -> list[Document]:
    # sorted() is stable: equal orders keep encounter order
    return sorted(documents, key=_order_key)


def order_module_documents(documents: list[Document]) -> list[Document]:
    """Return one module's documents in display order.

    Args:
        documents: All documents of a single module, in encounter order

    Returns:
        The same documents, each exactly once, in pre-order with orphans last
    """
    roots: list[Document] = []
    children_by_parent: dict[str, list[Document]] = defaultdict(list)
    for document in documents:
        if document.parent:
            children_by_parent[document.parent].append(document)
        else:
            roots.append(document)

    ordered: list[Document] = []
    visited: set[str] = set()

    # Explicit stack so deep parent chains cannot hit the recursion limit
    stack = list(reversed(_sort_by_order(roots)))
    while stack:
        document = stack.pop()
        if document.lesson_slug in visited:
            continue
        visited.add(document.lesson_slug)
        ordered.append(document)
        children = _sort_by_order(children_by_parent.get(document.lesson_slug, []))
        stack.extend(reversed(children))

    placed = {id(document) for document in ordered}
    orphans = [document for document in documents if id(document) not in placed]
    ordered.extend(_sort_by_order(orphans))
    return ordered


def group_by_module(documents: Iterable[Document]) -> dict[str, list[Document]]:
    """Group documents by module slug, keeping encounter order in each group."""
    groups: dict[str, list[Document]] = defaultdict(list)
    for document in documents:
        groups[document.module_slug].append(document)
    return groups


def build_modules(documents: Iterable[Document]) -> list[Module]:
    """
    Build the ordered module list for a collection of documents.

    Args:
        documents: Parsed documents from any number of modules

    Returns:
        Modules sorted by slug, each with its lessons in display order
    """
    modules = [
        Module(
            module_slug=module_slug,
            lessons=[
                Lesson.from_document(document)
                for document in order_module_documents(module_documents)
            ],
        )
        for module_slug, module_documents in group_by_module(documents).items()
    ]
    return sorted(modules, key=lambda module: module.module_slug)
