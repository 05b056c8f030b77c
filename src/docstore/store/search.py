"""Predicate evaluation for SearchRequest filters"""

from collections.abc import Iterable

from docstore.models import Document, SearchRequest


def _title_matches(doc: Document, prefixes: set[str]) -> bool:
    return any(doc.title.startswith(p) for p in prefixes)


def _content_matches(doc: Document, fragments: set[str]) -> bool:
    return any(f in doc.content for f in fragments)


def _author_matches(doc: Document, author_ids: set[str]) -> bool:
    """A document without an author never satisfies an author filter."""
    return doc.author is not None and doc.author.id in author_ids


def matches(doc: Document, request: SearchRequest | None) -> bool:
    """True if doc passes every filter set on request; None or an empty request matches all."""
    if request is None:
        return True
    if request.title_prefixes and not _title_matches(doc, request.title_prefixes):
        return False
    if request.contains_contents and not _content_matches(doc, request.contains_contents):
        return False
    if request.author_ids and not _author_matches(doc, request.author_ids):
        return False
    if request.created_from is not None and doc.created < request.created_from:
        return False
    if request.created_to is not None and doc.created > request.created_to:
        return False
    return True


def filter_documents(docs: Iterable[Document], request: SearchRequest | None) -> list[Document]:
    """Return the docs matching request, preserving input order."""
    return [d for d in docs if matches(d, request)]
