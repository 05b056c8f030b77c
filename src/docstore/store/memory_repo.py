"""In-memory document store"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from docstore.models import ConflictPolicy, Document, SearchRequest, as_utc
from docstore.store.errors import IdConflictError
from docstore.store.ids import IdGenerator
from docstore.store.repo import DocumentRepo
from docstore.store.search import filter_documents

if TYPE_CHECKING:
    from docstore.config import Settings


logger = logging.getLogger(__name__)


@dataclass
class MemoryRepo(DocumentRepo):
    """Dict-backed store keyed by document id.

    Documents are deep-copied on the way in and out, so callers cannot change
    stored state (notably `created`) by mutating a returned model.
    Not safe for concurrent use.
    """
    on_conflict: ConflictPolicy = ConflictPolicy.replace
    id_generator: IdGenerator = field(default_factory=IdGenerator)
    _docs: dict[str, Document] = field(default_factory=dict, repr=False)

    @classmethod
    def from_settings(cls, settings: Settings) -> MemoryRepo:
        return cls(
            on_conflict=settings.on_conflict,
            id_generator=IdGenerator(settings.id_space, settings.max_id_attempts),
        )

    def save(self, doc: Document) -> Document:
        """Insert doc, or resolve an id conflict according to on_conflict.

        An empty id is replaced by a generated one; the input model is never
        mutated. Under `replace` the stored `created` survives the overwrite.
        """
        if not doc.id:
            doc = doc.model_copy(update={"id": self.id_generator(self._docs.keys())})
        if doc.created.tzinfo is None:
            doc = doc.model_copy(update={"created": as_utc(doc.created)})

        existing = self._docs.get(doc.id)
        if existing is None:
            logger.debug("Inserting document %s", doc.id)
            self._docs[doc.id] = doc.model_copy(deep=True)
            return self._docs[doc.id].model_copy(deep=True)

        if self.on_conflict == ConflictPolicy.reject:
            logger.warning("The ID %s is already taken; write skipped", doc.id)
            return doc
        if self.on_conflict == ConflictPolicy.error:
            raise IdConflictError(doc.id)

        logger.debug("Replacing document %s", doc.id)
        self._docs[doc.id] = doc.model_copy(update={"created": existing.created}, deep=True)
        return self._docs[doc.id].model_copy(deep=True)

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        return [d.model_copy(deep=True) for d in filter_documents(self._docs.values(), request)]

    def find_by_id(self, doc_id: str) -> Document | None:
        doc = self._docs.get(doc_id)
        return doc.model_copy(deep=True) if doc is not None else None

    def all(self) -> list[Document]:
        return self.search()

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._docs
