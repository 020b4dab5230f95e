"""
Curriculum Document Store

Holds the reference documents in memory as an immutable, id-indexed
collection. The store is built once per process from the bundled corpus;
a different corpus can be loaded with CurriculumStore.from_records() without
touching ranking.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from types import MappingProxyType

from lesson_planner.models.curriculum import ReferenceDocument
from lesson_planner.services.curriculum.corpus import CURRICULUM_RECORDS

logger = logging.getLogger(__name__)


class CurriculumStore:
    """Read-only collection of reference documents, ordered by id."""

    def __init__(self, documents: Iterable[ReferenceDocument]):
        ordered = tuple(sorted(documents, key=lambda doc: doc.id))
        if not ordered:
            raise ValueError("Curriculum store needs at least one document")

        by_id: dict[int, ReferenceDocument] = {}
        for doc in ordered:
            if doc.id in by_id:
                raise ValueError(f"Duplicate curriculum document id: {doc.id}")
            by_id[doc.id] = doc

        self._documents = ordered
        self._by_id: Mapping[int, ReferenceDocument] = MappingProxyType(by_id)

    @classmethod
    def from_records(cls, records: Iterable[Mapping]) -> "CurriculumStore":
        """Validate raw dict records into documents and build a store."""
        return cls(ReferenceDocument.model_validate(record) for record in records)

    @property
    def documents(self) -> tuple[ReferenceDocument, ...]:
        return self._documents

    def get(self, doc_id: int) -> ReferenceDocument | None:
        return self._by_id.get(doc_id)

    def subjects(self) -> list[str]:
        return sorted({doc.subject for doc in self._documents})

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[ReferenceDocument]:
        return iter(self._documents)


# ── Singleton ─────────────────────────────────────────────────────────────────

@lru_cache()
def get_curriculum_store() -> CurriculumStore:
    """Build the bundled curriculum store once per process."""
    store = CurriculumStore.from_records(CURRICULUM_RECORDS)
    logger.info("[Curriculum] Loaded %d reference documents", len(store))
    return store


def get_store_status() -> dict:
    """Return status info about the curriculum store for the /curriculum/status endpoint."""
    store = get_curriculum_store()
    return {
        "available": True,
        "document_count": len(store),
        "subjects": store.subjects(),
    }
