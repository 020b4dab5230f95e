from __future__ import annotations

import pytest
from pydantic import ValidationError

from lesson_planner.models.curriculum import ReferenceDocument
from lesson_planner.services.curriculum.store import (
    CurriculumStore,
    get_curriculum_store,
    get_store_status,
)

from conftest import make_record


def test_bundled_store_holds_all_documents(store: CurriculumStore) -> None:
    assert len(store) == 17
    assert [doc.id for doc in store] == list(range(1, 18))
    assert get_curriculum_store() is store


def test_documents_are_immutable(store: CurriculumStore) -> None:
    doc = store.get(1)
    with pytest.raises(ValidationError):
        doc.subject = "Music"


def test_document_without_grades_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ReferenceDocument.model_validate(make_record(1, grades=[]))


def test_document_without_keywords_or_content_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ReferenceDocument.model_validate(make_record(1, keywords=[], content="   "))


def test_document_with_content_only_is_accepted() -> None:
    doc = ReferenceDocument.model_validate(make_record(1, keywords=[]))
    assert doc.keywords == ()


def test_duplicate_ids_are_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate"):
        CurriculumStore.from_records([make_record(1), make_record(1)])


def test_empty_store_is_rejected() -> None:
    with pytest.raises(ValueError):
        CurriculumStore([])


def test_store_orders_by_id_and_lists_subjects() -> None:
    store = CurriculumStore.from_records(
        [make_record(3, subject="Music"), make_record(1), make_record(2, subject="Art")]
    )
    assert [doc.id for doc in store.documents] == [1, 2, 3]
    assert store.subjects() == ["Art", "Music", "Science"]
    assert store.get(4) is None


def test_store_status() -> None:
    status = get_store_status()
    assert status["available"] is True
    assert status["document_count"] == 17
    assert "Science" in status["subjects"]
