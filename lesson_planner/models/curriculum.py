"""
Pydantic models for curriculum reference documents and ranking results.

ReferenceDocument records are immutable and validated once, when the
curriculum store is built. ScoredDocument and RankingResult are created per
ranking call and never persisted.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


PedagogicalLevel = Literal["concrete", "abstract", "mixed"]


class ReferenceDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    subject: str
    grades: tuple[str, ...] = Field(min_length=1)
    keywords: tuple[str, ...] = ()
    content: str = ""
    source: str
    activities: tuple[str, ...] = ()
    concept_tags: tuple[str, ...] = ()
    pedagogical_level: PedagogicalLevel = "mixed"  # informational, not scored
    cross_curricular_links: tuple[str, ...] = ()  # informational, not scored

    @model_validator(mode="after")
    def _must_be_matchable(self) -> "ReferenceDocument":
        if not self.keywords and not self.content.strip():
            raise ValueError(f"Document {self.id} has neither keywords nor content")
        return self


class ScoredDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    document: ReferenceDocument
    subject_score: float
    theme_score: float
    grade_score: float
    total_score: float

    @property
    def id(self) -> int:
        return self.document.id


class RankingResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    topic: str
    grade: str
    subjects: tuple[str, ...] = ()
    documents: tuple[ScoredDocument, ...] = ()
    relevance_score: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.documents
