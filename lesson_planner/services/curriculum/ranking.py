"""
Curriculum Ranking Engine

Selects the reference documents that best fit a lesson request.

How ranking works:
1. GRADE FLOOR – documents whose grade score is below 0.4 are dropped before
   any other scoring (a grade-6 text is never used for kindergarten).
2. SCORE       – subject, theme and grade scores are combined per document.
3. MIN SCORE   – documents with a total score below 0.3 are dropped as filler.
4. SORT        – highest total score first, ties broken by lowest id.
5. TOP-K       – at most 4 documents are kept.

The overall relevance score is the mean total score of the kept documents,
rounded to 3 decimals (0 when nothing is kept). An empty result is a normal
outcome; the context assembler turns it into a fallback notice.
"""

import logging
from collections.abc import Mapping, Sequence

from lesson_planner.models.curriculum import RankingResult, ScoredDocument
from lesson_planner.services.curriculum import scorer
from lesson_planner.services.curriculum.store import CurriculumStore, get_curriculum_store

logger = logging.getLogger(__name__)

DEFAULT_MIN_SCORE = 0.3
DEFAULT_GRADE_FLOOR = 0.4
DEFAULT_TOP_K = 4


def rank_curriculum(
    topic: str,
    grade: str,
    subjects: Sequence[str],
    *,
    store: CurriculumStore | None = None,
    associations: Mapping[str, Sequence[str]] | None = None,
    min_score: float = DEFAULT_MIN_SCORE,
    grade_floor: float = DEFAULT_GRADE_FLOOR,
    top_k: int = DEFAULT_TOP_K,
) -> RankingResult:
    """
    Rank the curriculum store against a topic, grade and subject filter.

    Args:
        topic: Free-text lesson theme (e.g., "forest animals")
        grade: Grade label (e.g., "2" or "kindergarten")
        subjects: Subject filters; empty means no filter
        store: Document store; defaults to the bundled curriculum
        associations: Theme word -> related terms table for theme scoring
        min_score: Minimum total score for a document to be returned
        grade_floor: Minimum grade score for a document to be considered
        top_k: Maximum number of documents returned

    Returns:
        RankingResult with documents sorted by descending total score
    """
    if store is None:
        store = get_curriculum_store()

    scored: list[ScoredDocument] = []
    for doc in store:
        grade_value = scorer.grade_score(grade, doc)
        if grade_value < grade_floor:
            continue

        subject_value = scorer.subject_score(subjects, doc)
        theme_value = scorer.theme_score(topic, doc, associations)
        total = scorer.combine_scores(subject_value, theme_value, grade_value)
        if total < min_score:
            continue

        scored.append(
            ScoredDocument(
                document=doc,
                subject_score=subject_value,
                theme_score=theme_value,
                grade_score=grade_value,
                total_score=total,
            )
        )

    scored.sort(key=lambda item: (-item.total_score, item.id))
    top = scored[:top_k]

    relevance = round(sum(item.total_score for item in top) / len(top), 3) if top else 0.0

    logger.info(
        "[Ranking] topic=%r grade=%r subjects=%s -> %d document(s), relevance=%.3f",
        topic, grade, list(subjects), len(top), relevance,
    )

    return RankingResult(
        topic=topic,
        grade=grade,
        subjects=tuple(subjects),
        documents=tuple(top),
        relevance_score=relevance,
    )
