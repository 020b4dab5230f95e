"""
Curriculum Router

Provides endpoints to inspect the curriculum store and preview how a
request would be ranked, without calling the LLM.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from lesson_planner.core.config import get_settings
from lesson_planner.services.curriculum.ranking import rank_curriculum
from lesson_planner.services.curriculum.store import get_store_status

router = APIRouter()


class CurriculumStatusResponse(BaseModel):
    available: bool
    document_count: int
    subjects: list[str] = []


class RankedDocumentResponse(BaseModel):
    id: int
    subject: str
    grades: list[str]
    source: str
    subject_score: float
    theme_score: float
    grade_score: float
    total_score: float


class CurriculumSearchResponse(BaseModel):
    documents: list[RankedDocumentResponse]
    relevance_score: float


@router.get("/status", response_model=CurriculumStatusResponse)
async def curriculum_status():
    """Check the status of the curriculum store."""
    info = get_store_status()
    return CurriculumStatusResponse(**info)


@router.get("/search", response_model=CurriculumSearchResponse)
async def search_curriculum(
    topic: str,
    grade: str,
    subjects: Annotated[list[str], Query()] = [],
):
    """Rank the curriculum for a topic, grade and optional subjects."""
    if not topic.strip() or not grade.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Topic and grade are required",
        )

    settings = get_settings()
    # Accept both ?subjects=a&subjects=b and ?subjects=a,b
    subject_list = [s.strip() for value in subjects for s in value.split(",") if s.strip()]

    result = rank_curriculum(
        topic.strip(),
        grade.strip(),
        subject_list,
        min_score=settings.ranking_min_score,
        grade_floor=settings.ranking_grade_floor,
        top_k=settings.ranking_top_k,
    )

    return CurriculumSearchResponse(
        documents=[
            RankedDocumentResponse(
                id=item.id,
                subject=item.document.subject,
                grades=list(item.document.grades),
                source=item.document.source,
                subject_score=item.subject_score,
                theme_score=item.theme_score,
                grade_score=item.grade_score,
                total_score=item.total_score,
            )
            for item in result.documents
        ],
        relevance_score=result.relevance_score,
    )
