"""
Lesson Planner Service

End-to-end flow for one lesson plan request:
request -> curriculum ranking -> context assembly -> generation with
quality retries -> plan + metadata.
"""

import logging

from lesson_planner.core.config import Settings, get_settings
from lesson_planner.models.plan import LessonPlanResponse, PlanMetadata, PlanRequest
from lesson_planner.services.curriculum import (
    CurriculumStore,
    assemble_context,
    count_curriculum_references,
    rank_curriculum,
)
from lesson_planner.services.llm.base import GenerateFn
from lesson_planner.services.llm.orchestrator import LLMOrchestrator, get_orchestrator

logger = logging.getLogger(__name__)


async def create_lesson_plan(
    request: PlanRequest,
    generate: GenerateFn,
    settings: Settings | None = None,
    orchestrator: LLMOrchestrator | None = None,
    store: CurriculumStore | None = None,
) -> LessonPlanResponse:
    """Rank curriculum for the request and generate a rubric-checked lesson plan."""
    settings = settings or get_settings()
    orchestrator = orchestrator or get_orchestrator()

    logger.info(
        "[Planner] topic=%r grade=%r subjects=%s",
        request.topic, request.grade, request.subjects,
    )

    ranking = rank_curriculum(
        request.topic,
        request.grade,
        request.subjects,
        store=store,
        min_score=settings.ranking_min_score,
        grade_floor=settings.ranking_grade_floor,
        top_k=settings.ranking_top_k,
    )
    if ranking.is_empty:
        logger.info("[Planner] No matching curriculum, falling back to general Lgr22 guidelines")

    context = assemble_context(ranking)
    outcome = await orchestrator.generate_with_retries(context, request, generate)

    logger.info(
        "[Planner] Lesson plan ready: quality=%.2f accepted=%s attempts=%d",
        outcome.score, outcome.accepted, outcome.attempts,
    )

    return LessonPlanResponse(
        plan=outcome.text,
        metadata=PlanMetadata(
            curriculum_references=count_curriculum_references(context),
            relevance_score=ranking.relevance_score,
            document_ids=[item.id for item in ranking.documents],
            quality_score=round(outcome.score, 2),
            compliance_issues=outcome.issues,
            attempts=outcome.attempts,
            accepted=outcome.accepted,
        ),
    )
