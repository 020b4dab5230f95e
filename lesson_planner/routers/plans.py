"""
Lesson Plans Router

Generates Lgr22-aligned lesson plans. The generation callable is built by a
factory dependency so tests (and future providers) can swap it out.
"""

import logging
from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from lesson_planner.core.errors import GenerationTransportError, QualityUnattainableError
from lesson_planner.models.plan import LessonPlanResponse, PlanRequest
from lesson_planner.services.llm.base import GenerateFn
from lesson_planner.services.llm.registry import get_generation_callable
from lesson_planner.services.planner import create_lesson_plan

logger = logging.getLogger(__name__)

router = APIRouter()

GeneratorFactory = Callable[[str | None], GenerateFn]


def get_generator_factory() -> GeneratorFactory:
    """Return the model_id -> generation callable factory."""
    return get_generation_callable


@router.post("", response_model=LessonPlanResponse)
async def generate_lesson_plan(
    request: PlanRequest,
    generator_factory: Annotated[GeneratorFactory, Depends(get_generator_factory)],
):
    """Generate a lesson plan for a theme, grade and subjects."""
    try:
        generate = generator_factory(request.model_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    try:
        return await create_lesson_plan(request, generate)
    except GenerationTransportError as e:
        logger.error("[Plans] Generation service failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="A technical error occurred while communicating with the AI service",
        )
    except QualityUnattainableError as e:
        logger.error("[Plans] %s", e)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Generated lesson plan does not meet quality requirements",
        )
