from lesson_planner.models.curriculum import ReferenceDocument, ScoredDocument, RankingResult
from lesson_planner.models.plan import (
    PlanRequest,
    ComplianceReport,
    GenerationOutcome,
    PlanMetadata,
    LessonPlanResponse,
)

__all__ = [
    "ReferenceDocument",
    "ScoredDocument",
    "RankingResult",
    "PlanRequest",
    "ComplianceReport",
    "GenerationOutcome",
    "PlanMetadata",
    "LessonPlanResponse",
]
