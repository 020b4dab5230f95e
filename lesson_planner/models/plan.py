"""
Pydantic models for lesson plan requests, compliance reports and responses.
"""

from pydantic import BaseModel, ConfigDict, field_validator


class PlanRequest(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    topic: str
    grade: str
    subjects: list[str] = []
    duration: str = "60 minutes"
    notes: str | None = None
    model_id: str | None = None

    @field_validator("topic", "grade", "duration")
    @classmethod
    def _strip_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("subjects", mode="before")
    @classmethod
    def _split_subjects(cls, value):
        # The planner form sends subjects as a comma-separated string
        if isinstance(value, str):
            value = value.split(",")
        if value is None:
            return []
        return [str(subject).strip() for subject in value if str(subject).strip()]

    @field_validator("notes")
    @classmethod
    def _blank_notes_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None


class ComplianceReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: float
    issues: list[str]
    meets_required_elements: bool


class GenerationOutcome(BaseModel):
    text: str
    score: float
    issues: list[str]
    attempts: int
    accepted: bool


class PlanMetadata(BaseModel):
    curriculum_references: int
    relevance_score: float
    document_ids: list[int]
    quality_score: float
    compliance_issues: list[str]
    attempts: int
    accepted: bool


class LessonPlanResponse(BaseModel):
    plan: str
    metadata: PlanMetadata
