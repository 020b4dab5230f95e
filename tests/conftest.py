from __future__ import annotations

from collections.abc import Iterable

import pytest

from lesson_planner.models.plan import PlanRequest
from lesson_planner.services.curriculum.store import CurriculumStore, get_curriculum_store

COMPLIANT_PLAN = """# Lesson plan: Forest animals

## Purpose and goals
- Link to the Lgr22 core content of the science curriculum
- Abilities the students will develop: observing and describing animals
- Knowledge requirements: students can describe where forest animals live

## Assessment and follow-up
1. Formative assessment with exit tickets
2. Reflection in pairs about what was learned

## Differentiation
- Progression and variation through tiered observation tasks
"""

# Missing four required elements and any markdown structure: 1.0 - 0.6 - 0.1
LOW_QUALITY_PLAN = (
    "In this lesson the students will develop knowledge about animals in the forest. "
    "They walk outside, look for tracks and talk about what they found together. "
    "The teacher follows the curriculum loosely and adapts the pace to the group. "
    "At the end everyone draws their favourite animal and shares it with a friend."
)

# Same shortfall, different wording
LOW_QUALITY_PLAN_B = (
    "The students will develop knowledge of forest life by collecting leaves and pine cones. "
    "Back in the classroom they sort the findings and describe them to each other. "
    "The curriculum is mentioned briefly and the teacher walks between the groups. "
    "The lesson ends with a short story read aloud by the teacher."
)

# Adds Lgr22 and structure to the low plan: 1.0 - 0.45
MEDIUM_QUALITY_PLAN = LOW_QUALITY_PLAN + "\n\n# Notes\n- Follows Lgr22 for grade 2.\n"


class StubGenerator:
    """Async prompt -> text stub that replays responses; exceptions are raised."""

    def __init__(self, responses: Iterable[str | Exception]):
        self.responses = list(responses)
        self.prompts: list[str] = []

    @property
    def calls(self) -> int:
        return len(self.prompts)

    async def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        index = min(len(self.prompts), len(self.responses)) - 1
        response = self.responses[index]
        if isinstance(response, Exception):
            raise response
        return response


class SleepRecorder:
    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def store() -> CurriculumStore:
    return get_curriculum_store()


@pytest.fixture
def plan_request() -> PlanRequest:
    return PlanRequest(topic="forest animals", grade="2", subjects=["Science"])


@pytest.fixture
def sleeper() -> SleepRecorder:
    return SleepRecorder()


def make_record(doc_id: int, **overrides) -> dict:
    record = {
        "id": doc_id,
        "subject": "Science",
        "grades": ["1", "2"],
        "keywords": ["plants"],
        "content": "Students will develop knowledge about plants.",
        "source": "Lgr22 - test",
        "activities": ["Plant seeds"],
        "concept_tags": ["botany"],
        "pedagogical_level": "concrete",
        "cross_curricular_links": [],
    }
    record.update(overrides)
    return record
