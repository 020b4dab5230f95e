from __future__ import annotations

import pytest

from lesson_planner.models.plan import PlanRequest
from lesson_planner.services.prompt_compiler import compile_plan_prompt, get_grade_description


@pytest.mark.parametrize(
    ("grade", "expected"),
    [
        ("kindergarten", "Kindergarten / förskoleklass (ages 6-7)"),
        ("Kindergarten", "Kindergarten / förskoleklass (ages 6-7)"),
        ("1", "Grade 1 (ages 7-8)"),
        ("6", "Grade 6 (ages 12-13)"),
        ("9", "Grade 9"),
    ],
)
def test_grade_description(grade: str, expected: str) -> None:
    assert get_grade_description(grade) == expected


def test_prompt_carries_request_and_context(plan_request: PlanRequest) -> None:
    prompt = compile_plan_prompt(plan_request, "CONTEXT-BLOCK")

    assert '"forest animals"' in prompt
    assert "Grade 2 (ages 8-9)" in prompt
    assert "Science" in prompt
    assert "60 minutes" in prompt
    assert "**CURRICULUM CONTEXT:**\nCONTEXT-BLOCK" in prompt
    assert "# Lesson plan: forest animals" in prompt
    assert "SPECIAL REQUESTS" not in prompt


def test_prompt_without_subjects_is_cross_curricular() -> None:
    prompt = compile_plan_prompt(PlanRequest(topic="water", grade="3"), "ctx")
    assert "within the subjects cross-curricular" in prompt


def test_notes_add_special_requests() -> None:
    request = PlanRequest(topic="water", grade="3", notes="Two students use wheelchairs")
    prompt = compile_plan_prompt(request, "ctx")
    assert "**SPECIAL REQUESTS:**\nTwo students use wheelchairs" in prompt
