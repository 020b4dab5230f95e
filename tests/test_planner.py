from __future__ import annotations

import asyncio

import pytest

from lesson_planner.core.config import Settings
from lesson_planner.core.errors import GenerationTransportError
from lesson_planner.models.plan import PlanRequest
from lesson_planner.services.curriculum.store import CurriculumStore
from lesson_planner.services.llm.orchestrator import LLMOrchestrator
from lesson_planner.services.planner import create_lesson_plan

from conftest import COMPLIANT_PLAN, LOW_QUALITY_PLAN, StubGenerator


@pytest.fixture
def orchestrator() -> LLMOrchestrator:
    return LLMOrchestrator(retry_delay=0.0)


def _plan(request, generator, orchestrator, store=None):
    return asyncio.run(
        create_lesson_plan(request, generator, settings=Settings(), orchestrator=orchestrator, store=store)
    )


def test_plan_includes_ranking_metadata(
    plan_request: PlanRequest, orchestrator: LLMOrchestrator, store: CurriculumStore
) -> None:
    generator = StubGenerator([COMPLIANT_PLAN])
    response = _plan(plan_request, generator, orchestrator, store)

    assert response.plan == COMPLIANT_PLAN
    meta = response.metadata
    assert meta.document_ids[0] == 1
    assert meta.accepted
    assert meta.attempts == 1
    assert meta.quality_score == 1.0
    assert meta.compliance_issues == []
    assert meta.curriculum_references >= len(meta.document_ids)
    assert 0.0 < meta.relevance_score <= 1.0
    assert store.get(1).content in generator.prompts[0]


def test_unmatched_request_uses_fallback_context(orchestrator: LLMOrchestrator) -> None:
    request = PlanRequest(topic="xylophone quantum", grade="12", subjects=["Music"])
    generator = StubGenerator([COMPLIANT_PLAN])
    response = _plan(request, generator, orchestrator)

    assert response.metadata.document_ids == []
    assert response.metadata.relevance_score == 0.0
    assert "No specific curriculum content was found" in generator.prompts[0]


def test_best_effort_plan_is_marked_not_accepted(
    plan_request: PlanRequest, orchestrator: LLMOrchestrator
) -> None:
    response = _plan(plan_request, StubGenerator([LOW_QUALITY_PLAN]), orchestrator)

    assert not response.metadata.accepted
    assert response.metadata.attempts == 3
    assert response.metadata.quality_score == 0.3
    assert response.metadata.compliance_issues


def test_transport_error_propagates(plan_request: PlanRequest, orchestrator: LLMOrchestrator) -> None:
    with pytest.raises(GenerationTransportError):
        _plan(plan_request, StubGenerator([ConnectionError("down")]), orchestrator)
