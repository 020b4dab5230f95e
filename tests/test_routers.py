from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from lesson_planner.core.errors import QualityUnattainableError
from lesson_planner.main import app
from lesson_planner.routers import plans as plans_router
from lesson_planner.routers.plans import get_generator_factory
from lesson_planner.services.llm import orchestrator as orchestrator_module
from lesson_planner.services.llm.orchestrator import LLMOrchestrator

from conftest import COMPLIANT_PLAN, StubGenerator


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    monkeypatch.setattr(orchestrator_module, "_orchestrator", LLMOrchestrator(retry_delay=0.0))
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _use_generator(generator: StubGenerator) -> list[str | None]:
    requested: list[str | None] = []

    def factory(model_id: str | None):
        requested.append(model_id)
        return generator

    app.dependency_overrides[get_generator_factory] = lambda: factory
    return requested


def test_generate_plan(client: TestClient) -> None:
    requested = _use_generator(StubGenerator([COMPLIANT_PLAN]))
    response = client.post(
        "/plans",
        json={"topic": "forest animals", "grade": "2", "subjects": "Science, Art", "model_id": "gpt-4o-mini"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["plan"] == COMPLIANT_PLAN
    assert body["metadata"]["document_ids"][0] == 1
    assert body["metadata"]["accepted"] is True
    assert requested == ["gpt-4o-mini"]


def test_generation_failure_maps_to_bad_gateway(client: TestClient) -> None:
    _use_generator(StubGenerator([ConnectionError("down")]))
    response = client.post("/plans", json={"topic": "forest animals", "grade": "2"})

    assert response.status_code == 502
    assert "AI service" in response.json()["detail"]


def test_unscorable_generation_maps_to_unprocessable(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    async def no_usable_attempt(request, generate):
        raise QualityUnattainableError("Generated lesson plan does not meet quality requirements")

    _use_generator(StubGenerator([COMPLIANT_PLAN]))
    monkeypatch.setattr(plans_router, "create_lesson_plan", no_usable_attempt)
    response = client.post("/plans", json={"topic": "forest animals", "grade": "2"})

    assert response.status_code == 422
    assert response.json()["detail"] == "Generated lesson plan does not meet quality requirements"


def test_unknown_model_is_rejected(client: TestClient) -> None:
    response = client.post("/plans", json={"topic": "forest animals", "grade": "2", "model_id": "no-such-model"})

    assert response.status_code == 400
    assert "Unknown model" in response.json()["detail"]


def test_blank_topic_fails_validation(client: TestClient) -> None:
    _use_generator(StubGenerator([COMPLIANT_PLAN]))
    response = client.post("/plans", json={"topic": "   ", "grade": "2"})
    assert response.status_code == 422


def test_curriculum_search(client: TestClient) -> None:
    response = client.get("/curriculum/search", params={"topic": "forest animals", "grade": "2", "subjects": "Science"})

    assert response.status_code == 200
    body = response.json()
    assert body["documents"][0]["id"] == 1
    assert len(body["documents"]) <= 4
    assert body["relevance_score"] > 0


def test_curriculum_search_requires_topic(client: TestClient) -> None:
    response = client.get("/curriculum/search", params={"topic": " ", "grade": "2"})
    assert response.status_code == 400


def test_curriculum_status(client: TestClient) -> None:
    body = client.get("/curriculum/status").json()
    assert body["available"] is True
    assert body["document_count"] == 17


def test_models_and_health(client: TestClient) -> None:
    models = client.get("/models").json()
    assert {model["id"] for model in models} == {"gpt-4o", "gpt-4o-mini"}
    assert client.get("/health").json() == {"status": "healthy"}


def test_single_model_lookup(client: TestClient) -> None:
    body = client.get("/models/gpt-4o-mini").json()
    assert body["tier"] == "budget"
    assert body["is_default"] is False
    assert client.get("/models/no-such-model").status_code == 404
