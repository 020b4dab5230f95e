"""
LLM Provider Abstraction Layer

Provides a unified prompt -> text interface over LLM providers with a model
registry, plus the shared quality-validation and retry orchestration.
"""

from lesson_planner.services.llm.compliance import ComplianceRubric, validate_compliance
from lesson_planner.services.llm.orchestrator import LLMOrchestrator, get_orchestrator
from lesson_planner.services.llm.registry import (
    MODEL_REGISTRY,
    get_generation_callable,
    get_provider,
    list_models,
)

__all__ = [
    "ComplianceRubric",
    "validate_compliance",
    "LLMOrchestrator",
    "get_orchestrator",
    "MODEL_REGISTRY",
    "get_generation_callable",
    "get_provider",
    "list_models",
]
