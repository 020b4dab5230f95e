"""
Model Registry

Lesson plan models the planner can generate with, and the factory that turns
a model id into the prompt -> text callable the orchestrator consumes.

How a request picks its model:
1. PlanRequest.model_id, if given
2. Settings.openai_model
3. DEFAULT_MODEL_ID
Unknown ids raise ValueError (mapped to 400 by the plans router).
"""

from dataclasses import dataclass

from lesson_planner.core.config import get_settings
from lesson_planner.services.llm.base import GenerateFn, LLMProvider


@dataclass(frozen=True)
class ModelSpec:
    display_name: str
    provider: str       # LLMProvider type, see _create_provider
    api_model: str      # model string sent to the provider API
    tier: str
    description: str


# ── Model Registry ────────────────────────────────────────────────────────────

MODEL_REGISTRY: dict[str, ModelSpec] = {
    "gpt-4o": ModelSpec(
        display_name="GPT-4o",
        provider="openai_chat",
        api_model="gpt-4o",
        tier="standard",
        description="Reliable long-form writing. Recommended default for full lesson plans.",
    ),
    "gpt-4o-mini": ModelSpec(
        display_name="GPT-4o Mini (Budget)",
        provider="openai_chat",
        api_model="gpt-4o-mini",
        tier="budget",
        description="Fastest and cheapest. Plans may need more retries to meet the Lgr22 rubric.",
    ),
}

DEFAULT_MODEL_ID = "gpt-4o"


# ── Provider Factory ──────────────────────────────────────────────────────────

# One provider instance per type, created on first use
_provider_instances: dict[str, LLMProvider] = {}


def _create_provider(provider_type: str) -> LLMProvider:
    if provider_type == "openai_chat":
        from lesson_planner.services.llm.openai_chat import OpenAIChatProvider
        return OpenAIChatProvider()
    raise ValueError(f"Unknown provider type: {provider_type}")


def get_provider(model_id: str) -> tuple[LLMProvider, str]:
    """
    Resolve a model id to its provider instance and API model name.

    Raises:
        ValueError: If the model_id is not in the registry
    """
    spec = MODEL_REGISTRY.get(model_id)
    if spec is None:
        raise ValueError(
            f"Unknown model: {model_id}. "
            f"Available models: {', '.join(MODEL_REGISTRY)}"
        )

    if spec.provider not in _provider_instances:
        _provider_instances[spec.provider] = _create_provider(spec.provider)

    return _provider_instances[spec.provider], spec.api_model


def get_generation_callable(model_id: str | None = None) -> GenerateFn:
    """
    Bind a provider, model and generation parameters into a prompt -> text callable.

    Raises:
        ValueError: If the model_id is not in the registry
    """
    settings = get_settings()
    model_id = model_id or settings.openai_model or DEFAULT_MODEL_ID
    provider, api_model = get_provider(model_id)

    async def generate(prompt: str) -> str:
        return await provider.complete(
            prompt,
            model=api_model,
            max_output_tokens=settings.generation_max_output_tokens,
            temperature=settings.generation_temperature,
        )

    return generate


def list_models() -> list[dict]:
    """Models for the planner's model picker, default first."""
    default_id = get_settings().openai_model or DEFAULT_MODEL_ID
    models = [
        {
            "id": model_id,
            "display_name": spec.display_name,
            "tier": spec.tier,
            "description": spec.description,
            "is_default": model_id == default_id,
        }
        for model_id, spec in MODEL_REGISTRY.items()
    ]
    models.sort(key=lambda model: not model["is_default"])
    return models
