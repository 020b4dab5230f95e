"""
LLM Orchestrator

Shared generate -> validate -> accept/retry loop for lesson plans:
- Builds the prompt once per request
- Calls the injected generation callable, one attempt at a time
- Scores every plan with the compliance validator
- Returns the first plan that clears the quality bar, otherwise the best
  plan seen (best-effort fallback)
- A failure on the final attempt is raised, even if earlier attempts
  produced text

The orchestrator never talks to a provider directly: callers inject an async
prompt -> text callable, so tests can drive it with plain stubs.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from lesson_planner.core.config import get_settings
from lesson_planner.core.errors import GenerationTransportError, QualityUnattainableError
from lesson_planner.models.plan import GenerationOutcome, PlanRequest
from lesson_planner.services.llm.base import GenerateFn
from lesson_planner.services.llm.compliance import DEFAULT_RUBRIC, ComplianceRubric, validate_compliance
from lesson_planner.services.prompt_compiler import compile_plan_prompt

logger = logging.getLogger(__name__)

SleepFn = Callable[[float], Awaitable[None]]

MAX_ATTEMPTS = 3
RETRY_DELAY_SECONDS = 1.0
MIN_QUALITY_SCORE = 0.6


class LLMOrchestrator:
    """Orchestrates lesson plan generation with quality validation and retries."""

    def __init__(
        self,
        max_attempts: int = MAX_ATTEMPTS,
        retry_delay: float = RETRY_DELAY_SECONDS,
        min_quality_score: float = MIN_QUALITY_SCORE,
        rubric: ComplianceRubric = DEFAULT_RUBRIC,
        sleep: SleepFn = asyncio.sleep,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self.min_quality_score = min_quality_score
        self.rubric = rubric
        self._sleep = sleep

    async def generate_with_retries(
        self,
        curriculum_context: str,
        request: PlanRequest,
        generate: GenerateFn,
    ) -> GenerationOutcome:
        """
        Generate a lesson plan, retrying until it meets the quality bar.

        Args:
            curriculum_context: Assembled curriculum context for the prompt
            request: The validated lesson plan request
            generate: Async callable taking the prompt and returning plan text

        Returns:
            GenerationOutcome for the accepted plan, or for the best-scoring
            plan when no attempt was accepted (accepted=False)

        Raises:
            GenerationTransportError: The final attempt failed to produce text
            QualityUnattainableError: The loop ended without any scored attempt
        """
        prompt = compile_plan_prompt(request, curriculum_context)
        best: GenerationOutcome | None = None

        for attempt in range(1, self.max_attempts + 1):
            is_last = attempt == self.max_attempts
            logger.info("[Retry] Attempt %d/%d: generating lesson plan", attempt, self.max_attempts)

            try:
                plan = await generate(prompt)
            except Exception as e:
                logger.warning("[Retry] Attempt %d failed: %s", attempt, e)
                if is_last:
                    raise GenerationTransportError(
                        f"Lesson plan generation failed on final attempt {attempt}: {e}",
                        attempts=self.max_attempts,
                    ) from e
                await self._sleep(self.retry_delay)
                continue

            report = validate_compliance(plan, self.rubric)
            logger.info("[Retry] Quality score for attempt %d: %.2f", attempt, report.score)

            if report.score >= self.min_quality_score and report.meets_required_elements:
                logger.info("[Retry] Quality requirements met on attempt %d", attempt)
                return GenerationOutcome(
                    text=plan,
                    score=report.score,
                    issues=list(report.issues),
                    attempts=attempt,
                    accepted=True,
                )

            # Ties keep the first-seen plan
            if best is None or report.score > best.score:
                best = GenerationOutcome(
                    text=plan,
                    score=report.score,
                    issues=list(report.issues),
                    attempts=attempt,
                    accepted=False,
                )

            if not is_last:
                logger.info("[Retry] Quality too low (%.2f), retrying", report.score)
                await self._sleep(self.retry_delay)

        if best is not None:
            logger.info("[Retry] Using best attempt with score %.2f", best.score)
            return best.model_copy(update={"attempts": self.max_attempts})

        raise QualityUnattainableError("Generated lesson plan does not meet quality requirements")


# ── Singleton ─────────────────────────────────────────────────────────────────

_orchestrator: LLMOrchestrator | None = None


def get_orchestrator() -> LLMOrchestrator:
    """Get or create the LLM orchestrator singleton from settings."""
    global _orchestrator
    if _orchestrator is None:
        settings = get_settings()
        _orchestrator = LLMOrchestrator(
            max_attempts=settings.max_generation_attempts,
            retry_delay=settings.retry_delay_seconds,
            min_quality_score=settings.min_quality_score,
            rubric=ComplianceRubric(min_length=settings.min_plan_length),
        )
    return _orchestrator
