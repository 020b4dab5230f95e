"""
Abstract base class for all LLM providers.

Each provider implements the API-specific translation layer.
Quality validation and retry logic are handled by the orchestrator.
"""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

# prompt -> plan text, the only boundary to the generation service
GenerateFn = Callable[[str], Awaitable[str]]


class LLMProvider(ABC):
    """Abstract base class for all LLM providers."""

    provider_name: str = "base"

    @abstractmethod
    async def complete(
        self,
        prompt: str,
        model: str,
        max_output_tokens: int = 2048,
        temperature: float = 0.3,
    ) -> str:
        """
        Send a single text prompt to the LLM and return the generated text.

        Args:
            prompt: The full lesson plan prompt
            model: The API model identifier (e.g., "gpt-4o")
            max_output_tokens: Maximum tokens in the response
            temperature: Sampling temperature

        Returns:
            Generated text, stripped

        Raises:
            Exception: Any transport or API failure, or an empty response
        """
        ...
