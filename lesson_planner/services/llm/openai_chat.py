"""
OpenAI Chat Completions API Provider

Handles GPT-4o, GPT-4o-mini, and other Chat Completions API models:
- client.chat.completions.create()
- a single user message carrying the lesson plan prompt
- response.choices[0].message.content
"""

from openai import AsyncOpenAI

from lesson_planner.core.config import get_settings
from lesson_planner.services.llm.base import LLMProvider


class OpenAIChatProvider(LLMProvider):
    """Provider for OpenAI Chat Completions API (GPT-4o, GPT-4o-mini, etc.)."""

    provider_name = "openai_chat"

    def __init__(self, client: AsyncOpenAI | None = None):
        self.client = client or AsyncOpenAI(api_key=get_settings().openai_api_key)

    async def complete(
        self,
        prompt: str,
        model: str,
        max_output_tokens: int = 2048,
        temperature: float = 0.3,
    ) -> str:
        response = await self.client.chat.completions.create(
            model=model,
            messages=[
                {
                    "role": "user",
                    "content": prompt,
                },
            ],
            max_completion_tokens=max_output_tokens,
            temperature=temperature,
        )

        content = response.choices[0].message.content
        if not content or not content.strip():
            raise ValueError("Empty lesson plan received from OpenAI Chat Completions API")
        return content.strip()
