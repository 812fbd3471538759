"""Client for the generative-AI service."""

import logging

import openai

from ..config import Settings
from ..errors import GenerationError

logger = logging.getLogger(__name__)


class GenerativeClient:
    """Thin wrapper over an OpenAI-compatible chat completion API.

    Failures are reported as GenerationError and never retried; the user
    decides whether to ask again.
    """

    def __init__(self, settings: Settings, client: openai.AsyncOpenAI | None = None):
        self.settings = settings
        self._client = client

    @property
    def client(self) -> openai.AsyncOpenAI:
        if self._client is None:
            if not self.settings.OPENAI_API_KEY:
                raise GenerationError(
                    "OpenAI API key not configured. Set OPENAI_API_KEY environment variable."
                )
            self._client = openai.AsyncOpenAI(
                api_key=self.settings.OPENAI_API_KEY,
                base_url=self.settings.OPENAI_BASE_URL,
                timeout=self.settings.AI_TIMEOUT,
            )
        return self._client

    async def generate_json(self, prompt: str, model: str | None = None) -> str:
        """Request a JSON object response. Returns the raw text."""
        return await self._complete(
            prompt,
            model or self.settings.MENU_MODEL,
            response_format={"type": "json_object"},
        )

    async def generate_text(self, prompt: str, model: str | None = None) -> str:
        """Request a free-text response."""
        return await self._complete(prompt, model or self.settings.FAST_MODEL)

    async def _complete(self, prompt: str, model: str, **kwargs) -> str:
        logger.debug("Calling %s (prompt: %d chars)", model, len(prompt))
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
                **kwargs,
            )
        except openai.OpenAIError as e:
            logger.error("Generation request to %s failed: %s", model, e)
            raise GenerationError(f"AI request failed: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            logger.error("Generation request to %s returned an empty response", model)
            raise GenerationError("AI returned an empty response")
        return content
