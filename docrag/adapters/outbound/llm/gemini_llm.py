"""Gemini completion adapter implementing the LLM port."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from ....common.rate_limiter import RateLimiter, is_rate_limit_error
from ....common.utils import clean_text
from ....core.domain.exceptions import (
    LLMConnectionError,
    LLMGenerationError,
    LLMRateLimitError,
    MissingAPIKeyError,
)
from ....core.ports.llm_port import LLMPort

if TYPE_CHECKING:
    from google import genai

logger = logging.getLogger(__name__)


class GeminiLLMAdapter(LLMPort):
    """Answers prompts with a Gemini model via the google-genai SDK."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.0-flash",
        rate_limiter: RateLimiter | None = None,
        max_retries: int = 3,
    ) -> None:
        """Initialize the adapter.

        Args:
            api_key: Google AI API key.
            model: Model to use.
            rate_limiter: Optional limiter applied before each request.
            max_retries: Attempts before giving up on rate limits.
        """
        self.api_key = api_key
        self.model_name = model
        self.rate_limiter = rate_limiter
        self.max_retries = max_retries
        self._client: genai.Client | None = None

    def _get_client(self) -> genai.Client:
        """Lazy load the Gemini client."""
        if self._client is None:
            if not self.api_key:
                raise MissingAPIKeyError(
                    "Google API key not set. Get one at https://aistudio.google.com/ "
                    "and set GOOGLE_API_KEY in your .env file."
                )
            try:
                from google import genai

                self._client = genai.Client(api_key=self.api_key)
            except Exception as e:
                raise LLMConnectionError(
                    "Failed to initialize Gemini client",
                    cause=e,
                    context={"model": self.model_name},
                ) from e
            logger.info("Gemini client initialized for model: %s", self.model_name)

        return self._client

    def generate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        temperature: float = 0.7,
        max_tokens: int = 1000,
    ) -> str:
        """Generate a response.

        Args:
            prompt: The user turn.
            system_prompt: Optional system instruction.
            temperature: Sampling temperature (0.0-1.0).
            max_tokens: Maximum tokens to generate.

        Returns:
            Generated text, or an empty string when the model returned none
            (for example when safety filters removed every candidate).

        Raises:
            LLMRateLimitError: Rate limited on every attempt.
            LLMGenerationError: The provider failed to generate.
        """
        from google.genai.types import GenerateContentConfig

        client = self._get_client()
        config = GenerateContentConfig(
            system_instruction=clean_text(system_prompt) if system_prompt else None,
            temperature=temperature,
            max_output_tokens=max_tokens,
        )

        for attempt in range(self.max_retries):
            if self.rate_limiter:
                self.rate_limiter.acquire()
            try:
                response = client.models.generate_content(
                    model=self.model_name,
                    contents=clean_text(prompt),
                    config=config,
                )
            except Exception as e:
                if is_rate_limit_error(e):
                    if attempt < self.max_retries - 1:
                        wait_time = 2**attempt
                        logger.warning("Rate limit hit, retrying in %ds...", wait_time)
                        time.sleep(wait_time)
                        continue
                    raise LLMRateLimitError(
                        "Completion rate limit exceeded",
                        cause=e,
                        context={"model": self.model_name},
                    ) from e
                raise LLMGenerationError(
                    f"Gemini generation failed: {e}",
                    cause=e,
                    context={"model": self.model_name},
                ) from e

            if not response.candidates:
                return ""
            return clean_text(response.text or "")

        raise LLMGenerationError("Failed to generate response after retries")
