"""Gemini API wrapper behind a minimal text-generation interface."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from google import genai
from google.genai import types

from interview_prep.config import API_KEY_ENV
from interview_prep.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.0-flash"


@dataclass
class LLMResponse:
    """Response from the LLM including usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int


class TextGenerator(Protocol):
    """Anything that turns a prompt into model text, or fails."""

    async def generate(self, prompt: str, system: str = "") -> LLMResponse: ...


class GeminiClient:
    """Async Gemini client requesting JSON output. One attempt per call."""

    def __init__(
        self,
        api_key: str | None,
        model: str = DEFAULT_MODEL,
        timeout: float | None = None,
    ):
        if not api_key:
            raise ConfigurationError(
                "missing_api_key",
                f"Missing {API_KEY_ENV} environment variable.",
            )
        kwargs: dict = {"api_key": api_key}
        if timeout is not None:
            # HttpOptions.timeout is in milliseconds
            kwargs["http_options"] = types.HttpOptions(timeout=int(timeout * 1000))
        self.client = genai.Client(**kwargs)
        self.model = model
        self._token_log: list[tuple[str, int, int]] = []  # (model, input_tokens, output_tokens)

    async def _call_api(self, prompt: str, system: str) -> types.GenerateContentResponse:
        """Make the actual API call."""
        contents = [system, prompt] if system else [prompt]
        return await self.client.aio.models.generate_content(
            model=self.model,
            contents=contents,
            config=types.GenerateContentConfig(response_mime_type="application/json"),
        )

    async def generate(self, prompt: str, system: str = "") -> LLMResponse:
        """Send the instruction and prompt to Gemini and return the text."""
        logger.debug("LLM call: model=%s, prompt_len=%d", self.model, len(prompt))
        try:
            response = await self._call_api(prompt, system)
        except Exception as exc:
            logger.error("LLM call failed", exc_info=True)
            raise UpstreamError("upstream_failure", str(exc) or type(exc).__name__) from exc

        usage = response.usage_metadata
        input_tokens = (usage.prompt_token_count or 0) if usage else 0
        output_tokens = (usage.candidates_token_count or 0) if usage else 0
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        self._token_log.append((self.model, input_tokens, output_tokens))
        return LLMResponse(
            text=response.text or "",
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )

    def get_token_summary(self) -> dict:
        """Return accumulated token usage and reset the log."""
        summary = {
            "input": sum(t[1] for t in self._token_log),
            "output": sum(t[2] for t in self._token_log),
            "calls": list(self._token_log),
        }
        self._token_log.clear()
        return summary
