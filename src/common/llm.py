"""Thin wrapper around the OpenAI chat completions API."""

from __future__ import annotations

import json
import logging
from typing import Any

from openai import OpenAI

from common.config import DEFAULT_MODEL, Config
from common.errors import GenerationError, JsonParseError

logger = logging.getLogger(__name__)

JSON_ONLY_INSTRUCTION = (
    "\n\nIMPORTANT: Respond ONLY with valid JSON. No markdown code blocks, no explanations."
)
PREVIEW_CHARS = 200


def strip_code_fence(text: str) -> str:
    """Remove a single leading ```json / ``` fence and a single trailing ``` fence."""
    cleaned = text.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[len("```json"):]
    elif cleaned.startswith("```"):
        cleaned = cleaned[len("```"):]
    if cleaned.endswith("```"):
        cleaned = cleaned[: -len("```")]
    return cleaned.strip()


class Generator:
    """Generates text and JSON from a system prompt and a user prompt.

    The OpenAI client is created by the caller and passed in, so tests can
    substitute a fake with the same `chat.completions.create` surface.
    """

    def __init__(self, client: Any, model: str = DEFAULT_MODEL):
        self.client = client
        self.model = model

    @classmethod
    def from_config(cls, config: Config) -> "Generator":
        return cls(OpenAI(api_key=config.openai_api_key), model=config.model)

    def generate_text(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int = 4096,
        temperature: float = 0.7,
    ) -> str:
        """Return the model's text response.

        Raises:
            GenerationError: If the response holds no text.
        """
        logger.debug("Calling %s (max_tokens=%d, temperature=%.1f)", self.model, max_tokens, temperature)
        response = self.client.chat.completions.create(
            model=self.model,
            max_tokens=max_tokens,
            temperature=temperature,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        )

        choices = getattr(response, "choices", None) or []
        content = choices[0].message.content if choices else None
        if not content or not content.strip():
            raise GenerationError(f"No text response from {self.model}")

        return content

    def generate_json(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int = 4096,
        temperature: float = 0.7,
    ) -> Any:
        """Return the model's response parsed as JSON.

        Raises:
            GenerationError: If the response holds no text.
            JsonParseError: If the text is not valid JSON after fence stripping.
        """
        response = self.generate_text(
            system_prompt + JSON_ONLY_INSTRUCTION,
            user_prompt,
            max_tokens=max_tokens,
            temperature=temperature,
        )

        cleaned = strip_code_fence(response)
        try:
            return json.loads(cleaned)
        except json.JSONDecodeError as e:
            raise JsonParseError(cleaned[:PREVIEW_CHARS]) from e
