"""Production GenerativeClient backed by the google-genai SDK."""

from __future__ import annotations

import logging
from typing import Type

from google import genai
from pydantic import BaseModel

from investcalc.config import DEFAULT_AI_MODEL

logger = logging.getLogger(__name__)


class GeminiClient:
    """Calls Gemini in JSON mode with the flow's output model as the response schema."""

    def __init__(self, api_key: str, model: str = DEFAULT_AI_MODEL):
        self.model = model
        self._client = genai.Client(api_key=api_key.strip())

    def generate(self, prompt_name: str, prompt: str, output_model: Type[BaseModel]) -> str:
        logger.debug("Calling %s for prompt %s", self.model, prompt_name)
        response = self._client.models.generate_content(
            model=self.model,
            contents=prompt,
            config={
                "response_mime_type": "application/json",
                "response_schema": output_model,
            },
        )
        if not response.text:
            raise ValueError(f"Empty response from {self.model} for prompt {prompt_name}")
        return response.text
